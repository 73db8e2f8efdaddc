"""
Display helpers for sensitive values.

Record names, types and values are not checked here: the 2PeekMe API is
the one deciding what it accepts.

Copyright (c) 2026 Snapp'
Author: Yannis Duvignau (yduvignau@snapp.fr)
"""


def mask_key(key: str) -> str:
    """
    Mask an API key, showing only the last 4 characters.

    Parameters:
        key: The key to mask

    Returns:
        The masked key (e.g. "***abcd")
    """
    if not key or len(key) <= 4:
        return "***"
    return "***" + key[-4:]
