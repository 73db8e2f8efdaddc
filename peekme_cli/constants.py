"""
Constants used throughout the 2PeekMe CLI package.

This module centralizes the API base URL, the local configuration file
location and the record type hint shown in prompts.

Copyright (c) 2026 Snapp'
Author: Yannis Duvignau (yduvignau@snapp.fr)
"""

import os
from pathlib import Path

# Base URL of the 2PeekMe API, overridable with PEEKME_API_BASE
API_BASE = os.environ.get("PEEKME_API_BASE", "https://api.2peek.me/")
if not API_BASE.endswith("/"):
    API_BASE += "/"

# Config file path: ~/.2peekme-cli.json
# Path.home() resolves HOME, or USERPROFILE on Windows
CONFIG_FILE = Path(
    os.environ.get("PEEKME_CONFIG_FILE", Path.home() / ".2peekme-cli.json")
)

# Owner read/write only
CONFIG_FILE_MODE = 0o600

# Record types suggested in prompts; the API is the one validating them
RECORD_TYPE_HINT = "A, AAAA, CNAME, TXT"
