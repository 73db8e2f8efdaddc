"""
2PeekMe CLI - A command-line client for the 2PeekMe DNS API.

This package provides a command-line interface for creating, updating,
deleting and listing subdomains through the 2PeekMe API, and for managing
the API key stored locally.

Copyright (c) 2026 Snapp'
Author: Yannis Duvignau (yduvignau@snapp.fr)
"""

__version__ = "1.0.0"
