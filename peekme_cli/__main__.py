"""
Allow running the package directly with `python -m peekme_cli`.

Copyright (c) 2026 Snapp'
Author: Yannis Duvignau (yduvignau@snapp.fr)
"""

from peekme_cli.cli import main

if __name__ == "__main__":
    main()
