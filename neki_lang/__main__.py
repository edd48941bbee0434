#!/usr/bin/env python3
"""
neki_lang - Main Entry Point

This module allows the package to be run as a script:
    python -m neki_lang
"""

# Local imports
from neki_lang.adapters.cli.main import main

if __name__ == "__main__":
    main()
