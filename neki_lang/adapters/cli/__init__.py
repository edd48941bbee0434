# neki_lang/adapters/cli/__init__.py

"""CLI adapter for neki_lang"""

# Local imports
from neki_lang.adapters.cli.main import main
from neki_lang.adapters.cli.parser import create_argument_parser

__all__ = ["create_argument_parser", "main"]
