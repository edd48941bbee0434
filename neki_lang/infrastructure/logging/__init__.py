# neki_lang/infrastructure/logging/__init__.py

"""Logging infrastructure for neki_lang.

This module provides centralized logging configuration and setup.
"""

# Local imports
from neki_lang.infrastructure.logging._setup import log_run_summary
from neki_lang.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging", "log_run_summary"]
