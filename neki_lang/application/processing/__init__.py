# neki_lang/application/processing/__init__.py

"""Parsing and patch generation

This module provides the relaxed JSON parser, the per-extension pattern
configuration and the patch generator built on them.
"""

# Local imports
from neki_lang.application.processing.patch_generator import generate_patch
from neki_lang.application.processing.patterns import PatternConfig
from neki_lang.application.processing.patterns import PatternSet
from neki_lang.application.processing.relaxed_json import RelaxedJSONParser
from neki_lang.application.processing.relaxed_json import parse

__all__ = ["PatternConfig", "PatternSet", "RelaxedJSONParser", "generate_patch", "parse"]
