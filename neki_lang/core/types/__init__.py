# neki_lang/core/types/__init__.py

"""Type definitions for neki_lang

Pure type aliases shared by the parser, the patch generator and the
persistence layer.
"""

# Local imports
from neki_lang.core.types.json import JSONDict
from neki_lang.core.types.json import JSONList
from neki_lang.core.types.json import JSONPrimitive
from neki_lang.core.types.json import JSONType

__all__ = ["JSONDict", "JSONList", "JSONPrimitive", "JSONType"]
