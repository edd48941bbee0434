# neki_lang/application/services/__init__.py

"""Application services for orchestration.

This module provides the service layer that runs a full language template
generation across the loaders, the generator and the writer.
"""

# Local imports
from neki_lang.application.services._generation_service import PatchGenerationService

__all__ = ["PatchGenerationService"]
