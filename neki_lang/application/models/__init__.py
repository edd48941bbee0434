# neki_lang/application/models/__init__.py

"""Application-level models for data transfer and orchestration"""

# Local imports
from neki_lang.application.models.config_models import GenerationOptions
from neki_lang.application.models.generation_stats import GenerationStats

__all__ = ["GenerationOptions", "GenerationStats"]
