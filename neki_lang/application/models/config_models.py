# neki_lang/application/models/config_models.py

"""Pydantic models for generation options"""

# Standard library imports
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator


class GenerationOptions(BaseModel):
    """Options for one language template generation run"""

    model_config = ConfigDict(frozen=True)

    input_dir: Path = Field(..., description="Mod root directory to scan")
    output_dir: Path = Field(..., description="Directory receiving the generated patches")
    test_operations: bool = Field(
        False, description="Guard every replace operation with a test operation"
    )

    @field_validator("input_dir")
    @classmethod
    def validate_input_dir(cls, v: Path) -> Path:
        """Ensure the input directory exists"""
        if not v.is_dir():
            raise ValueError(f"Input directory {v} does not exist or is not a directory")
        return v
