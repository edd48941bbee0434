# neki_lang/application/models/generation_stats.py

"""Pydantic model for generation run statistics"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class GenerationStats(BaseModel):
    """Statistics from generating the language template of one mod"""

    model_config = ConfigDict()

    files_read: int = Field(0, description="Asset files read from the input directory")
    patches_written: int = Field(0, description="Patch files written to the output directory")
    files_skipped: int = Field(
        0, description="Files that produced an empty or unserializable patch"
    )
    operations: int = Field(0, description="Replace operations across all patches")
    reading_seconds: float = Field(0.0, description="Time spent reading files")
    generation_seconds: float = Field(0.0, description="Time spent parsing and generating")
    writing_seconds: float = Field(0.0, description="Time spent writing patches")

    @property
    def total_seconds(self) -> float:
        return self.reading_seconds + self.generation_seconds + self.writing_seconds
