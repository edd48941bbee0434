# neki_lang/infrastructure/config/_models.py

"""Pydantic models for configuration files with validation"""

# Third party imports
from pydantic import RootModel
from pydantic import field_validator

# Local imports
from neki_lang.application.processing.patterns import PatternConfig


class DirWhitelistConfig(RootModel[list[str]]):
    """Directories of the mod, relative to its root, that are scanned for assets"""

    @field_validator("root")
    @classmethod
    def normalize_directories(cls, v: list[str]) -> list[str]:
        """Normalize separators and drop duplicates, keeping the first occurrence"""
        directories: list[str] = []
        for raw in v:
            directory = raw.replace("\\", "/").strip().strip("/")
            if not directory:
                raise ValueError("Whitelisted directory must not be empty")
            if directory not in directories:
                directories.append(directory)
        return directories

    @property
    def directories(self) -> list[str]:
        return self.root


class RegexConfig(RootModel[dict[str, list[str]]]):
    """Pointer path patterns keyed by file extension"""

    @field_validator("root")
    @classmethod
    def validate_patterns(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Ensure every pattern compiles"""
        for extension in v:
            if not extension or extension.startswith("."):
                raise ValueError(f"Extension {extension!r} must be non-empty and without a dot")
        PatternConfig(v)
        return v

    def to_pattern_config(self) -> PatternConfig:
        """Compile into the pattern configuration used by the generator"""
        return PatternConfig(self.root)
