from pathlib import Path
from typing import Callable, List

from pydantic import BaseModel, Field


class AppBaseModel(BaseModel):
    """Base Pydantic model with common configuration."""

    model_config = {
        "frozen": False,
        "extra": "forbid",  # Forbid extra fields not defined in the model
        "populate_by_name": True,
    }


class RemappingRule(AppBaseModel):
    """
    A single import remapping: occurrences of `pattern` in an import line
    are replaced with `replacement`.
    """

    model_config = {**AppBaseModel.model_config, "frozen": True}

    pattern: str = Field(min_length=1, description="Substring to look for (e.g. '@openzeppelin/').")
    replacement: str = Field(description="Text substituted for the first occurrence of the pattern.")

    def as_tuple(self) -> tuple:
        return (self.pattern, self.replacement)


class PathsConfig(AppBaseModel):
    """Source and cache directories handed to the compiler toolchain."""

    sources: str = Field(default="./src", description="Directory holding contract sources.")
    cache: str = Field(default="./cache_hardhat", description="Build cache directory.")


class PreprocessConfig(AppBaseModel):
    """
    Preprocessing hooks. `each_line` is called once per pass and returns the
    per-line transform used for that pass.
    """

    each_line: Callable[[], Callable[[str], str]] = Field(
        description="Factory returning a per-line source transform."
    )


class ToolConfig(AppBaseModel):
    """Build tool configuration: compiler version, paths and preprocessing hook."""

    solidity: str = Field(default="0.8.9", description="Solidity compiler version.")
    preprocess: PreprocessConfig
    paths: PathsConfig = Field(default_factory=PathsConfig)


class PreprocessReport(AppBaseModel):
    """Summary of a preprocessing pass over a sources directory."""

    output_dir: Path
    files: List[Path] = Field(default_factory=list, description="Source files that were processed.")
    lines_rewritten: int = Field(default=0, description="Number of import lines changed by a remapping.")

    @property
    def file_count(self) -> int:
        return len(self.files)
