import logging
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuration settings for the solc_remap build helper.
    Settings are loaded from environment variables and/or a .env file.
    """

    # --- General Settings ---
    SERVICE_NAME: str = Field(default="solc_remap", description="Name used as the root logger.")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level."
    )

    # --- Remappings File Settings ---
    # Relative paths are resolved against the working directory of the build
    REMAPPINGS_FILE_PATH: str = Field(
        default="remappings.txt",
        description="Path to the text file of find=replace import remappings."
    )
    FILE_ENCODING: str = Field(
        default="utf-8",
        description="Encoding used to read the remappings file and contract sources."
    )

    # --- Compiler Settings ---
    SOLIDITY_VERSION: str = Field(default="0.8.9", description="Solidity compiler version.")

    # --- Path Settings ---
    SOURCES_DIR: str = Field(default="./src", description="Directory holding contract sources.")
    CACHE_DIR: str = Field(default="./cache_hardhat", description="Build cache directory.")
    PREPROCESSED_SUBDIR: str = Field(
        default="preprocessed",
        description="Subdirectory of the cache that receives preprocessed sources."
    )
    SOURCE_GLOB: str = Field(
        default="**/*.sol",
        description="Glob, relative to SOURCES_DIR, selecting files for the preprocessing pass."
    )

    model_config = SettingsConfigDict(
        env_file=".env",  # Load .env file if present
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @staticmethod
    def _resolve(value: str) -> Path:
        path = Path(value)
        if path.is_absolute():
            return path
        return Path.cwd() / path

    def get_absolute_remappings_path(self) -> Path:
        """
        Returns the absolute path to the remappings file.
        If REMAPPINGS_FILE_PATH is already absolute, it is returned as is.
        Otherwise, it is resolved relative to the current working directory,
        which is read at call time rather than at import time.
        """
        return self._resolve(self.REMAPPINGS_FILE_PATH)

    def get_absolute_sources_dir(self) -> Path:
        return self._resolve(self.SOURCES_DIR)

    def get_absolute_cache_dir(self) -> Path:
        return self._resolve(self.CACHE_DIR)

    def get_preprocessed_dir(self) -> Path:
        """Directory the preprocessing pass mirrors rewritten sources into."""
        return self.get_absolute_cache_dir() / self.PREPROCESSED_SUBDIR


# Initialize settings globally for easy access
settings = Settings()

# Configure logging based on settings
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(settings.SERVICE_NAME)

logger.debug(f"solc_remap settings loaded: {settings.model_dump()}")

if __name__ == "__main__":
    # Print the effective configuration, useful when debugging a .env setup
    print("Loaded solc_remap Settings:")
    for field_name, value in settings.model_dump().items():
        print(f"  {field_name}: {value}")

    remappings_path = settings.get_absolute_remappings_path()
    print(f"\nAbsolute remappings file path: {remappings_path}")
    print(f"Remappings file exists: {remappings_path.exists()}")
