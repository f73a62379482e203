import logging
from typing import Optional

from .config import Settings, settings as default_settings
from .models.schemas import PathsConfig, PreprocessConfig, ToolConfig
from .service.transform import each_line

logger = logging.getLogger(default_settings.SERVICE_NAME + ".toolconfig")


def build_tool_config(settings: Optional[Settings] = None) -> ToolConfig:
    """
    Build the compiler toolchain configuration.

    The preprocessing hook reads remappings.txt from the working directory
    each time the host starts a pass, so edits to the file apply to the
    next build without reloading this configuration.
    """
    settings = settings or default_settings
    tool_config = ToolConfig(
        solidity=settings.SOLIDITY_VERSION,
        preprocess=PreprocessConfig(each_line=each_line),
        paths=PathsConfig(sources=settings.SOURCES_DIR, cache=settings.CACHE_DIR),
    )
    logger.debug(f"Tool config: solidity={tool_config.solidity}, paths={tool_config.paths.model_dump()}")
    return tool_config


config = build_tool_config()
