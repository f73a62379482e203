import logging
from pathlib import Path
from typing import List, Optional, Union

from ..config import settings
from ..models.schemas import RemappingRule

logger = logging.getLogger(settings.SERVICE_NAME + ".loader")

SEPARATOR = "="
BOM = "\ufeff"


def parse_remappings(text: str) -> List[RemappingRule]:
    """
    Parse remappings file content into an ordered list of rules.

    Each non-blank line is trimmed and split on the first '=' only, so a
    replacement may itself contain '='. Lines that cannot form a rule (no
    separator, or an empty pattern) are skipped with a warning.

    Args:
        text: Content of a remappings file, one find=replace pair per line

    Returns:
        List of RemappingRule in file order
    """
    rules: List[RemappingRule] = []
    # Files saved by some editors start with a byte-order mark
    text = text.lstrip(BOM)
    for lineno, raw_line in enumerate(text.split("\n"), 1):
        line = raw_line.strip()
        if not line:
            continue

        pattern, sep, replacement = line.partition(SEPARATOR)
        if not sep:
            logger.warning(f"Skipping remapping on line {lineno}, no '{SEPARATOR}' found: {line!r}")
            continue
        if not pattern:
            logger.warning(f"Skipping remapping on line {lineno}, empty pattern: {line!r}")
            continue

        rules.append(RemappingRule(pattern=pattern, replacement=replacement))
    return rules


def get_remappings(path: Optional[Union[str, Path]] = None) -> List[RemappingRule]:
    """
    Read the remappings file and return its rules.

    The file is read on every call; nothing is cached. When `path` is not
    given, REMAPPINGS_FILE_PATH is resolved against the current working
    directory.

    Raises:
        OSError: the file is missing or unreadable
        UnicodeDecodeError: the file is not valid text in FILE_ENCODING
    """
    remappings_path = Path(path) if path is not None else settings.get_absolute_remappings_path()

    try:
        text = remappings_path.read_text(encoding=settings.FILE_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read remappings file {remappings_path}: {e}", exc_info=True)
        raise

    rules = parse_remappings(text)
    logger.debug(f"Loaded {len(rules)} remappings from {remappings_path}")
    return rules


if __name__ == "__main__":
    for rule in get_remappings():
        print(f"{rule.pattern} -> {rule.replacement}")
