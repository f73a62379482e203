import logging
from typing import Callable, Iterable, List, Optional

import regex as re

from ..config import settings
from ..models.schemas import RemappingRule
from ..utils.loader import get_remappings

logger = logging.getLogger(settings.SERVICE_NAME + ".transform")

IMPORT_PATTERN = re.compile(r"^\s*import\b", re.IGNORECASE)


def is_import_line(line: str) -> bool:
    """True if the line, ignoring leading whitespace, starts with the `import` keyword."""
    return IMPORT_PATTERN.match(line) is not None


def apply_remappings(line: str, rules: Iterable[RemappingRule]) -> str:
    """
    Rewrite an import line with the given rules.

    Rules are applied in order, each replacing only the first occurrence of
    its pattern in the line as rewritten by the rules before it. Lines that
    are not import statements are returned unchanged.

    Args:
        line: A single source line
        rules: Ordered remapping rules

    Returns:
        The possibly rewritten line
    """
    if not is_import_line(line):
        return line

    for rule in rules:
        if rule.pattern in line:
            line = line.replace(rule.pattern, rule.replacement, 1)
    return line


class LineTransform:
    """
    Per-line transform handed to the preprocessing hook.
    Holds the rules loaded for one pass and counts the lines it rewrote.
    """

    def __init__(self, rules: List[RemappingRule]):
        self.rules = rules
        self.rewritten = 0

    def __call__(self, line: str) -> str:
        new_line = apply_remappings(line, self.rules)
        if new_line != line:
            self.rewritten += 1
            logger.debug(f"Remapped import: {line.strip()!r} -> {new_line.strip()!r}")
        return new_line

    def __repr__(self) -> str:
        return f"LineTransform(rules={len(self.rules)}, rewritten={self.rewritten})"


def each_line(loader: Optional[Callable[[], List[RemappingRule]]] = None) -> LineTransform:
    """
    Preprocessing hook factory.

    Loads the remappings once and returns the transform to run on each line
    of the pass. Errors reading the remappings file propagate to the caller.
    """
    rules = (loader or get_remappings)()
    logger.info(f"Preprocessing with {len(rules)} remappings")
    return LineTransform(rules)
