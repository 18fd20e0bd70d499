"""Step definition models.

A step definition (or potential step) is a catalog entry describing one
reusable step pattern. The matcher only needs the capability set of
``PotentialStep``; ``PatternStep`` is the implementation used by the
bundled catalogs.
"""

import logging
from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field, PrivateAttr

from ..constants import AND_KEYWORD, DEFAULT_PRIORITY, NO_DOCUMENTATION
from ..docs import docstring_of
from ..line_parser import parse_line
from ..pattern import StepPattern

logger = logging.getLogger(__name__)


class StepType(str, Enum):
    """Classification of a step definition."""

    GIVEN = "given"
    WHEN = "when"
    THEN = "then"


@runtime_checkable
class PotentialStep(Protocol):
    """Capabilities the matcher requires from a catalog entry."""

    step_type: StepType | None
    pattern: str
    priority: int
    handle: str | None

    def is_type_equal_to(self, tag: str | None) -> bool:
        """Return True if a line with keyword tag can use this step."""
        ...

    def weight_of(self, body: str) -> float:
        """Score partial body text against this step; <= 0 means no match."""
        ...

    def matches(self, line: str) -> bool:
        """Return True if the full step line is an exact match."""
        ...

    def parameters(self, line: str) -> dict[str, str] | None:
        """Return placeholder values for a matching line, or None."""
        ...

    def documentation(self) -> str:
        """Return documentation for this step, never raising."""
        ...


class PatternStep(BaseModel):
    """Step definition backed by a ``$placeholder`` pattern.

    Attributes:
        step_type: Step classification, or None for untyped steps.
        pattern: Step text with ``$name`` placeholders.
        priority: Tie-breaker among steps matching the same line exactly.
        handle: ``module:attribute`` reference to the implementing callable.
        doc: Inline documentation; takes precedence over the handle's docstring.

    Example:
        >>> step = PatternStep(
        ...     step_type=StepType.WHEN,
        ...     pattern="'$who' clicks on the '$button_id' button",
        ... )
        >>> step.matches("When 'Bob' clicks on the 'login' button")
        True
    """

    step_type: StepType | None = Field(default=None, description="Step classification")
    pattern: str = Field(min_length=1, description="Step text with $name placeholders")
    priority: int = Field(default=DEFAULT_PRIORITY, description="Exact-match tie-breaker")
    handle: str | None = Field(default=None, description="module:attribute of the implementation")
    doc: str | None = Field(default=None, description="Inline documentation")

    _compiled: StepPattern = PrivateAttr()
    _documentation: str | None = PrivateAttr(default=None)

    def model_post_init(self, __context: object) -> None:
        self._compiled = StepPattern(self.pattern)

    def __str__(self) -> str:
        keyword = self.step_type.value.capitalize() if self.step_type else "*"
        return f"{keyword} {self.pattern}"

    def is_type_equal_to(self, tag: str | None) -> bool:
        """Compare a line keyword with this step's type.

        A None tag only equals an untyped step. ``And`` continues whatever
        step precedes it, so it is compatible with every type.
        """
        if tag is None:
            return self.step_type is None
        if tag == AND_KEYWORD:
            return True
        return self.step_type is not None and self.step_type.value == tag.lower()

    def weight_of(self, body: str) -> float:
        return self._compiled.weight_of(body)

    def matches(self, line: str) -> bool:
        parsed = parse_line(line)
        return self.is_type_equal_to(parsed.type) and self._compiled.matches(parsed.body)

    def parameters(self, line: str) -> dict[str, str] | None:
        """Return placeholder values for a matching line, or None."""
        return self._compiled.parameters(parse_line(line).body)

    def documentation(self) -> str:
        """Return documentation, computed on first access and cached.

        Concurrent first reads may both compute it; the result is the same.
        """
        if self._documentation is None:
            self._documentation = self._lookup_documentation()
        return self._documentation

    def _lookup_documentation(self) -> str:
        if self.doc:
            return self.doc
        if not self.handle:
            return NO_DOCUMENTATION
        try:
            return docstring_of(self.handle) or NO_DOCUMENTATION
        except Exception as e:
            # Importing a handle runs arbitrary module code
            logger.debug(f"No documentation for step {self}: {e}")
            return NO_DOCUMENTATION
