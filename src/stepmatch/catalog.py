"""Step catalogs.

The matcher walks a catalog through ``traverse``, handing each step
definition to a visitor. Catalogs own their entries; searches only read
them.

Catalog files are TOML with one ``[[steps]]`` table per definition::

    [[steps]]
    type = "when"
    pattern = "'$who' clicks on the '$button_id' button"
    priority = 1
    handle = "myproject.steps:click_button"
"""

import logging
import tomllib
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field, ValidationError

from .errors import CatalogError, TraversalError
from .models import PatternStep, PotentialStep, StepType

logger = logging.getLogger(__name__)

StepVisitor = Callable[[PotentialStep], None]


class StepCatalog(Protocol):
    """Source of step definitions."""

    def traverse(self, visitor: StepVisitor) -> None:
        """Call visitor once per step definition.

        Raises:
            TraversalError: If the catalog cannot be walked
        """
        ...


class StepEntry(BaseModel):
    """One ``[[steps]]`` table of a catalog file."""

    type: StepType | None = None
    pattern: str = Field(min_length=1)
    priority: int = 0
    handle: str | None = None
    doc: str | None = None

    def to_step(self) -> PatternStep:
        return PatternStep(
            step_type=self.type,
            pattern=self.pattern,
            priority=self.priority,
            handle=self.handle,
            doc=self.doc,
        )


class CatalogFile(BaseModel):
    """Top-level layout of a catalog file."""

    steps: list[StepEntry] = Field(default_factory=list)


class StepRegistry:
    """In-memory catalog; traversal follows insertion order."""

    def __init__(self, steps: Iterable[PotentialStep] = ()) -> None:
        self._steps: list[PotentialStep] = list(steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[PotentialStep]:
        return iter(self._steps)

    def add(self, step: PotentialStep) -> None:
        self._steps.append(step)

    def traverse(self, visitor: StepVisitor) -> None:
        # Snapshot so visitors never observe concurrent additions mid-walk
        for step in list(self._steps):
            visitor(step)


def _read_steps(path: Path) -> list[PatternStep]:
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return [entry.to_step() for entry in CatalogFile.model_validate(data).steps]


def load_catalog(path: Path) -> StepRegistry:
    """Load a catalog file into memory.

    Args:
        path: Path to the TOML catalog

    Returns:
        Registry holding the file's steps in file order

    Raises:
        CatalogError: If the file is missing or invalid
    """
    try:
        steps = _read_steps(path)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        raise CatalogError(f"Cannot load step catalog {path}: {e}") from e
    logger.debug(f"Loaded {len(steps)} steps from {path}")
    return StepRegistry(steps)


class TomlStepCatalog:
    """Catalog backed by a TOML file, re-read on every traversal."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def traverse(self, visitor: StepVisitor) -> None:
        try:
            steps = _read_steps(self.path)
        except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
            raise TraversalError(f"Cannot read step catalog {self.path}: {e}") from e
        for step in steps:
            visitor(step)
