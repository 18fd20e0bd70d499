"""Resolution of a complete step line to a single step definition."""

import logging
from collections.abc import Iterable

from ..catalog import StepCatalog
from ..errors import TraversalError
from ..models import PotentialStep

logger = logging.getLogger(__name__)


def get_first_step_with_highest_prio(steps: Iterable[PotentialStep]) -> PotentialStep | None:
    """Return the first step holding the maximum priority, or None if steps is empty."""
    best: PotentialStep | None = None
    for step in steps:
        if best is None or step.priority > best.priority:
            best = step
    return best


def find_first_step(catalog: StepCatalog, line: str) -> PotentialStep | None:
    """Return the step definition matching line exactly.

    Several definitions may match; the highest priority wins and equal
    priorities resolve to the first one in traversal order.

    Raises:
        TraversalError: If the catalog cannot be walked; carries the line
    """
    matching: list[PotentialStep] = []

    def visit(step: PotentialStep) -> None:
        if step.matches(line):
            matching.append(step)

    try:
        catalog.traverse(visit)
    except TraversalError as e:
        raise TraversalError(f"Failed to find step for <{line}>: {e}", line=line) from e

    if len(matching) > 1:
        logger.debug(f"{len(matching)} steps match <{line}>, choosing by priority")
    return get_first_step_with_highest_prio(matching)


def resolve_handle(catalog: StepCatalog, line: str) -> str | None:
    """Return the implementation handle of the step matching line, if any."""
    step = find_first_step(catalog, line)
    return step.handle if step is not None else None
