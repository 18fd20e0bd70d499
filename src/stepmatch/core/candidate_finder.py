"""Candidate search for partially typed step lines.

Example, for a catalog holding ``When '$who' clicks on the '$button_id' button``,
each of these lines proposes that step with increasing weight::

    When 'Bo
    When 'Bob' clicks on the
    When 'Bob' clicks on the 'login' button
"""

import logging

from ..catalog import StepCatalog
from ..errors import TraversalError
from ..line_parser import parse_line
from ..models import PotentialStep, WeightedCandidate
from .scorer import score

logger = logging.getLogger(__name__)


def find_candidates_starting_with(
    catalog: StepCatalog,
    line: str,
    *,
    enforce_type_match: bool = True,
) -> list[WeightedCandidate]:
    """Collect every step definition that plausibly completes line.

    Args:
        catalog: Catalog to search
        line: Step line, possibly incomplete
        enforce_type_match: Exclude steps whose type differs from the line's keyword

    Returns:
        Weighted candidates in catalog traversal order (unsorted)

    Raises:
        TraversalError: If the catalog cannot be walked; carries the line
    """
    parsed = parse_line(line)
    found: list[WeightedCandidate] = []

    def visit(step: PotentialStep) -> None:
        weight = score(parsed, step, enforce_type_match=enforce_type_match)
        if weight is not None:
            found.append(WeightedCandidate(step=step, weight=weight))

    try:
        catalog.traverse(visit)
    except TraversalError as e:
        raise TraversalError(f"Failed to find candidates for step <{line}>: {e}", line=line) from e

    logger.debug(f"{len(found)} candidates for step <{line}>")
    return found


def rank_candidates(
    candidates: list[WeightedCandidate],
    limit: int | None = None,
) -> list[WeightedCandidate]:
    """Sort candidates by weight, highest first.

    Equal weights keep their original order.
    """
    ranked = sorted(candidates, key=lambda c: c.weight, reverse=True)
    return ranked[:limit] if limit is not None else ranked
