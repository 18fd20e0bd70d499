"""Candidate inclusion and weighting."""

from ..constants import BLANK_BODY_WEIGHT
from ..line_parser import ParsedLine
from ..models import PotentialStep


def score(
    parsed: ParsedLine,
    step: PotentialStep,
    *,
    enforce_type_match: bool = True,
) -> float | None:
    """Weigh a step definition against a parsed line.

    Args:
        parsed: The line being typed
        step: Candidate step definition
        enforce_type_match: Exclude steps whose type differs from the line's keyword

    Returns:
        The candidate's weight, or None if it is excluded
    """
    same_type = step.is_type_equal_to(parsed.type)
    if enforce_type_match and not same_type:
        return None

    if parsed.is_blank and same_type:
        return BLANK_BODY_WEIGHT

    weight = step.weight_of(parsed.body)
    if weight > 0:
        return weight
    return None
