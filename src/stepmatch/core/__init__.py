"""Core matching logic for stepmatch.

This package contains pure matching logic with no I/O of its own:
- scorer: Candidate inclusion and weighting
- candidate_finder: Candidate search and ranking for partial lines
- exact_resolver: Priority-based resolution of complete lines
- locator: StepLocator facade over a catalog
"""

from .candidate_finder import find_candidates_starting_with, rank_candidates
from .exact_resolver import find_first_step, get_first_step_with_highest_prio, resolve_handle
from .locator import StepLocator
from .scorer import score

__all__ = [
    "StepLocator",
    "find_candidates_starting_with",
    "find_first_step",
    "get_first_step_with_highest_prio",
    "rank_candidates",
    "resolve_handle",
    "score",
]
