"""Step locator: search entry points bound to a catalog and matcher settings."""

from ..catalog import StepCatalog
from ..config import MatcherConfig
from ..models import PotentialStep, WeightedCandidate
from .candidate_finder import find_candidates_starting_with, rank_candidates
from .exact_resolver import find_first_step, resolve_handle


class StepLocator:
    """Searches one catalog.

    Holds no state beyond its catalog and settings, so a locator can be
    shared between callers as long as the catalog supports concurrent reads.

    Example:
        >>> locator = StepLocator(registry)
        >>> [c.step.pattern for c in locator.find_ranked_candidates("When 'Bob' cli")]
        ["'$who' clicks on the '$button_id' button"]
    """

    def __init__(self, catalog: StepCatalog, config: MatcherConfig | None = None) -> None:
        self.catalog = catalog
        self.config = config or MatcherConfig()

    def find_candidates_starting_with(self, line: str) -> list[WeightedCandidate]:
        """Candidates for line in traversal order."""
        return find_candidates_starting_with(
            self.catalog, line, enforce_type_match=self.config.enforce_type_match
        )

    def find_ranked_candidates(self, line: str, limit: int | None = None) -> list[WeightedCandidate]:
        """Candidates for line, best first, cut to limit (or the configured limit)."""
        return rank_candidates(
            self.find_candidates_starting_with(line),
            limit=limit if limit is not None else self.config.limit,
        )

    def find_first_step(self, line: str) -> PotentialStep | None:
        return find_first_step(self.catalog, line)

    def resolve_handle(self, line: str) -> str | None:
        return resolve_handle(self.catalog, line)

    find_method = resolve_handle
