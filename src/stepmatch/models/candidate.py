"""Search result models."""

from dataclasses import dataclass

from .step import PotentialStep


@dataclass(frozen=True)
class WeightedCandidate:
    """A step definition proposed for a partially typed line.

    Weights are only comparable within a single search.
    """

    step: PotentialStep
    weight: float

    @property
    def documentation(self) -> str:
        return self.step.documentation()
