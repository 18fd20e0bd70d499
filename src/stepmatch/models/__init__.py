"""Data models for stepmatch.

- Step definitions and their capability protocol (PotentialStep, PatternStep, StepType)
- Search results (WeightedCandidate)

Example:
    >>> from stepmatch.models import PatternStep, StepType
    >>> step = PatternStep(step_type=StepType.GIVEN, pattern="a user named $name")
    >>> step.weight_of("a user")
    0.75
"""

from .candidate import WeightedCandidate
from .step import PatternStep, PotentialStep, StepType

__all__ = [
    "PatternStep",
    "PotentialStep",
    "StepType",
    "WeightedCandidate",
]
