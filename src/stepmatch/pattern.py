"""Step pattern matching and weighting.

A step pattern is plain text with ``$name`` placeholders::

    '$who' clicks on the '$button_id' button

Patterns answer two questions. ``matches`` tells whether a complete step
body fits the pattern. ``weight_of`` scores a body that may still be
being typed, so the last word can be incomplete and the body may stop
anywhere inside the pattern.
"""

import re
from dataclasses import dataclass

from .constants import PARTIAL_MATCH_FLOOR

PLACEHOLDER_RE = re.compile(r"\$[A-Za-z_]\w*")

# Quoted strings are single units; a trailing unterminated quote is allowed.
# Punctuation after a closing quote starts a unit of its own.
_UNIT_RE = re.compile(r"'[^']*'?|\"[^\"]*\"?|\S+")


@dataclass(frozen=True)
class PatternToken:
    """One word or quoted run of a pattern."""

    text: str
    is_parameter: bool


def _units(text: str) -> list[str]:
    return [re.sub(r"\s+", " ", unit) for unit in _UNIT_RE.findall(text)]


def tokenize_pattern(pattern: str) -> list[PatternToken]:
    """Split a pattern into literal and parameter tokens.

    Uses the same units as tokenize_body, so a quoted literal such as
    'Home Page' is one token.
    """
    return [
        PatternToken(text=unit, is_parameter=bool(PLACEHOLDER_RE.search(unit)))
        for unit in _units(pattern)
    ]


def tokenize_body(body: str) -> list[str]:
    """Split step body text into words and quoted strings."""
    return _units(body)


def _compile(pattern: str) -> re.Pattern[str]:
    parts: list[str] = []
    for segment in PLACEHOLDER_RE.split(pattern.strip()):
        words = re.sub(r"\s+", " ", segment).split(" ")
        parts.append(r"\s+".join(re.escape(word) for word in words))
    return re.compile("(.+?)".join(parts), re.DOTALL)


class StepPattern:
    """Compiled step pattern."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.tokens = tokenize_pattern(pattern)
        self.parameter_names = [name[1:] for name in PLACEHOLDER_RE.findall(pattern)]
        self._regex = _compile(pattern)

    def __repr__(self) -> str:
        return f"StepPattern({self.pattern!r})"

    def matches(self, body: str) -> bool:
        """Return True if the complete body fits the pattern."""
        return self._regex.fullmatch(body.strip()) is not None

    def parameters(self, body: str) -> dict[str, str] | None:
        """Return placeholder values captured from body, or None if it doesn't match.

        A placeholder used more than once keeps its first value.
        """
        match = self._regex.fullmatch(body.strip())
        if match is None:
            return None
        values: dict[str, str] = {}
        for name, value in zip(self.parameter_names, match.groups(), strict=True):
            values.setdefault(name, value)
        return values

    def weight_of(self, body: str) -> float:
        """Score how well a possibly incomplete body starts this pattern.

        Body units are compared with pattern units case-insensitively; the
        last body unit only has to be a prefix of its pattern unit, so a
        quoted literal can be typed partway. A parameter token accepts any
        single word or quoted string.

        Returns:
            0.0 when the body diverges from the pattern or is blank,
            otherwise a value in (PARTIAL_MATCH_FLOOR, 1.0] that grows
            with the share of the pattern the body covers.
        """
        units = tokenize_body(body)
        if not units or not self.tokens or len(units) > len(self.tokens):
            return 0.0

        covered = 0.0
        last = len(units) - 1
        for i, (unit, token) in enumerate(zip(units, self.tokens)):
            if token.is_parameter:
                covered += 1.0
                continue
            expected = token.text.lower()
            typed = unit.lower()
            if typed == expected:
                covered += 1.0
            elif i == last and expected.startswith(typed):
                covered += len(typed) / len(expected)
            else:
                return 0.0

        coverage = covered / len(self.tokens)
        return PARTIAL_MATCH_FLOOR + (1.0 - PARTIAL_MATCH_FLOOR) * coverage
