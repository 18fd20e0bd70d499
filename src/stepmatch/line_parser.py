"""Step line parsing.

A step line starts with an optional keyword (``Given``, ``When``, ``Then``
or ``And``) followed by the free-text body::

    When 'Bob' clicks on the 'login' button
    ^^^^ ^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^
    type body

Keywords are case-sensitive and must be followed by whitespace or the end
of the line. Leading whitespace is ignored. Parsing never fails: a line
without a recognized keyword has no type and the whole line is its body.
"""

import re
from dataclasses import dataclass

from .constants import STEP_KEYWORDS

_KEYWORD_RE = re.compile(r"^\s*(" + "|".join(STEP_KEYWORDS) + r")(?=\s|$)")


@dataclass(frozen=True)
class ParsedLine:
    """A step line split into its keyword and body."""

    type: str | None
    body: str

    @property
    def is_blank(self) -> bool:
        """True if there is no body text to match against."""
        return not self.body.strip()


def step_type(line: str) -> str | None:
    """Return the leading step keyword of line, or None."""
    match = _KEYWORD_RE.match(line)
    return match.group(1) if match else None


def extract_step_sentence(line: str) -> str:
    """Return line without its leading step keyword, stripped."""
    match = _KEYWORD_RE.match(line)
    if match:
        return line[match.end() :].strip()
    return line.strip()


def parse_line(line: str) -> ParsedLine:
    """Split a step line into (type, body)."""
    return ParsedLine(type=step_type(line), body=extract_step_sentence(line))
