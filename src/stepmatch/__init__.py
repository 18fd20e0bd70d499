"""Stepmatch: candidate matching and ranking for behaviour-specification steps."""

__version__ = "0.1.0"
