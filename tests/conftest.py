"""Shared test fixtures for stepmatch tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from stepmatch.catalog import StepRegistry
from stepmatch.errors import TraversalError
from stepmatch.models import PatternStep, StepType


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def click_step() -> PatternStep:
    return PatternStep(
        step_type=StepType.WHEN,
        pattern="'$who' clicks on the '$button_id' button",
        handle="stepmatch.pattern:StepPattern.weight_of",
    )


@pytest.fixture
def registry(click_step: PatternStep) -> StepRegistry:
    """Registry with one step per type plus a second When step."""
    return StepRegistry(
        [
            click_step,
            PatternStep(step_type=StepType.GIVEN, pattern="a user named $name"),
            PatternStep(step_type=StepType.THEN, pattern="the page title is '$title'"),
            PatternStep(step_type=StepType.WHEN, pattern="'$who' logs out"),
        ]
    )


class BrokenCatalog:
    """Catalog whose traversal always fails."""

    def traverse(self, visitor) -> None:
        raise TraversalError("project model out of sync")


@pytest.fixture
def broken_catalog() -> BrokenCatalog:
    return BrokenCatalog()


CATALOG_TOML = """\
[[steps]]
type = "when"
pattern = "'$who' clicks on the '$button_id' button"
handle = "myapp.steps:click_button"
doc = "Clicks a button."

[[steps]]
type = "when"
pattern = "'$who' clicks on the 'login' button"
priority = 5
doc = "Logs in."

[[steps]]
type = "given"
pattern = "a user named $name"
"""


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a three-step catalog file and return its path."""
    path = tmp_path / "steps.toml"
    path.write_text(CATALOG_TOML)
    return path
