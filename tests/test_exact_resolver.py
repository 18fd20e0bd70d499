"""Tests for exact step resolution."""

import pytest

from stepmatch.catalog import StepRegistry
from stepmatch.core import find_first_step, get_first_step_with_highest_prio, resolve_handle
from stepmatch.errors import TraversalError
from stepmatch.models import PatternStep, StepType


def when(pattern: str, priority: int = 0, handle: str | None = None) -> PatternStep:
    return PatternStep(step_type=StepType.WHEN, pattern=pattern, priority=priority, handle=handle)


def test_highest_priority_wins() -> None:
    a = when("Bob clicks login", priority=1, handle="steps:a")
    b = when("Bob clicks login", priority=5, handle="steps:b")
    assert find_first_step(StepRegistry([a, b]), "When Bob clicks login") is b


def test_equal_priority_first_in_traversal_order() -> None:
    a = when("$who clicks login", priority=3)
    b = when("Bob clicks $button", priority=3)
    c = when("Bob clicks login", priority=1)
    assert find_first_step(StepRegistry([a, b, c]), "When Bob clicks login") is a


def test_lower_priority_never_chosen_over_higher() -> None:
    steps = [when("$who clicks login", priority=p) for p in (2, 7, 4, 7)]
    found = find_first_step(StepRegistry(steps), "When Bob clicks login")
    assert found is steps[1]


def test_no_match_returns_none(registry: StepRegistry) -> None:
    assert find_first_step(registry, "When 'Bob' jumps") is None


def test_partial_line_does_not_resolve(registry: StepRegistry) -> None:
    assert find_first_step(registry, "When 'Bob' clicks on the") is None


def test_resolves_placeholder_step(registry: StepRegistry, click_step: PatternStep) -> None:
    assert find_first_step(registry, "When 'Bob' clicks on the 'login' button") is click_step


def test_resolve_handle() -> None:
    catalog = StepRegistry([when("Bob clicks login", handle="steps:click")])
    assert resolve_handle(catalog, "When Bob clicks login") == "steps:click"
    assert resolve_handle(catalog, "When Bob jumps") is None


def test_resolve_handle_without_handle() -> None:
    catalog = StepRegistry([when("Bob clicks login")])
    assert resolve_handle(catalog, "When Bob clicks login") is None


def test_highest_prio_of_nothing() -> None:
    assert get_first_step_with_highest_prio([]) is None


def test_highest_prio_accepts_any_iterable() -> None:
    steps = [when("x", priority=p) for p in (1, 3, 3)]
    assert get_first_step_with_highest_prio(iter(steps)) is steps[1]


def test_traversal_failure_identifies_line(broken_catalog) -> None:
    with pytest.raises(TraversalError) as exc_info:
        find_first_step(broken_catalog, "When Bob clicks login")
    assert exc_info.value.line == "When Bob clicks login"
    assert "When Bob clicks login" in str(exc_info.value)


def test_resolve_handle_propagates_traversal_failure(broken_catalog) -> None:
    with pytest.raises(TraversalError):
        resolve_handle(broken_catalog, "When Bob clicks login")
