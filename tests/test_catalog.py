"""Tests for step catalogs."""

from pathlib import Path

import pytest

from stepmatch.catalog import StepRegistry, TomlStepCatalog, load_catalog
from stepmatch.errors import CatalogError, TraversalError
from stepmatch.models import PatternStep, StepType


def collect(catalog) -> list:
    seen: list = []
    catalog.traverse(seen.append)
    return seen


class TestStepRegistry:
    def test_traverses_in_insertion_order(self) -> None:
        steps = [PatternStep(pattern=f"step {i}") for i in range(3)]
        assert collect(StepRegistry(steps)) == steps

    def test_add(self) -> None:
        registry = StepRegistry()
        step = PatternStep(pattern="x")
        registry.add(step)
        assert len(registry) == 1
        assert list(registry) == [step]

    def test_empty(self) -> None:
        assert collect(StepRegistry()) == []


class TestLoadCatalog:
    def test_loads_steps_in_file_order(self, catalog_file: Path) -> None:
        registry = load_catalog(catalog_file)
        steps = list(registry)
        assert [s.pattern for s in steps] == [
            "'$who' clicks on the '$button_id' button",
            "'$who' clicks on the 'login' button",
            "a user named $name",
        ]
        assert steps[0].step_type == StepType.WHEN
        assert steps[0].handle == "myapp.steps:click_button"
        assert steps[1].priority == 5
        assert steps[2].step_type == StepType.GIVEN

    def test_untyped_entry(self, tmp_path: Path) -> None:
        path = tmp_path / "steps.toml"
        path.write_text('[[steps]]\npattern = "anything"\n')
        (step,) = list(load_catalog(path))
        assert step.step_type is None

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "steps.toml"
        path.write_text("")
        assert len(load_catalog(path)) == 0

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="missing.toml"):
            load_catalog(tmp_path / "missing.toml")

    def test_unknown_step_type(self, tmp_path: Path) -> None:
        path = tmp_path / "steps.toml"
        path.write_text('[[steps]]\ntype = "sometimes"\npattern = "x"\n')
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "steps.toml"
        path.write_text("[[steps]\n")
        with pytest.raises(CatalogError):
            load_catalog(path)


class TestTomlStepCatalog:
    def test_traverses_file(self, catalog_file: Path) -> None:
        assert len(collect(TomlStepCatalog(catalog_file))) == 3

    def test_rereads_file(self, catalog_file: Path) -> None:
        catalog = TomlStepCatalog(catalog_file)
        catalog_file.write_text('[[steps]]\npattern = "only one"\n')
        assert [s.pattern for s in collect(catalog)] == ["only one"]

    def test_missing_file_fails_traversal(self, tmp_path: Path) -> None:
        with pytest.raises(TraversalError):
            collect(TomlStepCatalog(tmp_path / "missing.toml"))

    def test_invalid_entry_fails_traversal(self, tmp_path: Path) -> None:
        path = tmp_path / "steps.toml"
        path.write_text('[[steps]]\npattern = ""\n')
        with pytest.raises(TraversalError):
            collect(TomlStepCatalog(path))
