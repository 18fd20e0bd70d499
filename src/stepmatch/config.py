"""Configuration management for stepmatch."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_FILENAME, DEFAULT_CATALOG_FILENAME
from .errors import StepmatchError


class ConfigError(StepmatchError):
    """Raised when stepmatch.toml cannot be parsed."""


class MatcherConfig(BaseModel):
    """Configuration for candidate search."""

    enforce_type_match: bool = Field(
        default=True,
        description="Exclude candidates whose step type differs from the line's keyword",
    )
    limit: int | None = Field(
        default=None, ge=1, description="Maximum number of ranked candidates to return"
    )


class CatalogConfig(BaseModel):
    """Location of the step catalog."""

    path: str = DEFAULT_CATALOG_FILENAME

    def resolve(self, root: Path) -> Path:
        """Return the catalog path, relative paths taken from root."""
        path = Path(self.path)
        return path if path.is_absolute() else root / path


class StepmatchConfig(BaseModel):
    """Root configuration for stepmatch."""

    matcher: MatcherConfig = Field(default_factory=MatcherConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)


def load_config(root: Path) -> StepmatchConfig:
    """Load config from stepmatch.toml.

    Args:
        root: Project directory holding stepmatch.toml

    Returns:
        Loaded configuration, or defaults if stepmatch.toml doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    config_path = root / CONFIG_FILENAME
    if not config_path.exists():
        return StepmatchConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return StepmatchConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid {config_path}: {e}") from e


def write_config_template(root: Path) -> Path:
    """Write default stepmatch.toml template.

    Args:
        root: Project directory

    Returns:
        Path to the written config file
    """
    config_path = root / CONFIG_FILENAME
    template = {
        "matcher": {"enforce_type_match": True},
        "catalog": {"path": DEFAULT_CATALOG_FILENAME},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
