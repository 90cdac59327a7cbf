"""Project configuration loaded from langver.toml or pyproject.toml."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError
from .language_version import LanguageVersion

logger = logging.getLogger(__name__)

LANGVER_TOML = "langver.toml"
PYPROJECT_TOML = "pyproject.toml"


class LangverConfig(BaseModel):
    """Language version requirements of a project.

    Attributes:
        minimum: Oldest language version the project supports.
        features: Named features mapped to the version that introduced them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    minimum: LanguageVersion | None = None
    features: dict[str, LanguageVersion] = Field(default_factory=dict)

    def supports(self: Self, feature: str, version: LanguageVersion) -> bool:
        """Check whether a configured feature is available in a version.

        Raises:
            KeyError: If the feature is not configured.
        """
        return version >= self.features[feature]


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e


def _extract_section(data: dict[str, Any], path: Path) -> Any:
    if "langver" in data:
        return data["langver"]
    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError(f"tool configuration in {path} must be a table")
    return tool.get("langver")


def _find_config(search_dir: Path) -> tuple[Path, Any] | None:
    for name in (LANGVER_TOML, PYPROJECT_TOML):
        candidate = search_dir / name
        if candidate.is_file():
            section = _extract_section(_read_toml(candidate), candidate)
            if section is not None:
                return candidate, section
    return None


def load_config(config_path: Path | None = None) -> LangverConfig:
    """Load the langver configuration.

    Without an explicit path, langver.toml and then pyproject.toml in the
    current directory are searched. langver.toml uses a ``[langver]`` table
    and pyproject.toml uses ``[tool.langver]``.

    Args:
        config_path: Explicit configuration file to read.

    Returns:
        The loaded configuration, or defaults when nothing is configured.

    Raises:
        ConfigError: If the file cannot be read or its contents are invalid.

    Example:
        >>> # pyproject.toml
        >>> # [tool.langver]
        >>> # minimum = "2.12"
        >>> # features = { records = "3.0" }
        >>> config = load_config()
        >>> config.minimum
        LanguageVersion(2, 12)
    """
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        path = config_path
        section = _extract_section(_read_toml(path), path)
        if section is None:
            logger.debug("No langver table in %s, using defaults", path)
            return LangverConfig()
    else:
        found = _find_config(Path.cwd())
        if found is None:
            logger.debug("No langver configuration found, using defaults")
            return LangverConfig()
        path, section = found

    if not isinstance(section, dict):
        raise ConfigError(f"langver configuration in {path} must be a table")

    logger.debug("Loading langver configuration from %s", path)
    try:
        return LangverConfig.model_validate(section)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(f"Invalid langver configuration in {path}: {errors}") from e
