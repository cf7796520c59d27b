"""
Configuration for the contest.model layer.

Defines ModelSettings, a frozen dataclass carrying runtime configuration for how
the in-memory Contest applies feed events and how logging is set up.

Precedence
- environment (``CONTEST_*``) > TOML (``./contest.toml`` or
  ``./pyproject.toml`` under ``[tool.contest.model]``) > defaults.

Import DAG discipline
- Depends only on stdlib and contest.core.
- Does not import entities or the aggregate.

Notes
- ``strict_fields`` only affects call sites that apply whole events
  (``Contest.apply_event``); ``ContestObject.add`` never raises on unknown names.
- ``log_level`` must be a loguru level name.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from contest.core.errors import ConfigError

__all__ = [
    "LOG_LEVELS",
    "ModelSettings",
]

LOG_LEVELS: frozenset[str] = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


@dataclass(frozen=True)
class ModelSettings:
    """
    Runtime settings for the contest model.

    Attributes:
        strict_fields (bool): If True, ``Contest.apply_event`` raises
            UnknownFieldError on patch fields the entity kind does not recognize.
        validate_on_apply (bool): If True, ``Contest.apply_event`` validates the
            patched entity and logs any errors at WARNING.
        log_level (str): Minimum level for the stderr sink installed by
            ``contest.model.log.setup_logging``.

    Raises:
        ConfigError: If log_level is not a known loguru level.

    Examples:
        >>> from contest.model.config import ModelSettings
        >>> ModelSettings(strict_fields=True)  # doctest: +ELLIPSIS
        ModelSettings(strict_fields=True, ...)
    """

    strict_fields: bool = False
    validate_on_apply: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        level = self.log_level.strip().upper()
        if level not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {sorted(LOG_LEVELS)} (got {self.log_level!r})"
            )
        object.__setattr__(self, "log_level", level)

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: ModelSettings, cfg: dict[str, Any] | None) -> ModelSettings:
        """Apply a loose config mapping onto ModelSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "strict_fields" in cfg:
            s = replace(s, strict_fields=_bool(cfg["strict_fields"]))

        if "validate_on_apply" in cfg:
            s = replace(s, validate_on_apply=_bool(cfg["validate_on_apply"]))

        if "log_level" in cfg and isinstance(cfg["log_level"], str):
            s = replace(s, log_level=cfg["log_level"])

        return s

    @classmethod
    def from_env(cls, base: ModelSettings | None = None, prefix: str = "CONTEST_") -> ModelSettings:
        """
        Build ModelSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - CONTEST_STRICT_FIELDS (1/0/true/false/yes/no/on/off)
            - CONTEST_VALIDATE_ON_APPLY (1/0/true/false/yes/no/on/off)
            - CONTEST_LOG_LEVEL
        """
        s = base or cls()

        def get(name: str) -> str | None:
            return os.getenv(prefix + name)

        mapping: dict[str, Any] = {}
        v = get("STRICT_FIELDS")
        if v:
            mapping["strict_fields"] = v
        v = get("VALIDATE_ON_APPLY")
        if v:
            mapping["validate_on_apply"] = v
        v = get("LOG_LEVEL")
        if v:
            mapping["log_level"] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> ModelSettings:
        """
        Build ModelSettings from a TOML file.

        Search order when `path` is None:
            1) ./contest.toml (with either top-level [model] or direct keys)
            2) ./pyproject.toml under [tool.contest.model]

        Returns defaults if no file is present.

        Raises:
            tomllib.TOMLDecodeError: If a candidate file exists but is not valid TOML.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "contest.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            with p.open("rb") as fh:
                data = tomllib.load(fh)
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("contest", {}).get("model") if isinstance(tool, dict) else None
            elif isinstance(data.get("model"), dict):
                cfg = data["model"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> ModelSettings:
        """
        Load ModelSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (contest.toml, pyproject.toml).

        Returns:
            ModelSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
