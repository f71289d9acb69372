"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``COMPONENT_PICKER_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

CLI commands receive an ``AppConfig`` instance — never raw dicts or
individual env var lookups scattered through the codebase.  The
recommendation engine itself takes no configuration.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

log = logging.getLogger(__name__)

# ── Sub-config models ─────────────────────────────────────────────────────────


class KnowledgeConfig(BaseModel):
    """Where the component catalog comes from."""

    model_config = ConfigDict(frozen=True)

    # None = built-in catalog
    catalog_path: Optional[str] = None


class OutputConfig(BaseModel):
    """Filesystem paths for written reports."""

    model_config = ConfigDict(frozen=True)

    recommendations_dir: str = "data/outputs/recommendations"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    knowledge: KnowledgeConfig = KnowledgeConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``; when that default file is
            absent (e.g. an installed wheel) the built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicitly given ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    raw: dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = root / "config" / "default.toml"

    if config_path.exists():
        with open(config_path, "rb") as f:
            raw = tomllib.load(f)

        # Also merge local.toml if present (gitignored local overrides)
        local_config_path = config_path.parent / "local.toml"
        if local_config_path.exists():
            with open(local_config_path, "rb") as f:
                local_raw: dict[str, Any] = tomllib.load(f)
            raw = _deep_merge(raw, local_raw)
    else:
        log.debug("No config file at %s; using built-in defaults", config_path)

    # 3. Apply COMPONENT_PICKER_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply COMPONENT_PICKER_* env vars to the raw config dict.

    Supported overrides:
      COMPONENT_PICKER_LOG_LEVEL    → raw["logging"]["level"]
      COMPONENT_PICKER_CATALOG_PATH → raw["knowledge"]["catalog_path"]
      COMPONENT_PICKER_OUTPUT_DIR   → raw["output"]["recommendations_dir"]
      COMPONENT_PICKER_DEBUG        → raw["debug"]
    """
    if log_level := os.environ.get("COMPONENT_PICKER_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if catalog_path := os.environ.get("COMPONENT_PICKER_CATALOG_PATH"):
        raw.setdefault("knowledge", {})["catalog_path"] = catalog_path

    if output_dir := os.environ.get("COMPONENT_PICKER_OUTPUT_DIR"):
        raw.setdefault("output", {})["recommendations_dir"] = output_dir

    if debug := os.environ.get("COMPONENT_PICKER_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    knowledge = dict(raw.get("knowledge", {}))
    # TOML has no null; an empty string means "use the built-in catalog".
    if not knowledge.get("catalog_path"):
        knowledge["catalog_path"] = None

    return AppConfig(
        knowledge=KnowledgeConfig(**knowledge),
        output=OutputConfig(**raw.get("output", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
