"""Config loading and normalization for Papjesz."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any, cast

import yaml

from papjesz.config.model import PapjeszConfig
from papjesz.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_EXCERPT_MEAN_LINES,
    DEFAULT_EXCERPT_STDDEV_LINES,
)
from papjesz.constants.mascots import DEFAULT_MASCOT, VALID_MASCOT_PRESETS
from papjesz.exceptions import ConfigError
from papjesz.types import MascotPreset

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> PapjeszConfig:
    """Load and validate config from ``papjesz.yaml`` or an explicit path.

    Relative ``mascot_file`` and ``corpus_file`` paths are resolved against
    the directory holding the config file.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return PapjeszConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(raw, key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            raise ConfigError(f"Unknown config key `{key}`{_suggest_key(str(key))}")

    mascot = raw.get("mascot", DEFAULT_MASCOT)
    if not isinstance(mascot, str) or mascot not in VALID_MASCOT_PRESETS:
        raise ConfigError(f"mascot must be one of {sorted(VALID_MASCOT_PRESETS)}, got {mascot!r}")

    if "mascot" in raw and raw.get("mascot_file") is not None:
        raise ConfigError("mascot and mascot_file are mutually exclusive")

    base_dir = path.parent
    mascot_file = _optional_path(raw.get("mascot_file"), "mascot_file", base_dir)
    corpus_file = _optional_path(raw.get("corpus_file"), "corpus_file", base_dir)

    mean = _ensure_number(raw.get("excerpt_mean_lines", DEFAULT_EXCERPT_MEAN_LINES), "excerpt_mean_lines")
    stddev = _ensure_number(raw.get("excerpt_stddev_lines", DEFAULT_EXCERPT_STDDEV_LINES), "excerpt_stddev_lines")
    if stddev < 0:
        raise ConfigError("excerpt_stddev_lines must not be negative")

    logger.debug("Loaded config from %s", path)
    return PapjeszConfig(
        mascot=cast(MascotPreset, mascot),
        mascot_file=mascot_file,
        corpus_file=corpus_file,
        excerpt_mean_lines=mean,
        excerpt_stddev_lines=stddev,
    )


def _optional_path(value: Any, key_name: str, base_dir: Path) -> Path | None:
    """Coerce an optional path string, resolving it against *base_dir*."""
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string path")
    return base_dir / Path(value).expanduser()


def _ensure_number(value: Any, key_name: str) -> float:
    """Coerce an int or float, raising ConfigError on type mismatch."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key_name} must be a number")
    return float(value)


def _suggest_key(unknown: str) -> str:
    """Return a "did you mean" hint for an unknown top-level key."""
    matches = difflib.get_close_matches(unknown, sorted(ALLOWED_CONFIG_KEYS), n=1, cutoff=0.6)
    return f" (did you mean `{matches[0]}`?)" if matches else ""
