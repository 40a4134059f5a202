"""Game configuration loaded from ``configs/game.yaml``."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

import yaml

_LOG = logging.getLogger(__name__)

DEFAULT_ROUNDS = 3
DEFAULT_REPORT_FILE = "game_stats.txt"


@dataclass(frozen=True)
class GameConfig:
    default_rounds: int = DEFAULT_ROUNDS
    report_file: str = DEFAULT_REPORT_FILE
    # alias -> move 名，例如 {"r": "rock"}（只读）
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


def _config_path() -> Path:
    override = os.getenv("RPS_CONFIG_FILE")
    if override:
        return Path(override).expanduser().resolve()
    return Path(__file__).resolve().parents[2] / "configs" / "game.yaml"


def _load_yaml(path: Path) -> Mapping[str, object]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        _LOG.debug("config file %s not found; using defaults", path)
        return {}
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        _LOG.warning("invalid YAML in %s (%s); using defaults", path, exc)
        return {}
    if not isinstance(data, Mapping):
        _LOG.warning("config %s is not a mapping; using defaults", path)
        return {}
    return data


def _as_positive_int(raw: object, fallback: int, source: str) -> int:
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        _LOG.warning("%s=%r is not an integer; using %d", source, raw, fallback)
        return fallback
    return max(1, value)


def build_config(raw: Mapping[str, object]) -> GameConfig:
    rounds = _as_positive_int(
        raw.get("default_rounds", DEFAULT_ROUNDS), DEFAULT_ROUNDS, "default_rounds"
    )
    env_rounds = os.getenv("RPS_DEFAULT_ROUNDS")
    if env_rounds:
        rounds = _as_positive_int(env_rounds, rounds, "RPS_DEFAULT_ROUNDS")

    report_file = str(raw.get("report_file") or DEFAULT_REPORT_FILE)

    aliases_raw = raw.get("aliases") or {}
    aliases: dict[str, str] = {}
    if isinstance(aliases_raw, Mapping):
        aliases = {str(k).strip().lower(): str(v).strip().lower() for k, v in aliases_raw.items()}
    else:
        _LOG.warning("aliases must be a mapping; ignoring %r", aliases_raw)

    return GameConfig(
        default_rounds=rounds,
        report_file=report_file,
        aliases=MappingProxyType(aliases),
    )


@lru_cache(maxsize=1)
def load_game_config() -> GameConfig:
    path = _config_path()
    cfg = build_config(_load_yaml(path))
    _LOG.debug("loaded game config from %s: %s", path, cfg)
    return cfg


__all__ = ["DEFAULT_REPORT_FILE", "DEFAULT_ROUNDS", "GameConfig", "build_config", "load_game_config"]
