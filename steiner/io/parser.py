from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from ..core.model import ConfigError, Parameters


@dataclass
class RunConfig:
    n: int
    k: int
    t: int
    prune: bool | None = None
    workers: int = 1
    limit: int | None = None
    output: str = "count"

    def parameters(self) -> Parameters:
        return Parameters(self.n, self.k, self.t)


_PRUNE_WORDS = {"auto": None, "true": True, "false": False, "on": True, "off": False}


def parse_prune(value: Any) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    try:
        return _PRUNE_WORDS[str(value).strip().lower()]
    except KeyError:
        raise ConfigError(f"prune must be true, false or auto, got {value!r}") from None


def config_from_mapping(data: Dict[str, Any]) -> RunConfig:
    if not isinstance(data, dict):
        raise ConfigError("run configuration must be a mapping")
    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")
    missing = [key for key in ("n", "k", "t") if key not in data]
    if missing:
        raise ConfigError(f"missing configuration keys: {', '.join(missing)}")

    prune = parse_prune(data.get("prune"))
    limit = data.get("limit")
    try:
        config = RunConfig(
            n=int(data["n"]),
            k=int(data["k"]),
            t=int(data["t"]),
            prune=prune,
            workers=int(data.get("workers", 1)),
            limit=None if limit is None else int(limit),
            output=str(data.get("output", "count")),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"bad configuration value: {exc}") from exc
    if config.workers < 1:
        raise ConfigError(f"workers must be at least 1, got {config.workers}")
    if config.limit is not None and config.limit < 0:
        raise ConfigError(f"limit must not be negative, got {config.limit}")
    return config


def load_config(path: str | Path) -> RunConfig:
    """Load a YAML run description into a RunConfig object."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    return config_from_mapping(data or {})
