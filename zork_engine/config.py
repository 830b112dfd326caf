"""Configuration loader and typed config objects."""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict
import logging
import os

import yaml
from dotenv import load_dotenv


@dataclass(frozen=True)
class AppSection:
    name: str
    env: str


@dataclass(frozen=True)
class WorldSection:
    data_file: Path
    strict_consistency: bool


@dataclass(frozen=True)
class LoggingSection:
    level: str
    format: str


@dataclass(frozen=True)
class AppConfig:
    app: AppSection
    world: WorldSection
    logging: LoggingSection

    def resolve_paths(self, project_root: Path) -> "AppConfig":
        """Return a copy with the world data path resolved to an absolute path."""
        world = self.world
        data_file = world.data_file
        if not data_file.is_absolute():
            data_file = (project_root / data_file).resolve()
        return replace(self, world=replace(world, data_file=data_file))


def _load_env() -> None:
    if Path(".env").exists():
        load_dotenv(dotenv_path=Path(".env"), override=False)


def _require_section(cfg: Dict[str, Any], key: str) -> Dict[str, Any]:
    if key not in cfg or not isinstance(cfg[key], dict):
        raise ValueError(f"Missing or invalid config section: {key}")
    return cfg[key]


def load_config(config_path: str | Path = "configs/config.yaml") -> AppConfig:
    """Load YAML config, apply env overrides, return typed AppConfig."""
    _load_env()

    path = Path(config_path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")

    app_cfg = _require_section(data, "app")
    world_cfg = _require_section(data, "world")
    logging_cfg = _require_section(data, "logging")

    # Environment overrides
    env_world_file = os.getenv("ZORK_WORLD_FILE", "")
    env_log_level = os.getenv("ZORK_LOG_LEVEL", "")

    app = AppSection(
        name=str(app_cfg.get("name", "zork")),
        env=str(app_cfg.get("env", "dev")),
    )

    world = WorldSection(
        data_file=Path(env_world_file or str(world_cfg.get("data_file", "data/zork.json"))),
        strict_consistency=bool(world_cfg.get("strict_consistency", False)),
    )

    log = LoggingSection(
        level=(env_log_level or str(logging_cfg.get("level", "WARNING"))).upper(),
        format=str(logging_cfg.get("format", "%(levelname)s %(name)s: %(message)s")),
    )

    return AppConfig(app=app, world=world, logging=log)


def configure_logging(section: LoggingSection) -> None:
    level = logging.getLevelName(section.level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {section.level}")
    logging.basicConfig(level=level, format=section.format)
