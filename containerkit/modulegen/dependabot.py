"""Reading and writing the dependabot configuration of the repository."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from containerkit.modulegen.example import Example

UPDATE_SCHEDULE = "monthly"

StrPath = str | os.PathLike


@dataclass
class Schedule:
    """How often dependabot looks for updates."""

    interval: str = ""


@dataclass
class Update:
    """One directory watched by dependabot."""

    package_ecosystem: str = ""
    directory: str = ""
    schedule: Schedule = field(default_factory=Schedule)
    open_pull_requests_limit: int = 0
    rebase_strategy: str = ""


@dataclass
class DependabotConfig:
    """The whole dependabot configuration."""

    version: int = 0
    updates: list[Update] = field(default_factory=list)


def new_update(example: Example) -> Update:
    """Return the dependabot entry for ``example``."""
    return Update(
        package_ecosystem="gomod",
        directory=f"/{example.parent_dir()}/{example.lower()}",
        schedule=Schedule(interval=UPDATE_SCHEDULE),
        open_pull_requests_limit=3,
        rebase_strategy="disabled",
    )


def dependabot_config_file(root_dir: StrPath) -> Path:
    """Return the path of the dependabot configuration under ``root_dir``."""
    return Path(root_dir) / ".github" / "dependabot.yml"


def get_dependabot_updates(root_dir: StrPath) -> list[Update]:
    """Return the updates configured under ``root_dir``."""
    return read_dependabot_config(root_dir).updates


def _update_from_dict(data: dict[str, Any]) -> Update:
    schedule = data.get("schedule") or {}
    return Update(
        package_ecosystem=data.get("package-ecosystem") or "",
        directory=data.get("directory") or "",
        schedule=Schedule(interval=schedule.get("interval") or ""),
        open_pull_requests_limit=data.get("open-pull-requests-limit") or 0,
        rebase_strategy=data.get("rebase-strategy") or "",
    )


def _update_to_dict(update: Update) -> dict[str, Any]:
    return {
        "package-ecosystem": update.package_ecosystem,
        "directory": update.directory,
        "schedule": {"interval": update.schedule.interval},
        "open-pull-requests-limit": update.open_pull_requests_limit,
        "rebase-strategy": update.rebase_strategy,
    }


def read_dependabot_config(root_dir: StrPath) -> DependabotConfig:
    """Load the dependabot configuration under ``root_dir``."""
    text = dependabot_config_file(root_dir).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("dependabot configuration must be a mapping")
    return DependabotConfig(
        version=data.get("version") or 0,
        updates=[_update_from_dict(item) for item in data.get("updates") or []],
    )


def write_dependabot_config(root_dir: StrPath, config: DependabotConfig) -> None:
    """Write ``config`` as the dependabot configuration under ``root_dir``."""
    data = {
        "version": config.version,
        "updates": [_update_to_dict(update) for update in config.updates],
    }
    text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    dependabot_config_file(root_dir).write_text(text, encoding="utf-8")