"""Reading and writing the documentation site configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

StrPath = str | os.PathLike


@dataclass
class MkDocsConfig:
    """The documentation site configuration.

    ``nav`` holds one mapping per navigation section, e.g. ``{"Examples": [...]}``.
    """

    site_name: str = ""
    plugins: list[Any] = field(default_factory=list)
    theme: dict[str, Any] = field(default_factory=dict)
    extra_css: list[str] = field(default_factory=list)
    repo_name: str = ""
    repo_url: str = ""
    markdown_extensions: list[Any] = field(default_factory=list)
    nav: list[dict[str, Any]] = field(default_factory=list)
    edit_uri: str = ""
    latest_version: str = ""


def mkdocs_config_file(root_dir: StrPath) -> Path:
    """Return the path of the site configuration under ``root_dir``."""
    return Path(root_dir) / "mkdocs.yml"


def get_root_dir() -> Path:
    """Return the parent of the current working directory."""
    return Path.cwd().parent


def get_examples(root_dir: StrPath) -> list[str]:
    """Return the sorted names of the example directories, leaving out the template."""
    with os.scandir(Path(root_dir) / "examples") as entries:
        return sorted(
            entry.name
            for entry in entries
            if entry.is_dir(follow_symlinks=False) and entry.name != "_template"
        )


def get_examples_docs(root_dir: StrPath) -> list[str]:
    """Return the sorted names of the entries in the examples documentation directory."""
    return sorted(os.listdir(Path(root_dir) / "docs" / "examples"))


def read_mkdocs_config(root_dir: StrPath) -> MkDocsConfig:
    """Load the site configuration under ``root_dir``."""
    text = mkdocs_config_file(root_dir).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("mkdocs configuration must be a mapping")
    extra = data.get("extra") or {}
    return MkDocsConfig(
        site_name=data.get("site_name") or "",
        plugins=list(data.get("plugins") or []),
        theme=dict(data.get("theme") or {}),
        extra_css=list(data.get("extra_css") or []),
        repo_name=data.get("repo_name") or "",
        repo_url=data.get("repo_url") or "",
        markdown_extensions=list(data.get("markdown_extensions") or []),
        nav=[dict(entry) for entry in data.get("nav") or []],
        edit_uri=data.get("edit_uri") or "",
        latest_version=extra.get("latest_version") or "",
    )


def write_mkdocs_config(root_dir: StrPath, config: MkDocsConfig) -> None:
    """Write ``config`` as the site configuration under ``root_dir``."""
    data = {
        "site_name": config.site_name,
        "plugins": config.plugins,
        "theme": config.theme,
        "extra_css": config.extra_css,
        "repo_name": config.repo_name,
        "repo_url": config.repo_url,
        "markdown_extensions": config.markdown_extensions,
        "nav": config.nav,
        "edit_uri": config.edit_uri,
        "extra": {"latest_version": config.latest_version},
    }
    text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    mkdocs_config_file(root_dir).write_text(text, encoding="utf-8")