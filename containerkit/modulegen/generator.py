"""Registering a new example in the documentation and dependabot configurations."""

from __future__ import annotations

import os

from containerkit.modulegen.dependabot import (
    new_update,
    read_dependabot_config,
    write_dependabot_config,
)
from containerkit.modulegen.example import Example
from containerkit.modulegen.mkdocs import read_mkdocs_config, write_mkdocs_config

StrPath = str | os.PathLike

_MODULES_NAV = 3
_EXAMPLES_NAV = 4


def generate_mkdocs(root_dir: StrPath, example: Example) -> None:
    """Add ``example`` to the site navigation, keeping the index first and the rest sorted."""
    config = read_mkdocs_config(root_dir)

    if example.is_module:
        section, key = config.nav[_MODULES_NAV], "Modules"
    else:
        section, key = config.nav[_EXAMPLES_NAV], "Examples"

    parent = example.parent_dir()
    entries = [entry for entry in section.get(key) or [] if not entry.endswith("index.md")]
    entries.append(f"{parent}/{example.lower()}.md")
    section[key] = [f"{parent}/index.md", *sorted(entries)]

    write_mkdocs_config(root_dir, config)


def generate_dependabot_updates(root_dir: StrPath, example: Example) -> None:
    """Add ``example`` to the dependabot updates, keeping the first entry first and the rest sorted."""
    config = read_dependabot_config(root_dir)
    updates = config.updates

    others = [update for update in updates if update.directory != "/"]
    others.append(new_update(example))
    others.sort(key=lambda update: update.directory)

    config.updates = [updates[0], *others]
    write_dependabot_config(root_dir, config)