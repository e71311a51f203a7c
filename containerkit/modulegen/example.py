"""Description of a new example or module to be generated."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9]*")
_WORD_RE = re.compile(r"\w+")
_RULE = "Only alphanumerical characters are allowed (leading character must be a letter)"


@dataclass
class Example:
    """An example or module: its name, title, image and the library version it targets."""

    name: str = ""
    title_name: str = ""
    image: str = ""
    is_module: bool = False
    tc_version: str = ""

    def container_name(self) -> str:
        """Return the name of the container type, e.g. ``MongoDBContainer``."""
        if self.is_module:
            name = self.title()
        elif self.title_name:
            name = self.title_name[:1].lower() + self.title_name[1:]
        else:
            name = self.lower()
        return name + "Container"

    def entrypoint(self) -> str:
        """Return the name of the function that starts the container."""
        return "StartContainer" if self.is_module else "startContainer"

    def lower(self) -> str:
        """Return the name in lower case."""
        return self.name.lower()

    def parent_dir(self) -> str:
        """Return the directory the example lives under."""
        return "modules" if self.is_module else "examples"

    def title(self) -> str:
        """Return the title, or the lower-cased name with each word capitalised."""
        if self.title_name:
            return self.title_name
        return _WORD_RE.sub(lambda m: m[0][:1].upper() + m[0][1:], self.lower())

    def kind(self) -> str:
        """Return ``module`` or ``example``."""
        return "module" if self.is_module else "example"

    def validate(self) -> None:
        """Raise ``ValueError`` if the name or the title is not alphanumerical."""
        if not _NAME_RE.fullmatch(self.name):
            raise ValueError(f"invalid name: {self.name}. {_RULE}")
        if not _NAME_RE.fullmatch(self.title_name):
            raise ValueError(f"invalid title: {self.title_name}. {_RULE}")