"""Build-information data model."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

_KEY_QUOTE_CHARS = frozenset("= \t\r\n\"`")
_VALUE_QUOTE_CHARS = frozenset(" \t\r\n\"`")

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "\"": "\\\"",
}


def _quote(text: str) -> str:
    """Double-quote text, escaping quotes, backslashes and non-printable characters."""
    escaped = []
    for ch in text:
        code = ord(ch)
        if ch in _ESCAPES:
            escaped.append(_ESCAPES[ch])
        elif ch.isprintable():
            escaped.append(ch)
        elif code < 0x80:
            escaped.append(f"\\x{code:02x}")
        elif code <= 0xFFFF:
            escaped.append(f"\\u{code:04x}")
        else:
            escaped.append(f"\\U{code:08x}")
    return '"' + "".join(escaped) + '"'


class Module(BaseModel):
    """A module that took part in the build.

    A dependency may carry a replacement module, which is never replaced
    again (one level only).
    """

    path: str = ""
    version: str = ""
    checksum: str = ""
    replacement: Module | None = None

    model_config = {"frozen": True}

    @field_validator("replacement")
    @classmethod
    def single_level_replacement(cls, v: Module | None) -> Module | None:
        """Reject replacements that are themselves replaced."""
        if v is not None and v.replacement is not None:
            raise ValueError(f"replacement {v.path!r} cannot itself be replaced")
        return v

    def is_empty(self) -> bool:
        return not (self.path or self.version or self.checksum or self.replacement)

    def raw_lines(self, word: str) -> list[str]:
        """Format this module for the raw dump, introduced by ``word``."""
        if self.replacement is None:
            return [f"{word}\t{self.path}\t{self.version}\t{self.checksum}"]
        return [f"{word}\t{self.path}\t{self.version}", *self.replacement.raw_lines("=>")]


class BuildSetting(BaseModel):
    """A key/value pair recording a build-time option."""

    key: str
    value: str = ""

    model_config = {"frozen": True}

    def raw_line(self) -> str:
        key = self.key
        if not key or _KEY_QUOTE_CHARS.intersection(key):
            key = _quote(key)
        value = self.value
        if _VALUE_QUOTE_CHARS.intersection(value):
            value = _quote(value)
        return f"build\t{key}={value}"


class BuildInfo(BaseModel):
    """The build-information record of an executable.

    Dependencies and settings keep the order in which they were supplied.
    """

    path: str = ""
    main_module: Module = Field(default_factory=Module)
    dependencies: tuple[Module, ...] = ()
    toolchain_version: str = ""
    settings: tuple[BuildSetting, ...] = ()

    model_config = {"frozen": True}

    def __str__(self) -> str:
        lines: list[str] = []
        if self.toolchain_version:
            lines.append(f"go\t{self.toolchain_version}")
        if self.path:
            lines.append(f"path\t{self.path}")
        if not self.main_module.is_empty():
            lines.extend(self.main_module.raw_lines("mod"))
        for dep in self.dependencies:
            lines.extend(dep.raw_lines("dep"))
        lines.extend(setting.raw_line() for setting in self.settings)
        return "".join(line + "\n" for line in lines)
