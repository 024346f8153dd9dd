# topmark:header:start
#
#   project      : ObjKit
#   file         : model.py
#   file_relpath : src/objkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the library and the CLI.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (lowest precedence first):
    1. runtime defaults (`load_defaults_dict`)
    2. ``[tool.objkit]`` in ``pyproject.toml`` of the working directory
    3. ``objkit.toml`` of the working directory
    4. explicit config files, in the order given
    5. CLI / API overrides

A layer only overrides the values it actually sets; unset (``None``) fields
inherit from the layers below.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from objkit.config.keys import Toml
from objkit.config.loaders import (
    extract_tool_section,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    parse_toml_file,
)
from objkit.config.logging import get_logger
from objkit.constants import OBJKIT_TOML_NAME, PYPROJECT_TOML_NAME
from objkit.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from objkit.config.loaders import TomlTable
    from objkit.config.logging import ObjkitLogger

logger: ObjkitLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for ObjKit.

    Attributes:
        json_indent (int): Indentation for JSON output; ``0`` means compact output.
        json_sort_keys (bool): Whether JSON objects are emitted with sorted keys.
        collation_locale (str): Locale name used to collate strings when sorting
            (e.g. ``"de_DE.UTF-8"``); empty selects the built-in Unicode-aware collation.
        config_files (tuple[Path | str, ...]): Config sources that contributed to this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings encountered while loading or merging.
    """

    json_indent: int
    json_sort_keys: bool
    collation_locale: str
    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        log = DiagnosticLog()
        log.items.extend(self.diagnostics)
        return MutableConfig(
            json_indent=self.json_indent,
            json_sort_keys=self.json_sort_keys,
            collation_locale=self.collation_locale,
            config_files=list(self.config_files),
            diagnostics=log,
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-compatible dict."""
        return {
            Toml.SECTION_JSON: {
                Toml.KEY_INDENT: self.json_indent,
                Toml.KEY_SORT_KEYS: self.json_sort_keys,
            },
            Toml.SECTION_COLLATION: {
                Toml.KEY_LOCALE: self.collation_locale,
            },
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder used while merging layers.

    ``None`` means "not set by this layer"; `freeze` resolves remaining ``None``
    values to the runtime defaults.
    """

    json_indent: int | None = None
    json_sort_keys: bool | None = None
    collation_locale: str | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), source="<defaults>")

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: Path | str) -> MutableConfig:
        """Build a layer from a parsed TOML table.

        Values of the wrong type are ignored with a warning recorded in the
        diagnostics; unknown sections are reported but otherwise ignored.

        Args:
            data: Parsed TOML table (already unwrapped from ``[tool.objkit]`` if needed).
            source: Where the table came from; recorded in ``config_files``.

        Returns:
            A new builder holding only the values set by ``data``.
        """
        m = cls(config_files=[source])
        where = str(source)

        for section in data:
            if section not in Toml.ALL_SECTIONS:
                logger.warning("Unknown config section [%s] in %s", section, where)
                m.diagnostics.add_warning(f"Unknown config section [{section}] in {where}")

        json_table: TomlTable = get_table_value(data, Toml.SECTION_JSON)
        indent: Any | None = json_table.get(Toml.KEY_INDENT)
        if indent is not None:
            if isinstance(indent, int) and not isinstance(indent, bool) and indent >= 0:
                m.json_indent = indent
            else:
                m._warn_type(where, Toml.SECTION_JSON, Toml.KEY_INDENT, "non-negative int", indent)
        sort_keys: Any | None = json_table.get(Toml.KEY_SORT_KEYS)
        if sort_keys is not None:
            if isinstance(sort_keys, bool):
                m.json_sort_keys = sort_keys
            else:
                m._warn_type(where, Toml.SECTION_JSON, Toml.KEY_SORT_KEYS, "bool", sort_keys)

        collation_table: TomlTable = get_table_value(data, Toml.SECTION_COLLATION)
        locale_name: Any | None = collation_table.get(Toml.KEY_LOCALE)
        if locale_name is not None:
            if isinstance(locale_name, str):
                m.collation_locale = locale_name.strip()
            else:
                m._warn_type(where, Toml.SECTION_COLLATION, Toml.KEY_LOCALE, "str", locale_name)

        logger.trace("Config layer from %s: %r", where, m)
        return m

    @classmethod
    def from_toml_file(
        cls,
        path: Path,
        *,
        pyproject: bool = False,
        strict: bool = False,
    ) -> MutableConfig:
        """Load a layer from a TOML file (``[tool.objkit]`` when ``pyproject`` is True).

        Raises:
            ConfigLoadError: If ``strict`` and the file is unreadable or invalid TOML.
                Without ``strict`` the failure is logged and the layer is empty.
        """
        data: TomlTable = parse_toml_file(path) if strict else load_toml_dict(path)
        if pyproject:
            data = extract_tool_section(data)
        logger.debug("Loaded config from %s", path)
        return cls.from_toml_dict(data, source=path)

    def _warn_type(self, where: str, section: str, key: str, expected: str, value: Any) -> None:
        loc = f"{where}: [{section}].{key}"
        logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
        self.diagnostics.add_warning(
            f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}"
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay ``other`` on top of this builder (in place) and return ``self``.

        Fields set in ``other`` win; unset fields keep their current values.
        Sources and diagnostics are appended in order.
        """
        if other.json_indent is not None:
            self.json_indent = other.json_indent
        if other.json_sort_keys is not None:
            self.json_sort_keys = other.json_sort_keys
        if other.collation_locale is not None:
            self.collation_locale = other.collation_locale
        self.config_files.extend(other.config_files)
        self.diagnostics.extend(other.diagnostics)
        return self

    def apply_overrides(self, overrides: Mapping[str, Any]) -> MutableConfig:
        """Apply keyword overrides (CLI/API), ignoring ``None`` values.

        Raises:
            AttributeError: If an override names an unknown field.
        """
        for key, value in overrides.items():
            if value is None:
                continue
            if key not in ("json_indent", "json_sort_keys", "collation_locale"):
                raise AttributeError(f"Unknown config override: {key}")
            setattr(self, key, value)
        return self

    def freeze(self) -> Config:
        """Return an immutable snapshot, filling unset values from the runtime defaults."""
        defaults = MutableConfig.from_toml_dict(load_defaults_dict(), source="<defaults>")
        return Config(
            json_indent=(
                self.json_indent if self.json_indent is not None else defaults.json_indent or 0
            ),
            json_sort_keys=bool(
                self.json_sort_keys if self.json_sort_keys is not None else defaults.json_sort_keys
            ),
            collation_locale=(
                self.collation_locale
                if self.collation_locale is not None
                else defaults.collation_locale or ""
            ),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge all configuration layers.

        Args:
            cwd: Directory searched for ``pyproject.toml`` and ``objkit.toml``
                (defaults to the current working directory).
            extra_files: Explicit config files merged after discovery, in order.
            no_config: Skip discovery in ``cwd`` (explicit files still apply).

        Raises:
            ConfigLoadError: If an explicit config file is unreadable or invalid TOML.

        Returns:
            The merged builder; call `freeze` to obtain a `Config`.
        """
        base = cwd or Path.cwd()
        merged = cls.from_defaults()

        if not no_config:
            pyproject = base / PYPROJECT_TOML_NAME
            if pyproject.is_file():
                merged.merge_with(cls.from_toml_file(pyproject, pyproject=True))
            local = base / OBJKIT_TOML_NAME
            if local.is_file():
                merged.merge_with(cls.from_toml_file(local))

        for path in extra_files:
            merged.merge_with(cls.from_toml_file(path, strict=True))

        logger.debug("Merged config sources: %s", [str(p) for p in merged.config_files])
        return merged
