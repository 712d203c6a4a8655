# topmark:header:start
#
#   project      : RubyLit
#   file         : model.py
#   file_relpath : src/rubylit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encoder configuration model and merge policy.

This module defines:
    - `EncoderConfig`: an immutable snapshot handed to the encoder.
    - `MutableEncoderConfig`: a mutable builder used while layering sources; it can be
      frozen into `EncoderConfig` and thawed back for edits.
    - `resolve_config`: the layering policy used by the CLI.

Layering (later wins):
    1. runtime defaults (`rubylit.config.io.load_defaults_dict`)
    2. the discovered config file (nearest ``rubylit.toml`` / ``[tool.rubylit]``),
       unless discovery is disabled
    3. an explicit config file
    4. explicit overrides (CLI flags); ``None`` means "not given"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from rubylit.api import EncoderOptions
from rubylit.config.io import (
    ConfigError,
    discover_config_file,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_config_table,
    load_defaults_dict,
)
from rubylit.config.keys import Toml
from rubylit.config.logging import get_logger

if TYPE_CHECKING:
    from rubylit.config.io import TomlTable
    from rubylit.config.logging import RubylitLogger

logger: RubylitLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class EncoderConfig:
    """Immutable runtime configuration for the encoder.

    Attributes:
        indent_enabled (bool): Indented (True) or compact (False) output.
        indent_unit (str): Unit repeated per nesting level in indented mode.
        prefix (str): Per-line prefix in indented mode.
        max_depth (int): Maximum nesting depth.
        uniform_pair_spacing (bool): Mapping entries follow the record separator rule.
        config_files (tuple[Path, ...]): Files that contributed to this config, in order.
    """

    indent_enabled: bool
    indent_unit: str
    prefix: str
    max_depth: int
    uniform_pair_spacing: bool
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableEncoderConfig:
        """Return a mutable copy of this config."""
        return MutableEncoderConfig(
            indent_enabled=self.indent_enabled,
            indent_unit=self.indent_unit,
            prefix=self.prefix,
            max_depth=self.max_depth,
            uniform_pair_spacing=self.uniform_pair_spacing,
            config_files=list(self.config_files),
        )

    def to_options(self) -> EncoderOptions:
        """Return the encoder options described by this config."""
        return EncoderOptions(
            indent_enabled=self.indent_enabled,
            indent=self.indent_unit,
            prefix=self.prefix,
            max_depth=self.max_depth,
            uniform_pair_spacing=self.uniform_pair_spacing,
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this config as a TOML-compatible dict (without provenance)."""
        return {
            Toml.SECTION_ENCODER: {
                Toml.KEY_INDENT: self.indent_enabled,
                Toml.KEY_INDENT_UNIT: self.indent_unit,
                Toml.KEY_PREFIX: self.prefix,
                Toml.KEY_MAX_DEPTH: self.max_depth,
                Toml.KEY_UNIFORM_PAIR_SPACING: self.uniform_pair_spacing,
            }
        }


@dataclass
class MutableEncoderConfig:
    """Mutable builder for `EncoderConfig`."""

    indent_enabled: bool = False
    indent_unit: str = ""
    prefix: str = ""
    max_depth: int = 1
    uniform_pair_spacing: bool = False
    config_files: list[Path] = field(default_factory=list)

    @classmethod
    def from_defaults(cls) -> MutableEncoderConfig:
        """Return a builder populated with the runtime defaults."""
        config = cls()
        config.merge_toml_table(load_defaults_dict())
        return config

    def merge_toml_table(self, table: TomlTable, *, source: Path | None = None) -> None:
        """Overlay the values present in a RubyLit TOML table.

        Args:
            table (TomlTable): A parsed ``rubylit.toml`` document or ``[tool.rubylit]`` table.
            source (Path | None): File the table was read from (recorded for provenance).
        """
        encoder: TomlTable = get_table_value(table, Toml.SECTION_ENCODER)

        indent: bool | None = get_bool_value_or_none(encoder, Toml.KEY_INDENT)
        if indent is not None:
            self.indent_enabled = indent
        indent_unit: str | None = get_string_value_or_none(encoder, Toml.KEY_INDENT_UNIT)
        if indent_unit is not None:
            self.indent_unit = indent_unit
        prefix: str | None = get_string_value_or_none(encoder, Toml.KEY_PREFIX)
        if prefix is not None:
            self.prefix = prefix
        max_depth: int | None = get_int_value_or_none(encoder, Toml.KEY_MAX_DEPTH)
        if max_depth is not None:
            self.max_depth = max_depth
        uniform: bool | None = get_bool_value_or_none(encoder, Toml.KEY_UNIFORM_PAIR_SPACING)
        if uniform is not None:
            self.uniform_pair_spacing = uniform

        if source is not None:
            self.config_files.append(source)

    def apply_overrides(
        self,
        *,
        indent_enabled: bool | None = None,
        indent_unit: str | None = None,
        prefix: str | None = None,
        max_depth: int | None = None,
        uniform_pair_spacing: bool | None = None,
    ) -> None:
        """Apply explicit overrides; ``None`` leaves the current value untouched."""
        if indent_enabled is not None:
            self.indent_enabled = indent_enabled
        if indent_unit is not None:
            self.indent_unit = indent_unit
        if prefix is not None:
            self.prefix = prefix
        if max_depth is not None:
            self.max_depth = max_depth
        if uniform_pair_spacing is not None:
            self.uniform_pair_spacing = uniform_pair_spacing

    def freeze(self) -> EncoderConfig:
        """Validate and return an immutable snapshot.

        Raises:
            ConfigError: If ``max_depth`` is not a positive integer.
        """
        if self.max_depth < 1:
            source: Path | None = self.config_files[-1] if self.config_files else None
            raise ConfigError(source, f"max_depth must be at least 1, got {self.max_depth}")
        return EncoderConfig(
            indent_enabled=self.indent_enabled,
            indent_unit=self.indent_unit,
            prefix=self.prefix,
            max_depth=self.max_depth,
            uniform_pair_spacing=self.uniform_pair_spacing,
            config_files=tuple(self.config_files),
        )


def resolve_config(
    *,
    cwd: Path | None = None,
    config_file: Path | None = None,
    discover: bool = True,
    indent_enabled: bool | None = None,
    indent_unit: str | None = None,
    prefix: str | None = None,
    max_depth: int | None = None,
    uniform_pair_spacing: bool | None = None,
) -> EncoderConfig:
    """Layer defaults, config files and overrides into an `EncoderConfig`.

    Args:
        cwd (Path | None): Directory where discovery starts (defaults to the CWD).
        config_file (Path | None): Explicit config file, applied after the discovered one.
        discover (bool): Whether to look for ``rubylit.toml`` / ``[tool.rubylit]``.
        indent_enabled (bool | None): Override for indented output.
        indent_unit (str | None): Override for the indent unit.
        prefix (str | None): Override for the line prefix.
        max_depth (int | None): Override for the maximum depth.
        uniform_pair_spacing (bool | None): Override for mapping separator spacing.

    Returns:
        EncoderConfig: The frozen configuration.

    Raises:
        ConfigError: If a config file cannot be read or the result is invalid.
    """
    config: MutableEncoderConfig = MutableEncoderConfig.from_defaults()

    if discover:
        discovered: Path | None = discover_config_file(cwd or Path.cwd())
        explicit: Path | None = config_file.resolve() if config_file is not None else None
        if discovered is not None and discovered != explicit:
            config.merge_toml_table(load_config_table(discovered), source=discovered)

    if config_file is not None:
        config.merge_toml_table(load_config_table(config_file), source=config_file)

    config.apply_overrides(
        indent_enabled=indent_enabled,
        indent_unit=indent_unit,
        prefix=prefix,
        max_depth=max_depth,
        uniform_pair_spacing=uniform_pair_spacing,
    )
    frozen: EncoderConfig = config.freeze()
    logger.debug("Resolved encoder config: %r", frozen)
    return frozen
