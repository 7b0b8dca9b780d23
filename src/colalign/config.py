"""Configuration for the line driver and the command-line interface."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, TextIO

import yaml

from .exceptions import ConfigError
from .models import AlignFormat

ENV_PREFIX = "COLALIGN_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(value: str, name: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}", source="environment")


def _parse_int(value: Any, name: str, source: str) -> int:
    try:
        result = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid integer for {name}: {value!r}", source=source) from e
    if result < 0:
        raise ConfigError(f"{name} must be >= 0, got {result}", source=source)
    return result


def _prefix(data: dict[str, Any], name: str, default: str) -> str:
    value = data.get(name)
    return default if value is None else str(value)


@dataclass
class DriverConfig:
    """
    Settings for turning input lines into an aligned table.

    Attributes:
        header_prefix: Lines starting with this declare column headers
        rule_prefix: Lines starting with this print a horizontal rule
        paginate: Repeat the header row every page
        page_lines: Lines per page; None means use the terminal height
        format: Fill, separator and rule characters
    """

    header_prefix: str = ";"
    rule_prefix: str = "--"
    paginate: bool = True
    page_lines: int | None = None
    format: AlignFormat = field(default_factory=AlignFormat)

    def __post_init__(self) -> None:
        if not self.header_prefix:
            raise ConfigError("header_prefix must not be empty")
        if not self.rule_prefix:
            raise ConfigError("rule_prefix must not be empty")
        if self.page_lines and self.page_lines < 3:
            # Spacer, header and rule rows must fit on a page; 0 turns paging off
            raise ConfigError(f"page_lines must be >= 3, got {self.page_lines}")

    @classmethod
    def from_environment(cls) -> DriverConfig:
        """Create DriverConfig from environment variables."""
        page_lines = os.environ.get(f"{ENV_PREFIX}PAGE_LINES")
        paginate = os.environ.get(f"{ENV_PREFIX}PAGINATE")
        return cls(
            header_prefix=os.environ.get(f"{ENV_PREFIX}HEADER_PREFIX", ";"),
            rule_prefix=os.environ.get(f"{ENV_PREFIX}RULE_PREFIX", "--"),
            paginate=(
                _parse_bool(paginate, f"{ENV_PREFIX}PAGINATE") if paginate is not None else True
            ),
            page_lines=(
                _parse_int(page_lines, f"{ENV_PREFIX}PAGE_LINES", "environment")
                if page_lines
                else None
            ),
            format=AlignFormat.from_environment(ENV_PREFIX),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> DriverConfig:
        """
        Load DriverConfig from a YAML file.

        Example file:
            header_prefix: ";"
            rule_prefix: "--"
            paginate: true
            page_lines: 40
            format:
              fill: "."
              sep: "|"
              rule: "="

        Raises:
            ConfigError: If the file cannot be read or is not a valid config
        """
        source = str(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}", source=source) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", source=source) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping", source=source)
        return cls.from_mapping(data, source=source)

    @classmethod
    def from_mapping(cls, data: dict[str, Any], source: str | None = None) -> DriverConfig:
        """Create DriverConfig from a parsed mapping."""
        unknown = set(data) - {"header_prefix", "rule_prefix", "paginate", "page_lines", "format"}
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}", source=source)

        fmt_data = data.get("format") or {}
        if not isinstance(fmt_data, dict):
            raise ConfigError("'format' must be a mapping", source=source)

        page_lines = data.get("page_lines")
        paginate = data.get("paginate")
        if paginate is None:
            paginate = True
        if not isinstance(paginate, bool):
            raise ConfigError(f"'paginate' must be a boolean, got {paginate!r}", source=source)

        try:
            return cls(
                header_prefix=_prefix(data, "header_prefix", ";"),
                rule_prefix=_prefix(data, "rule_prefix", "--"),
                paginate=paginate,
                page_lines=(
                    _parse_int(page_lines, "page_lines", source or "mapping")
                    if page_lines is not None
                    else None
                ),
                format=AlignFormat.from_mapping(fmt_data, source=source),
            )
        except ConfigError as e:
            if e.source is None and source is not None:
                raise ConfigError(str(e), source=source) from e
            raise

    def merge(self, **overrides: Any) -> DriverConfig:
        """
        Return a copy with the given overrides applied.

        ``None`` values are skipped, so unset command-line options keep the
        configured value. ``fill``, ``sep`` and ``rule`` update the format.
        """
        fmt = self.format.copy()
        fmt.update(
            fill=overrides.pop("fill", None),
            sep=overrides.pop("sep", None),
            rule=overrides.pop("rule", None),
        )
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, format=fmt, **changes)

    def resolve_page_lines(self, stream: TextIO) -> int | None:
        """
        Decide how many lines fit on a page for the given output stream.

        Returns:
            Lines per page, or None when pagination is off
        """
        if not self.paginate:
            return None
        if self.page_lines is not None:
            return self.page_lines or None
        isatty = getattr(stream, "isatty", None)
        if isatty is None or not isatty():
            return None
        lines = shutil.get_terminal_size().lines
        return lines if lines >= 3 else None
