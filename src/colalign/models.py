"""Core models for colalign."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import ConfigError, InvalidFormatCharError

DEFAULT_FILL = " "
DEFAULT_SEP = " "
DEFAULT_RULE = "-"


def validate_char(field_name: str, value: Any) -> str:
    """Return value if it is a single-character string, else raise."""
    if not isinstance(value, str) or len(value) != 1:
        raise InvalidFormatCharError(field_name, value)
    return value


@dataclass
class AlignFormat:
    """
    Formatting characters used by an alignment state.

    Changes take effect from the next emitted character onward; text
    already written to the sink is not touched.

    Attributes:
        fill: Padding character between a cell's content and its column width
        sep: Character written between two columns
        rule: Character repeated by horizontal rules
    """

    fill: str = DEFAULT_FILL
    sep: str = DEFAULT_SEP
    rule: str = DEFAULT_RULE

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("fill", "sep", "rule"):
            validate_char(name, value)
        super().__setattr__(name, value)

    def update(
        self,
        fill: str | None = None,
        sep: str | None = None,
        rule: str | None = None,
    ) -> None:
        """Set the given characters, leaving ``None`` arguments unchanged."""
        # Validate everything first so a bad argument leaves the format intact
        if fill is not None:
            validate_char("fill", fill)
        if sep is not None:
            validate_char("sep", sep)
        if rule is not None:
            validate_char("rule", rule)
        if fill is not None:
            self.fill = fill
        if sep is not None:
            self.sep = sep
        if rule is not None:
            self.rule = rule

    def copy(self) -> AlignFormat:
        return AlignFormat(fill=self.fill, sep=self.sep, rule=self.rule)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: str | None = None) -> AlignFormat:
        """
        Create from a parsed configuration mapping.

        Unknown keys are ignored; missing keys keep their defaults.

        Raises:
            ConfigError: If a value is not a single character
        """
        kwargs = {k: data[k] for k in ("fill", "sep", "rule") if data.get(k) is not None}
        try:
            return cls(**kwargs)
        except InvalidFormatCharError as e:
            raise ConfigError(str(e), source=source) from e

    @classmethod
    def from_environment(cls, prefix: str = "COLALIGN_") -> AlignFormat:
        """Create AlignFormat from environment variables."""
        return cls.from_mapping(
            {
                "fill": os.environ.get(f"{prefix}FILL"),
                "sep": os.environ.get(f"{prefix}SEP"),
                "rule": os.environ.get(f"{prefix}RULE"),
            },
            source="environment",
        )
