"""Tests for formatting models."""

import pytest

from colalign.exceptions import ConfigError, InvalidFormatCharError
from colalign.models import AlignFormat


class TestAlignFormat:
    """Tests for AlignFormat."""

    def test_defaults(self) -> None:
        fmt = AlignFormat()

        assert (fmt.fill, fmt.sep, fmt.rule) == (" ", " ", "-")

    @pytest.mark.parametrize("value", ["", "ab", None, 1])
    def test_rejects_non_single_characters(self, value: object) -> None:
        with pytest.raises(InvalidFormatCharError) as exc_info:
            AlignFormat(fill=value)  # type: ignore[arg-type]

        assert exc_info.value.field == "fill"

    def test_assignment_is_validated(self) -> None:
        fmt = AlignFormat()

        with pytest.raises(InvalidFormatCharError):
            fmt.rule = "=="
        assert fmt.rule == "-"

    def test_update_is_all_or_nothing(self) -> None:
        fmt = AlignFormat()

        with pytest.raises(InvalidFormatCharError):
            fmt.update(fill=".", rule="")

        assert fmt.fill == " "

    def test_copy_is_independent(self) -> None:
        fmt = AlignFormat(sep="|")
        other = fmt.copy()
        other.sep = ","

        assert fmt.sep == "|"
        assert other == AlignFormat(sep=",")

    def test_from_mapping(self) -> None:
        fmt = AlignFormat.from_mapping({"fill": ".", "rule": "=", "other": "x"})

        assert fmt == AlignFormat(fill=".", sep=" ", rule="=")

    def test_from_mapping_invalid(self) -> None:
        with pytest.raises(ConfigError, match="align.yaml"):
            AlignFormat.from_mapping({"sep": " | "}, source="align.yaml")

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COLALIGN_SEP", "|")
        monkeypatch.delenv("COLALIGN_FILL", raising=False)
        monkeypatch.delenv("COLALIGN_RULE", raising=False)

        assert AlignFormat.from_environment() == AlignFormat(sep="|")

    def test_from_environment_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COLALIGN_RULE", "==")

        with pytest.raises(ConfigError, match="environment"):
            AlignFormat.from_environment()
