"""Tests for driver configuration."""

import io
import os
from pathlib import Path

import pytest

from colalign.config import DriverConfig
from colalign.exceptions import ConfigError, InvalidFormatCharError
from colalign.models import AlignFormat

ENV_VARS = [
    "COLALIGN_HEADER_PREFIX",
    "COLALIGN_RULE_PREFIX",
    "COLALIGN_PAGINATE",
    "COLALIGN_PAGE_LINES",
    "COLALIGN_FILL",
    "COLALIGN_SEP",
    "COLALIGN_RULE",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove all colalign environment variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class FakeTerminal(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestDriverConfig:
    """Tests for DriverConfig construction."""

    def test_defaults(self) -> None:
        config = DriverConfig()

        assert config.header_prefix == ";"
        assert config.rule_prefix == "--"
        assert config.paginate is True
        assert config.page_lines is None
        assert config.format == AlignFormat()

    def test_empty_prefix_rejected(self) -> None:
        with pytest.raises(ConfigError, match="header_prefix"):
            DriverConfig(header_prefix="")

    def test_small_page_rejected(self) -> None:
        with pytest.raises(ConfigError, match="page_lines"):
            DriverConfig(page_lines=2)

    def test_zero_page_lines_allowed(self) -> None:
        assert DriverConfig(page_lines=0).page_lines == 0


class TestFromEnvironment:
    """Tests for DriverConfig.from_environment."""

    def test_defaults_without_variables(self, clean_env: pytest.MonkeyPatch) -> None:
        assert DriverConfig.from_environment() == DriverConfig()

    def test_reads_variables(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("COLALIGN_HEADER_PREFIX", "#")
        clean_env.setenv("COLALIGN_RULE_PREFIX", "==")
        clean_env.setenv("COLALIGN_PAGINATE", "no")
        clean_env.setenv("COLALIGN_PAGE_LINES", "40")
        clean_env.setenv("COLALIGN_FILL", ".")

        config = DriverConfig.from_environment()

        assert config.header_prefix == "#"
        assert config.rule_prefix == "=="
        assert config.paginate is False
        assert config.page_lines == 40
        assert config.format.fill == "."

    def test_invalid_boolean(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("COLALIGN_PAGINATE", "maybe")

        with pytest.raises(ConfigError, match="COLALIGN_PAGINATE"):
            DriverConfig.from_environment()

    def test_invalid_integer(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("COLALIGN_PAGE_LINES", "many")

        with pytest.raises(ConfigError, match="COLALIGN_PAGE_LINES"):
            DriverConfig.from_environment()


class TestFromFile:
    """Tests for DriverConfig.from_file."""

    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "align.yaml"
        path.write_text(
            'header_prefix: "#"\n'
            "paginate: false\n"
            "page_lines: 30\n"
            "format:\n"
            '  sep: "|"\n'
            '  rule: "="\n'
        )

        config = DriverConfig.from_file(path)

        assert config.header_prefix == "#"
        assert config.rule_prefix == "--"
        assert config.paginate is False
        assert config.page_lines == 30
        assert config.format == AlignFormat(sep="|", rule="=")

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert DriverConfig.from_file(path) == DriverConfig()

    def test_null_values_use_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "nulls.yaml"
        path.write_text("header_prefix: null\nrule_prefix: ~\npaginate: null\n")

        config = DriverConfig.from_file(path)

        assert config.header_prefix == ";"
        assert config.rule_prefix == "--"
        assert config.paginate is True

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            DriverConfig.from_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("format: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            DriverConfig.from_file(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            DriverConfig.from_file(path)

    def test_unknown_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "typo.yaml"
        path.write_text("paginat: true\n")

        with pytest.raises(ConfigError, match="paginat"):
            DriverConfig.from_file(path)

    def test_invalid_values_name_the_file(self, tmp_path: Path) -> None:
        path = tmp_path / "small.yaml"
        path.write_text("page_lines: 2\n")

        with pytest.raises(ConfigError) as exc_info:
            DriverConfig.from_file(path)

        assert exc_info.value.source == str(path)

    def test_paginate_must_be_boolean(self) -> None:
        with pytest.raises(ConfigError, match="paginate"):
            DriverConfig.from_mapping({"paginate": "yes"})


class TestMerge:
    """Tests for DriverConfig.merge."""

    def test_none_values_are_skipped(self) -> None:
        config = DriverConfig(page_lines=30)

        merged = config.merge(page_lines=None, paginate=None, header_prefix="#")

        assert merged.page_lines == 30
        assert merged.paginate is True
        assert merged.header_prefix == "#"

    def test_format_overrides(self) -> None:
        config = DriverConfig(format=AlignFormat(rule="="))

        merged = config.merge(sep="|", fill=None)

        assert merged.format == AlignFormat(sep="|", rule="=")
        assert config.format == AlignFormat(rule="=")

    def test_invalid_override(self) -> None:
        with pytest.raises(InvalidFormatCharError):
            DriverConfig().merge(sep="||")


class TestResolvePageLines:
    """Tests for DriverConfig.resolve_page_lines."""

    def test_pagination_off(self) -> None:
        config = DriverConfig(paginate=False, page_lines=40)

        assert config.resolve_page_lines(FakeTerminal()) is None

    def test_explicit_page_lines(self) -> None:
        assert DriverConfig(page_lines=40).resolve_page_lines(io.StringIO()) == 40

    def test_zero_disables(self) -> None:
        assert DriverConfig(page_lines=0).resolve_page_lines(FakeTerminal()) is None

    def test_not_a_terminal(self) -> None:
        assert DriverConfig().resolve_page_lines(io.StringIO()) is None

    def test_terminal_height(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "colalign.config.shutil.get_terminal_size",
            lambda: os.terminal_size((80, 30)),
        )

        assert DriverConfig().resolve_page_lines(FakeTerminal()) == 30
