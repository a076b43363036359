"""Shared test fixtures."""

from pathlib import Path

import pytest

from manchu_converter.converter import ManchuConverter


@pytest.fixture
def converter() -> ManchuConverter:
    return ManchuConverter()


@pytest.fixture
def write_config(tmp_path):
    """Write a manchu_converter.toml into tmp_path and return its path."""

    def _write(body: str, name: str = "manchu_converter.toml") -> Path:
        p = tmp_path / name
        p.write_text(body, encoding="utf-8")
        return p

    return _write
