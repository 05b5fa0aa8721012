from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest

from personnel_guard import DEFAULT_GRAMMAR, GrammarConfig

HEADER = '"name","age","profession","gender"\n'


@pytest.fixture
def grammar() -> GrammarConfig:
    return DEFAULT_GRAMMAR


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    def _write(data: object = None, name: str = "grammar.json") -> Path:
        if data is None:
            data = {"delimiter": '"', "hasHeaders": True, "separator": ",", "terminator": "\n"}
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_file(write_config: Callable[..., Path]) -> Path:
    return write_config()


@pytest.fixture
def write_records(tmp_path: Path) -> Callable[..., Path]:
    """Write record text byte-for-byte so line endings are preserved."""

    def _write(text: str, name: str = "people.csv") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def valid_records() -> str:
    return HEADER + '"Alice","30","Nurse","Female"\n"Bob Smith","45","Clerk","male"\n'
