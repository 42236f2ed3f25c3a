"""Tests for opening named inputs as byte sources."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from uwc.features.counting.adapters.filesystem import open_source
from uwc.features.counting.domain.errors import OpenError


def test_opens_regular_file_in_binary_mode(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    _ = path.write_bytes(b"caf\xc3\xa9\r\n")

    with open_source(str(path)) as source:
        assert source.read() == b"caf\xc3\xa9\r\n"

    assert getattr(source, "closed") is True


def test_dash_means_standard_input(monkeypatch: pytest.MonkeyPatch) -> None:
    stdin = io.TextIOWrapper(io.BytesIO(b"piped\n"))
    monkeypatch.setattr(sys, "stdin", stdin)

    with open_source("-") as source:
        assert source.read() == b"piped\n"

    assert not stdin.buffer.closed


def test_missing_file_raises_open_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"

    with pytest.raises(OpenError) as excinfo:
        with open_source(str(missing)):
            pass

    assert excinfo.value.name == str(missing)
    assert str(excinfo.value) == f"cannot open {missing}: No such file or directory"


def test_directory_raises_open_error(tmp_path: Path) -> None:
    with pytest.raises(OpenError):
        with open_source(str(tmp_path)):
            pass
