"""Shared pytest fixtures for the uwc test-suite."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path

import pytest


class RecordingSink:
    """Output sink that keeps every header and row in memory."""

    def __init__(self) -> None:
        self.header: list[str] | None = None
        self.rows: list[tuple[list[int], str | None]] = []
        self.closed: bool = False

    def write_header(self, columns: Sequence[str]) -> None:
        self.header = list(columns)

    def write_row(self, counts: Sequence[int], label: str | None = None) -> None:
        self.rows.append((list(counts), label))

    def close(self) -> None:
        self.closed = True

    def row_for(self, label: str) -> list[int]:
        """Return the counts written under ``label``."""

        matches = [counts for counts, row_label in self.rows if row_label == label]
        assert len(matches) == 1, f"expected one row for {label!r}, got {matches}"
        return matches[0]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a missing file and reset the cached instance."""

    import uwc.config.config as config_module

    config_path = tmp_path_factory.mktemp("uwc-config") / "config.toml"
    monkeypatch.setenv("UWC_CONFIG", str(config_path))

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = config_module.Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield config_path
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def recording_sink() -> RecordingSink:
    """Provide a fresh in-memory sink."""

    return RecordingSink()


@pytest.fixture
def recording_sink_factory() -> type[RecordingSink]:
    """Provide the sink class for tests that need several sinks."""

    return RecordingSink
