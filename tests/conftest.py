"""Shared pytest fixtures and configuration for the pano-cli test suite.

Guidelines
----------
* Diagnostics are captured with :class:`RecordingLogger`, never from stderr.
* Filesystem cases build their trees under ``tmp_path``.
* Tests must not depend on the current working directory.
"""

from __future__ import annotations

import pytest


class RecordingLogger:
    """In-memory :class:`~pano_cli.core.protocols.Logger` for assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def info(self, msg: str) -> None:
        self.records.append(("info", msg))

    def warning(self, msg: str) -> None:
        self.records.append(("warning", msg))

    def error(self, msg: str) -> None:
        self.records.append(("error", msg))

    def messages(self, level: str) -> list[str]:
        return [msg for lvl, msg in self.records if lvl == level]

    @property
    def infos(self) -> list[str]:
        return self.messages("info")

    @property
    def warnings(self) -> list[str]:
        return self.messages("warning")

    @property
    def errors(self) -> list[str]:
        return self.messages("error")


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()
