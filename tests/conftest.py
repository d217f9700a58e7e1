"""Pytest fixtures for gridprompt tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point config at a temp dir and clear module-level caches."""
    from gridprompt.config import Config, clear_config_cache

    monkeypatch.setenv("GRIDPROMPT_CONFIG_DIR", str(tmp_path / "config"))
    for key in Config.DEFAULTS:
        monkeypatch.delenv(f"GRIDPROMPT_{key.upper()}", raising=False)
    clear_config_cache()

    yield tmp_path / "config"

    clear_config_cache()


class RecordingHost:
    """PromptHost that keeps every frame and answer it receives."""

    def __init__(self, default=None):
        self.default = default
        self.frames: list[str] = []
        self.completed: list[list] = []

    def get_default(self):
        return self.default

    def on_frame(self, text: str) -> None:
        self.frames.append(text)

    def on_complete(self, answers: list) -> None:
        self.completed.append(answers)


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()
