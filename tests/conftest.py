"""Shared fixtures for linking tests."""

from pathlib import Path

import pytest

from symlinklib import Config, LinkContext


class ScriptedPrompt:
    """Prompt stand-in that replays fixed answers and records each question."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.titles = []

    def __call__(self, title, message, options):
        self.titles.append(title)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {title}")
        return self.answers.pop(0)


@pytest.fixture
def repo(tmp_path):
    """Dotfiles repository with empty config/ and dotfiles/ trees for alice@box."""
    root = tmp_path / "repo"
    (root / "config").mkdir(parents=True)
    (root / "dotfiles").mkdir()
    (root / "symlink.toml").write_text('user = "alice"\nhost = "box"\n')
    return root


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def config(repo, home):
    return Config(repo_root=repo, home=home)


@pytest.fixture
def make_context():
    """Build a LinkContext whose prompt answers with the given letters."""
    def _make(*answers):
        prompt = ScriptedPrompt(answers)
        return LinkContext(prompt=prompt), prompt
    return _make


def write(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path
