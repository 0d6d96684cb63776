"""Shared test fixtures and configuration."""

import json
import subprocess
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from convcommit import config, global_config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, temp_dir):
    """Keep tests away from the real ~/.convcommit and OPENAI_* variables."""
    monkeypatch.setattr(global_config, "_CONFIG_DIR", temp_dir / ".convcommit")
    for name in ("OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_BASE_URL", "EDITOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "ACTIVE_MODEL", config.DEFAULT_MODEL)
    monkeypatch.setattr(config, "ACTIVE_BASE_URL", config.DEFAULT_BASE_URL)
    monkeypatch.setattr(config, "TEMPERATURE", config.DEFAULT_TEMPERATURE)
    return temp_dir / ".convcommit"


@pytest.fixture
def sample_diff():
    """Sample staged diff."""
    return """diff --git a/auth/session.py b/auth/session.py
index 1234567..abcdefg 100644
--- a/auth/session.py
+++ b/auth/session.py
@@ -1,5 +1,8 @@
 def login(user):
-    return create_session(user)
+    session = create_session(user)
+    session.refresh()
+    return session
"""


@pytest.fixture
def sample_commit_dict():
    """Sample commit descriptor as a dictionary."""
    return {"type": "feat", "scope": "auth", "message": "refresh session on login"}


@pytest.fixture
def sample_llm_response(sample_commit_dict):
    """Sample raw LLM response (valid JSON)."""
    return json.dumps(sample_commit_dict)


@pytest.fixture
def mock_completion():
    """Build a fake chat.completions.create return value."""

    def _build(content, prompt_tokens=120, completion_tokens=15):
        response = MagicMock()
        response.choices = [MagicMock()]
        response.choices[0].message.content = content
        response.choices[0].message.refusal = None
        response.usage.prompt_tokens = prompt_tokens
        response.usage.completion_tokens = completion_tokens
        return response

    return _build


class FakeGit:
    """Stand-in for subprocess.run that answers git subcommands."""

    def __init__(self):
        self.calls = []
        self.responses = {
            "rev-parse": (0, "/path/to/repo\n", ""),
            "branch": (0, "main\n", ""),
        }

    def set(self, subcommand, stdout="", returncode=0, stderr=""):
        self.responses[subcommand] = (returncode, stdout, stderr)

    def subcommands(self):
        return [cmd[1] for cmd in self.calls]

    def __call__(self, cmd, **kwargs):
        self.calls.append(cmd)
        returncode, stdout, stderr = self.responses.get(cmd[1], (0, "", ""))
        if isinstance(stdout, bytes):
            stdout = stdout.decode(kwargs.get("encoding") or "utf-8")
        if returncode != 0 and kwargs.get("check"):
            raise subprocess.CalledProcessError(returncode, cmd, output=stdout, stderr=stderr)
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def fake_git(mocker):
    """Route git subprocess calls to a FakeGit instance."""
    git = FakeGit()
    mocker.patch("convcommit.git.runner.subprocess.run", side_effect=git)
    return git
