import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Point the platform config root at a temporary directory."""

    root = tmp_path / "config-home"
    root.mkdir()
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(root))
    return root
