"""Pytest configuration and shared fixtures for sway-helper tests."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Make the sway_helper package and the fixtures package importable
repo_root = Path(__file__).parent.parent
tests_root = Path(__file__).parent
for path in (repo_root, tests_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from fixtures.mock_sway_ipc import MockSwayConnection  # noqa: E402
from sway_helper.models import ContainerNode, NodeKind, Rectangle  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Never read the user's config file or socket during tests."""
    monkeypatch.setattr("sway_helper.core.config.DEFAULT_CONFIG_FILE", tmp_path / "config.json")
    monkeypatch.delenv("SWAYSOCK", raising=False)
    return tmp_path / "config.json"


@pytest.fixture
def make_node():
    """Factory for ContainerNode snapshots."""
    def _make(id: int, x: int, y: int, width: int = 100, height: int = 100,
              kind: NodeKind = NodeKind.TILING_CONTAINER, focused: bool = False) -> ContainerNode:
        return ContainerNode(
            id=id,
            rect=Rectangle(x=x, y=y, width=width, height=height),
            kind=kind,
            focused=focused,
        )
    return _make


@pytest.fixture
def make_workspace():
    """Factory for a workspace snapshot holding the given containers."""
    def _make(*nodes: ContainerNode, floating=()) -> ContainerNode:
        return ContainerNode(
            id=100,
            name="1",
            kind=NodeKind.WORKSPACE,
            nodes=tuple(nodes),
            floating_nodes=tuple(floating),
        )
    return _make


@pytest.fixture
def mock_connection():
    """Patch i3ipc.Connection so SwayClient talks to a MockSwayConnection."""
    conn = MockSwayConnection()
    with patch("sway_helper.core.sway_client.i3ipc.Connection", return_value=conn) as factory:
        conn.factory = factory
        yield conn
