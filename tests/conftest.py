"""Shared pytest fixtures for the microapp scaffold test suite.

Provides reusable fixtures for:
- Temporary workspaces (empty, and with a host app already present)
- A ``Config`` rooted at the temporary workspace
- A renderer and descriptors for a few representative unit names
"""

from __future__ import annotations

from pathlib import Path

import pytest

from microapp_scaffold.config import Config
from microapp_scaffold.scaffolder import MicroappDescriptor, TemplateRenderer, UnitKind


# ---------------------------------------------------------------------------
# Workspaces
# ---------------------------------------------------------------------------

HOST_LAYOUT = """\
import { Tabs } from 'expo-router';

export default function TabLayout() {
  return (
    <Tabs>
      <Tabs.Screen name="index" options={{ title: 'Home' }} />
    </Tabs>
  );
}
"""


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """An empty workspace root (no apps/ or packages/ yet)."""
    root = tmp_path / "monorepo"
    root.mkdir()
    yield root


@pytest.fixture
def host_workspace(workspace: Path) -> Path:
    """A workspace containing the host app and its hand-authored tab layout."""
    tabs = workspace / "apps" / "main-app" / "app" / "(tabs)"
    tabs.mkdir(parents=True)
    (tabs / "_layout.tsx").write_text(HOST_LAYOUT, encoding="utf-8")
    (workspace / "packages").mkdir()
    (workspace / "package.json").write_text(
        '{"private": true, "workspaces": ["apps/*", "packages/*"]}\n', encoding="utf-8"
    )
    yield workspace


@pytest.fixture
def config(workspace: Path) -> Config:
    return Config(workspace_root=workspace)


@pytest.fixture
def host_config(host_workspace: Path) -> Config:
    return Config(workspace_root=host_workspace)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer(config: Config) -> TemplateRenderer:
    return TemplateRenderer(config)


@pytest.fixture
def fitness() -> MicroappDescriptor:
    """A known domain name (icon ``heartbeat``), both artifacts."""
    return MicroappDescriptor.from_name("fitness", UnitKind.BOTH)


@pytest.fixture
def news() -> MicroappDescriptor:
    """A name absent from the icon map."""
    return MicroappDescriptor.from_name("news-feed", UnitKind.BOTH)


@pytest.fixture
def snapshot_tree():
    """Return a function mapping every path under a root to its text content.

    Directories map to ``None``.
    """

    def _snapshot(root: Path) -> dict[str, str | None]:
        tree: dict[str, str | None] = {}
        for path in sorted(root.rglob("*")):
            rel = path.relative_to(root).as_posix()
            tree[rel] = None if path.is_dir() else path.read_text(encoding="utf-8")
        return tree

    return _snapshot
