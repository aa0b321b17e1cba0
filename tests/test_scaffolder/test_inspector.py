"""Tests for the WorkspaceInspector."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from microapp_scaffold.errors import MissingWorkspaceRootError
from microapp_scaffold.scaffolder import WorkspaceInspector, WorkspaceSnapshot

pytestmark = pytest.mark.unit


class TestListUnits:
    def test_empty_workspace(self, config):
        snapshot = WorkspaceInspector(config).list_units()
        assert snapshot == WorkspaceSnapshot()
        assert snapshot.standalone_shells == []
        assert snapshot.unit_packages == []
        assert snapshot.is_empty

    def test_host_app_only(self, host_config):
        snapshot = WorkspaceInspector(host_config).list_units()
        assert snapshot.is_empty

    def test_lists_units(self, host_config, host_workspace):
        for app in ("fitness-app", "banking-app"):
            (host_workspace / "apps" / app).mkdir()
        for pkg in ("fitness-microapp", "banking-microapp", "shared-types"):
            (host_workspace / "packages" / pkg).mkdir()

        snapshot = WorkspaceInspector(host_config).list_units()
        assert snapshot.standalone_shells == ["banking-app", "fitness-app"]
        assert snapshot.unit_packages == ["banking-microapp", "fitness-microapp"]

    def test_files_ignored(self, host_config, host_workspace):
        (host_workspace / "apps" / "notes.txt").write_text("x", encoding="utf-8")
        (host_workspace / "packages" / "stray-microapp").write_text("x", encoding="utf-8")
        assert WorkspaceInspector(host_config).list_units().is_empty

    def test_one_root_missing(self, config, workspace):
        (workspace / "packages" / "chat-microapp").mkdir(parents=True)
        snapshot = WorkspaceInspector(config).list_units()
        assert snapshot.standalone_shells == []
        assert snapshot.unit_packages == ["chat-microapp"]

    def test_read_only(self, config, workspace):
        WorkspaceInspector(config).list_units()
        assert list(workspace.iterdir()) == []


class TestScan:
    def test_missing_root_raises_soft_error(self, workspace):
        with pytest.raises(MissingWorkspaceRootError) as excinfo:
            WorkspaceInspector._scan(workspace / "apps")
        assert excinfo.value.path == workspace / "apps"

    def test_soft_error_is_file_not_found(self, workspace):
        with pytest.raises(FileNotFoundError):
            WorkspaceInspector._scan(workspace / "packages")

    def test_permission_error_raises_soft_error(self, host_workspace):
        with patch.object(Path, "iterdir", side_effect=PermissionError("denied")):
            with pytest.raises(MissingWorkspaceRootError) as excinfo:
                WorkspaceInspector._scan(host_workspace / "apps")
        assert isinstance(excinfo.value.__cause__, PermissionError)


class TestUnreadableRoots:
    def test_unreadable_roots_are_empty(self, host_config):
        with patch.object(Path, "iterdir", side_effect=PermissionError("denied")):
            snapshot = WorkspaceInspector(host_config).list_units()
        assert snapshot.is_empty

    def test_one_unreadable_root(self, host_config, host_workspace):
        (host_workspace / "packages" / "chat-microapp").mkdir()
        apps_root = host_workspace / "apps"

        def fake_list(root):
            if Path(root) == apps_root:
                raise OSError("I/O error")
            return ["chat-microapp"]

        with patch("microapp_scaffold.scaffolder.inspector.list_subdirectories", fake_list):
            snapshot = WorkspaceInspector(host_config).list_units()
        assert snapshot.standalone_shells == []
        assert snapshot.unit_packages == ["chat-microapp"]
