"""Read-only enumeration of the units already present in a workspace."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from microapp_scaffold.config import Config
from microapp_scaffold.errors import MissingWorkspaceRootError
from microapp_scaffold.utils import list_subdirectories

PACKAGE_SUFFIX = "-microapp"


class WorkspaceSnapshot(BaseModel):
    """Existing units partitioned into standalone shells and unit packages."""

    standalone_shells: list[str] = Field(default_factory=list)
    unit_packages: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.standalone_shells and not self.unit_packages


class WorkspaceInspector:
    """Lists units by scanning the shells root and the packages root."""

    def __init__(self, config: Config) -> None:
        self.config = config

    def list_units(self) -> WorkspaceSnapshot:
        """Return a snapshot of the workspace.

        A missing or unreadable root yields an empty collection for that
        side; "no units yet" is a valid workspace state.
        """
        shells = [
            name
            for name in self._subdirectories(self.config.apps_path)
            if name != self.config.host_app
        ]
        packages = [
            name
            for name in self._subdirectories(self.config.packages_path)
            if name.endswith(PACKAGE_SUFFIX)
        ]
        return WorkspaceSnapshot(standalone_shells=shells, unit_packages=packages)

    def _subdirectories(self, root: Path) -> list[str]:
        try:
            return self._scan(root)
        except MissingWorkspaceRootError:
            return []

    @staticmethod
    def _scan(root: Path) -> list[str]:
        """List *root*, mapping any failure to read it onto the soft error."""
        try:
            return list_subdirectories(root)
        except OSError as exc:
            raise MissingWorkspaceRootError(root) from exc
