"""Microapp scaffold configuration.

Typed description of the workspace layout the scaffolder writes into. All
settings use a Pydantic v2 model so they are validated at construction time
and can be overridden from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Workspace layout and collaborator settings.

    Instances are created once by the CLI entry point (or a test) and passed
    to the scaffolder, the navigation registrar, and the workspace inspector.
    """

    workspace_root: Path = Field(default=Path("."))
    apps_dir: str = Field(default="apps", description="Root of the standalone shells")
    packages_dir: str = Field(default="packages", description="Root of the unit packages")
    host_app: str = Field(default="main-app", description="Host application directory name")
    shared_package: str = Field(default="shared-types")
    import_prefix: str = Field(
        default="@packages", description="Path alias generated code imports packages through"
    )
    package_scope: str = Field(
        default="", description="npm scope for manifest names, e.g. '@packages' (empty = unscoped)"
    )
    install_command: str = Field(default="yarn install")
    install_timeout: int = Field(default=600, ge=1, description="Install timeout in seconds")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def apps_path(self) -> Path:
        """Directory holding every standalone shell and the host app."""
        return self.workspace_root / self.apps_dir

    @property
    def packages_path(self) -> Path:
        """Directory holding the unit packages and the shared contract."""
        return self.workspace_root / self.packages_dir

    @property
    def host_app_path(self) -> Path:
        return self.apps_path / self.host_app

    @property
    def host_tabs_path(self) -> Path:
        """Directory the navigation-entry files are written to."""
        return self.host_app_path / "app" / "(tabs)"

    @property
    def host_layout_path(self) -> Path:
        """The host's hand-authored tab list (never modified)."""
        return self.host_tabs_path / "_layout.tsx"

    @property
    def shared_package_path(self) -> Path:
        return self.packages_path / self.shared_package

    # ------------------------------------------------------------------
    # Naming helpers
    # ------------------------------------------------------------------

    def manifest_name(self, directory: str) -> str:
        """Return the manifest ``name`` for a package living in *directory*."""
        if self.package_scope:
            return f"{self.package_scope.rstrip('/')}/{directory}"
        return directory

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            MICROAPP_ROOT, MICROAPP_APPS_DIR, MICROAPP_PACKAGES_DIR,
            MICROAPP_HOST_APP, MICROAPP_SHARED_PACKAGE, MICROAPP_PACKAGE_SCOPE,
            MICROAPP_INSTALL_COMMAND.

        Keyword *overrides* win over the environment (used by the CLI for
        explicit flags such as ``--root``).
        """
        env_map = {
            "workspace_root": "MICROAPP_ROOT",
            "apps_dir": "MICROAPP_APPS_DIR",
            "packages_dir": "MICROAPP_PACKAGES_DIR",
            "host_app": "MICROAPP_HOST_APP",
            "shared_package": "MICROAPP_SHARED_PACKAGE",
            "package_scope": "MICROAPP_PACKAGE_SCOPE",
            "install_command": "MICROAPP_INSTALL_COMMAND",
        }
        kwargs: dict[str, Any] = {}
        for field_name, var in env_map.items():
            value = os.environ.get(var)
            if value:
                kwargs[field_name] = Path(value) if field_name == "workspace_root" else value

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
