"""Jinja2 template rendering for microapp scaffolding.

Provides the ``TemplateRenderer`` class which loads the ``.j2`` templates
shipped in ``microapp_scaffold/scaffolder/templates/`` and renders one artifact
kind at a time for a ``MicroappDescriptor``.  Rendering is pure substitution:
templates contain no control flow, and a render call never touches the
filesystem.

The generated sources are TSX/JSON, which use ``{{ ... }}`` heavily, so the
Jinja2 environment uses ``[[ ... ]]`` as its variable delimiters.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, NamedTuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from microapp_scaffold.config import Config
from microapp_scaffold.scaffolder.naming import MicroappDescriptor


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Artifact kinds
# ---------------------------------------------------------------------------


class ArtifactKind(str, Enum):
    """Every file (or text block) the scaffolder can render."""

    SHARED_MANIFEST = "shared-manifest"
    SHARED_TSCONFIG = "shared-tsconfig"
    SHARED_TYPES = "shared-types"

    PACKAGE_MANIFEST = "package-manifest"
    PACKAGE_TSCONFIG = "package-tsconfig"
    PACKAGE_INDEX = "package-index"
    PACKAGE_SCREEN = "package-screen"
    PACKAGE_PROVIDER = "package-provider"
    PACKAGE_TYPES = "package-types"

    SHELL_MANIFEST = "shell-manifest"
    SHELL_APP_CONFIG = "shell-app-config"
    SHELL_TSCONFIG = "shell-tsconfig"
    SHELL_METRO_CONFIG = "shell-metro-config"
    SHELL_ROOT_LAYOUT = "shell-root-layout"
    SHELL_TAB_LAYOUT = "shell-tab-layout"
    SHELL_HOME_SCREEN = "shell-home-screen"
    SHELL_FEATURES_SCREEN = "shell-features-screen"
    SHELL_SETTINGS_SCREEN = "shell-settings-screen"

    NAV_ENTRY = "nav-entry"
    NAV_INSTRUCTION = "nav-instruction"


class ArtifactSpec(NamedTuple):
    """Where an artifact kind comes from and where it lands.

    ``path`` is a ``str.format`` pattern relative to the workspace root, or
    ``None`` for text that is reported rather than written.
    """

    template: str
    path: str | None
    extra: Mapping[str, str] = MappingProxyType({})


_PKG = "{packages_dir}/{package_dir}"
_SHARED = "{packages_dir}/{shared_package}"
_SHELL = "{apps_dir}/{app_dir}"

ARTIFACT_SPECS: dict[ArtifactKind, ArtifactSpec] = {
    ArtifactKind.SHARED_MANIFEST: ArtifactSpec("shared/package.json.j2", f"{_SHARED}/package.json"),
    ArtifactKind.SHARED_TSCONFIG: ArtifactSpec("common/tsconfig.lib.json.j2", f"{_SHARED}/tsconfig.json"),
    ArtifactKind.SHARED_TYPES: ArtifactSpec("shared/index.ts.j2", f"{_SHARED}/src/index.ts"),
    ArtifactKind.PACKAGE_MANIFEST: ArtifactSpec("package/package.json.j2", f"{_PKG}/package.json"),
    ArtifactKind.PACKAGE_TSCONFIG: ArtifactSpec("common/tsconfig.lib.json.j2", f"{_PKG}/tsconfig.json"),
    ArtifactKind.PACKAGE_INDEX: ArtifactSpec("package/index.tsx.j2", f"{_PKG}/src/index.tsx"),
    ArtifactKind.PACKAGE_SCREEN: ArtifactSpec(
        "package/App.tsx.j2", f"{_PKG}/src/screens/{{component_name}}App.tsx"
    ),
    ArtifactKind.PACKAGE_PROVIDER: ArtifactSpec(
        "package/MicroappProvider.tsx.j2",
        f"{_PKG}/src/components/{{component_name}}MicroappProvider.tsx",
    ),
    ArtifactKind.PACKAGE_TYPES: ArtifactSpec("package/types.ts.j2", f"{_PKG}/src/types/index.ts"),
    ArtifactKind.SHELL_MANIFEST: ArtifactSpec("standalone/package.json.j2", f"{_SHELL}/package.json"),
    ArtifactKind.SHELL_APP_CONFIG: ArtifactSpec("standalone/app.json.j2", f"{_SHELL}/app.json"),
    ArtifactKind.SHELL_TSCONFIG: ArtifactSpec("standalone/tsconfig.json.j2", f"{_SHELL}/tsconfig.json"),
    ArtifactKind.SHELL_METRO_CONFIG: ArtifactSpec(
        "standalone/metro.config.js.j2", f"{_SHELL}/metro.config.js"
    ),
    ArtifactKind.SHELL_ROOT_LAYOUT: ArtifactSpec("standalone/root_layout.tsx.j2", f"{_SHELL}/app/_layout.tsx"),
    ArtifactKind.SHELL_TAB_LAYOUT: ArtifactSpec(
        "standalone/tab_layout.tsx.j2", f"{_SHELL}/app/(tabs)/_layout.tsx"
    ),
    ArtifactKind.SHELL_HOME_SCREEN: ArtifactSpec(
        "standalone/home_screen.tsx.j2", f"{_SHELL}/app/(tabs)/index.tsx"
    ),
    ArtifactKind.SHELL_FEATURES_SCREEN: ArtifactSpec(
        "standalone/placeholder_screen.tsx.j2",
        f"{_SHELL}/app/(tabs)/features.tsx",
        MappingProxyType({"screen": "features", "screen_title": "Features"}),
    ),
    ArtifactKind.SHELL_SETTINGS_SCREEN: ArtifactSpec(
        "standalone/placeholder_screen.tsx.j2",
        f"{_SHELL}/app/(tabs)/settings.tsx",
        MappingProxyType({"screen": "settings", "screen_title": "Settings"}),
    ),
    ArtifactKind.NAV_ENTRY: ArtifactSpec(
        "navigation/tab.tsx.j2", "{apps_dir}/{host_app}/app/(tabs)/{name}.tsx"
    ),
    ArtifactKind.NAV_INSTRUCTION: ArtifactSpec("navigation/instruction.txt.j2", None),
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders microapp artifacts from Jinja2 templates.

    The renderer holds the workspace ``Config`` so it can substitute package
    names and import specifiers alongside the descriptor's name variants.
    Identical descriptor + artifact kind always yields byte-identical output.
    """

    def __init__(
        self,
        config: Config | None = None,
        template_dir: str | Path | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.config = config or Config()
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            variable_start_string="[[",
            variable_end_string="]]",
            block_start_string="[%",
            block_end_string="%]",
            comment_start_string="[#",
            comment_end_string="#]",
        )

    # -- Context building --------------------------------------------------

    def build_context(self, descriptor: MicroappDescriptor) -> dict[str, Any]:
        """Return every substitution variable available to the templates."""
        cfg = self.config
        return {
            "name": descriptor.canonical_name,
            "display_name": descriptor.display_name,
            "component_name": descriptor.component_name,
            "icon_key": descriptor.icon_key,
            "package_dir": descriptor.package_dir,
            "app_dir": descriptor.app_dir,
            "packages_dir": cfg.packages_dir,
            "apps_dir": cfg.apps_dir,
            "host_app": cfg.host_app,
            "shared_package": cfg.shared_package,
            "import_prefix": cfg.import_prefix,
            "package_name": cfg.manifest_name(descriptor.package_dir),
            "app_name": cfg.manifest_name(descriptor.app_dir),
            "shared_name": cfg.manifest_name(cfg.shared_package),
            "package_import": f"{cfg.import_prefix}/{descriptor.package_dir}",
            "shared_import": f"{cfg.import_prefix}/{cfg.shared_package}",
        }

    # -- Rendering ---------------------------------------------------------

    def render(self, descriptor: MicroappDescriptor, kind: ArtifactKind) -> str:
        """Render the literal text content of one artifact.

        Args:
            descriptor: The unit being scaffolded.
            kind: Which artifact to render.

        Returns:
            The rendered file content.
        """
        spec = ARTIFACT_SPECS[kind]
        context = {**self.build_context(descriptor), **spec.extra}
        template = self.env.get_template(spec.template)
        return template.render(**context)

    def relative_path(self, descriptor: MicroappDescriptor, kind: ArtifactKind) -> str:
        """Return the workspace-relative POSIX path the artifact is written to.

        Raises:
            ValueError: If *kind* is not written to disk.
        """
        spec = ARTIFACT_SPECS[kind]
        if spec.path is None:
            raise ValueError(f"Artifact kind {kind.value} has no output path")
        return spec.path.format(**self.build_context(descriptor))

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template paths."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in self.template_dir.rglob("*.j2")
        )
