"""Artifact planning: which files a descriptor materialises, in which order."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from microapp_scaffold.errors import Stage

from .naming import MicroappDescriptor
from .templates import ArtifactKind, TemplateRenderer

SHARED_CONTRACT_KINDS: tuple[ArtifactKind, ...] = (
    ArtifactKind.SHARED_MANIFEST,
    ArtifactKind.SHARED_TSCONFIG,
    ArtifactKind.SHARED_TYPES,
)

UNIT_PACKAGE_KINDS: tuple[ArtifactKind, ...] = (
    ArtifactKind.PACKAGE_MANIFEST,
    ArtifactKind.PACKAGE_TSCONFIG,
    ArtifactKind.PACKAGE_TYPES,
    ArtifactKind.PACKAGE_PROVIDER,
    ArtifactKind.PACKAGE_SCREEN,
    ArtifactKind.PACKAGE_INDEX,
)

STANDALONE_SHELL_KINDS: tuple[ArtifactKind, ...] = (
    ArtifactKind.SHELL_MANIFEST,
    ArtifactKind.SHELL_APP_CONFIG,
    ArtifactKind.SHELL_TSCONFIG,
    ArtifactKind.SHELL_METRO_CONFIG,
    ArtifactKind.SHELL_ROOT_LAYOUT,
    ArtifactKind.SHELL_TAB_LAYOUT,
    ArtifactKind.SHELL_HOME_SCREEN,
    ArtifactKind.SHELL_FEATURES_SCREEN,
    ArtifactKind.SHELL_SETTINGS_SCREEN,
)

NAVIGATION_KINDS: tuple[ArtifactKind, ...] = (ArtifactKind.NAV_ENTRY,)

# Empty directories created alongside each stage's files.
UNIT_PACKAGE_DIRS: tuple[str, ...] = ("src/components", "src/screens", "src/types")
STANDALONE_SHELL_DIRS: tuple[str, ...] = (
    "app/(tabs)",
    "components",
    "constants",
    "assets/fonts",
    "assets/images",
)


class Artifact(BaseModel):
    """One rendered file: workspace-relative POSIX path plus content."""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    path: str
    content: str


class ArtifactSet(BaseModel):
    """Everything a descriptor materialises, grouped by prerequisite order."""

    shared_contract: list[Artifact] = Field(default_factory=list)
    unit_package: list[Artifact] = Field(default_factory=list)
    standalone_shell: list[Artifact] = Field(default_factory=list)
    navigation_entry: list[Artifact] = Field(default_factory=list)

    def stages(self) -> list[tuple[Stage, list[Artifact]]]:
        """Return the groups in the order they must be written."""
        return [
            (Stage.SHARED_CONTRACT, self.shared_contract),
            (Stage.UNIT_PACKAGE, self.unit_package),
            (Stage.STANDALONE_SHELL, self.standalone_shell),
            (Stage.NAVIGATION, self.navigation_entry),
        ]

    def ordered(self) -> list[Artifact]:
        """Flatten the groups in write order."""
        return [artifact for _, group in self.stages() for artifact in group]

    def paths(self) -> list[str]:
        return [artifact.path for artifact in self.ordered()]


def render_group(
    renderer: TemplateRenderer,
    descriptor: MicroappDescriptor,
    kinds: tuple[ArtifactKind, ...],
) -> list[Artifact]:
    """Render every artifact kind in *kinds* for *descriptor*."""
    return [
        Artifact(
            kind=kind,
            path=renderer.relative_path(descriptor, kind),
            content=renderer.render(descriptor, kind),
        )
        for kind in kinds
    ]


def build_artifact_set(
    renderer: TemplateRenderer,
    descriptor: MicroappDescriptor,
) -> ArtifactSet:
    """Plan the full ``ArtifactSet`` for *descriptor* without touching disk.

    The shared-contract and navigation groups are always present; the unit
    package and standalone shell groups follow ``descriptor.kind``.
    """
    kind = descriptor.kind
    return ArtifactSet(
        shared_contract=render_group(renderer, descriptor, SHARED_CONTRACT_KINDS),
        unit_package=(
            render_group(renderer, descriptor, UNIT_PACKAGE_KINDS) if kind.includes_package else []
        ),
        standalone_shell=(
            render_group(renderer, descriptor, STANDALONE_SHELL_KINDS)
            if kind.includes_standalone
            else []
        ),
        navigation_entry=render_group(renderer, descriptor, NAVIGATION_KINDS),
    )
