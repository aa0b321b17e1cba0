"""Microapp scaffolder -- generates unit packages, standalone shells and tabs.

Quick usage::

    from microapp_scaffold.config import Config
    from microapp_scaffold.scaffolder import MicroappDescriptor, MicroappScaffolder

    descriptor = MicroappDescriptor.from_name("fitness", "both")
    scaffolder = MicroappScaffolder(Config(workspace_root=Path("/path/to/monorepo")))
    result = await scaffolder.scaffold(descriptor)
    print(result.registration.instruction)
"""

from microapp_scaffold.scaffolder.artifacts import Artifact, ArtifactSet, build_artifact_set
from microapp_scaffold.scaffolder.generator import MicroappScaffolder, ScaffoldResult, WritePolicy
from microapp_scaffold.scaffolder.inspector import WorkspaceInspector, WorkspaceSnapshot
from microapp_scaffold.scaffolder.naming import (
    ICON_MAP,
    MicroappDescriptor,
    UnitKind,
    normalize_name,
)
from microapp_scaffold.scaffolder.navigation import NavigationRegistrar, TabRegistration
from microapp_scaffold.scaffolder.templates import ArtifactKind, TemplateRenderer

__all__ = [
    "ICON_MAP",
    "Artifact",
    "ArtifactKind",
    "ArtifactSet",
    "MicroappDescriptor",
    "MicroappScaffolder",
    "NavigationRegistrar",
    "ScaffoldResult",
    "TabRegistration",
    "TemplateRenderer",
    "UnitKind",
    "WorkspaceInspector",
    "WorkspaceSnapshot",
    "WritePolicy",
    "build_artifact_set",
    "normalize_name",
]
