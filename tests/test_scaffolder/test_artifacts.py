"""Tests for ArtifactSet planning."""

from __future__ import annotations

import pytest

from microapp_scaffold.errors import Stage
from microapp_scaffold.scaffolder import MicroappDescriptor, UnitKind, build_artifact_set
from microapp_scaffold.scaffolder.artifacts import (
    NAVIGATION_KINDS,
    SHARED_CONTRACT_KINDS,
    STANDALONE_SHELL_KINDS,
    UNIT_PACKAGE_KINDS,
)

pytestmark = pytest.mark.unit


class TestBuildArtifactSet:
    def test_both_has_all_groups(self, renderer, fitness):
        artifacts = build_artifact_set(renderer, fitness)
        assert len(artifacts.shared_contract) == len(SHARED_CONTRACT_KINDS)
        assert len(artifacts.unit_package) == len(UNIT_PACKAGE_KINDS)
        assert len(artifacts.standalone_shell) == len(STANDALONE_SHELL_KINDS)
        assert len(artifacts.navigation_entry) == len(NAVIGATION_KINDS)

    def test_package_only(self, renderer):
        d = MicroappDescriptor.from_name("banking", UnitKind.PACKAGE)
        artifacts = build_artifact_set(renderer, d)
        assert artifacts.unit_package
        assert artifacts.standalone_shell == []
        assert artifacts.navigation_entry

    def test_standalone_only(self, renderer):
        d = MicroappDescriptor.from_name("banking", UnitKind.STANDALONE)
        artifacts = build_artifact_set(renderer, d)
        assert artifacts.unit_package == []
        assert artifacts.standalone_shell
        assert artifacts.shared_contract

    def test_stage_order(self, renderer, fitness):
        stages = [stage for stage, _ in build_artifact_set(renderer, fitness).stages()]
        assert stages == [
            Stage.SHARED_CONTRACT,
            Stage.UNIT_PACKAGE,
            Stage.STANDALONE_SHELL,
            Stage.NAVIGATION,
        ]

    def test_ordered_paths(self, renderer, fitness):
        paths = build_artifact_set(renderer, fitness).paths()
        assert paths[0].startswith("packages/shared-types/")
        assert paths[-1] == "apps/main-app/app/(tabs)/fitness.tsx"
        first_shell = next(i for i, p in enumerate(paths) if p.startswith("apps/fitness-app/"))
        last_package = max(i for i, p in enumerate(paths) if p.startswith("packages/fitness-microapp/"))
        assert last_package < first_shell

    def test_paths_unique(self, renderer, fitness):
        paths = build_artifact_set(renderer, fitness).paths()
        assert len(paths) == len(set(paths))

    def test_planning_touches_no_files(self, renderer, fitness, workspace):
        build_artifact_set(renderer, fitness)
        assert list(workspace.iterdir()) == []
