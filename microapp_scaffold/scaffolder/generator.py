"""Main scaffolding orchestrator.

Takes a ``MicroappDescriptor`` and materialises its ``ArtifactSet`` inside the
workspace, stage by stage:

1. the shared-contract package (missing files only, existing ones are kept),
2. the unit package (``kind`` package/both),
3. the standalone shell (``kind`` standalone/both),
4. the navigation entry in the host app (always).

Stages run strictly one after another because later stages declare workspace
dependencies on earlier ones.  Directory creation is idempotent; file writes
overwrite by default, so re-running with the same descriptor reproduces the
same tree (and discards manual edits in those exact files).  A failing stage
raises ``ScaffoldError`` and leaves earlier stages in place.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from microapp_scaffold.config import Config
from microapp_scaffold.errors import ScaffoldError, Stage
from microapp_scaffold.utils import ensure_dir, print_step, print_warning, run_command, write_file

from .artifacts import (
    STANDALONE_SHELL_DIRS,
    UNIT_PACKAGE_DIRS,
    Artifact,
    ArtifactSet,
    build_artifact_set,
)
from .naming import MicroappDescriptor
from .navigation import NavigationRegistrar, TabRegistration
from .templates import TemplateRenderer


class WritePolicy(str, Enum):
    """What to do with a target file that already exists."""

    OVERWRITE = "overwrite"
    SKIP_EXISTING = "skip-existing"


class ScaffoldResult(BaseModel):
    """Outcome of one ``scaffold`` run."""

    descriptor: MicroappDescriptor
    written: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)
    shared_contract_created: bool = False
    package_path: Path | None = None
    app_path: Path | None = None
    registration: TabRegistration | None = None


class MicroappScaffolder:
    """Materialises microapp units inside a workspace.

    Attributes:
        config: Workspace layout.
        renderer: Template renderer shared with the registrar.
        registrar: Navigation registrar run as the final stage.
        write_policy: Overwrite (default) or skip files that already exist.
    """

    def __init__(
        self,
        config: Config,
        renderer: TemplateRenderer | None = None,
        write_policy: WritePolicy = WritePolicy.OVERWRITE,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer(config)
        self.registrar = NavigationRegistrar(config, self.renderer)
        self.write_policy = write_policy

    # -- Public API --------------------------------------------------------

    def plan(self, descriptor: MicroappDescriptor) -> ArtifactSet:
        """Render the artifact set for *descriptor* without writing anything."""
        return build_artifact_set(self.renderer, descriptor)

    async def scaffold(self, descriptor: MicroappDescriptor) -> ScaffoldResult:
        """Create every artifact for *descriptor*.

        Returns:
            A ``ScaffoldResult`` listing written and skipped files.

        Raises:
            ScaffoldError: When a stage hits an I/O error.  Stages completed
                before the failure are not rolled back; re-running resolves
                the partial scaffold.
        """
        artifacts = self.plan(descriptor)
        result = ScaffoldResult(descriptor=descriptor)

        # 1. Shared contract: only missing files are written, existing ones are
        #    never touched.
        missing_shared = [
            artifact
            for artifact in artifacts.shared_contract
            if not (self.config.workspace_root / artifact.path).exists()
        ]
        if missing_shared:
            print_step(f"Creating {self.config.shared_package} package...")
            await self._write_stage(
                Stage.SHARED_CONTRACT,
                self.config.shared_package_path,
                ("src",),
                missing_shared,
                result,
            )
            result.shared_contract_created = True

        # 2. Unit package
        if descriptor.kind.includes_package:
            package_path = self.config.packages_path / descriptor.package_dir
            print_step(
                f"Creating microapp package at: {self.config.packages_dir}/{descriptor.package_dir}"
            )
            await self._write_stage(
                Stage.UNIT_PACKAGE, package_path, UNIT_PACKAGE_DIRS, artifacts.unit_package, result
            )
            result.package_path = package_path

        # 3. Standalone shell
        if descriptor.kind.includes_standalone:
            app_path = self.config.apps_path / descriptor.app_dir
            print_step(f"Creating standalone app at: {self.config.apps_dir}/{descriptor.app_dir}")
            await self._write_stage(
                Stage.STANDALONE_SHELL,
                app_path,
                STANDALONE_SHELL_DIRS,
                artifacts.standalone_shell,
                result,
            )
            result.app_path = app_path

        # 4. Navigation entry, always last.
        print_step(f"Adding {descriptor.canonical_name} tab to {self.config.host_app}")
        registration = await self.registrar.register_tab(
            descriptor, overwrite=self.write_policy is WritePolicy.OVERWRITE
        )
        result.registration = registration
        if registration.written:
            result.written.append(registration.path)
        else:
            result.skipped.append(registration.path)

        return result

    async def install_dependencies(self) -> bool:
        """Run the configured install command once in the workspace root.

        Failures are reported as a warning only: the unit has already been
        created and the operator can install by hand.

        Returns:
            ``True`` if the command exited with status 0.
        """
        print_step("Installing workspace dependencies...")
        try:
            code, _stdout, stderr = await run_command(
                self.config.install_command,
                cwd=self.config.workspace_root,
                timeout=self.config.install_timeout,
            )
        except OSError as exc:
            print_warning(f"Could not run '{self.config.install_command}': {exc}")
            return False

        if code != 0:
            print_warning(
                "Installation had some warnings, but the microapp was created successfully."
            )
            if stderr:
                print_warning(stderr.splitlines()[-1])
            return False
        return True

    # -- Stage execution ---------------------------------------------------

    async def _write_stage(
        self,
        stage: Stage,
        base: Path,
        directories: tuple[str, ...],
        artifacts: list[Artifact],
        result: ScaffoldResult,
    ) -> None:
        """Create *directories* under *base* then write *artifacts* in order.

        Any ``OSError`` aborts the rest of the stage and is re-raised as a
        ``ScaffoldError`` tagged with *stage*.
        """
        try:
            ensure_dir(base)
            for directory in directories:
                ensure_dir(base / directory)
            for artifact in artifacts:
                target = self.config.workspace_root / artifact.path
                if self.write_policy is WritePolicy.SKIP_EXISTING and target.exists():
                    result.skipped.append(target)
                    continue
                await write_file(target, artifact.content)
                result.written.append(target)
        except OSError as exc:
            raise ScaffoldError(stage, exc) from exc
