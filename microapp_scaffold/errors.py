"""Exception hierarchy for the scaffolding engine."""

from __future__ import annotations

from enum import Enum


class Stage(str, Enum):
    """Scaffold stages, in the order they run."""

    SHARED_CONTRACT = "shared-contract"
    UNIT_PACKAGE = "unit-package"
    STANDALONE_SHELL = "standalone-shell"
    NAVIGATION = "navigation"


class MicroappError(Exception):
    """Base class for every error raised by the scaffolder."""


class InvalidNameError(MicroappError, ValueError):
    """Raised when a unit name does not satisfy ``^[a-z][a-z0-9-]*$``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid microapp name {name!r}: must be lowercase, start with a letter, "
            "and contain only letters, numbers, and hyphens"
        )


class ScaffoldError(MicroappError):
    """Raised when a scaffold stage fails on an underlying I/O error."""

    def __init__(self, stage: Stage, cause: BaseException) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"Stage {stage.value} failed: {cause}")


class MissingWorkspaceRootError(MicroappError, FileNotFoundError):
    """A units/shells root directory does not exist or cannot be read.

    Read paths treat this as an empty result; write paths create the directory.
    """

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Workspace root not found: {path}")
