"""Navigation registration for the host application.

The registrar writes one self-contained tab file into the host app's
``app/(tabs)/`` directory and returns the ``<Tabs.Screen>`` fragment a human
has to add to the host's hand-authored ``_layout.tsx``.  The host layout file
itself is never parsed or modified.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from microapp_scaffold.config import Config
from microapp_scaffold.errors import ScaffoldError, Stage
from microapp_scaffold.utils import write_file

from .naming import MicroappDescriptor
from .templates import ArtifactKind, TemplateRenderer


class TabRegistration(BaseModel):
    """Result of registering a unit with the host app."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: Path
    icon_key: str
    instruction: str
    layout_path: Path
    written: bool = True


class NavigationRegistrar:
    """Emits navigation-entry files and manual patch instructions."""

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer(config)

    def instruction_for(self, descriptor: MicroappDescriptor) -> str:
        """Return the declarative fragment to insert into the host tab list."""
        return self.renderer.render(descriptor, ArtifactKind.NAV_INSTRUCTION).rstrip("\n")

    async def register_tab(
        self, descriptor: MicroappDescriptor, *, overwrite: bool = True
    ) -> TabRegistration:
        """Write the unit's tab file into the host app.

        The host ``app/(tabs)`` directory is created when missing.  Re-running
        overwrites the tab file with identical content unless *overwrite* is
        ``False``, in which case an existing tab file is left untouched.

        Raises:
            ScaffoldError: Stage ``navigation``, when the file cannot be written.
        """
        relative = self.renderer.relative_path(descriptor, ArtifactKind.NAV_ENTRY)
        content = self.renderer.render(descriptor, ArtifactKind.NAV_ENTRY)
        target = self.config.workspace_root / relative
        written = overwrite or not target.exists()
        if written:
            try:
                await write_file(target, content)
            except OSError as exc:
                raise ScaffoldError(Stage.NAVIGATION, exc) from exc

        return TabRegistration(
            name=descriptor.canonical_name,
            path=target,
            written=written,
            icon_key=descriptor.icon_key,
            instruction=self.instruction_for(descriptor),
            layout_path=self.config.host_layout_path,
        )
