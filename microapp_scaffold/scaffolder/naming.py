"""Unit name validation and the ``MicroappDescriptor`` value object."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from microapp_scaffold.errors import InvalidNameError

NAME_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")

DEFAULT_ICON = "star"

# FontAwesome icon names for well-known microapp domains.
ICON_MAP: dict[str, str] = {
    "ecommerce": "shopping-cart",
    "banking": "credit-card",
    "social": "users",
    "chat": "comments",
    "music": "music",
    "video": "video-camera",
    "photos": "camera",
    "maps": "map",
    "weather": "cloud",
    "calendar": "calendar",
    "notes": "sticky-note",
    "tasks": "check-square",
    "fitness": "heartbeat",
    "food": "cutlery",
    "travel": "plane",
    "education": "graduation-cap",
    "health": "medkit",
    "finance": "line-chart",
    "games": "gamepad",
}


class UnitKind(str, Enum):
    """Which artifacts a scaffold run emits."""

    STANDALONE = "standalone"
    PACKAGE = "package"
    BOTH = "both"

    @property
    def includes_package(self) -> bool:
        return self in (UnitKind.PACKAGE, UnitKind.BOTH)

    @property
    def includes_standalone(self) -> bool:
        return self in (UnitKind.STANDALONE, UnitKind.BOTH)


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------


def normalize_name(raw: str) -> str:
    """Validate *raw* against the unit name grammar.

    Args:
        raw: User-supplied unit name.

    Returns:
        The canonical name (identical to *raw* when valid).

    Raises:
        InvalidNameError: If *raw* is empty or does not match
            ``^[a-z][a-z0-9-]*$``.
    """
    if not isinstance(raw, str) or not NAME_PATTERN.fullmatch(raw):
        raise InvalidNameError(raw)
    return raw


def display_name_for(canonical: str) -> str:
    """Upper-case the first character only (``"my-app"`` -> ``"My-app"``)."""
    return canonical[:1].upper() + canonical[1:]


def icon_for(canonical: str) -> str:
    """Return the tab icon for *canonical*, or the generic default."""
    return ICON_MAP.get(canonical, DEFAULT_ICON)


def component_name_for(canonical: str) -> str:
    """Return an identifier-safe component prefix (``"my-app"`` -> ``"MyApp"``).

    Hyphens are legal in unit names but not in TypeScript identifiers, so
    hyphenated names are joined in PascalCase.  For single-word names this is
    the same as the display name.
    """
    return "".join(part[:1].upper() + part[1:] for part in canonical.split("-") if part)


# ---------------------------------------------------------------------------
# Descriptor
# ---------------------------------------------------------------------------


class MicroappDescriptor(BaseModel):
    """Immutable description of the unit being scaffolded."""

    model_config = ConfigDict(frozen=True)

    raw_name: str
    canonical_name: str = Field(pattern=NAME_PATTERN.pattern)
    display_name: str
    kind: UnitKind = UnitKind.BOTH
    icon_key: str = DEFAULT_ICON

    @property
    def component_name(self) -> str:
        return component_name_for(self.canonical_name)

    @property
    def package_dir(self) -> str:
        """Directory name of the unit package."""
        return f"{self.canonical_name}-microapp"

    @property
    def app_dir(self) -> str:
        """Directory name of the standalone shell."""
        return f"{self.canonical_name}-app"

    @classmethod
    def from_name(cls, raw: str, kind: UnitKind | str = UnitKind.BOTH) -> "MicroappDescriptor":
        """Normalise *raw* and derive every name variant.

        Raises:
            InvalidNameError: If *raw* fails the name grammar.
            ValueError: If *kind* is not a known ``UnitKind`` value.
        """
        canonical = normalize_name(raw)
        return cls(
            raw_name=raw,
            canonical_name=canonical,
            display_name=display_name_for(canonical),
            kind=UnitKind(kind),
            icon_key=icon_for(canonical),
        )
