"""
Info Panel Catalog
==================
Static content of the info panel: the promoted apps and the short
explanation of what the app does.

The content is bundled as ``whatday/resources/promoted_apps.json`` and is
the only copy of this data.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
import json
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when the info panel catalog cannot be read."""


@dataclass(frozen=True)
class PromotedApp:
    image_ref: str
    name: str
    description: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> PromotedApp:
        return PromotedApp(
            image_ref=str(data.get("image_ref", "")),
            name=str(data["name"]),
            description=str(data.get("description", "")),
            url=str(data.get("url", "")),
        )


@dataclass(frozen=True)
class InfoContent:
    ads_title: str = "Ads & App Functionality"
    functionality_title: str = "App Functionality"
    functionality_lines: tuple[str, ...] = field(default_factory=tuple)
    apps: tuple[PromotedApp, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ads_title": self.ads_title,
            "functionality_title": self.functionality_title,
            "functionality_lines": list(self.functionality_lines),
            "apps": [app.to_dict() for app in self.apps],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> InfoContent:
        defaults = InfoContent()
        return InfoContent(
            ads_title=data.get("ads_title", defaults.ads_title),
            functionality_title=data.get("functionality_title", defaults.functionality_title),
            functionality_lines=tuple(data.get("functionality_lines", [])),
            apps=tuple(PromotedApp.from_dict(item) for item in data.get("apps", [])),
        )


def load_info_content(path: str) -> InfoContent:
    """Read the catalog JSON. Raises CatalogError on missing or malformed files."""
    logger.info(f"Loading info panel catalog from: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read catalog '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Malformed catalog '{path}': {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"Malformed catalog '{path}': top level must be an object")

    try:
        content = InfoContent.from_dict(data)
    except (KeyError, TypeError) as e:
        raise CatalogError(f"Malformed catalog '{path}': {e}") from e

    logger.debug(f"Loaded {len(content.apps)} promoted apps.")
    return content


# Titles only, no apps: shown when the bundled catalog cannot be read
EMPTY_INFO_CONTENT = InfoContent()
