# trails/core/game.py

"""Game records and their tolerant decoding from Legendary metadata.

Legendary's metadata files are loosely typed JSON. Everything here treats a
missing key or a value of the wrong type as "absent" rather than failing the
whole document, so one odd field never hides a game from the library.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

__all__ = [
    "BOX_ART_TYPES",
    "GameData",
    "KEY_IMAGE_TYPES",
    "KeyImage",
    "Platform",
    "extract_platforms",
    "game_from_metadata",
    "select_key_image",
]


class Platform(str, Enum):
    """Platforms a game has builds for.

    Values are the literal key names Legendary uses in ``asset_infos``.
    """

    WINDOWS = "Windows"
    MAC = "Mac"
    LINUX = "Linux"


# Box art ends the key image scan as soon as one is found
BOX_ART_TYPES: frozenset[str] = frozenset({"DieselGameBox", "DieselGameBoxTall"})

KEY_IMAGE_TYPES: frozenset[str] = BOX_ART_TYPES | {"DieselGameBoxLogo", "Thumbnail"}


def _opt_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _opt_int(value: Any) -> int | None:
    # bool is an int subclass; JSON true/false is never a pixel size
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _parse_date(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp as an aware datetime.

    Timestamps without an offset are taken as UTC. Anything unparsable falls
    back to the current time.
    """
    if isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
        else:
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class KeyImage:
    """A piece of artwork attached to a game.

    Attributes:
        alt: Alternative text, rarely present.
        height: Height in pixels.
        md5: Checksum of the image file.
        size: File size in bytes (0 when unknown).
        type: Artwork category tag, e.g. ``DieselGameBoxTall``.
        uploaded_date: When the image was uploaded.
        url: Where to fetch the image. The only field the UI really needs.
        width: Width in pixels.
    """

    alt: str | None
    height: int
    md5: str | None
    size: int
    type: str
    uploaded_date: datetime
    url: str
    width: int

    @classmethod
    def from_dict(cls, data: Any) -> KeyImage | None:
        """Build a KeyImage from a raw ``keyImages`` entry.

        Args:
            data: One element of the ``metadata.keyImages`` array.

        Returns:
            The image, or None when type, url, width or height is unusable.
        """
        if not isinstance(data, dict):
            return None

        image_type = _opt_str(data.get("type"))
        url = _opt_str(data.get("url"))
        width = _opt_int(data.get("width"))
        height = _opt_int(data.get("height"))
        if image_type is None or url is None or width is None or height is None:
            return None

        return cls(
            alt=_opt_str(data.get("alt")),
            height=height,
            md5=_opt_str(data.get("md5")),
            size=_opt_int(data.get("size")) or 0,
            type=image_type,
            uploaded_date=_parse_date(data.get("uploadedDate")),
            url=url,
            width=width,
        )


@dataclass
class GameData:
    """A game as shown in the library.

    Attributes:
        app_title: The human-readable title.
        app_name: Legendary's code name for the game; the stable key.
        platforms: Platforms with a build, in metadata order.
        key_image: The artwork picked to represent the game.
        is_downloaded: True when the game appears in installed.json.
        requires_update: True when the installed version is behind the
            metadata build version.
    """

    app_title: str | None = None
    app_name: str | None = None
    platforms: list[Platform] = field(default_factory=list)
    key_image: KeyImage | None = None
    is_downloaded: bool = False
    requires_update: bool = False

    @property
    def id(self) -> str:
        """Identity for views: app_name, or a throwaway token without one.

        The fallback is regenerated on every access, so it is only good for
        the lifetime of a single view binding.
        """
        return self.app_name or uuid.uuid4().hex

    @property
    def sort_key(self) -> str:
        """Case-insensitive title used for library ordering."""
        return (self.app_title or "").casefold()

    @property
    def is_listable(self) -> bool:
        """Whether the game has enough data to appear in the library."""
        return bool(self.app_name) and bool(self.platforms)


def extract_platforms(asset_infos: Any) -> list[Platform]:
    """Map ``asset_infos`` keys to known platforms.

    Args:
        asset_infos: The raw ``asset_infos`` value from a metadata file.

    Returns:
        Known platforms in key order, unknown keys dropped.
    """
    if not isinstance(asset_infos, dict):
        return []

    platforms: list[Platform] = []
    for key in asset_infos:
        try:
            platform = Platform(key)
        except ValueError:
            continue
        if platform not in platforms:
            platforms.append(platform)
    return platforms


def select_key_image(key_images: Any) -> KeyImage | None:
    """Pick the representative image from a ``keyImages`` array.

    Every usable candidate of a known type replaces the previous pick; the
    scan stops at the first box art. A thumbnail seen early therefore loses
    to any box art after it, while box art wins over anything that follows.

    Args:
        key_images: The raw ``metadata.keyImages`` value.

    Returns:
        The selected image, or None if no candidate qualifies.
    """
    if not isinstance(key_images, list):
        return None

    selected: KeyImage | None = None
    for raw in key_images:
        image = KeyImage.from_dict(raw)
        if image is None or image.type not in KEY_IMAGE_TYPES:
            continue
        selected = image
        if image.type in BOX_ART_TYPES:
            break
    return selected


def game_from_metadata(data: dict[str, Any]) -> GameData:
    """Decode one Legendary metadata document.

    Args:
        data: The parsed top-level JSON object.

    Returns:
        A GameData with whatever fields could be read. Install and update
        flags are left for the reconciler.
    """
    game = GameData(
        app_title=_opt_str(data.get("app_title")),
        app_name=_opt_str(data.get("app_name")),
        platforms=extract_platforms(data.get("asset_infos")),
    )

    metadata = data.get("metadata")
    if isinstance(metadata, dict):
        game.key_image = select_key_image(metadata.get("keyImages"))

    return game
