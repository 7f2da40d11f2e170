"""Group, filter and order the image entries of an artwork."""

import math
from dataclasses import dataclass, field
from typing import Any, Literal

from common.constants import ALL_IMAGE_TYPES, UNSPECIFIED_IMAGE_TYPE

from .errors import NotFoundError, ParseError

ImageEntry = dict[str, Any]


@dataclass
class ImageSelection:
    """Result of selecting images by position or by type."""

    mode: Literal["position", "all", "type"]
    images: list[ImageEntry] = field(default_factory=list)
    images_by_type: dict[str, list[ImageEntry]] = field(default_factory=dict)
    selected_type: str | None = None
    position: int | float | None = None
    total_images: int = 0

    @property
    def available_types(self) -> list[str]:
        return list(self.images_by_type)


def coerce_position(value: Any) -> float:
    """Coerce a requested position to a number.

    Anything that is not numeric becomes NaN, which never equals an
    entry's position.

    Example:
        >>> coerce_position("2")
        2.0
        >>> math.isnan(coerce_position("abc"))
        True
    """
    if isinstance(value, int | float):
        return float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return math.nan


def _field(image: Any, name: str) -> Any:
    return image.get(name) if isinstance(image, dict) else None


def _numeric_position(image: ImageEntry) -> float | None:
    position = _field(image, "position")
    if isinstance(position, bool) or not isinstance(position, int | float):
        return None
    if math.isnan(position):
        return None
    return float(position)


def sort_by_position(images: list[ImageEntry]) -> list[ImageEntry]:
    """Order images by ascending position.

    Entries without a numeric position go last, keeping their relative order.
    """

    def key(image: ImageEntry) -> tuple[int, float]:
        position = _numeric_position(image)
        return (1, 0.0) if position is None else (0, position)

    return sorted(images, key=key)


def group_by_type(images: list[ImageEntry]) -> dict[str, list[ImageEntry]]:
    """Group images by their declared type.

    Groups appear in order of each type's first occurrence; untyped images
    land in the "unspecified" group, as do entries that are not objects.
    """
    groups: dict[str, list[ImageEntry]] = {}
    for image in images:
        image_type = _field(image, "type") or UNSPECIFIED_IMAGE_TYPE
        groups.setdefault(str(image_type), []).append(image)
    return groups


def find_by_position(images: list[ImageEntry], position: Any) -> ImageEntry:
    """Return the image whose position equals the requested one.

    Raises:
        NotFoundError: If no image sits at that position
    """
    wanted = coerce_position(position)
    for image in images:
        if _numeric_position(image) == wanted:
            return image
    raise NotFoundError(f"No image found with position {position}")


def select_images(
    images: list[ImageEntry] | None,
    image_type: str | None = None,
    position: Any = None,
) -> ImageSelection:
    """Select images of an artwork by position, by type, or all of them.

    Args:
        images: The artwork's image entries
        image_type: Group to return; "all" or None returns every group. An
            unknown type falls back to the first group.
        position: If given, return only the image at this position

    Returns:
        ImageSelection describing what was picked

    Raises:
        NotFoundError: If the artwork has no images, or none at ``position``
        ParseError: If ``images`` is not a list
    """
    if not images:
        raise NotFoundError("No images available for this artwork")
    if not isinstance(images, list):
        raise ParseError(f"Expected a list of images, got {type(images).__name__}")

    total = len(images)

    if position is not None:
        wanted = coerce_position(position)
        image = find_by_position(images, position)
        return ImageSelection(
            mode="position",
            images=[image],
            position=int(wanted) if wanted.is_integer() else wanted,
            total_images=total,
        )

    groups = group_by_type(images)

    if image_type is None or image_type == ALL_IMAGE_TYPES:
        return ImageSelection(mode="all", images=images, images_by_type=groups, total_images=total)

    selected_type = image_type if image_type in groups else next(iter(groups))
    return ImageSelection(
        mode="type",
        images=sort_by_position(groups[selected_type]),
        images_by_type=groups,
        selected_type=selected_type,
        total_images=total,
    )
