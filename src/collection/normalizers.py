"""Map raw artwork JSON records from the collection API to ArtworkDetail."""

from typing import Any

from .errors import ParseError
from .models import ArtworkDetail
from .settings import CollectionSettings

# ArtworkDetail field -> source key in the API record, for plain text fields
TEXT_FIELDS = {
    "title": "title",
    "artist": "creator",
    "date": "date",
    "medium": "medium",
    "dimensions": "dimensions",
    "description": "description",
    "curatorial_info": "curatorial_info",
    "provenance": "provenance",
}

LIST_FIELDS = {
    "image": "image",
    "exhibition_history": "exhibition_history",
    "bibliography": "bibliography",
    "related_works": "related_works",
}


class ArtworkNormalizer:
    """Normalize collection API artwork records to the canonical detail shape.

    Every field is read from its source key and defaulted when the key is
    absent or null, so callers never see missing keys. Field types are not
    validated beyond that.
    """

    def __init__(self, settings: CollectionSettings | None = None):
        self.settings = settings or CollectionSettings.from_env()

    def normalize(self, api_response: Any, fallback_id: str | None = None) -> ArtworkDetail:
        """Convert an API record to an ArtworkDetail.

        Args:
            api_response: Decoded JSON record of one artwork
            fallback_id: Identifier the record was requested with, used when
                the record carries neither ``id`` nor ``ark``

        Returns:
            ArtworkDetail with every optional field filled

        Raises:
            ParseError: If the record is not a JSON object
        """
        if not isinstance(api_response, dict):
            raise ParseError(
                f"Expected an artwork object, got {type(api_response).__name__}"
            )

        artwork_id = self._first_present(api_response, "id", "ark") or fallback_id or ""
        artwork_id = str(artwork_id)

        values: dict[str, Any] = {
            name: self._get(api_response, key, "") for name, key in TEXT_FIELDS.items()
        }
        values.update(
            {name: self._get(api_response, key, []) for name, key in LIST_FIELDS.items()}
        )

        return ArtworkDetail(
            id=artwork_id,
            url=self.settings.artwork_url(artwork_id),
            **values,
        )

    @staticmethod
    def _get(data: dict[str, Any], key: str, default: Any) -> Any:
        value = data.get(key)
        return default if value is None else value

    @staticmethod
    def _first_present(data: dict[str, Any], *keys: str) -> Any:
        for key in keys:
            if data.get(key):
                return data[key]
        return None
