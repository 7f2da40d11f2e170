"""Request-level operations behind each API route.

Each operation makes one upstream fetch (the image lookup reuses the
artwork record) and reshapes the result; nothing is shared between calls.
"""

import re
from typing import Any

from bs4 import BeautifulSoup

from common.constants import ALL_IMAGE_TYPES, SORT_BY_DATE
from common.logger import get_logger

from .client import LouvreClient
from .errors import ValidationError
from .extractors import artist_result_count, extract_cards, search_result_count, total_pages
from .images import select_images
from .models import ArtworkDetail, SearchResults, Timeline
from .normalizers import ArtworkNormalizer
from .settings import CollectionSettings
from .timeline import build_timeline

logger = get_logger(__name__)

LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_page(value: Any) -> int:
    """Parse the leading integer of a page parameter; none or 0 means page 1.

    Example:
        >>> parse_page("3")
        3
        >>> parse_page("2abc")
        2
        >>> parse_page("abc")
        1
    """
    if value is None:
        return 1
    match = LEADING_INTEGER.match(str(value))
    if not match:
        return 1
    return int(match.group(1)) or 1


class CollectionService:
    """Search, detail, image and timeline lookups against the collection."""

    def __init__(self, client: LouvreClient, settings: CollectionSettings | None = None):
        self.client = client
        self.settings = settings or client.settings
        self.normalizer = ArtworkNormalizer(self.settings)

    def search_artwork(self, query: str | None, page: Any = 1) -> SearchResults:
        """Run a keyword search and return one page of artwork cards.

        Raises:
            ValidationError: If the query is missing
            FetchError: If the search page cannot be fetched
        """
        if not query:
            raise ValidationError("Search query is required")

        page_number = parse_page(page)
        html = self.client.fetch_search_page(query, page_number)
        soup = BeautifulSoup(html, "html.parser")

        total_results = search_result_count(soup)
        results = SearchResults(
            query=query,
            page=page_number,
            total_results=total_results,
            total_pages=total_pages(total_results, self.settings.page_size),
            artworks=extract_cards(soup, self.settings.base_url),
        )
        logger.info(
            f"Search '{query}' page {page_number}: {len(results.artworks)} cards, "
            f"{total_results} results"
        )
        return results

    def get_artwork_details(self, ark_id: str) -> ArtworkDetail:
        """Fetch and normalize one artwork record."""
        if not ark_id:
            raise ValidationError("Artwork id is required")

        raw = self.client.fetch_artwork(ark_id)
        return self.normalizer.normalize(raw, fallback_id=ark_id)

    def get_artwork_images(
        self,
        ark_id: str,
        image_type: str | None = ALL_IMAGE_TYPES,
        position: Any = None,
    ) -> dict[str, Any]:
        """Fetch an artwork and select its images by position or type.

        Raises:
            NotFoundError: If the artwork has no images, or none at ``position``
        """
        detail = self.get_artwork_details(ark_id)
        selection = select_images(detail.image, image_type, position)

        payload: dict[str, Any] = {"id": ark_id, "artworkTitle": detail.title}
        if selection.mode == "position":
            payload["image"] = selection.images[0]
            payload["position"] = selection.position
            return payload

        payload["images"] = selection.images
        if selection.mode == "all":
            payload["imagesByType"] = selection.images_by_type
        else:
            payload["selectedType"] = selection.selected_type
        payload["availableTypes"] = selection.available_types
        payload["totalImages"] = selection.total_images
        return payload

    def get_artist_timeline(self, artist: str | None, sort_by: str = SORT_BY_DATE) -> Timeline:
        """Build a decade timeline of an artist's works.

        Raises:
            ValidationError: If the artist is missing
        """
        if not artist:
            raise ValidationError("Artist parameter is required")

        html = self.client.fetch_artist_page(artist)
        soup = BeautifulSoup(html, "html.parser")

        artworks = extract_cards(soup, self.settings.base_url, with_dates=True)
        timeline = build_timeline(
            artist, artworks, sort_by=sort_by, total_works=artist_result_count(soup)
        )
        logger.info(
            f"Timeline for '{artist}': {len(artworks)} cards in {len(timeline.by_decade)} decades"
        )
        return timeline
