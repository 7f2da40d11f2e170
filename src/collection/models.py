"""Request-scoped records produced by the extraction pipeline."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ArtworkSummary:
    """One artwork card scraped from a search results page.

    ``date`` and ``year`` are only filled in by the timeline extractor;
    a ``year`` of 0 means no year could be derived from the label.
    """

    id: str
    title: str
    full_title: str
    author: str
    image_url: str
    url: str
    date: str | None = None
    year: int | None = None
    popularity: float | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "fullTitle": self.full_title,
            "author": self.author,
        }
        if self.date is not None:
            data["date"] = self.date
            data["year"] = self.year or 0
        if self.popularity is not None:
            data["popularity"] = self.popularity
        data["imageUrl"] = self.image_url
        data["url"] = self.url
        return data


@dataclass
class SearchResults:
    """One page of artwork search results."""

    query: str
    page: int
    total_results: int
    total_pages: int
    artworks: list[ArtworkSummary] = field(default_factory=list)

    @property
    def next_page(self) -> int | None:
        return self.page + 1 if self.page < self.total_pages else None

    @property
    def prev_page(self) -> int | None:
        return self.page - 1 if self.page > 1 else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "page": self.page,
            "totalResults": self.total_results,
            "totalPages": self.total_pages,
            "artworks": [artwork.to_dict() for artwork in self.artworks],
            "nextPage": self.next_page,
            "prevPage": self.prev_page,
        }


@dataclass
class ArtworkDetail:
    """Canonical artwork record mapped from the collection's JSON API.

    Every field is always present; missing upstream values become empty
    strings or empty lists.
    """

    id: str
    title: str = ""
    artist: str = ""
    date: str = ""
    medium: str = ""
    dimensions: str = ""
    description: str = ""
    image: list[dict[str, Any]] = field(default_factory=list)
    url: str = ""
    curatorial_info: str = ""
    provenance: str = ""
    exhibition_history: list[Any] = field(default_factory=list)
    bibliography: list[Any] = field(default_factory=list)
    related_works: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "date": self.date,
            "medium": self.medium,
            "dimensions": self.dimensions,
            "description": self.description,
            "image": self.image,
            "url": self.url,
            "curatorial_info": self.curatorial_info,
            "provenance": self.provenance,
            "exhibition_history": self.exhibition_history,
            "bibliography": self.bibliography,
            "related_works": self.related_works,
        }


@dataclass
class Timeline:
    """An artist's works ordered and bucketed by decade."""

    artist: str
    total_works: int
    chronological: list[ArtworkSummary] = field(default_factory=list)
    by_decade: dict[str, list[ArtworkSummary]] = field(default_factory=dict)

    @property
    def earliest(self) -> ArtworkSummary | None:
        return self.chronological[0] if self.chronological else None

    @property
    def latest(self) -> ArtworkSummary | None:
        return self.chronological[-1] if self.chronological else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "artist": self.artist,
            "total_works": self.total_works,
            "timeline": {
                "chronological": [artwork.to_dict() for artwork in self.chronological],
                "by_decade": {
                    decade: [artwork.to_dict() for artwork in artworks]
                    for decade, artworks in self.by_decade.items()
                },
            },
            "earliest_work": self.earliest.to_dict() if self.earliest else None,
            "latest_work": self.latest.to_dict() if self.latest else None,
        }
