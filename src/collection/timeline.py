"""Order an artist's works and bucket them by decade."""

from common.constants import SORT_BY_DATE, SORT_BY_POPULARITY

from .models import ArtworkSummary, Timeline


def sort_artworks(artworks: list[ArtworkSummary], sort_by: str) -> list[ArtworkSummary]:
    """Sort artworks for a timeline.

    "date" sorts by ascending year, "popularity" by descending popularity
    (missing counts as 0). Any other value keeps the input order. The sort
    is stable, so ties keep page order.
    """
    if sort_by == SORT_BY_DATE:
        return sorted(artworks, key=lambda artwork: artwork.year or 0)
    if sort_by == SORT_BY_POPULARITY:
        return sorted(artworks, key=lambda artwork: artwork.popularity or 0, reverse=True)
    return list(artworks)


def decade_label(year: int) -> str:
    """Bucket label of a year, e.g. 1889 -> "1880s"."""
    return f"{(year // 10) * 10}s"


def group_by_decade(artworks: list[ArtworkSummary]) -> dict[str, list[ArtworkSummary]]:
    """Group artworks into decade buckets, skipping those without a year.

    Buckets appear in the order their first artwork is met.
    """
    decades: dict[str, list[ArtworkSummary]] = {}
    for artwork in artworks:
        if not artwork.year:
            continue
        decades.setdefault(decade_label(artwork.year), []).append(artwork)
    return decades


def build_timeline(
    artist: str,
    artworks: list[ArtworkSummary],
    sort_by: str = SORT_BY_DATE,
    total_works: int | None = None,
) -> Timeline:
    """Sort an artist's works and group them by decade.

    Artworks without a year stay in the chronological list but are left
    out of every decade bucket.
    """
    ordered = sort_artworks(artworks, sort_by)
    return Timeline(
        artist=artist,
        total_works=len(artworks) if total_works is None else total_works,
        chronological=ordered,
        by_decade=group_by_decade(ordered),
    )
