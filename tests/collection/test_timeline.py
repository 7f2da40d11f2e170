"""Tests for timeline sorting and decade bucketing."""

import pytest

from collection.models import ArtworkSummary
from collection.timeline import build_timeline, decade_label, group_by_decade, sort_artworks


def artwork(artwork_id, year, popularity=None):
    """Build a timeline card with a derived year."""
    return ArtworkSummary(
        id=artwork_id,
        title=f"Work {artwork_id}",
        full_title="",
        author="Artist",
        image_url="",
        url="",
        date=str(year) if year else "undated",
        year=year,
        popularity=popularity,
    )


@pytest.fixture
def artworks():
    """Works out of order, including one without a year."""
    return [
        artwork("c", 1889),
        artwork("a", 1503),
        artwork("u", 0),
        artwork("d", 1892),
        artwork("b", 1510),
    ]


class TestGroupByDecade:
    """Tests for decade bucketing."""

    def test_buckets_by_decade(self, artworks):
        buckets = group_by_decade(sort_artworks(artworks, "date"))

        assert list(buckets) == ["1500s", "1510s", "1880s", "1890s"]
        assert [a.id for a in buckets["1500s"]] == ["a"]

    def test_same_decade_shares_bucket(self):
        years = [1503, 1509, 1891, 1892]
        buckets = group_by_decade([artwork(str(i), year) for i, year in enumerate(years)])

        assert {decade: len(items) for decade, items in buckets.items()} == {"1500s": 2, "1890s": 2}

    def test_year_zero_is_not_bucketed(self, artworks):
        buckets = group_by_decade(artworks)

        assert all(a.id != "u" for items in buckets.values() for a in items)

    def test_decade_label(self):
        assert decade_label(1889) == "1880s"
        assert decade_label(1650) == "1650s"


class TestSortArtworks:
    """Tests for timeline ordering."""

    def test_sort_by_date(self, artworks):
        ordered = sort_artworks(artworks, "date")

        assert [a.year for a in ordered] == [0, 1503, 1510, 1889, 1892]

    def test_sort_by_popularity(self):
        works = [artwork("a", 1500, 3), artwork("b", 1500), artwork("c", 1500, 10)]

        assert [a.id for a in sort_artworks(works, "popularity")] == ["c", "a", "b"]

    def test_popularity_without_values_keeps_every_element(self, artworks):
        ordered = sort_artworks(artworks, "popularity")

        assert len(ordered) == len(artworks)
        assert {a.id for a in ordered} == {a.id for a in artworks}

    def test_unknown_sort_keeps_order(self, artworks):
        assert sort_artworks(artworks, "title") == artworks

    def test_sort_does_not_mutate_input(self, artworks):
        before = list(artworks)
        sort_artworks(artworks, "date")
        assert artworks == before


class TestBuildTimeline:
    """Tests for build_timeline."""

    def test_chronological_keeps_undated_work(self, artworks):
        timeline = build_timeline("Artist", artworks, sort_by="date", total_works=42)

        assert len(timeline.chronological) == 5
        assert timeline.total_works == 42
        assert timeline.earliest.id == "u"
        assert timeline.latest.id == "d"

    def test_to_dict_shape(self, artworks):
        data = build_timeline("Artist", artworks).to_dict()

        assert set(data) == {"artist", "total_works", "timeline", "earliest_work", "latest_work"}
        assert set(data["timeline"]) == {"chronological", "by_decade"}
        assert data["timeline"]["chronological"][1]["year"] == 1503
        assert data["total_works"] == 5

    def test_empty_timeline(self):
        timeline = build_timeline("Nobody", [])

        assert timeline.earliest is None
        assert timeline.latest is None
        assert timeline.to_dict()["earliest_work"] is None
        assert timeline.by_decade == {}
