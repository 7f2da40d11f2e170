"""Tests for the request-level collection operations."""

from unittest.mock import Mock

import pytest

from collection.client import LouvreClient
from collection.errors import FetchError, NotFoundError, ValidationError
from collection.service import CollectionService, parse_page
from collection.settings import CollectionSettings

BASE_URL = "https://collections.example.org"

SEARCH_PAGE = """
<span class="search__results__count">45 résultats</span>
<div id="search__grid">
  <div class="card__outer">
    <a href="/ark:/53355/cl1"><img data-src="/media/1.jpg" title="Full title one"></a>
    <div class="card__title"><a>One</a></div>
    <div class="card__author">Eugène Delacroix</div>
    <div class="card__date">1830</div>
  </div>
  <div class="card__outer">
    <a href="/ark:/53355/cl2"><img data-src="/media/2.jpg" title="Full title two"></a>
    <div class="card__title"><a>Two</a></div>
    <div class="card__author">Eugène Delacroix</div>
    <div class="card__date">1824</div>
  </div>
  <div class="card__outer">
    <a href="/ark:/53355/cl3"></a>
    <div class="card__title"><a>Three</a></div>
    <div class="card__date">sans date</div>
  </div>
</div>
<span id="count_text">312 résultats</span>
"""


@pytest.fixture
def client():
    """Fake client that serves canned pages and records."""
    fake = Mock(spec=LouvreClient)
    fake.settings = CollectionSettings(base_url=BASE_URL)
    fake.fetch_search_page.return_value = SEARCH_PAGE
    fake.fetch_artist_page.return_value = SEARCH_PAGE
    fake.fetch_artwork.return_value = {
        "id": "cl1",
        "title": "La Liberté guidant le peuple",
        "image": [
            {"type": "face", "position": 1},
            {"type": "face", "position": 0},
            {"type": "dos", "position": 2},
        ],
    }
    return fake


@pytest.fixture
def service(client):
    return CollectionService(client)


class TestParsePage:
    """Tests for page parameter parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("3", 3),
            (2, 2),
            ("2abc", 2),
            (" 4 ", 4),
            ("abc", 1),
            ("0", 1),
            (None, 1),
            ("", 1),
        ],
    )
    def test_parse_page(self, value, expected):
        assert parse_page(value) == expected


class TestSearchArtwork:
    """Tests for keyword search."""

    def test_missing_query_raises_validation_error(self, service, client):
        with pytest.raises(ValidationError, match="Search query is required"):
            service.search_artwork("")
        client.fetch_search_page.assert_not_called()

    def test_first_page(self, service, client):
        data = service.search_artwork("delacroix", "1").to_dict()

        client.fetch_search_page.assert_called_once_with("delacroix", 1)
        assert data["totalResults"] == 45
        assert data["totalPages"] == 3
        assert data["nextPage"] == 2
        assert data["prevPage"] is None
        assert [a["id"] for a in data["artworks"]] == ["cl1", "cl2", "cl3"]
        assert data["artworks"][0]["imageUrl"] == f"{BASE_URL}/media/1.jpg"
        assert "year" not in data["artworks"][0]

    def test_page_with_trailing_garbage_fetches_leading_number(self, service, client):
        data = service.search_artwork("delacroix", "2abc").to_dict()

        client.fetch_search_page.assert_called_once_with("delacroix", 2)
        assert data["page"] == 2

    def test_last_page(self, service):
        data = service.search_artwork("delacroix", 3).to_dict()

        assert data["page"] == 3
        assert data["nextPage"] is None
        assert data["prevPage"] == 2

    def test_fetch_error_propagates(self, service, client):
        client.fetch_search_page.side_effect = FetchError("boom")

        with pytest.raises(FetchError):
            service.search_artwork("delacroix")


class TestArtworkDetails:
    """Tests for artwork details."""

    def test_details(self, service, client):
        detail = service.get_artwork_details("cl1")

        client.fetch_artwork.assert_called_once_with("cl1")
        assert detail.title == "La Liberté guidant le peuple"
        assert detail.provenance == ""
        assert detail.url == f"{BASE_URL}/ark:/53355/cl1"


class TestArtworkImages:
    """Tests for artwork image selection payloads."""

    def test_all_images(self, service):
        payload = service.get_artwork_images("cl1")

        assert payload["artworkTitle"] == "La Liberté guidant le peuple"
        assert payload["availableTypes"] == ["face", "dos"]
        assert payload["totalImages"] == 3
        assert set(payload["imagesByType"]) == {"face", "dos"}
        assert "selectedType" not in payload

    def test_images_of_type(self, service):
        payload = service.get_artwork_images("cl1", image_type="face")

        assert payload["selectedType"] == "face"
        assert [img["position"] for img in payload["images"]] == [0, 1]
        assert "imagesByType" not in payload

    def test_image_at_position(self, service):
        payload = service.get_artwork_images("cl1", position="2")

        assert payload == {
            "id": "cl1",
            "artworkTitle": "La Liberté guidant le peuple",
            "image": {"type": "dos", "position": 2},
            "position": 2,
        }

    def test_artwork_without_images(self, service, client):
        client.fetch_artwork.return_value = {"id": "cl1", "title": "Untitled"}

        with pytest.raises(NotFoundError, match="No images available"):
            service.get_artwork_images("cl1", position="0")


class TestArtistTimeline:
    """Tests for artist timelines."""

    def test_missing_artist_raises_validation_error(self, service):
        with pytest.raises(ValidationError, match="Artist parameter is required"):
            service.get_artist_timeline(None)

    def test_timeline(self, service, client):
        data = service.get_artist_timeline("Eugène Delacroix").to_dict()

        client.fetch_artist_page.assert_called_once_with("Eugène Delacroix")
        assert data["total_works"] == 312
        chronological = data["timeline"]["chronological"]
        assert [a["year"] for a in chronological] == [0, 1824, 1830]
        assert list(data["timeline"]["by_decade"]) == ["1820s", "1830s"]
        assert data["earliest_work"]["id"] == "cl3"
        assert data["latest_work"]["id"] == "cl1"
