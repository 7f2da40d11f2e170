"""FastAPI application exposing the museum collection as JSON."""

import time
from collections.abc import Iterator
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from api.errors import ErrorResponse, error_envelope, error_response_handler
from collection import CollectionService, CollectionSettings, LouvreClient
from common.constants import ALL_IMAGE_TYPES, API_TITLE, API_VERSION, SORT_BY_DATE
from common.env import env
from common.logger import setup_logging

setup_logging(level=env.log_level())

STARTED_AT = time.monotonic()

app = FastAPI(
    title=API_TITLE,
    description="Search, artwork details, images and artist timelines from the museum collection",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=env.cors_origins(),
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.add_exception_handler(ErrorResponse, error_response_handler)


def get_service() -> Iterator[CollectionService]:
    """Provide a collection service with its own HTTP session for one request."""
    with error_envelope("Failed to configure collection client"):
        settings = CollectionSettings.from_env()
    with LouvreClient(settings) as client:
        yield CollectionService(client)


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "docs": "/docs",
    }


@app.get("/api/search_artwork")
def search_artwork(
    query: str | None = None,
    page: str | None = "1",
    service: CollectionService = Depends(get_service),
):
    """Search artworks by keyword, one page of 20 cards at a time."""
    with error_envelope("Failed to search for artwork"):
        return service.search_artwork(query, page).to_dict()


@app.get("/api/get_artwork_details/{ark_id}")
def get_artwork_details(ark_id: str, service: CollectionService = Depends(get_service)):
    """Full record of one artwork."""
    with error_envelope("Failed to get artwork details"):
        return service.get_artwork_details(ark_id).to_dict()


@app.get("/api/get_artwork_image/{ark_id}")
def get_artwork_image(
    ark_id: str,
    image_type: str = Query(ALL_IMAGE_TYPES, alias="type"),
    position: str | None = None,
    service: CollectionService = Depends(get_service),
):
    """Images of one artwork, all of them, one type, or the one at a position."""
    with error_envelope("Failed to get artwork image"):
        return service.get_artwork_images(ark_id, image_type=image_type, position=position)


@app.get("/api/get_artist_timeline")
def get_artist_timeline(
    artist: str | None = None,
    sort_by: str = Query(SORT_BY_DATE, alias="sortBy"),
    service: CollectionService = Depends(get_service),
):
    """Chronological timeline of an artist's works grouped by decade."""
    with error_envelope("Failed to generate artist timeline"):
        return service.get_artist_timeline(artist, sort_by=sort_by).to_dict()


@app.get("/api/health")
def health():
    """Health check endpoint.

    ``uptime`` counts seconds since this module was imported, which is
    when the server loaded the app, not since the process started.
    """
    return {
        "status": "ok",
        "uptime": time.monotonic() - STARTED_AT,
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace(
            "+00:00", "Z"
        ),
    }
