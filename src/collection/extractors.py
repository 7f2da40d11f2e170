"""Scrape artwork cards and result counts out of search results pages."""

import math
import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from common.constants import RESULT_COUNT_WORD
from common.logger import get_logger

from .dates import parse_year
from .models import ArtworkSummary

logger = get_logger(__name__)

CARD_SELECTOR = "#search__grid .card__outer"
TITLE_SELECTOR = ".card__title a"
AUTHOR_SELECTOR = ".card__author"
DATE_SELECTOR = ".card__date"
SEARCH_COUNT_SELECTOR = ".search__results__count"
ARTIST_COUNT_SELECTOR = "#count_text"

NON_DIGITS = re.compile(r"\D")
RESULT_WORD_PATTERN = re.compile(re.escape(RESULT_COUNT_WORD), re.IGNORECASE)


def _soup(document: str | BeautifulSoup) -> BeautifulSoup:
    if isinstance(document, BeautifulSoup):
        return document
    return BeautifulSoup(document, "html.parser")


def _text(card: Tag, selector: str) -> str:
    element = card.select_one(selector)
    return element.get_text().strip() if element else ""


def _attr(element: Tag | None, name: str) -> str:
    if element is None:
        return ""
    value = element.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or ""


def absolutize(base_url: str, value: str) -> str:
    """Prefix a site-relative URL with the origin; empty stays empty.

    Example:
        >>> absolutize("https://collections.louvre.fr", "/ark:/53355/cl1")
        'https://collections.louvre.fr/ark:/53355/cl1'
        >>> absolutize("https://collections.louvre.fr", "")
        ''
        >>> absolutize("https://collections.louvre.fr", "//cdn.example.org/a.jpg")
        'https://cdn.example.org/a.jpg'
    """
    if not value:
        return ""
    if value.startswith(("http://", "https://")):
        return value
    if value.startswith("//"):
        return urljoin(base_url, value)
    if not value.startswith("/"):
        value = f"/{value}"
    return f"{base_url}{value}"


def extract_card(card: Tag, base_url: str, with_dates: bool = False) -> ArtworkSummary:
    """Extract one artwork card. Missing elements become empty strings."""
    href = _attr(card.select_one("a"), "href")
    image = card.select_one("img")

    summary = ArtworkSummary(
        id=href.split("/")[-1] if href else "",
        title=_text(card, TITLE_SELECTOR),
        full_title=_attr(image, "title"),
        author=_text(card, AUTHOR_SELECTOR),
        image_url=absolutize(base_url, _attr(image, "data-src")),
        url=absolutize(base_url, href),
    )
    if with_dates:
        summary.date = _text(card, DATE_SELECTOR)
        summary.year = parse_year(summary.date)
    return summary


def extract_cards(
    html: str | BeautifulSoup, base_url: str, with_dates: bool = False
) -> list[ArtworkSummary]:
    """Extract every artwork card of a search results page.

    Args:
        html: Raw search results page
        base_url: Origin used to absolutize image and page links
        with_dates: Also read each card's date label and derive its year

    Returns:
        Cards in page order; a malformed card yields empty fields instead
        of aborting the page
    """
    soup = _soup(html)
    cards = [extract_card(card, base_url, with_dates) for card in soup.select(CARD_SELECTOR)]
    logger.debug(f"Extracted {len(cards)} artwork cards")
    return cards


def parse_count(text: str) -> int:
    """Keep only the digits of a counter label; 0 when there are none.

    Example:
        >>> parse_count("1 234")
        1234
        >>> parse_count("aucun")
        0
    """
    digits = NON_DIGITS.sub("", text)
    return int(digits) if digits else 0


def search_result_count(html: str | BeautifulSoup) -> int:
    """Total hit count of a keyword search page (first word of the counter)."""
    soup = _soup(html)
    element = soup.select_one(SEARCH_COUNT_SELECTOR)
    # split on plain spaces only: the site groups thousands with no-break spaces
    text = element.get_text().strip() if element else ""
    return parse_count(text.split(" ")[0])


def artist_result_count(html: str | BeautifulSoup) -> int:
    """Total hit count of an advanced (artist) search page."""
    soup = _soup(html)
    element = soup.select_one(ARTIST_COUNT_SELECTOR)
    if element is None:
        return 0
    return parse_count(RESULT_WORD_PATTERN.sub("", element.get_text()))


def total_pages(total_results: int, page_size: int = 20) -> int:
    """Number of result pages for a hit count."""
    if total_results <= 0:
        return 0
    return math.ceil(total_results / page_size)
