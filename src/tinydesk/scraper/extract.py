"""
Pure extraction over an already-parsed concert page.

Nothing here touches the network or a browser, so every function can be
exercised against static HTML.
"""
import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from tinydesk.models import PageDetails, RawExtraction

logger = logging.getLogger(__name__)


SET_LIST_MARKER = "SET LIST"
MUSICIANS_MARKER = "MUSICIANS"
QUOTE_CHARS = "\"'"


# ---------------------------------------------------------------------
# Helpers (pure)
# ---------------------------------------------------------------------

def clean_item_text(text: str) -> str:
    """
    Normalize a list item's text:
    - strip whitespace
    - drop at most one leading quote (" or ')
    - drop at most one trailing quote (" or ')
    - strip again
    """
    text = text.strip()
    if text and text[0] in QUOTE_CHARS:
        text = text[1:]
    if text and text[-1] in QUOTE_CHARS:
        text = text[:-1]
    return text.strip()


def extract_artist(title: str) -> str:
    """'The Band: Tiny Desk Concert : NPR' -> 'The Band'."""
    return title.split(":", 1)[0].strip()


def _find_marker(paragraphs: List[Tag], marker: str) -> Optional[Tag]:
    for p in paragraphs:
        if marker in p.get_text():
            return p
    return None


def _items_after(marker: Optional[Tag]) -> List[str]:
    if marker is None:
        return []

    sibling = marker.find_next_sibling()
    if sibling is None or sibling.name != "ul":
        return []

    return [clean_item_text(li.get_text()) for li in sibling.find_all("li")]


# ---------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------

def extract_sections(
    soup: BeautifulSoup, container_selector: str = "#storytext"
) -> RawExtraction:
    """
    Pull the SET LIST and MUSICIANS lists out of the story container.

    Each marker paragraph is searched for independently; a list is read
    only when the element right after the marker is a <ul>. Anything
    missing yields an empty section rather than an error.
    """
    container = soup.select_one(container_selector)
    if container is None:
        logger.warning("Container %s not found", container_selector)
        return RawExtraction()

    paragraphs = container.find_all("p")
    set_list_p = _find_marker(paragraphs, SET_LIST_MARKER)
    musicians_p = _find_marker(paragraphs, MUSICIANS_MARKER)

    return RawExtraction(
        set_list=tuple(_items_after(set_list_p)),
        musicians=tuple(_items_after(musicians_p)),
    )


def extract_page_details(
    soup: BeautifulSoup, container_selector: str = "#storytext"
) -> PageDetails:
    """Story title, publication date and the intro text before the lists."""
    title_tag = soup.select_one(".storytitle h1")
    story_title = title_tag.get_text(strip=True) if title_tag else None

    time_tag = soup.select_one(".dateblock time")
    date = time_tag.get("datetime") if time_tag else None

    description = None
    container = soup.select_one(container_selector)
    if container is not None:
        parts: List[str] = []
        for p in container.find_all("p"):
            text = p.get_text()
            if SET_LIST_MARKER in text or MUSICIANS_MARKER in text:
                break
            text = p.get_text(" ", strip=True)
            if text:
                parts.append(text)
        if parts:
            description = "\n\n".join(parts)

    return PageDetails(
        story_title=story_title or None,
        date=date or None,
        description=description,
    )
