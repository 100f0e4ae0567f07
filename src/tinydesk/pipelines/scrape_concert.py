import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bs4 import BeautifulSoup

from tinydesk.config import Settings
from tinydesk.errors import TinyDeskError
from tinydesk.logging_config import setup_logging
from tinydesk.models import PageDetails, RawExtraction
from tinydesk.record import build_concert_record, write_record
from tinydesk.scraper.extract import extract_artist, extract_page_details, extract_sections
from tinydesk.scraper.get_data import fetch_page

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tinydesk-scrape",
        description="Save the set list and musicians of a Tiny Desk concert page as JSON.",
    )
    parser.add_argument("url", help="URL of the concert page")
    return parser.parse_args(argv)


def _log_details(details: PageDetails) -> None:
    if details.story_title:
        logger.info("Story title: %s", details.story_title)
    else:
        logger.info("No story title found")

    if details.date:
        logger.info("Date: %s", details.date)
    else:
        logger.info("No date found")


def _log_sections(raw: RawExtraction) -> None:
    if raw.set_list:
        logger.info("Set list:")
        for i, song in enumerate(raw.set_list, start=1):
            logger.info("%d. %s", i, song)
    else:
        logger.info("No set list found")

    if raw.musicians:
        logger.info("Musicians:")
        for i, musician in enumerate(raw.musicians, start=1):
            logger.info("%d. %s", i, musician)
    else:
        logger.info("No musicians list found")


def scrape_concert(url: str, settings: Settings) -> Path:
    """
    One full run: fetch -> extract -> build record -> write file.

    Raises TinyDeskError subclasses on fetch failures; nothing is written
    in that case.
    """
    page = fetch_page(url, settings)
    soup = BeautifulSoup(page.html, "html.parser")

    artist = extract_artist(page.title)
    logger.info("Artist: %s", artist)
    _log_details(extract_page_details(soup, settings.container_selector))

    raw = extract_sections(soup, settings.container_selector)
    _log_sections(raw)

    record = build_concert_record(artist, url, raw)
    return write_record(record, settings.output_dir)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = Settings()
    setup_logging(settings.log_level)

    try:
        scrape_concert(args.url, settings)
    except TinyDeskError as exc:
        logger.error("Error scraping the data: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
