import logging
from dataclasses import dataclass
from typing import Callable, Dict

import requests
from bs4 import BeautifulSoup
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from tinydesk.config import Settings
from tinydesk.errors import ContainerNotFoundError, FetchError
from tinydesk.scraper.browser import browser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedPage:
    url: str
    title: str
    html: str


def fetch_with_playwright(url: str, settings: Settings) -> FetchedPage:
    """
    Render the page in headless Chromium and return its final HTML.

    The only wait is for ``settings.container_selector``; if it does not
    appear within ``settings.wait_timeout_ms`` the run is over.
    """
    with browser(headless=settings.headless) as page:
        try:
            page.goto(url, wait_until="domcontentloaded")
            title = page.title()
        except PlaywrightError as exc:
            raise FetchError(f"Failed to load {url}: {exc}") from exc

        try:
            page.wait_for_selector(
                settings.container_selector, timeout=settings.wait_timeout_ms
            )
            html = page.content()
        except PlaywrightTimeoutError as exc:
            raise ContainerNotFoundError(
                f"{settings.container_selector!r} did not appear within "
                f"{settings.wait_timeout_ms} ms on {url}"
            ) from exc
        except PlaywrightError as exc:
            raise FetchError(f"Failed to read {url}: {exc}") from exc

    return FetchedPage(url=url, title=title, html=html)


def fetch_with_requests(url: str, settings: Settings) -> FetchedPage:
    """Plain HTTP GET, for pages that render the story server-side."""
    try:
        resp = requests.get(
            url,
            headers={"User-Agent": settings.user_agent},
            timeout=settings.http_timeout_s,
        )
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"Failed to load {url}: {exc}") from exc

    # bytes: <meta charset> decides the encoding, not the missing header
    soup = BeautifulSoup(resp.content, "html.parser")
    if soup.select_one(settings.container_selector) is None:
        raise ContainerNotFoundError(
            f"{settings.container_selector!r} not found on {url}"
        )

    title = soup.title.get_text() if soup.title else ""
    return FetchedPage(url=url, title=title, html=str(soup))


BACKENDS: Dict[str, Callable[[str, Settings], FetchedPage]] = {
    "playwright": fetch_with_playwright,
    "http": fetch_with_requests,
}


def fetch_page(url: str, settings: Settings) -> FetchedPage:
    logger.info("Navigating to %s (backend=%s)", url, settings.fetch_backend)
    return BACKENDS[settings.fetch_backend](url, settings)
