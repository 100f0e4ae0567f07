from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Page, sync_playwright


@contextmanager
def browser(headless: bool = True) -> Iterator[Page]:
    """Yield a fresh Chromium page; the browser is closed on every exit path."""
    with sync_playwright() as p:
        chromium = p.chromium.launch(headless=headless)
        context = chromium.new_context()
        page = context.new_page()
        try:
            yield page
        finally:
            chromium.close()
