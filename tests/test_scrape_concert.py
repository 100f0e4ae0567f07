import json

import pytest

from tinydesk.errors import ContainerNotFoundError
from tinydesk.pipelines import scrape_concert as pipeline
from tinydesk.scraper.get_data import FetchedPage

URL = "https://www.npr.org/2024/03/18/the-band-tiny-desk-concert"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for var in ("TINYDESK_OUTPUT_DIR", "TINYDESK_FETCH_BACKEND"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


def _fake_fetch(html, title="The Band: Tiny Desk Concert : NPR"):
    def fetch(url, settings):
        return FetchedPage(url=url, title=title, html=html)

    return fetch


def test_main_writes_concert_json(workdir, monkeypatch, concert_html):
    monkeypatch.setattr(pipeline, "fetch_page", _fake_fetch(concert_html))

    assert pipeline.main([URL]) == 0

    data = json.loads((workdir / "the_band_info.json").read_text(encoding="utf-8"))
    assert data["artist"] == "The Band"
    assert data["source"] == URL
    assert [s["songNumber"] for s in data["setList"]] == [1, 2, 3]
    assert [s["title"] for s in data["setList"]] == ["Song A", "Song B", "Song C"]
    assert data["musicians"] == [
        {"musicianNumber": 1, "name": "John Doe", "instrument": "Guitar"},
        {"musicianNumber": 2, "name": "Jane Roe"},
        {"musicianNumber": 3, "name": "A: B: C"},
    ]


def test_main_without_sections_still_writes_file(workdir, monkeypatch):
    html = '<html><body><div id="storytext"><p>Just words.</p></div></body></html>'
    monkeypatch.setattr(pipeline, "fetch_page", _fake_fetch(html, title="Pearl Jam"))

    assert pipeline.main([URL]) == 0

    data = json.loads((workdir / "pearl_jam_info.json").read_text(encoding="utf-8"))
    assert data["setList"] == []
    assert data["musicians"] == []


def test_main_respects_output_dir(workdir, monkeypatch, concert_html):
    monkeypatch.setenv("TINYDESK_OUTPUT_DIR", str(workdir / "exports"))
    monkeypatch.setattr(pipeline, "fetch_page", _fake_fetch(concert_html))

    assert pipeline.main([URL]) == 0
    assert (workdir / "exports" / "the_band_info.json").exists()


def test_main_fetch_failure_writes_nothing(workdir, monkeypatch):
    def failing_fetch(url, settings):
        raise ContainerNotFoundError("'#storytext' did not appear")

    monkeypatch.setattr(pipeline, "fetch_page", failing_fetch)

    assert pipeline.main([URL]) == 1
    assert list(workdir.iterdir()) == []


def test_main_without_url_exits_before_fetching(workdir, monkeypatch):
    def unexpected_fetch(url, settings):
        raise AssertionError("fetch_page should not be called")

    monkeypatch.setattr(pipeline, "fetch_page", unexpected_fetch)

    with pytest.raises(SystemExit) as exc_info:
        pipeline.main([])

    assert exc_info.value.code != 0
