"""
Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides
shared fixtures for all tests.

Network access is never used: scraper tests run against stored HTML/JSON
pages under tests/fixtures, served by FakeHttpClient.
"""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from espn_scraper.scrape import EspnScraper

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def soup_from(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


class FakeHttpClient:
    """
    Stand-in for HttpClient that serves fixture files by URL.

    ``routes`` maps a full URL to a fixture file name. Unknown URLs fail the
    test loudly, and every requested URL is recorded in ``requested``.
    """

    def __init__(self, routes: dict[str, str]):
        self.routes = routes
        self.requested: list[str] = []
        self.closed = False

    def _load(self, url: str) -> str:
        self.requested.append(url)
        if url not in self.routes:
            raise AssertionError(f"Unexpected request: {url}")
        return load_fixture(self.routes[url])

    def get_json(self, url, headers=None):
        return json.loads(self._load(url))

    def get_text(self, url, headers=None):
        return self._load(url)

    def get_html(self, url, headers=None):
        return soup_from(self._load(url))

    def close(self):
        self.closed = True


ROUTES = {
    "https://www.espn.com/nfl/teams": "nfl_teams.html",
    "https://www.espn.com/wnba/teams": "wnba_teams.html",
    "https://www.espn.com/college-football/standings/_/view/fbs": "ncf_teams_fbs.html",
    "https://www.espn.com/college-football/standings/_/view/fcs-i-aa": "ncf_teams_fcs.html",
    "https://www.espn.com/nba/standings/_/season/2004/group/division": "nba_standings_2004.html",
    "https://www.espn.com/wnba/standings/_/season/2019/group/conference": "wnba_standings_2019.html",
    "https://www.espn.com/nfl/scoreboard/_/year/2019/seasontype/2/week/1?xhr=1": "nfl_scoreboard_2019.json",
    "https://www.espn.com/ncf/scoreboard/_/year/2019/seasontype/2/week/1?xhr=1": "ncf_scoreboard_2019.json",
    "https://www.espn.com/nba/scoreboard/_/date/20201101?xhr=1": "nba_scoreboard_20201101.json",
    "https://www.espn.com/nfl/boxscore?gameId=401131040&xhr=1": "nfl_boxscore_401131040.json",
    "https://www.espn.com/nhl/boxscore?gameId=401272107&xhr=1": "nhl_boxscore_401272107.html",
    "https://sportscenter.api.espn.com/apis/v1/events?sport=hockey&league=nhl&dates=20210115": (
        "nhl_events_20210115.json"
    ),
}


@pytest.fixture
def fake_client():
    return FakeHttpClient(dict(ROUTES))


@pytest.fixture
def fixture_soup():
    """Parse a stored HTML fixture by file name."""
    return lambda name: soup_from(load_fixture(name))


@pytest.fixture
def fixed_now():
    """Clock factory: ``fixed_now(2021, 5, 22, 16)`` -> callable returning that UTC instant."""

    def _factory(*args):
        moment = datetime(*args, tzinfo=timezone.utc)
        return lambda: moment

    return _factory


@pytest.fixture
def make_scraper(fake_client):
    def _factory(now=None):
        if now is None:
            return EspnScraper(client=fake_client)
        return EspnScraper(client=fake_client, now=now)

    return _factory
