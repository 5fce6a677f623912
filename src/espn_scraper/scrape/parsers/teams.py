"""
Team list extraction from ESPN teams and college standings pages.

Pro teams pages render one container per team:
    <div class="mt3">
        <a href="/nfl/team/_/name/buf/buffalo-bills"><h2>Buffalo Bills</h2></a>
        ...
    </div>

WNBA uses ``div.pl3`` for the same structure. College football teams are read
from the standings view, where each team name sits in a ``span.hide-mobile``.
"""

from typing import Optional

from bs4 import BeautifulSoup, Tag

from espn_scraper.leagues import get_league
from espn_scraper.scrape.base import Team
from espn_scraper.scrape.parsers.links import id_from_profile_link

COLLEGE_TEAM_SELECTOR = ".hide-mobile"


def _first_link_href(container: Tag) -> Optional[str]:
    """The href of the container's first anchor, None if it has no anchor or no href."""
    anchor = container.find("a")
    if anchor is None:
        return None
    return anchor.get("href")


def _team_from_container(container: Tag, use_heading: bool, division: Optional[str] = None) -> Team:
    """
    Build a Team from one container.

    A container without a link (defunct team) still yields a record: its
    text becomes the name and the id is left empty. The same applies when
    the first anchor carries no href.
    """
    href = _first_link_href(container)
    team_id = id_from_profile_link(href) if href else ""

    name = ""
    if use_heading:
        heading = container.find("h2")
        if heading is not None:
            name = heading.get_text(strip=True)
    if not name:
        name = container.get_text(" ", strip=True)

    return Team(id=team_id, name=name, division=division)


def extract_teams(soup: BeautifulSoup, league: str) -> list[Team]:
    """Extract teams from a pro (or college basketball) ``/{league}/teams`` page."""
    selector = get_league(league).teams_selector
    return [_team_from_container(div, use_heading=True) for div in soup.select(selector)]


def extract_college_teams(soup: BeautifulSoup, division: str) -> list[Team]:
    """Extract teams of one college football division from its standings view."""
    return [
        _team_from_container(span, use_heading=False, division=division)
        for span in soup.select(COLLEGE_TEAM_SELECTOR)
    ]
