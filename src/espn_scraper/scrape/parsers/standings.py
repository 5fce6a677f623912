"""
Standings extraction from ESPN standings pages.

Page structure (trimmed):
    <div class="standings__table">
        <div class="Table__Title">Eastern Conference</div>
        <table class="Table Table--fixed-left">
            <tr class="subgroup-headers"><td>Atlantic</td></tr>
            <tr class="Table__TR">
                <td class="Table__TD">
                    <span class="hide-mobile">
                        <a href="/nba/team/_/name/mia/miami-heat">Miami Heat</a>
                    </span>
                </td>
            </tr>
            ...
        </table>
        ...
    </div>

A ``subgroup-headers`` row opens a new division; every other non-empty row
is a team appended to the current division. Tables without any header rows
(conference-only layouts) put all their teams into a division named "".
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from espn_scraper.leagues import get_league
from espn_scraper.scrape.base import Conference, Division, Standings, TeamStanding
from espn_scraper.scrape.parsers.links import segment_after

logger = logging.getLogger(__name__)

DEFAULT_DIVISION = ""


def _is_subgroup_header(row: Tag) -> bool:
    return any("subgroup-headers" in css_class for css_class in row.get("class") or [])


def parse_team_row(row: Tag, link_marker: str) -> TeamStanding:
    """
    Read the team name and abbreviation from one standings row.

    Defunct teams have no link: the cell text becomes the name and the
    abbreviation stays empty. Rows missing the name span fall back to the
    row text the same way.
    """
    span: Optional[Tag] = None
    for cell in row.select("td.Table__TD"):
        span = cell.select_one("span.hide-mobile")
        if span is not None:
            break

    if span is None:
        return TeamStanding(name=row.get_text(" ", strip=True))

    link = span.find("a", href=True)
    if link is None:
        return TeamStanding(name=span.get_text(strip=True))

    abbr = segment_after(link["href"], link_marker) or ""
    return TeamStanding(name=link.get_text(strip=True), abbr=abbr.upper())


def parse_conference(block: Tag, link_marker: str) -> Conference:
    """Parse one ``standings__table`` block into a Conference."""
    title = block.select_one("div.Table__Title")
    conference = Conference(name=title.get_text(strip=True) if title is not None else "")

    table = block.select_one("table.Table--fixed-left")
    rows = table.find_all("tr") if table is not None else []

    current = DEFAULT_DIVISION
    for row in rows:
        if _is_subgroup_header(row):
            current = row.get_text(strip=True)
            conference.divisions.setdefault(current, Division(name=current))
            continue

        if not row.get_text(strip=True):
            continue

        division = conference.divisions.setdefault(current, Division(name=current))
        division.teams.append(parse_team_row(row, link_marker))

    if not conference.divisions:
        conference.divisions[DEFAULT_DIVISION] = Division(name=DEFAULT_DIVISION)

    return conference


def extract_standings(soup: BeautifulSoup, league: str) -> Standings:
    """Extract the full conference -> division -> team tree from a standings page."""
    link_marker = get_league(league).team_link_marker
    standings = Standings()

    for block in soup.select("div.standings__table"):
        conference = parse_conference(block, link_marker)
        logger.debug("Found conference %r with %d divisions", conference.name, len(conference.divisions))
        standings.conferences[conference.name] = conference

    return standings
