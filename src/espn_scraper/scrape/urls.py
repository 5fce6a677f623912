"""
ESPN URL building and introspection.

Every function here is pure: same arguments, same URL, no I/O. Builders raise
InvalidArgumentError when asked for a league/parameter combination ESPN does
not serve.

URLs:
- Game pages: https://www.espn.com/{league}/{url_type}?gameId={id}&xhr=1
- Teams: https://www.espn.com/{league}/teams
- College football teams: https://www.espn.com/college-football/standings/_/view/{division}
- Standings: https://www.espn.com/{league}/standings/_/season/{year}/group/{division|conference}
- College standings: https://www.espn.com/{league}/standings/_/season/{year}/view/{division}
- Date scoreboard: https://www.espn.com/{league}/scoreboard/_/[group/{group}/]date/{yyyymmdd}?xhr=1
- NHL scoreboard: https://www.espn.com/nhl/scoreboard?date={yyyymmdd}
- Week scoreboard: https://www.espn.com/{league}/scoreboard/_/[group/{group}/]year/{y}/seasontype/{t}/week/{w}?xhr=1
- Sportscenter events API: https://sportscenter.api.espn.com/apis/v1/events?sport=..&league=..&dates=..
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Literal, Optional, Union
from urllib.parse import parse_qs, urlparse

from espn_scraper.errors import InvalidArgumentError
from espn_scraper.leagues import (
    COLLEGE_FOOTBALL_TEAM_DIVISIONS,
    DATE_LEAGUES,
    LEAGUES,
    WEEK_LEAGUES,
    get_league,
    normalize_college_division,
)
from espn_scraper.scrape.parsers.links import path_segments, segment_after

logger = logging.getLogger(__name__)

BASE_URL = "https://www.espn.com"
SPORTSCENTER_API_URL = "https://sportscenter.api.espn.com/apis/v1/events"

GAME_URL_TYPES: tuple[str, ...] = ("recap", "boxscore", "playbyplay", "conversation", "gamecast")

# "scoreboard" first: it wins when a URL matches more than one type
DATA_TYPES: tuple[str, ...] = ("scoreboard",) + GAME_URL_TYPES

ResponseFormat = Literal["json", "html"]
DateLike = Union[str, date, datetime]

SCOREBOARD_DATE_PATTERN = re.compile(r"\d{8}")


def _format_date(value: DateLike) -> str:
    """Render a date as ESPN's YYYYMMDD; strings are passed through untouched."""
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y%m%d")
    return str(value)


# =============================================================================
# Builders
# =============================================================================


def game_url(url_type: str, league: str, espn_id: Union[str, int]) -> str:
    """Return the XHR URL for one game page (recap, boxscore, ...)."""
    if url_type not in GAME_URL_TYPES:
        message = (
            f"Unknown url_type: '{url_type}' for game_url. "
            f"Valid url_types are {', '.join(GAME_URL_TYPES)}"
        )
        logger.error(message)
        raise InvalidArgumentError(message, context={"url_type": url_type})
    get_league(league)
    return f"{BASE_URL}/{league}/{url_type}?gameId={espn_id}&xhr=1"


def teams_url(league: str) -> str:
    get_league(league)
    return f"{BASE_URL}/{league}/teams"


def college_football_teams_urls() -> list[tuple[str, str]]:
    """
    Return (division, url) pairs for the college football team listings.

    ESPN's college football teams page only lists FBS, so teams come from
    the standings view of each division instead.
    """
    return [
        (division, f"{BASE_URL}/college-football/standings/_/view/{division}")
        for division in COLLEGE_FOOTBALL_TEAM_DIVISIONS
    ]


def standings_url(
    league: str,
    season_year: Union[int, str],
    college_division: Optional[str] = None,
) -> str:
    """
    Return the standings page URL for a league and season.

    College football defaults to the FBS view. Passing a college division
    switches to the per-division view ("fcs" is accepted as an alias for
    ESPN's "fcs-i-aa"). Otherwise WNBA is grouped by conference and every
    other league by division.
    """
    info = get_league(league)

    if league == "ncf" and college_division is None:
        college_division = "fbs"

    if college_division is not None:
        division = normalize_college_division(college_division)
        return f"{BASE_URL}/{league}/standings/_/season/{season_year}/view/{division}"

    return f"{BASE_URL}/{league}/standings/_/season/{season_year}/group/{info.standings_layout}"


def date_scoreboard_url(league: str, day: DateLike, group: Optional[int] = None) -> str:
    """Return the scoreboard URL for a date-based league (everything but football)."""
    if league not in DATE_LEAGUES:
        message = f"League {league} must be in '{', '.join(DATE_LEAGUES)}' to get date scoreboard url"
        logger.error(message)
        raise InvalidArgumentError(message, context={"league": league})

    day_str = _format_date(day)
    if league == "nhl":
        return f"{BASE_URL}/{league}/scoreboard?date={day_str}"
    if group is not None:
        return f"{BASE_URL}/{league}/scoreboard/_/group/{group}/date/{day_str}?xhr=1"
    return f"{BASE_URL}/{league}/scoreboard/_/date/{day_str}?xhr=1"


def week_scoreboard_url(
    league: str,
    season_year: Union[int, str],
    season_type: Union[int, str],
    week: Union[int, str],
    group: Optional[int] = None,
) -> str:
    """Return the scoreboard URL for a week-based league (football)."""
    if league not in WEEK_LEAGUES:
        message = f"League {league} must be in '{', '.join(WEEK_LEAGUES)}' to get week scoreboard url"
        logger.error(message)
        raise InvalidArgumentError(message, context={"league": league})

    path = f"year/{season_year}/seasontype/{season_type}/week/{week}"
    if group is not None:
        path = f"group/{group}/{path}"
    return f"{BASE_URL}/{league}/scoreboard/_/{path}?xhr=1"


def sportscenter_api_url(sport: str, league: str, dates: DateLike) -> str:
    """Events feed used when a league's scoreboard has no fetchable JSON."""
    return f"{SPORTSCENTER_API_URL}?sport={sport}&league={league}&dates={_format_date(dates)}"


# =============================================================================
# Introspection
# =============================================================================


def get_league_from_url(url: str) -> str:
    """Return the league code, i.e. the first path segment of an espn.com URL."""
    segments = path_segments(urlparse(url).path)
    if not segments:
        raise InvalidArgumentError(f"Cannot find a league in url: {url}", context={"url": url})
    return segments[0]


def get_data_type_from_url(url: str) -> str:
    """Guess the data type ('scoreboard', 'boxscore', ...) from a URL."""
    for data_type in DATA_TYPES:
        if data_type in url:
            return data_type
    message = f"Unknown data_type for url. Url must contain one of '{', '.join(DATA_TYPES)}'"
    raise InvalidArgumentError(message, context={"url": url})


def get_date_from_scoreboard_url(url: str) -> str:
    """
    Return the YYYYMMDD date a date-league scoreboard URL points at.

    Hockey carries it as the ``date`` query parameter, every other league
    as the path segment following ``date``.

    Raises:
        InvalidArgumentError: if the URL has no well-formed date
    """
    parsed = urlparse(url)
    if get_league_from_url(url) == "nhl":
        day = (parse_qs(parsed.query).get("date") or [None])[0]
    else:
        day = segment_after(parsed.path, "date")

    if day is None or not SCOREBOARD_DATE_PATTERN.fullmatch(day):
        message = f"No YYYYMMDD date in scoreboard url: {url}"
        logger.error(message)
        raise InvalidArgumentError(message, context={"url": url})
    return day


def expected_response_format(league: str, data_type: str) -> ResponseFormat:
    """JSON everywhere, except box scores of leagues that only serve HTML."""
    info = LEAGUES.get(league)
    if data_type == "boxscore" and info is not None and info.html_boxscore:
        return "html"
    return "json"
