"""League definitions shared by URL building, parsing and season walking.

This module is the single source of truth for how each ESPN league behaves:
which scoreboard scheme it uses (by date or by week), which division groups
its scoreboards are split into, how its season window is found, and which
markup conventions its team and standings pages follow.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from espn_scraper.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

ScoreboardScheme = Literal["date", "week"]
StandingsLayout = Literal["division", "conference"]


@dataclass(frozen=True)
class MonthDay:
    """A calendar day relative to a season year (``year_offset`` -1 = prior year)."""

    month: int
    day: int
    year_offset: int = 0

    def as_date_string(self, season_year: int) -> str:
        return f"{season_year + self.year_offset:04d}{self.month:02d}{self.day:02d}"


@dataclass(frozen=True)
class SeasonWindowRule:
    """
    How to find the first and last scoreboard day of a date-league season.

    Either ``probe`` is set (fetch that day's scoreboard and read the season
    calendar bounds out of it) or ``start``/``end`` are set (hardcoded window,
    midnight local time).
    """

    probe: Optional[MonthDay] = None
    start: Optional[MonthDay] = None
    end: Optional[MonthDay] = None

    @property
    def is_fixed(self) -> bool:
        return self.probe is None


@dataclass(frozen=True)
class League:
    """Behaviour of one ESPN league code."""

    code: str
    sport: str
    scoreboard: ScoreboardScheme
    groups: tuple[int, ...] = ()
    college: bool = False
    standings_layout: StandingsLayout = "division"
    teams_selector: str = "div.mt3"
    season_window: Optional[SeasonWindowRule] = None
    scoreboard_json: bool = True
    html_boxscore: bool = False

    @property
    def team_link_marker(self) -> str:
        # /nfl/team/_/name/kc/... vs /college-football/team/_/id/302/...
        return "id" if self.college else "name"


LEAGUES: dict[str, League] = {
    "nfl": League(code="nfl", sport="football", scoreboard="week"),
    "ncf": League(
        code="ncf",
        sport="football",
        scoreboard="week",
        groups=(80, 81),
        college=True,
    ),
    "mlb": League(
        code="mlb",
        sport="baseball",
        scoreboard="date",
        season_window=SeasonWindowRule(probe=MonthDay(4, 15)),
    ),
    "nba": League(
        code="nba",
        sport="basketball",
        scoreboard="date",
        season_window=SeasonWindowRule(probe=MonthDay(11, 1, year_offset=-1)),
    ),
    "wnba": League(
        code="wnba",
        sport="basketball",
        scoreboard="date",
        standings_layout="conference",
        teams_selector="div.pl3",
        season_window=SeasonWindowRule(start=MonthDay(4, 20), end=MonthDay(10, 31)),
        scoreboard_json=False,
    ),
    "nhl": League(
        code="nhl",
        sport="hockey",
        scoreboard="date",
        season_window=SeasonWindowRule(
            start=MonthDay(10, 1, year_offset=-1),
            end=MonthDay(6, 30),
        ),
        scoreboard_json=False,
        html_boxscore=True,
    ),
    "ncb": League(
        code="ncb",
        sport="basketball",
        scoreboard="date",
        groups=(50, 55, 56, 100),
        college=True,
        season_window=SeasonWindowRule(probe=MonthDay(11, 30, year_offset=-1)),
    ),
    "ncw": League(
        code="ncw",
        sport="basketball",
        scoreboard="date",
        groups=(50, 55, 100),
        college=True,
        season_window=SeasonWindowRule(probe=MonthDay(11, 30, year_offset=-1)),
    ),
}

DATE_LEAGUES: tuple[str, ...] = tuple(
    code for code, league in LEAGUES.items() if league.scoreboard == "date"
)
WEEK_LEAGUES: tuple[str, ...] = tuple(
    code for code, league in LEAGUES.items() if league.scoreboard == "week"
)

# Divisions accepted by the college standings page; "fcs" is an alias
COLLEGE_DIVISIONS: tuple[str, ...] = ("fbs", "fcs", "fcs-i-aa", "d2", "d3")
COLLEGE_DIVISION_ALIASES: dict[str, str] = {"fcs": "fcs-i-aa"}

# The college football teams page only lists FBS, so teams are read
# from the standings view of each of these divisions instead
COLLEGE_FOOTBALL_TEAM_DIVISIONS: tuple[str, ...] = ("fbs", "fcs-i-aa")


def get_league(code: str) -> League:
    """Return the League for a code, raising InvalidArgumentError for unknown codes."""
    try:
        return LEAGUES[code]
    except KeyError:
        message = f"Unknown league: '{code}'. Valid leagues are {', '.join(LEAGUES)}"
        logger.error(message)
        raise InvalidArgumentError(message, context={"league": code}) from None


def get_sport(code: str) -> str:
    """Return the ESPN sport slug ('basketball', 'hockey', ...) for a league."""
    return get_league(code).sport


def normalize_college_division(division: str) -> str:
    """Map a college division onto ESPN's internal view name ('fcs' -> 'fcs-i-aa')."""
    if division not in COLLEGE_DIVISIONS:
        message = (
            f"College division must be None or one of {', '.join(COLLEGE_DIVISIONS)}, "
            f"got '{division}'"
        )
        logger.error(message)
        raise InvalidArgumentError(message, context={"college_division": division})
    return COLLEGE_DIVISION_ALIASES.get(division, division)
