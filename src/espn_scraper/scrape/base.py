"""
Common data structures produced by the ESPN extractors.

All records are rebuilt from live pages on every call; nothing here is
persisted. Each record has a ``to_dict`` for callers that want plain data.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass
class Team:
    """
    A team as listed on a league's teams page.

    ``id`` is the identifier from the team's profile link ("buf" for the
    Buffalo Bills, "302" for UC Davis). It is empty for defunct teams whose
    rows have no link. ``division`` is only set for college football.
    """

    id: str
    name: str
    division: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.division is not None:
            result["division"] = self.division
        return result


@dataclass
class TeamStanding:
    """One row of a standings table: display name and upper-cased abbreviation."""

    name: str
    abbr: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "abbr": self.abbr}


@dataclass
class Division:
    """Teams of one division bucket, in page order. Name may be empty."""

    name: str
    teams: list[TeamStanding] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"teams": [team.to_dict() for team in self.teams]}


@dataclass
class Conference:
    """A standings table block; always holds at least one division once parsed."""

    name: str
    divisions: dict[str, Division] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"divisions": {name: div.to_dict() for name, div in self.divisions.items()}}


@dataclass
class Standings:
    """Conference -> division -> teams tree for one league season."""

    conferences: dict[str, Conference] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"conferences": {name: conf.to_dict() for name, conf in self.conferences.items()}}

    def __repr__(self) -> str:
        return f"<Standings({len(self.conferences)} conferences)>"


@dataclass
class CalendarEntry:
    """
    One window of a season calendar (a football week, usually).

    ``season_type`` and ``value`` are the ESPN identifiers that go into the
    week scoreboard URL (e.g. season type 2 = regular season, value 1 = week 1).
    """

    season_type: str
    value: str
    start_date: datetime
    end_date: datetime
    label: str = ""

    def contains(self, moment: datetime) -> bool:
        """Inclusive on both ends."""
        return self.start_date <= moment <= self.end_date


@dataclass
class SeasonType:
    """A season phase (preseason, regular season, postseason) and its entries."""

    value: str
    label: str = ""
    entries: list[CalendarEntry] = field(default_factory=list)
