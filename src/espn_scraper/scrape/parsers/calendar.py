"""
Season calendar extraction from ESPN scoreboard JSON.

Week-league scoreboards carry the season calendar under ``content.calendar``:
    [
        {"label": "Preseason", "value": "1", "entries": [
            {"label": "Hall of Fame Weekend", "value": "1",
             "startDate": "2019-08-01T07:00Z", "endDate": "2019-08-07T06:59Z"},
            ...
        ]},
        {"label": "Regular Season", "value": "2", "entries": [...]},
        ...
    ]

Date-league scoreboards expose the season bounds instead, under
``content.sbData.leagues[0].calendarStartDate`` / ``calendarEndDate``.
"""

from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from espn_scraper.errors import UnexpectedResponseShapeError
from espn_scraper.scrape.base import CalendarEntry, SeasonType


def parse_espn_datetime(value: str) -> datetime:
    """
    Parse an ESPN timestamp like "2019-08-01T07:00Z" into an aware datetime.

    Timestamps without an offset are taken as UTC.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise UnexpectedResponseShapeError(
            f"Could not parse calendar date: {value}", context={"value": value}
        ) from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _dig(payload: Any, *keys: str) -> Any:
    node = payload
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node


def extract_calendar(payload: Any) -> list:
    """Return the raw ``content.calendar`` list of a scoreboard payload."""
    calendar = _dig(payload, "content", "calendar")
    if not isinstance(calendar, list):
        raise UnexpectedResponseShapeError(
            "Scoreboard response has no content.calendar list",
            context={"keys": sorted(payload) if isinstance(payload, dict) else None},
        )
    return calendar


def parse_season_types(calendar: Iterable[Any]) -> list[SeasonType]:
    """
    Turn a raw week-league calendar into SeasonType records.

    Items without an ``entries`` list (date-league calendars are plain date
    strings) are skipped, and so are entries missing a date.
    """
    season_types: list[SeasonType] = []
    for item in calendar:
        if not isinstance(item, dict) or not isinstance(item.get("entries"), list):
            continue

        season_type = SeasonType(value=str(item.get("value", "")), label=item.get("label", ""))
        for entry in item["entries"]:
            if not isinstance(entry, dict):
                continue
            start, end = entry.get("startDate"), entry.get("endDate")
            if not start or not end:
                continue
            season_type.entries.append(
                CalendarEntry(
                    season_type=season_type.value,
                    value=str(entry.get("value", "")),
                    start_date=parse_espn_datetime(start),
                    end_date=parse_espn_datetime(end),
                    label=entry.get("label", ""),
                )
            )
        season_types.append(season_type)
    return season_types


def find_entry(season_types: Iterable[SeasonType], moment: datetime) -> Optional[CalendarEntry]:
    """
    Return the entry whose window contains ``moment``.

    Windows are inclusive on both ends, so back-to-back entries sharing a
    boundary instant can both match; the first one in calendar order wins.
    """
    for season_type in season_types:
        for entry in season_type.entries:
            if entry.contains(moment):
                return entry
    return None


def extract_season_window(payload: Any) -> tuple[datetime, datetime]:
    """Return (calendarStartDate, calendarEndDate) of a date-league scoreboard."""
    leagues = _dig(payload, "content", "sbData", "leagues")
    league = leagues[0] if isinstance(leagues, list) and leagues else None
    if not isinstance(league, dict):
        raise UnexpectedResponseShapeError("Scoreboard response has no content.sbData.leagues entry")

    try:
        start, end = league["calendarStartDate"], league["calendarEndDate"]
    except KeyError as e:
        raise UnexpectedResponseShapeError(
            f"Scoreboard league is missing {e.args[0]}", context={"keys": sorted(league)}
        ) from e

    return parse_espn_datetime(start), parse_espn_datetime(end)
