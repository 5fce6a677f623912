"""
Parsers for ESPN pages.

This module contains extractors for:
- Team lists (pro teams pages, college football standings views)
- Standings trees (conference -> division -> team)
- Season calendars and season windows from scoreboard JSON
"""

from espn_scraper.scrape.parsers.calendar import (
    extract_calendar,
    extract_season_window,
    find_entry,
    parse_season_types,
)
from espn_scraper.scrape.parsers.standings import extract_standings
from espn_scraper.scrape.parsers.teams import extract_college_teams, extract_teams

__all__ = [
    "extract_calendar",
    "extract_college_teams",
    "extract_season_window",
    "extract_standings",
    "extract_teams",
    "find_entry",
    "parse_season_types",
]
