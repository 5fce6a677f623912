"""
ESPN Scraper - sports data extraction client for espn.com

Builds ESPN URLs from semantic parameters (league, season, week or date,
college division), fetches HTML or JSON pages with retry/backoff and parses
structured records out of them.

Main components:
- leagues: Lookup table of supported leagues and their URL/season rules
- scrape.urls: Pure URL builders and URL introspection
- scrape.http: HTTP transport with retry and exponential backoff
- scrape.parsers: Team, standings and calendar extraction
- scrape.season: Season/current scoreboard URL enumeration
- scrape.scraper: EspnScraper facade tying everything together
"""

__version__ = "0.1.0"
