"""
Integration tests for EspnScraper against stored ESPN pages.

The scraper is wired to FakeHttpClient (see conftest.py), so the full
URL -> fetch -> parse path runs without touching the network.
"""

import pytest
from bs4 import BeautifulSoup

from espn_scraper.errors import InvalidArgumentError, UnsupportedOperationError
from espn_scraper.scrape.base import Team, TeamStanding


class TestTeams:
    def test_nfl_teams(self, make_scraper, fake_client):
        teams = make_scraper().get_teams("nfl")
        assert Team(id="buf", name="Buffalo Bills") in teams
        assert [team.id for team in teams] == ["buf", "mia", "ne", "kc"]
        assert fake_client.requested == ["https://www.espn.com/nfl/teams"]

    def test_wnba_teams_use_pl3_containers(self, make_scraper):
        teams = make_scraper().get_teams("wnba")
        assert teams == [Team(id="chi", name="Chicago Sky"), Team(id="lv", name="Las Vegas Aces")]

    def test_ncf_teams_span_fbs_and_fcs(self, make_scraper, fake_client):
        teams = make_scraper().get_teams("ncf")
        assert Team(id="2717", name="Western Carolina Catamounts", division="fcs-i-aa") in teams
        assert Team(id="2116", name="UCF Knights", division="fbs") in teams
        assert fake_client.requested == [
            "https://www.espn.com/college-football/standings/_/view/fbs",
            "https://www.espn.com/college-football/standings/_/view/fcs-i-aa",
        ]

    def test_unknown_league_raises_before_request(self, make_scraper, fake_client):
        with pytest.raises(InvalidArgumentError):
            make_scraper().get_teams("xfl")
        assert fake_client.requested == []


class TestStandings:
    def test_nba_2004_division_tree(self, make_scraper):
        standings = make_scraper().get_standings("nba", 2004)

        east = standings.conferences["Eastern Conference"]
        assert TeamStanding(name="Miami Heat", abbr="MIA") in east.divisions["Atlantic"].teams

        west = standings.conferences["Western Conference"]
        assert TeamStanding(name="Minnesota Timberwolves", abbr="MIN") in west.divisions["Midwest"].teams

    def test_nba_2004_defunct_team(self, make_scraper):
        standings = make_scraper().get_standings("nba", 2004)
        pacific = standings.conferences["Western Conference"].divisions["Pacific"]
        assert TeamStanding(name="Seattle SuperSonics", abbr="") in pacific.teams

    def test_wnba_conference_layout_has_unnamed_division(self, make_scraper):
        standings = make_scraper().get_standings("wnba", 2019)
        assert list(standings.conferences) == ["Eastern Conference", "Western Conference"]
        east = standings.conferences["Eastern Conference"].divisions
        assert list(east) == [""]
        assert east[""].teams == [
            TeamStanding(name="Washington Mystics", abbr="WSH"),
            TeamStanding(name="Connecticut Sun", abbr="CONN"),
        ]

    def test_unsupported_league_is_empty_without_request(self, make_scraper, fake_client):
        standings = make_scraper().get_standings("xfl", 2019)
        assert standings.conferences == {}
        assert fake_client.requested == []

    def test_invalid_college_division_raises_before_request(self, make_scraper, fake_client):
        with pytest.raises(InvalidArgumentError):
            make_scraper().get_standings("ncb", 2019, college_division="d9")
        assert fake_client.requested == []


class TestGetUrl:
    def test_json_boxscore(self, make_scraper):
        payload = make_scraper().get_url("https://www.espn.com/nfl/boxscore?gameId=401131040&xhr=1")
        assert payload["gameId"] == "401131040"

    def test_nhl_boxscore_is_html(self, make_scraper):
        soup = make_scraper().get_url("https://www.espn.com/nhl/boxscore?gameId=401272107&xhr=1")
        assert isinstance(soup, BeautifulSoup)
        assert soup.select_one(".gamepackage-home-wrap .team-name").get_text() == "Flyers"

    def test_nhl_scoreboard_goes_to_sportscenter_api(self, make_scraper, fake_client):
        payload = make_scraper().get_url("https://www.espn.com/nhl/scoreboard?date=20210115")
        assert fake_client.requested == [
            "https://sportscenter.api.espn.com/apis/v1/events?sport=hockey&league=nhl&dates=20210115"
        ]
        assert payload["sports"][0]["leagues"][0]["events"][0]["id"] == "401272107"

    def test_scoreboard_without_date_raises_before_request(self, make_scraper, fake_client):
        with pytest.raises(InvalidArgumentError):
            make_scraper().get_url("https://www.espn.com/wnba/scoreboard")
        assert fake_client.requested == []

    def test_cache_is_unsupported(self, make_scraper, fake_client):
        with pytest.raises(UnsupportedOperationError):
            make_scraper().get_url("https://www.espn.com/nfl/boxscore?gameId=401131040&xhr=1", cache=True)
        assert fake_client.requested == []

    def test_unknown_data_type_raises(self, make_scraper):
        with pytest.raises(InvalidArgumentError):
            make_scraper().get_url("https://www.espn.com/nfl/standings")


class TestScoreboardUrls:
    def test_nfl_2019_season(self, make_scraper):
        urls = make_scraper().get_all_scoreboard_urls("nfl", 2019)
        assert "https://www.espn.com/nfl/scoreboard/_/year/2019/seasontype/1/week/1?xhr=1" in urls
        assert urls[-1] == "https://www.espn.com/nfl/scoreboard/_/year/2019/seasontype/3/week/1?xhr=1"
        # off season has no entries
        assert len(urls) == 6

    def test_ncf_2019_season_is_split_by_group(self, make_scraper):
        urls = make_scraper().get_all_scoreboard_urls("ncf", 2019)
        assert urls[:2] == [
            "https://www.espn.com/ncf/scoreboard/_/group/80/year/2019/seasontype/2/week/1?xhr=1",
            "https://www.espn.com/ncf/scoreboard/_/group/81/year/2019/seasontype/2/week/1?xhr=1",
        ]
        assert len(urls) == 6

    def test_nba_2021_season_window_from_probe(self, make_scraper, fake_client):
        urls = make_scraper().get_all_scoreboard_urls("nba", 2021)
        assert fake_client.requested == ["https://www.espn.com/nba/scoreboard/_/date/20201101?xhr=1"]
        assert urls[0] == "https://www.espn.com/nba/scoreboard/_/date/20201222?xhr=1"
        assert "https://www.espn.com/nba/scoreboard/_/date/20201231?xhr=1" in urls
        assert urls[-1] == "https://www.espn.com/nba/scoreboard/_/date/20210102?xhr=1"
        assert len(urls) == 12

    def test_ncb_current_with_offset(self, make_scraper, fixed_now, fake_client):
        scraper = make_scraper(now=fixed_now(2021, 5, 22, 16))
        urls = scraper.get_current_scoreboard_urls("ncb", 5)
        assert "https://www.espn.com/ncb/scoreboard/_/group/50/date/20210527?xhr=1" in urls
        assert len(urls) == 4
        assert fake_client.requested == []

    def test_nfl_current_week(self, make_scraper, fixed_now):
        scraper = make_scraper(now=fixed_now(2019, 9, 14, 12))
        assert scraper.get_current_scoreboard_urls("nfl") == [
            "https://www.espn.com/nfl/scoreboard/_/year/2019/seasontype/2/week/2?xhr=1"
        ]

    def test_nfl_calendar(self, make_scraper):
        calendar = make_scraper().get_calendar("nfl", 2019)
        assert [season_type["value"] for season_type in calendar] == ["1", "2", "3", "4"]


def test_context_manager_closes_client(make_scraper, fake_client):
    with make_scraper() as scraper:
        scraper.get_teams("nfl")
    assert fake_client.closed is True
