"""Normalizer unit tests: status table, URL templates, streams, missing fields."""
import pytest

from matchfeed.normalization.normalizer import (
    Normalizer,
    format_logo_url,
    format_status,
    format_stream_url,
    format_timestamp,
)

BASE = "https://example.com/"


class TestFormatStatus:
    @pytest.mark.parametrize("code", [1, 2, 3, 4, 5, 6, 7])
    def test_live_codes(self, code):
        assert format_status(code) == "Live"

    @pytest.mark.parametrize(
        "code, label",
        [(0, "Upcoming"), (8, "Finished"), (9, "Cancelled"), (10, "Postponed")],
    )
    def test_fixed_labels(self, code, label):
        assert format_status(code) == label

    @pytest.mark.parametrize("code", [11, -1, 42, 100])
    def test_unknown_codes_interpolate_the_code(self, code):
        assert format_status(code) == f"Unknown({code})"

    def test_string_codes_behave_like_integers(self):
        assert format_status("4") == "Live"
        assert format_status("10") == "Postponed"
        assert format_status("12") == "Unknown(12)"

    def test_integral_float_codes_match_the_table(self):
        assert format_status(1.0) == "Live"
        assert format_status(8.0) == "Finished"
        assert format_status(2.5) == "Unknown(2.5)"

    def test_missing_code(self):
        assert format_status(None) == "Unknown(None)"


class TestFormatUrls:
    def test_logo_url_template(self):
        assert (
            format_logo_url("man_utd.png", BASE)
            == "https://example.com/wp-content/uploads/truc-tiep/logos/football/team/man_utd.png"
        )

    @pytest.mark.parametrize("filename, base", [(None, BASE), ("", BASE), ("a.png", None), ("a.png", "")])
    def test_logo_url_none_when_part_missing(self, filename, base):
        assert format_logo_url(filename, base) is None

    def test_stream_url_template(self):
        assert (
            format_stream_url("mu-vs-liv", 123, BASE)
            == "https://example.com/truc-tiep/mu-vs-liv/?blv=123"
        )

    def test_stream_url_none_when_slug_or_base_missing(self):
        assert format_stream_url(None, 123, BASE) is None
        assert format_stream_url("mu-vs-liv", 123, None) is None

    def test_stream_url_missing_uid_leaves_parameter_empty(self):
        assert format_stream_url("mu-vs-liv", None, BASE) == "https://example.com/truc-tiep/mu-vs-liv/?blv="


class TestFormatTimestamp:
    def test_renders_in_yangon_time(self):
        # 2023-11-14 22:13:20 UTC -> 2023-11-15 04:43:20 +06:30
        assert format_timestamp(1700000000) == "11/15/2023, 04:43:20"

    def test_uses_24_hour_clock(self):
        # 2024-01-01 10:00:00 UTC -> 16:30:00 local
        assert format_timestamp(1704103200) == "01/01/2024, 16:30:00"

    def test_accepts_numeric_strings(self):
        assert format_timestamp("1700000000") == "11/15/2023, 04:43:20"

    @pytest.mark.parametrize("value", [None, "", "soon", [1]])
    def test_unparseable_gives_none(self, value):
        assert format_timestamp(value) is None


class TestNormalizer:
    def test_full_record(self, make_match):
        match = Normalizer().normalize_match(make_match(7, status_id=3, hot="1", anchors=3), BASE)

        assert match.match_id == 7
        assert match.status == "Live"
        assert match.is_hot is True
        assert match.competition == "English Premier League"
        assert match.kickoff_time == "11/15/2023, 04:43:20"
        assert match.home_team.name == "Manchester United"
        assert match.home_team.logo_url.endswith("/logos/football/team/man_utd.png")
        assert match.away_team.logo_url.endswith("/logos/football/team/liverpool.png")
        assert [s.server_name for s in match.streams] == ["Server 1", "Server 2", "Server 3"]
        assert [s.stream_page_url for s in match.streams] == [
            "https://example.com/truc-tiep/home-vs-away-7/?blv=100",
            "https://example.com/truc-tiep/home-vs-away-7/?blv=101",
            "https://example.com/truc-tiep/home-vs-away-7/?blv=102",
        ]

    @pytest.mark.parametrize("hot", ["0", "", None, 1, "true", " 1"])
    def test_is_hot_only_for_string_one(self, make_match, hot):
        assert Normalizer().normalize_match(make_match(hot=hot), BASE).is_hot is False

    def test_missing_fields_become_none(self):
        match = Normalizer().normalize_match({}, BASE)

        assert match.match_id is None
        assert match.status == "Unknown(None)"
        assert match.is_hot is False
        assert match.competition is None
        assert match.kickoff_time is None
        assert match.home_team.name is None
        assert match.home_team.logo_url is None
        assert match.streams == []

    def test_missing_base_url_nulls_all_urls(self, make_match):
        match = Normalizer().normalize_match(make_match(anchors=2), None)

        assert match.home_team.logo_url is None
        assert match.away_team.logo_url is None
        assert len(match.streams) == 2
        assert all(s.stream_page_url is None for s in match.streams)

    def test_odd_anchor_entries_still_count_as_servers(self, make_match):
        raw = make_match()
        raw["match_data"]["anchors"] = [{"uid": 5}, "junk", {}]

        streams = Normalizer().normalize_match(raw, BASE).streams

        assert [s.server_name for s in streams] == ["Server 1", "Server 2", "Server 3"]
        assert streams[1].stream_page_url.endswith("?blv=")

    def test_normalize_keeps_upstream_order(self, raw_matches):
        matches = Normalizer().normalize(raw_matches, BASE)

        assert [m.match_id for m in matches] == [1, 2, 3, 4, 5]
