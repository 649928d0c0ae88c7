from typing import Any, Dict, List, Optional, Union
from datetime import datetime
from zoneinfo import ZoneInfo

from loguru import logger

from matchfeed.models.enums import STATUS_CODE_LABELS
from matchfeed.models.match import Match, Stream, TeamInfo

DISPLAY_TIMEZONE = ZoneInfo("Asia/Yangon")  # UTC+06:30, no DST
DISPLAY_TIME_FORMAT = "%m/%d/%Y, %H:%M:%S"

LOGO_PATH = "wp-content/uploads/truc-tiep/logos/football/team/"
STREAM_PATH = "truc-tiep/{post_name}/?blv={anchor_uid}"


def format_status(status_id: Any) -> str:
    """Maps an upstream status code to its public label."""
    if isinstance(status_id, float) and status_id.is_integer():
        status_id = int(status_id)
    code = str(status_id)
    label = STATUS_CODE_LABELS.get(code)
    if label is None:
        return f"Unknown({code})"
    return label.value


def format_timestamp(timestamp: Any) -> Optional[str]:
    """Renders epoch seconds as a Yangon-local display string."""
    if timestamp is None or timestamp == "":
        return None
    try:
        moment = datetime.fromtimestamp(float(timestamp), tz=DISPLAY_TIMEZONE)
    except (TypeError, ValueError, OverflowError, OSError):
        logger.debug(f"Unparseable kickoff timestamp: {timestamp!r}")
        return None
    return moment.strftime(DISPLAY_TIME_FORMAT)


def format_logo_url(logo_file_name: Optional[str], base_url: Optional[str]) -> Optional[str]:
    if not logo_file_name or not base_url:
        return None
    return f"{base_url}{LOGO_PATH}{logo_file_name}"


def format_stream_url(
    post_name: Optional[str], anchor_uid: Any, base_url: Optional[str]
) -> Optional[str]:
    if not post_name or not base_url:
        return None
    uid = "" if anchor_uid is None else anchor_uid
    return base_url + STREAM_PATH.format(post_name=post_name, anchor_uid=uid)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


class Normalizer:
    """Turns raw upstream match records into public ``Match`` objects.

    Normalization never fails on a single record: anything missing from the
    upstream payload ends up as ``None`` (or an empty list) on the result.
    """

    def normalize(
        self, raw_matches: List[Dict[str, Any]], base_url: Optional[str]
    ) -> List[Match]:
        """Normalizes every raw record against the base URL that served it.

        Args:
            raw_matches: Records extracted from the listing page.
            base_url: Source domain used to build logo and stream URLs.

        Returns:
            Normalized matches, in upstream order.
        """
        matches = [self.normalize_match(raw, base_url) for raw in raw_matches]
        logger.info(f"Normalization complete. Produced {len(matches)} matches from {base_url}.")
        return matches

    def normalize_match(self, raw_match: Dict[str, Any], base_url: Optional[str]) -> Match:
        match_data = _as_dict(raw_match.get("match_data"))
        post_name = raw_match.get("post_name")

        # Server names are positional; upstream commentator identity is dropped
        streams = [
            Stream(
                server_name=f"Server {index}",
                stream_page_url=format_stream_url(
                    post_name, _as_dict(anchor).get("uid"), base_url
                ),
            )
            for index, anchor in enumerate(_as_list(match_data.get("anchors")), start=1)
        ]

        competition = match_data.get("competition_full")

        return Match(
            match_id=self._identifier(raw_match.get("id")),
            status=format_status(raw_match.get("status_id")),
            is_hot=raw_match.get("hot") == "1",
            competition=competition if isinstance(competition, str) else None,
            kickoff_time=format_timestamp(raw_match.get("time")),
            home_team=TeamInfo(
                name=self._text(raw_match.get("home_name")),
                logo_url=format_logo_url(raw_match.get("home_logo"), base_url),
            ),
            away_team=TeamInfo(
                name=self._text(raw_match.get("away_name")),
                logo_url=format_logo_url(raw_match.get("away_logo"), base_url),
            ),
            streams=streams,
        )

    @staticmethod
    def _identifier(value: Any) -> Optional[Union[int, str]]:
        if value is None or isinstance(value, (int, str)):
            return value
        return str(value)

    @staticmethod
    def _text(value: Any) -> Optional[str]:
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)
