import math
import re
from typing import List, Optional

from pydantic import BaseModel

from matchfeed.models.match import Match, MatchPage

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT_RE = re.compile(r"^\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))")


def parse_int(value: Optional[str], default: int) -> int:
    """Reads the leading integer of a query value ("3abc" -> 3, "2.9" -> 2, "0x2" -> 2).

    Absent, non-numeric and zero values give ``default``; negatives pass
    through unchanged.
    """
    if value is None:
        return default
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return default
    sign, hex_digits, digits = match.groups()
    number = int(hex_digits, 16) if hex_digits else int(digits)
    return (-number if sign == "-" else number) or default


class MatchQuery(BaseModel):
    """Filter and pagination parameters for a match listing."""

    status: Optional[str] = None
    hot: Optional[str] = None
    league: Optional[str] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(
        cls,
        status: Optional[str] = None,
        hot: Optional[str] = None,
        league: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> "MatchQuery":
        return cls(
            status=status,
            hot=hot,
            league=league,
            page=parse_int(page, DEFAULT_PAGE),
            limit=parse_int(limit, DEFAULT_LIMIT),
        )


def filter_matches(
    matches: List[Match], query: MatchQuery, hot_only: bool = False
) -> List[Match]:
    # Hot-only mode ignores every other filter
    if hot_only:
        return [m for m in matches if m.is_hot is True]

    filtered = matches
    if query.status:
        status = query.status.lower()
        filtered = [m for m in filtered if m.status.lower() == status]
    if query.hot:
        filtered = [m for m in filtered if str(m.is_hot).lower() == query.hot]
    if query.league:
        league = query.league.lower()
        filtered = [
            m for m in filtered if m.competition and league in m.competition.lower()
        ]
    return filtered


def paginate(matches: List[Match], query: MatchQuery, source_domain: str) -> MatchPage:
    """Slices the already-filtered matches into the requested page."""
    total_items = len(matches)
    start_index = (query.page - 1) * query.limit
    end_index = query.page * query.limit

    return MatchPage(
        total_items=total_items,
        total_pages=math.ceil(total_items / query.limit),
        current_page=query.page,
        items_per_page=query.limit,
        source_domain=source_domain,
        data=matches[start_index:end_index],
    )
