from enum import Enum


class MatchStatus(str, Enum):
    UPCOMING = "Upcoming"
    LIVE = "Live"  # First half through penalty shootout
    FINISHED = "Finished"
    CANCELLED = "Cancelled"
    POSTPONED = "Postponed"


# Upstream status_id (as string) -> public label
STATUS_CODE_LABELS = {
    "0": MatchStatus.UPCOMING,
    "1": MatchStatus.LIVE,  # First half
    "2": MatchStatus.LIVE,  # Half time
    "3": MatchStatus.LIVE,  # Second half
    "4": MatchStatus.LIVE,  # Second half
    "5": MatchStatus.LIVE,  # Over time
    "6": MatchStatus.LIVE,  # Over time break
    "7": MatchStatus.LIVE,  # Penalty shootout
    "8": MatchStatus.FINISHED,
    "9": MatchStatus.CANCELLED,
    "10": MatchStatus.POSTPONED,
}
