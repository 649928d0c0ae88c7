from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TeamInfo(BaseModel):
    """A team as exposed by the API: display name plus absolute logo URL."""

    name: Optional[str] = None
    logo_url: Optional[str] = None


class Stream(BaseModel):
    """One stream page for a match. Names are positional ("Server 1", ...)."""

    server_name: str
    stream_page_url: Optional[str] = None


class Match(BaseModel):
    """Normalized match record built fresh from the upstream payload."""

    match_id: Optional[Union[int, str]] = None  # Opaque upstream identifier
    status: str = Field(
        ..., description="Status label, or 'Unknown(<code>)' for unmapped codes."
    )
    is_hot: bool = False
    competition: Optional[str] = None
    # Display string in Asia/Yangon time, not a sortable instant
    kickoff_time: Optional[str] = None
    home_team: TeamInfo = Field(default_factory=TeamInfo)
    away_team: TeamInfo = Field(default_factory=TeamInfo)
    streams: List[Stream] = []


class MatchPage(BaseModel):
    """A filtered, paginated slice of matches plus the source that served it."""

    model_config = ConfigDict(populate_by_name=True)

    total_items: int = Field(..., alias="totalItems")
    total_pages: int = Field(..., alias="totalPages")
    current_page: int = Field(..., alias="currentPage")
    items_per_page: int = Field(..., alias="itemsPerPage")
    source_domain: str = Field(..., alias="sourceDomain")
    data: List[Match] = []


class FetchedPage(BaseModel):
    """Raw HTML body and the base URL of the source that produced it."""

    model_config = ConfigDict(frozen=True)

    html: str
    base_url: str
