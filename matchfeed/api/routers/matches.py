from typing import Optional

from fastapi import APIRouter, Depends, Query

from matchfeed.api.dependencies import get_match_service
from matchfeed.models.match import MatchPage
from matchfeed.query.processor import MatchQuery
from matchfeed.services.match_service import MatchService

router = APIRouter(prefix="/api/matches", tags=["matches"])

# page/limit stay plain strings so junk input falls back to defaults instead of a 422


@router.get("", response_model=MatchPage)
async def list_matches(
    status: Optional[str] = Query(None, description="Status label, case-insensitive"),
    hot: Optional[str] = Query(None, description="'true' or 'false'"),
    league: Optional[str] = Query(None, description="Substring of the competition name"),
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    limit: Optional[str] = Query(None, description="Items per page (default 10)"),
    service: MatchService = Depends(get_match_service),
) -> MatchPage:
    query = MatchQuery.from_params(
        status=status, hot=hot, league=league, page=page, limit=limit
    )
    return await service.get_matches(query)


@router.get("/hot", response_model=MatchPage)
async def list_hot_matches(
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    limit: Optional[str] = Query(None, description="Items per page (default 10)"),
    service: MatchService = Depends(get_match_service),
) -> MatchPage:
    query = MatchQuery.from_params(page=page, limit=limit)
    return await service.get_matches(query, hot_only=True)
