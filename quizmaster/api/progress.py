# quizmaster/api/progress.py - Progress, history and leaderboard
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from quizmaster.api.deps import StandardResponse, get_aggregator, get_current_user, raise_for_result
from quizmaster.models.user import User
from quizmaster.services.progress_service import ProgressAggregator

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/dashboard", response_model=StandardResponse)
async def get_dashboard(
        current_user: User = Depends(get_current_user),
        aggregator: ProgressAggregator = Depends(get_aggregator)
):
    """Stats, recent attempts, category breakdown and recommendations"""
    try:
        dashboard = aggregator.get_dashboard(current_user.id)
    except Exception as e:
        logger.error(f"❌ Dashboard error for user {current_user.id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to load dashboard")

    if dashboard is None:
        raise HTTPException(status_code=404, detail="User not found")

    return StandardResponse(
        status_code=200,
        is_success=True,
        details="Dashboard retrieved successfully",
        data=dashboard
    )


@router.get("/me", response_model=StandardResponse)
async def get_my_progress(
        current_user: User = Depends(get_current_user),
        aggregator: ProgressAggregator = Depends(get_aggregator)
):
    """Per-category progress, most recently attempted first"""
    progress = aggregator.user_store.get_user_progress(current_user.id)
    return StandardResponse(
        status_code=200,
        is_success=True,
        details="Progress retrieved successfully",
        data={"progress": [p.model_dump(mode="json") for p in progress]}
    )


@router.get("/attempts", response_model=StandardResponse)
async def get_attempts(
        limit: int = Query(10, ge=1, le=100),
        current_user: User = Depends(get_current_user),
        aggregator: ProgressAggregator = Depends(get_aggregator)
):
    """Quiz history, newest first"""
    attempts = aggregator.user_store.list_user_attempts(current_user.id, limit)
    return StandardResponse(
        status_code=200,
        is_success=True,
        details=f"Found {len(attempts)} attempts",
        data={"attempts": [a.model_dump(mode="json") for a in attempts]}
    )


@router.get("/analytics", response_model=StandardResponse)
async def get_analytics(
        current_user: User = Depends(get_current_user),
        aggregator: ProgressAggregator = Depends(get_aggregator)
):
    try:
        analytics = aggregator.get_analytics(current_user.id)
    except Exception as e:
        logger.error(f"❌ Analytics error for user {current_user.id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to get analytics")

    return StandardResponse(
        status_code=200,
        is_success=True,
        details="Analytics retrieved successfully",
        data=analytics
    )


@router.get("/leaderboard", response_model=StandardResponse)
async def get_leaderboard(
        limit: int = Query(50, ge=1, le=100),
        search: Optional[str] = None,
        aggregator: ProgressAggregator = Depends(get_aggregator)
):
    leaderboard = aggregator.get_leaderboard(limit, search)
    return StandardResponse(
        status_code=200,
        is_success=True,
        details=f"Found {len(leaderboard)} users",
        data={"leaderboard": leaderboard}
    )


@router.post("/rebuild", response_model=StandardResponse)
async def rebuild_progress(
        current_user: User = Depends(get_current_user),
        aggregator: ProgressAggregator = Depends(get_aggregator)
):
    """Recompute progress and stats from the attempt history"""
    try:
        result = aggregator.rebuild_aggregates(current_user.id)
    except Exception as e:
        logger.error(f"❌ Rebuild failed for user {current_user.id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to rebuild progress")

    raise_for_result(result)
    return StandardResponse(
        status_code=200,
        is_success=True,
        details=result["message"],
        data={"attempts": result["attempts"], "categories": result["categories"]}
    )
