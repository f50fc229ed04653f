from fastapi import APIRouter, Depends, Query, Request
from typing import Optional

from ..features import HistoryManager
from ..utils import serialize_day_buckets
from ..logging_config import setup_logger

logger = setup_logger(__name__)
router = APIRouter(prefix="/history", tags=["history"])


def get_history_manager(request: Request) -> HistoryManager:
    return request.app.state.history_manager


@router.get("")
def list_history(manager: HistoryManager = Depends(get_history_manager)):
    """Visited URLs, most recent first"""
    return {"history": manager.get_history()}


@router.post("", status_code=202)
def record_visit(
    url: Optional[str] = Query(None),
    manager: HistoryManager = Depends(get_history_manager)
):
    # Blank URLs and a disabled feature are dropped without an error
    manager.add_to_history(url)
    return {"status": "accepted"}


@router.delete("")
def delete_history_entry(
    url: str = Query(...),
    manager: HistoryManager = Depends(get_history_manager)
):
    manager.delete_history_entry(url)
    return {"status": "success", "url": url}


@router.delete("/all")
def clear_history(manager: HistoryManager = Depends(get_history_manager)):
    manager.clear_all_history()
    logger.info("History cleared through API")
    return {"status": "success"}


@router.get("/by-day")
def history_by_day(manager: HistoryManager = Depends(get_history_manager)):
    """History grouped by calendar day, newest day first"""
    return {"days": serialize_day_buckets(manager.get_history_by_day())}


@router.get("/count")
def history_count(manager: HistoryManager = Depends(get_history_manager)):
    return {"count": manager.get_history_count()}


@router.get("/most-recent")
def most_recent(manager: HistoryManager = Depends(get_history_manager)):
    return {"url": manager.get_most_recent_url()}


@router.post("/enable")
def enable_history(manager: HistoryManager = Depends(get_history_manager)):
    manager.enable()
    return {"feature": manager.feature_name, "enabled": manager.is_enabled}


@router.post("/disable")
def disable_history(manager: HistoryManager = Depends(get_history_manager)):
    manager.disable()
    return {"feature": manager.feature_name, "enabled": manager.is_enabled}
