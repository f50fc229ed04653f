from fastapi import APIRouter, Depends, Query, HTTPException, Request
from typing import Optional

from ..exceptions import InvalidURLError
from ..features import BookmarkManager
from ..logging_config import setup_logger

logger = setup_logger(__name__)
router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


def get_bookmark_manager(request: Request) -> BookmarkManager:
    return request.app.state.bookmark_manager


@router.get("")
def list_bookmarks(manager: BookmarkManager = Depends(get_bookmark_manager)):
    """Bookmarked URLs, most recently added first"""
    return {"bookmarks": manager.get_bookmarks()}


@router.post("", status_code=201)
def add_bookmark(
    url: Optional[str] = Query(None),
    manager: BookmarkManager = Depends(get_bookmark_manager)
):
    try:
        manager.add_bookmark(url)
    except InvalidURLError as e:
        logger.warning(f"Rejected bookmark: {e}")
        raise HTTPException(
            status_code=400,
            detail={"message": e.message, "url": e.url}
        )
    return {"status": "success", "url": url}


@router.delete("")
def delete_bookmark(
    url: str = Query(...),
    manager: BookmarkManager = Depends(get_bookmark_manager)
):
    manager.delete_bookmark(url)
    return {"status": "success", "url": url}


@router.get("/count")
def bookmark_count(manager: BookmarkManager = Depends(get_bookmark_manager)):
    return {"count": manager.get_bookmark_count()}


@router.post("/enable")
def enable_bookmarks(manager: BookmarkManager = Depends(get_bookmark_manager)):
    manager.enable()
    return {"feature": manager.feature_name, "enabled": manager.is_enabled}


@router.post("/disable")
def disable_bookmarks(manager: BookmarkManager = Depends(get_bookmark_manager)):
    manager.disable()
    return {"feature": manager.feature_name, "enabled": manager.is_enabled}
