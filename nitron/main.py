from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from typing import Optional

# Local imports
from .config import Config
from .database import DatabaseManager
from .exceptions import StoreUnavailableError
from .features import BookmarkManager, HistoryManager
from .logging_config import setup_logger
from .operations import DatabaseOperations
from .summary import DaySummary

# Import Routers
from .routers import bookmarks, history, summary

logger = setup_logger(__name__)


def create_app(config: Optional[Config] = None, db: Optional[DatabaseOperations] = None) -> FastAPI:
    """
    Build the API around one store and one manager per feature.

    Args:
        config: Loaded configuration, read from the default locations when None
        db: Store to use instead of opening ``config.database_url``

    Returns:
        FastAPI: Application with the store and managers in ``app.state``
    """
    config = config or Config()
    logger.info("Starting application initialization...")

    if db is None:
        logger.info(f"Opening database at {config.database_url}")
        db = DatabaseManager(config.database_url, tz=config.timezone)

    bookmark_manager = BookmarkManager(db)
    history_manager = HistoryManager(db)
    bookmark_manager.initialize()
    history_manager.initialize()

    app = FastAPI(title="Nitron Browser Store API")
    app.state.config = config
    app.state.db = db
    app.state.bookmark_manager = bookmark_manager
    app.state.history_manager = history_manager
    app.state.day_summary = DaySummary(
        history_manager,
        tz=getattr(db, "tz", config.timezone),
        top_n=config.summary_top_sites,
    )

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
        logger.error(f"Store unavailable during {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=503,
            content={"message": "Store unavailable", "error": str(exc)}
        )

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Starting application shutdown...")
        app.state.db.close()
        logger.info("Application shutdown complete.")

    # --- Include Routers ---
    app.include_router(bookmarks.router)
    app.include_router(history.router)
    app.include_router(summary.router)

    @app.get("/health", tags=["service"])
    def health_check():
        db_ok = False
        ping = getattr(app.state.db, "ping", None)
        if ping is None:
            db_ok = True
        else:
            try:
                db_ok = ping()
            except StoreUnavailableError:
                db_ok = False

        return {
            "status": "ok",
            "database_connection": "ok" if db_ok else "error",
            "features": [str(bookmark_manager), str(history_manager)],
        }

    logger.info("Application startup complete.")
    return app
