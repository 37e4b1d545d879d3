from __future__ import annotations
import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from wordexplorer.config import settings
from wordexplorer.db.database import init_db
from wordexplorer.web.dependencies import WEB_DIR, get_favorites_service, get_history_service
from wordexplorer.web.routers import dictionary, favorites, history

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Word Explorer")

@app.on_event("startup")
def on_startup() -> None:
    init_db()
    # Load both lists now rather than on the first request.
    get_history_service()
    get_favorites_service()
    logger.info("Word Explorer ready (db=%s)", settings.DB_PATH)

app.mount("/static", StaticFiles(directory=str(WEB_DIR / "static")), name="static")

app.include_router(dictionary.router)
app.include_router(favorites.router)
app.include_router(history.router)
