from __future__ import annotations
from typing import Optional

from fastapi import Request

from wordexplorer.models.lookup import LookupResult
from wordexplorer.service.favorites_service import FavoritesService
from wordexplorer.service.history_service import HistoryService
from wordexplorer.web.dependencies import templates


def render_home(
    request: Request,
    history: HistoryService,
    favorites: FavoritesService,
    *,
    result: Optional[LookupResult] = None,
    error: Optional[str] = None,
    input_value: str = "",
    status_code: int = 200,
):
    """Render the single search page with the current lists."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "result": result,
            "error": error,
            "input_value": input_value,
            "history": history.list(),
            "favorites": favorites.list(),
            "is_favorite": favorites.contains(result.word) if result else False,
        },
        status_code=status_code,
    )
