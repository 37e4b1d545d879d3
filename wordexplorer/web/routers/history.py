from __future__ import annotations
from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from wordexplorer.service.errors import EmptyStateError
from wordexplorer.service.favorites_service import FavoritesService
from wordexplorer.service.history_service import HistoryService
from wordexplorer.web.dependencies import get_favorites_service, get_history_service
from wordexplorer.web.pages import render_home

router = APIRouter()


@router.post("/history/clear")
async def clear_all(
    request: Request,
    history: HistoryService = Depends(get_history_service),
    favorites: FavoritesService = Depends(get_favorites_service),
):
    try:
        history.clear()
    except EmptyStateError as e:
        return render_home(request, history, favorites, error=str(e))
    return RedirectResponse(url="/", status_code=303)
