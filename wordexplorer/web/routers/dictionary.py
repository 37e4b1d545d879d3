from __future__ import annotations
from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse

from wordexplorer.service.errors import WordExplorerError
from wordexplorer.service.favorites_service import FavoritesService
from wordexplorer.service.history_service import HistoryService
from wordexplorer.service.lookup_service import LookupService
from wordexplorer.service.random_word import RandomWordSelector
from wordexplorer.web.dependencies import (
    get_favorites_service,
    get_history_service,
    get_lookup_service,
    get_random_word_selector,
)
from wordexplorer.web.pages import render_home

router = APIRouter()


async def _search_and_render(
    request: Request,
    word: str,
    lookup: LookupService,
    history: HistoryService,
    favorites: FavoritesService,
):
    """Look a word up, record it in history on success, render the page."""
    try:
        result = await lookup.lookup(word)
    except WordExplorerError as e:
        return render_home(request, history, favorites, error=str(e), input_value=word)
    history.add(word)
    return render_home(request, history, favorites, result=result)


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    query: str = "",
    lookup: LookupService = Depends(get_lookup_service),
    history: HistoryService = Depends(get_history_service),
    favorites: FavoritesService = Depends(get_favorites_service),
):
    """Search page.

    An optional ``query`` shows that word without touching history, so we
    can redirect back here after starring a word without reordering the
    history list.
    """
    query = (query or "").strip()
    if not query:
        return render_home(request, history, favorites)
    try:
        result = await lookup.lookup(query)
    except WordExplorerError as e:
        return render_home(request, history, favorites, error=str(e))
    return render_home(request, history, favorites, result=result)


@router.post("/search", response_class=HTMLResponse)
async def search(
    request: Request,
    word: str = Form(""),
    lookup: LookupService = Depends(get_lookup_service),
    history: HistoryService = Depends(get_history_service),
    favorites: FavoritesService = Depends(get_favorites_service),
):
    return await _search_and_render(request, word, lookup, history, favorites)


@router.get("/entry", response_class=HTMLResponse)
async def entry(
    request: Request,
    q: str = Query(""),
    lookup: LookupService = Depends(get_lookup_service),
    history: HistoryService = Depends(get_history_service),
    favorites: FavoritesService = Depends(get_favorites_service),
):
    """Used by history, favorite, synonym and antonym links."""
    return await _search_and_render(request, q, lookup, history, favorites)


@router.post("/random", response_class=HTMLResponse)
async def random_word(
    request: Request,
    selector: RandomWordSelector = Depends(get_random_word_selector),
    lookup: LookupService = Depends(get_lookup_service),
    history: HistoryService = Depends(get_history_service),
    favorites: FavoritesService = Depends(get_favorites_service),
):
    return await _search_and_render(request, selector.pick(), lookup, history, favorites)
