from __future__ import annotations
import json
import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import RedirectResponse, Response

from wordexplorer.service.errors import ValidationError
from wordexplorer.service.favorites_service import FavoritesService
from wordexplorer.web.dependencies import get_favorites_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _back_to(query: str) -> RedirectResponse:
    query = (query or "").strip()
    url = f"/?query={quote(query)}" if query else "/"
    return RedirectResponse(url=url, status_code=303)


@router.post("/favorites/toggle")
async def toggle_favorite(
    word: str = Form(""),
    phonetic: str = Form(""),
    favorites: FavoritesService = Depends(get_favorites_service),
):
    """Star/un-star the displayed word, then return to it."""
    try:
        favorites.toggle(word, phonetic)
    except ValidationError:
        return _back_to("")
    return _back_to(word)


@router.post("/favorites/remove")
async def remove_favorite(
    word: str = Form(""),
    query: str = Form(""),
    favorites: FavoritesService = Depends(get_favorites_service),
):
    """Remove a favorite from the side panel and go back to whatever was displayed."""
    favorites.remove(word)
    return _back_to(query)


@router.get("/favorites/export")
async def export_favorites(favorites: FavoritesService = Depends(get_favorites_service)):
    """Export favorites as JSON (word + phonetic + timestamp)."""
    data = json.dumps(favorites.export(), ensure_ascii=False, indent=2).encode("utf-8")
    return Response(
        content=data,
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="favorites.json"'},
    )


@router.post("/favorites/import")
async def import_favorites(
    json_file: UploadFile = File(...),
    favorites: FavoritesService = Depends(get_favorites_service),
):
    """Import favorites from an uploaded JSON file.

    Words that are already favorites are kept as they are.
    """
    raw = await json_file.read()
    try:
        items = json.loads(raw.decode("utf-8"))
        if not isinstance(items, list):
            raise ValueError("JSON must be a list.")
    except ValueError as e:
        logger.warning("Rejected favorites import: %s", e)
        return RedirectResponse(url="/", status_code=303)

    added = favorites.import_entries(items)
    logger.info("Imported %d favorites", added)
    return RedirectResponse(url="/", status_code=303)
