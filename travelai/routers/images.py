from fastapi import APIRouter, Query

from travelai.services.pexels_service import search_photos

router = APIRouter(tags=["images"])


@router.get("/api/pexels")
def pexels_proxy(query: str = Query("")):
    """Image search proxy; always returns a renderable {photos: [...]} payload."""
    return search_photos(query)
