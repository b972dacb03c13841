"""
Fallback Route - Static page for every unmatched request.

Registered last, for every method, so it only sees requests that no
other route fully matched: unknown paths, malformed ids, and methods
the people endpoints do not accept.
"""
from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from people_api.core.exceptions import PeopleApiException
from people_api.core.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(include_in_schema=False)

FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]


@router.api_route("/{path:path}", methods=FALLBACK_METHODS)
async def static_page(request: Request, path: str) -> FileResponse:
    """Serve the configured HTML page regardless of path and method."""
    index_path = request.app.state.settings.static_index_path

    if not index_path.is_file():
        logger.error(f"Static page missing: {index_path}")
        raise PeopleApiException("static page not available", details=str(index_path))

    return FileResponse(index_path, media_type="text/html; charset=utf-8")
