import os
from pathlib import Path
from typing import Any
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from wiki.config import Settings, get_settings

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "storage": {"status": "ok"},
                        "templates": {"status": "ok"},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "storage": {
                            "status": "error",
                            "message": "Pages directory is not writable",
                        },
                        "templates": {"status": "ok"},
                    }
                }
            },
        },
    },
)
def healthcheck(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "storage": {"status": "ok"},
        "templates": {"status": "ok"},
    }
    has_error = False

    # Check the pages directory
    pages_dir = Path(settings.PAGES_DIR)
    if not pages_dir.is_dir():
        health_status["storage"].update(
            {"status": "error", "message": f"Pages directory {pages_dir} not found"}
        )
        has_error = True
    elif not os.access(pages_dir, os.W_OK):
        health_status["storage"].update(
            {"status": "error", "message": "Pages directory is not writable"}
        )
        has_error = True

    # Check the templates loaded at startup
    if getattr(request.app.state, "page_renderer", None) is None:
        health_status["templates"].update(
            {"status": "error", "message": "Templates not loaded"}
        )
        has_error = True

    if has_error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
