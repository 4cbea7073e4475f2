import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse, RedirectResponse

from wiki.common.exceptions import PageStorageException, ResourceNotFoundException
from wiki.pages.dependencies import get_page_service
from wiki.pages.forms import get_page_body
from wiki.pages.service import PageService
from wiki.pages.validation import get_page_title
from wiki.templating import PageRenderer, get_page_renderer

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Pages"],
)

# Titles are matched loosely here so that every path under a prefix reaches
# get_page_title, which rejects anything that is not alphanumeric.


@router.get("/view/{raw_title:path}", response_class=HTMLResponse)
def view_page(
    title: str = Depends(get_page_title),
    page_service: PageService = Depends(get_page_service),
    renderer: PageRenderer = Depends(get_page_renderer),
):
    try:
        page = page_service.load_page(title)
    except (ResourceNotFoundException, PageStorageException) as e:
        logger.info(f"Redirecting '{title}' to edit: {e}")
        return RedirectResponse(f"/edit/{title}", status_code=status.HTTP_302_FOUND)

    return renderer.render("view", page)


@router.get("/edit/{raw_title:path}", response_class=HTMLResponse)
def edit_page(
    title: str = Depends(get_page_title),
    page_service: PageService = Depends(get_page_service),
    renderer: PageRenderer = Depends(get_page_renderer),
):
    page = page_service.load_page_or_blank(title)
    return renderer.render("edit", page)


@router.post("/save/{raw_title:path}")
def save_page(
    title: str = Depends(get_page_title),
    body: bytes = Depends(get_page_body),
    page_service: PageService = Depends(get_page_service),
):
    page_service.save_page(title, body)
    return RedirectResponse(f"/view/{title}", status_code=status.HTTP_302_FOUND)
