from fastapi import Depends

from wiki.pages.service import PageService
from wiki.pages.store.base import PageStore
from wiki.pages.store.dependencies import get_page_store


def get_page_service(
    page_store: PageStore = Depends(get_page_store),
) -> PageService:
    return PageService(page_store=page_store)
