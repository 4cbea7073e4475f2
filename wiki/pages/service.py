import logging

from wiki.common.exceptions import PageStorageException, ResourceNotFoundException
from wiki.pages.schemas import Page
from wiki.pages.store.base import PageStore

logger = logging.getLogger(__name__)


class PageService:
    def __init__(self, page_store: PageStore) -> None:
        self.page_store = page_store

    def load_page(self, title: str) -> Page:
        return self.page_store.load(title)

    def load_page_or_blank(self, title: str) -> Page:
        try:
            return self.page_store.load(title)
        except (ResourceNotFoundException, PageStorageException) as e:
            logger.info(f"Starting a blank page for '{title}': {e}")
            return Page(title=title)

    def save_page(self, title: str, body: bytes) -> Page:
        page = Page(title=title, body=body)
        self.page_store.save(page)
        return page
