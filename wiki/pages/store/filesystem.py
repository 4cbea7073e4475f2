import logging
import os
from pathlib import Path

from wiki.common.exceptions import (
    InvalidPageTitleException,
    PageStorageException,
    ResourceNotFoundException,
    ResourceType,
)
from wiki.pages.schemas import Page
from wiki.pages.store.base import PageStore
from wiki.pages.validation import is_valid_title

logger = logging.getLogger(__name__)

PAGE_EXTENSION = ".txt"


class FilePageStore(PageStore):
    """Stores each page as ``<title>.txt`` holding the raw body bytes.

    Writes are not atomic and are not coordinated between requests, so two
    concurrent saves of the same title race; the last writer usually wins.
    """

    def __init__(self, pages_dir: str | Path, file_mode: int = 0o600) -> None:
        self.pages_dir = Path(pages_dir)
        self.file_mode = file_mode

    def _page_path(self, title: str) -> Path:
        if not is_valid_title(title):
            raise InvalidPageTitleException(title)
        return self.pages_dir / f"{title}{PAGE_EXTENSION}"

    def save(self, page: Page) -> None:
        path = self._page_path(page.title)
        try:
            # The mode only applies when the file is created
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.file_mode)
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
        except OSError as e:
            raise PageStorageException(page.title, str(e)) from e

        logger.info(f"Saved page '{page.title}' ({len(page.body)} bytes)")

    def load(self, title: str) -> Page:
        path = self._page_path(title)
        try:
            body = path.read_bytes()
        except FileNotFoundError as e:
            raise ResourceNotFoundException(ResourceType.PAGE, title) from e
        except OSError as e:
            raise PageStorageException(title, str(e)) from e

        return Page(title=title, body=body)
