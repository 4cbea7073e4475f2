import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
import uvicorn

from wiki.common.exceptions import (
    InvalidPageTitleException,
    PageStorageException,
    TemplateRenderException,
    invalid_page_title_handler,
    page_storage_exception_handler,
    template_render_exception_handler,
    unexpected_exception_handler,
)
from wiki.config import get_settings
from wiki.healthcheck.router import router as health_router
from wiki.pages.router import router as pages_router
from wiki.pages.store.filesystem import FilePageStore
from wiki.templating import load_page_renderer

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A missing or broken template aborts startup
    app.state.page_renderer = load_page_renderer(settings.TEMPLATES_DIR)
    app.state.page_store = FilePageStore(
        pages_dir=settings.PAGES_DIR, file_mode=settings.PAGE_FILE_MODE
    )
    logger.info(f"Serving pages from {settings.PAGES_DIR}")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    summary=settings.APP_SUMMARY,
    lifespan=lifespan,
    version=settings.WIKI_VERSION,
)

app.exception_handler(InvalidPageTitleException)(invalid_page_title_handler)
app.exception_handler(PageStorageException)(page_storage_exception_handler)
app.exception_handler(TemplateRenderException)(template_render_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(pages_router)


def run() -> None:
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
