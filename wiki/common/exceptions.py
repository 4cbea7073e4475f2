from enum import Enum
import logging
from fastapi import Request, status
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    PAGE = "Page"


# Exceptions
class ResourceNotFoundException(Exception):
    def __init__(self, resource_type: ResourceType, identifier: str):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(f"{self.resource_type} '{identifier}' not found")


class InvalidPageTitleException(Exception):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid page title in path '{path}'")


class PageStorageException(Exception):
    def __init__(self, title: str, message: str):
        self.title = title
        super().__init__(message)


class TemplateRenderException(Exception):
    def __init__(self, template_name: str, message: str):
        self.template_name = template_name
        super().__init__(message)


# Exception handlers
def invalid_page_title_handler(request: Request, exc: InvalidPageTitleException):
    logger.warning(exc)
    return PlainTextResponse(
        "404 page not found",
        status_code=status.HTTP_404_NOT_FOUND,
    )


def page_storage_exception_handler(request: Request, exc: PageStorageException):
    logger.error(f"Failed to store page '{exc.title}': {exc}")
    return PlainTextResponse(
        str(exc),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def template_render_exception_handler(
    request: Request, exc: TemplateRenderException
):
    logger.error(f"Failed to render template '{exc.template_name}': {exc}")
    return PlainTextResponse(
        str(exc),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(exc)
    return PlainTextResponse(
        "An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
