import re
from fastapi import Request

from wiki.common.exceptions import InvalidPageTitleException

TITLE_PATTERN = re.compile(r"[a-zA-Z0-9]+")
VALID_PATH = re.compile(r"/(edit|save|view)/([a-zA-Z0-9]+)")


def is_valid_title(title: str) -> bool:
    return TITLE_PATTERN.fullmatch(title) is not None


def get_title(path: str) -> str:
    """Extract the page title from a request path.

    Raises InvalidPageTitleException unless the path is exactly one of
    /edit/, /save/ or /view/ followed by an alphanumeric title.
    """
    match = VALID_PATH.fullmatch(path)
    if match is None:
        raise InvalidPageTitleException(path)
    return match.group(2)


def get_page_title(request: Request) -> str:
    return get_title(request.url.path)
