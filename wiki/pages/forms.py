import logging
from urllib.parse import unquote_to_bytes
from fastapi import Request
import python_multipart
from python_multipart.exceptions import FormParserError
from python_multipart.multipart import Field, parse_options_header

logger = logging.getLogger(__name__)

URLENCODED = b"application/x-www-form-urlencoded"
MULTIPART = b"multipart/form-data"


def parse_form_field(content_type: str, data: bytes, field_name: bytes) -> bytes:
    """Return the raw bytes of the first ``field_name`` value in a form body.

    Values are never decoded to text, so bodies that are not valid UTF-8
    are stored exactly as submitted. A missing field, an unsupported content
    type or a malformed body all yield an empty value.
    """
    media_type, _ = parse_options_header(content_type)
    if media_type not in (URLENCODED, MULTIPART):
        return b""

    values: list[bytes] = []

    def on_field(field: Field) -> None:
        if field.field_name == field_name:
            values.append(field.value or b"")

    try:
        parser = python_multipart.create_form_parser(
            {"Content-Type": content_type}, on_field, None
        )
        parser.write(data)
        parser.finalize()
    except FormParserError as e:
        logger.warning(f"Ignoring malformed form body: {e}")
        return b""

    if not values:
        return b""
    if media_type == URLENCODED:
        return unquote_to_bytes(values[0].replace(b"+", b" "))
    return values[0]


async def get_page_body(request: Request) -> bytes:
    content_type = request.headers.get("content-type", "")
    return parse_form_field(content_type, await request.body(), b"body")
