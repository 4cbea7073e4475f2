from pydantic import BaseModel, field_validator

from wiki.pages.validation import is_valid_title


class Page(BaseModel):
    title: str
    body: bytes = b""

    @field_validator("title")
    def validate_title(cls, value: str):
        if not is_valid_title(value):
            raise ValueError("'title' must contain only alphanumeric characters")
        return value

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
