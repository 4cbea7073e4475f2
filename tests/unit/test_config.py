import pytest

from wiki.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.PAGES_DIR == "."
    assert settings.PAGE_FILE_MODE == 0o600


def test_log_level_is_normalized() -> None:
    assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize("value", ["600", "0o600"])
def test_page_file_mode_from_octal_string(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    monkeypatch.setenv("PAGE_FILE_MODE", value)

    assert Settings(_env_file=None).PAGE_FILE_MODE == 0o600
