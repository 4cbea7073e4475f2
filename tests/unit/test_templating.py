from pathlib import Path
import pytest

from wiki.common.exceptions import TemplateRenderException
from wiki.config import DEFAULT_TEMPLATES_DIR
from wiki.pages.schemas import Page
from wiki.templating import PageRenderer, load_page_renderer


@pytest.fixture
def renderer() -> PageRenderer:
    return load_page_renderer(DEFAULT_TEMPLATES_DIR)


def write_templates(directory: Path, view: str, edit: str) -> Path:
    (directory / "view.html").write_text(view)
    (directory / "edit.html").write_text(edit)
    return directory


def test_load_bundled_templates(renderer: PageRenderer) -> None:
    assert set(renderer.templates) == {"view", "edit"}


def test_render_view(renderer: PageRenderer) -> None:
    response = renderer.render("view", Page(title="Foo", body=b"hello"))

    assert response.status_code == 200
    content = response.body.decode()
    assert "<h1>Foo</h1>" in content
    assert "hello" in content
    assert 'href="/edit/Foo"' in content


def test_render_edit(renderer: PageRenderer) -> None:
    response = renderer.render("edit", Page(title="NoFile"))

    content = response.body.decode()
    assert 'action="/save/NoFile"' in content
    assert '<textarea name="body" rows="20" cols="80"></textarea>' in content


def test_render_escapes_body(renderer: PageRenderer) -> None:
    page = Page(title="Foo", body=b"<script>alert(1)</script>")

    content = renderer.render("view", page).body.decode()

    assert "<script>" not in content
    assert "&lt;script&gt;" in content


def test_render_unknown_template(renderer: PageRenderer) -> None:
    with pytest.raises(TemplateRenderException):
        renderer.render("history", Page(title="Foo"))


def test_render_failure(tmp_path: Path) -> None:
    write_templates(tmp_path, "{{ page.missing.attribute }}", "ok")
    renderer = load_page_renderer(tmp_path)

    with pytest.raises(TemplateRenderException) as exc_info:
        renderer.render("view", Page(title="Foo"))

    assert exc_info.value.template_name == "view"


def test_load_missing_template(tmp_path: Path) -> None:
    (tmp_path / "view.html").write_text("{{ page.title }}")

    with pytest.raises(RuntimeError, match="edit.html"):
        load_page_renderer(tmp_path)


def test_load_malformed_template(tmp_path: Path) -> None:
    write_templates(tmp_path, "{% if %}", "{{ page.title }}")

    with pytest.raises(RuntimeError, match="view.html"):
        load_page_renderer(tmp_path)
