# tests/test_error_handling.py

import pytest

from prompt_registry import get_default_registry
from prompt_registry.errors import (
    DuplicateNameError,
    ParseError,
    RenderError,
    TemplateIOError,
    TemplateNotFoundError,
    TemplateRegistryError,
)


@pytest.mark.parametrize("error_cls", [
    DuplicateNameError,
    ParseError,
    RenderError,
    TemplateIOError,
    TemplateNotFoundError,
])
def test_all_errors_share_base(error_cls):
    assert issubclass(error_cls, TemplateRegistryError)


def test_parse_error_carries_name_and_cause(registry):
    with pytest.raises(ParseError) as exc_info:
        registry.register("broken", "{% for x in %}")

    err = exc_info.value
    assert err.name == "broken"
    assert err.cause is err.__cause__
    assert str(err).startswith("failed to parse template 'broken'")


def test_render_error_carries_name_and_cause(registry):
    registry.register("needs_x", "{{ x.y }}")
    renderer, _ = registry.lookup("needs_x")

    with pytest.raises(RenderError) as exc_info:
        renderer("", {})

    err = exc_info.value
    assert err.name == "needs_x"
    assert err.cause is err.__cause__
    assert str(err).startswith("failed to render template 'needs_x'")


def test_io_error_message(tmp_path, registry):
    path = tmp_path / "missing.prompt"
    with pytest.raises(TemplateIOError) as exc_info:
        registry.register_from_file("m", path)

    assert exc_info.value.name == "m"
    assert str(path) in str(exc_info.value)


def test_render_error_does_not_affect_registration(registry):
    registry.register("greet", "Hi {{ who }}")
    with pytest.raises(RenderError):
        registry.render("greet", {})

    assert registry.render("greet", {"who": "you"}) == {"prompt": "Hi you"}


def test_default_registry_is_shared():
    assert get_default_registry() is get_default_registry()
