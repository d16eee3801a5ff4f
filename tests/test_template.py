from __future__ import annotations

import pytest

from ccinit.errors import CCInitError
from ccinit.template import TemplateRenderer, TemplateRenderingError


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_render_string_with_filters(renderer: TemplateRenderer):
    template = "Project {{ name|title }} by {{ owner|upper }}"
    context = {"name": "sample app", "owner": "octocat"}
    rendered = renderer.render_string(template, context)
    assert rendered == "Project Sample App by OCTOCAT"


def test_render_string_resolves_dotted_keys(renderer: TemplateRenderer):
    rendered = renderer.render_string("{{ project.name }}", {"project": {"name": "demo"}})
    assert rendered == "demo"


def test_render_string_leaves_single_braces_alone(renderer: TemplateRenderer):
    template = "find . -exec rm -rf {} + for {{ name }}"
    assert renderer.render_string(template, {"name": "demo"}) == "find . -exec rm -rf {} + for demo"


def test_render_string_missing_policy_keep(renderer: TemplateRenderer):
    template = "Hello {{ missing }}"
    assert renderer.render_string(template, {}, missing="keep") == template


def test_render_string_missing_policy_empty(renderer: TemplateRenderer):
    template = "Hello {{ missing }}"
    assert renderer.render_string(template, {}, missing="empty") == "Hello "


def test_render_string_missing_policy_error(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError, match="missing"):
        renderer.render_string("{{ missing }}", {}, missing="error")


def test_render_string_rejects_unknown_policy(renderer: TemplateRenderer):
    with pytest.raises(ValueError):
        renderer.render_string("{{ name }}", {"name": "demo"}, missing="ignore")


def test_unknown_filter_raises(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ name|unknown }}", {"name": "demo"})


def test_rendering_error_is_a_ccinit_error():
    assert issubclass(TemplateRenderingError, CCInitError)
