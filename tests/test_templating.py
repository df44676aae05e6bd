from pathlib import Path

import pytest
from jinja2 import Environment, UndefinedError

from taghelpers.config import HelperConfig
from taghelpers.templating import helper_env, register_helpers


def _env(config: HelperConfig | None = None) -> Environment:
    return register_helpers(Environment(autoescape=True), config)


def test_call_block_becomes_content() -> None:
    template = _env().from_string(
        '{% call content_tag("div", {"class": "strong"}) %}Hello world!{% endcall %}'
    )
    assert template.render() == '<div class="strong">Hello world!</div>'


def test_call_block_content_is_escaped_once() -> None:
    template = _env().from_string('{% call content_tag("p") %}{{ text }}{% endcall %}')
    assert template.render(text="<b>") == "<p>&lt;b&gt;</p>"


def test_content_tag_global() -> None:
    template = _env().from_string('{{ content_tag("p", text, {"id": "intro"}) }}')
    assert template.render(text="A & B") == '<p id="intro">A &amp; B</p>'


def test_tag_global_follows_configured_style() -> None:
    assert _env().from_string('{{ tag("br") }}').render() == "<br />"

    html4 = _env(HelperConfig(tag_style="html4"))
    assert html4.from_string('{{ tag("br") }}').render() == "<br>"
    assert html4.from_string('{{ tag("br", none, "xhtml") }}').render() == "<br />"


def test_javascript_include_tag_global() -> None:
    env = _env(HelperConfig(javascripts_dir="/static"))
    html = env.from_string('{{ javascript_include_tag("app", options={"async": true}) }}').render()
    assert html == '<script async="async" src="/static/app.js" type="text/javascript"></script>'


def test_tag_options_filter() -> None:
    template = _env().from_string("<input{{ attrs|tag_options }}>")
    assert template.render(attrs={"type": "text", "disabled": True}) == '<input disabled="disabled" type="text">'
    assert template.render(attrs={}) == "<input>"


def test_helper_env_is_strict(tmp_path: Path) -> None:
    (tmp_path / "page.html").write_text("{{ content_tag('h1', missing_value) }}", encoding="utf-8")

    env = helper_env([tmp_path])
    with pytest.raises(UndefinedError):
        env.get_template("page.html").render()


def test_helper_env_renders_file(tmp_path: Path) -> None:
    (tmp_path / "page.html").write_text(
        "{{ javascript_path('app') }}|{{ tag('hr') }}", encoding="utf-8"
    )

    env = helper_env([tmp_path])
    assert env.get_template("page.html").render() == "/javascripts/app.js|<hr />"
