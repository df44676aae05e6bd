from bs4 import BeautifulSoup

from taghelpers.asset_tag_helper import (
    is_uri,
    javascript_include_tag,
    javascript_path,
    javascript_src_tag,
)
from taghelpers.config import HelperConfig


def test_is_uri() -> None:
    assert is_uri("http://www.example.com/a.js")
    assert is_uri("https://cdn.example.com/a.js")
    assert is_uri("ftp://example.com/a.js")
    assert is_uri("cid:part1.abc@example")
    assert not is_uri("xmlhr")
    assert not is_uri("/javascripts/xmlhr.js")
    assert not is_uri("HTTP://example.com")


def test_javascript_path() -> None:
    assert javascript_path("xmlhr") == "/javascripts/xmlhr.js"
    assert javascript_path("http://www.example.com/xmlhr.js") == "http://www.example.com/xmlhr.js"


def test_javascript_path_uses_config() -> None:
    config = HelperConfig(javascripts_dir="/static/js/", javascript_extension=".mjs")
    assert javascript_path("app", config) == "/static/js/app.mjs"


def test_single_include_tag() -> None:
    assert (
        javascript_include_tag("xmlhr")
        == '<script src="/javascripts/xmlhr.js" type="text/javascript"></script>'
    )


def test_multiple_sources_join_with_newlines() -> None:
    html = javascript_include_tag("common", "http://www.example.com/elsewhere.js")
    assert html == (
        '<script src="/javascripts/common.js" type="text/javascript"></script>\n'
        '<script src="http://www.example.com/elsewhere.js" type="text/javascript"></script>'
    )

    soup = BeautifulSoup(html, "html.parser")
    srcs = [script["src"] for script in soup.find_all("script")]
    assert srcs == ["/javascripts/common.js", "http://www.example.com/elsewhere.js"]


def test_options_apply_to_every_tag() -> None:
    html = javascript_include_tag("a", "b", options={"defer": True})
    soup = BeautifulSoup(html, "html.parser")
    scripts = soup.find_all("script")
    assert len(scripts) == 2
    assert all(script["defer"] == "defer" for script in scripts)


def test_options_override_defaults() -> None:
    assert (
        javascript_src_tag("app", {"type": "module"})
        == '<script src="/javascripts/app.js" type="module"></script>'
    )


def test_no_sources() -> None:
    assert javascript_include_tag() == ""
