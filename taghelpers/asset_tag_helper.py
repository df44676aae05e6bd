"""Script include tags built on top of ``content_tag``."""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from .config import DEFAULT_CONFIG, HelperConfig
from .tag_helper import SafeString, attribute_name, content_tag

URI_PATTERN = re.compile(r"^[-a-z]+://|^cid:")


def is_uri(path: str) -> bool:
    """True for absolute URIs (``scheme://...``) and ``cid:`` references."""

    return URI_PATTERN.match(path) is not None


def javascript_path(source: str, config: Optional[HelperConfig] = None) -> str:
    """Return ``source`` unchanged if it is a URI, else its public script path."""

    if is_uri(source):
        return source
    config = config or DEFAULT_CONFIG
    return f"{config.javascripts_dir.rstrip('/')}/{source}{config.javascript_extension}"


def javascript_src_tag(
    source: str,
    options: Mapping[str, Any],
    config: Optional[HelperConfig] = None,
) -> SafeString:
    attrs = {"type": "text/javascript", "src": javascript_path(source, config)}
    attrs.update(options)
    escape = (config or DEFAULT_CONFIG).escape
    return content_tag("script", "", attrs, escape)


def javascript_include_tag(
    *sources: str,
    options: Optional[Mapping[Any, Any]] = None,
    config: Optional[HelperConfig] = None,
) -> SafeString:
    """Return a ``<script>`` tag per source, separated by newlines.

        javascript_include_tag("xmlhr")
        # => <script src="/javascripts/xmlhr.js" type="text/javascript"></script>
        javascript_include_tag("common", "http://www.example.com/elsewhere.js")
        # => two tags joined by "\\n"
    """

    normalized = {attribute_name(key): value for key, value in (options or {}).items()}
    tags = [javascript_src_tag(source, normalized, config) for source in sources]
    return SafeString("\n".join(tags))


__all__ = [
    "URI_PATTERN",
    "is_uri",
    "javascript_include_tag",
    "javascript_path",
    "javascript_src_tag",
]
