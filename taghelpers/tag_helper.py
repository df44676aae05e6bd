"""Tag builders for rendering HTML elements from attribute mappings."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

from markupsafe import Markup
from markupsafe import escape as html_escape

SafeString = Markup

BOOLEAN_ATTRIBUTES = frozenset(
    {
        "disabled",
        "readonly",
        "multiple",
        "checked",
        "autobuffer",
        "autoplay",
        "controls",
        "loop",
        "selected",
        "hidden",
        "scoped",
        "async",
        "defer",
        "reversed",
        "ismap",
        "seemless",
        "muted",
        "required",
        "autofocus",
        "novalidate",
        "formnovalidate",
        "open",
    }
)

AttributeMap = Mapping[Any, Any]
ContentProducer = Callable[[], Any]


class TagStyle(Enum):
    """How void elements are closed."""

    XHTML = "xhtml"
    HTML4 = "html4"


def attribute_name(key: Any) -> str:
    """Normalize an attribute key; enum members use their value."""

    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def _attribute_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    if value is True:
        return "true"
    if value is False:
        return "false"
    return value


def tag_options(options: Optional[AttributeMap], escape: bool = True) -> SafeString | None:
    """Serialize ``options`` into `` key="value"`` pairs, or ``None`` if nothing renders.

    Keys listed in ``BOOLEAN_ATTRIBUTES`` render as ``key="key"`` unless the value
    is ``None`` or ``False``, in which case they are dropped, so ``""`` and ``0``
    still set them. Other ``None`` values are dropped. Fragments are sorted so the
    output does not depend on mapping order.
    """

    if not options:
        return None

    attrs: list[str] = []
    for key, value in options.items():
        name = attribute_name(key)
        if name in BOOLEAN_ATTRIBUTES:
            if value is not None and value is not False:
                attrs.append(f'{name}="{name}"')
        elif value is not None:
            final_value = _attribute_value(value)
            if escape:
                final_value = html_escape(final_value)
            attrs.append(f'{name}="{final_value}"')

    if not attrs:
        return None
    return SafeString(" " + " ".join(sorted(attrs)))


def _resolve_style(open: Union[TagStyle, bool]) -> TagStyle:
    if isinstance(open, TagStyle):
        return open
    return TagStyle.HTML4 if open else TagStyle.XHTML


def tag(
    name: str,
    options: Optional[AttributeMap] = None,
    open: Union[TagStyle, bool] = TagStyle.XHTML,
    escape: bool = True,
) -> SafeString:
    """Return an empty element such as ``<br />``.

    Pass ``TagStyle.HTML4`` (or ``True``) as ``open`` for ``<br>``. Set ``escape``
    to ``False`` to embed attribute values verbatim.

        tag("input", {"type": "text", "disabled": True})
        # => <input disabled="disabled" type="text" />
    """

    attrs = tag_options(options, escape) or ""
    closing = ">" if _resolve_style(open) is TagStyle.HTML4 else " />"
    return SafeString(f"<{name}{attrs}{closing}")


def _split_content_args(
    content_or_options: Any,
    options: Optional[AttributeMap],
    block: Optional[ContentProducer],
) -> tuple[Any, Optional[AttributeMap]]:
    """Decide which positional argument is content and which is the attribute map."""

    if isinstance(content_or_options, Mapping):
        return (block() if block is not None else ""), content_or_options
    if block is not None:
        return block(), options
    if callable(content_or_options):
        return content_or_options(), options
    return content_or_options, options


def content_tag_string(
    name: str,
    content: Any,
    options: Optional[AttributeMap],
    escape: bool = True,
) -> SafeString:
    attrs = tag_options(options, escape) or ""
    if content is None:
        content = ""
    body = html_escape(content) if escape else content
    return SafeString(f"<{name}{attrs}>{body}</{name}>")


def content_tag(
    name: str,
    content_or_options: Any = None,
    options: Optional[AttributeMap] = None,
    escape: bool = True,
    *,
    block: Optional[ContentProducer] = None,
) -> SafeString:
    """Return an element of type ``name`` wrapping ``content``.

    Content can be given directly or produced by a zero-argument callable, either
    in the content position or as ``block``. A mapping in the content position is
    the attribute map; content then comes from ``block`` or is empty.

        content_tag("p", "Hello world!")
        # => <p>Hello world!</p>
        content_tag("div", content_tag("p", "Hello world!"), {"class": "strong"})
        # => <div class="strong"><p>Hello world!</p></div>
        content_tag("div", {"class": "strong"}, block=lambda: "Hello world!")
        # => <div class="strong">Hello world!</div>
    """

    content, options = _split_content_args(content_or_options, options, block)
    return content_tag_string(name, content, options, escape)


__all__ = [
    "AttributeMap",
    "BOOLEAN_ATTRIBUTES",
    "ContentProducer",
    "SafeString",
    "TagStyle",
    "attribute_name",
    "content_tag",
    "content_tag_string",
    "tag",
    "tag_options",
]
