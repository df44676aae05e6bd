"""Expose the tag helpers to Jinja templates."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Any, Iterable, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .asset_tag_helper import javascript_include_tag, javascript_path
from .config import DEFAULT_CONFIG, HelperConfig
from .tag_helper import SafeString, TagStyle, content_tag, tag, tag_options


def register_helpers(env: Environment, config: Optional[HelperConfig] = None) -> Environment:
    """Install tag helper globals and the ``tag_options`` filter on ``env``.

    ``content_tag`` works with ``{% call %}`` blocks: the block body becomes the
    element content.
    """

    config = config or DEFAULT_CONFIG

    def template_tag(
        name: str,
        options: Any = None,
        open: Any = None,
        escape: Optional[bool] = None,
    ) -> SafeString:
        if open is None:
            style = config.style
        elif isinstance(open, str):
            style = TagStyle(open)
        else:
            style = open
        return tag(name, options, style, config.escape if escape is None else escape)

    def template_content_tag(
        name: str,
        content_or_options: Any = None,
        options: Any = None,
        escape: Optional[bool] = None,
        caller: Any = None,
    ) -> SafeString:
        return content_tag(
            name,
            content_or_options,
            options,
            config.escape if escape is None else escape,
            block=caller,
        )

    def tag_options_filter(options: Any) -> SafeString:
        return tag_options(options, config.escape) or SafeString("")

    env.globals.update(
        tag=template_tag,
        content_tag=template_content_tag,
        javascript_include_tag=partial(javascript_include_tag, config=config),
        javascript_path=partial(javascript_path, config=config),
    )
    env.filters["tag_options"] = tag_options_filter
    return env


def helper_env(
    template_dirs: Iterable[Path], config: Optional[HelperConfig] = None
) -> Environment:
    """Create a strict, autoescaping Jinja environment with the helpers installed."""

    env = Environment(
        loader=FileSystemLoader([str(path) for path in template_dirs]),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    return register_helpers(env, config)


__all__ = ["helper_env", "register_helpers"]
