"""Command-line interface for taghelpers."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Iterable, Optional

from .asset_tag_helper import javascript_include_tag
from .config import HelperConfig, load_config
from .io_utils import load_json_argument, write_text
from .tag_helper import TagStyle, content_tag, tag
from .templating import helper_env


def _load_attrs(raw: Optional[str]) -> Optional[dict[str, Any]]:
    attrs = load_json_argument(raw)
    if attrs is None:
        return None
    if not isinstance(attrs, dict):
        raise SystemExit("--attrs must be a JSON object of attribute names to values.")
    return attrs


def _config(args: argparse.Namespace) -> HelperConfig:
    return load_config(args.config)


def _escape(args: argparse.Namespace, config: HelperConfig) -> bool:
    return config.escape and not args.no_escape


def _emit(markup: str, out: Optional[Path]) -> None:
    if out is None:
        print(markup)
        return
    write_text(out, markup + "\n")


def _handle_tag(args: argparse.Namespace) -> None:
    config = _config(args)
    style = TagStyle.HTML4 if args.html4 else config.style
    _emit(tag(args.name, _load_attrs(args.attrs), style, _escape(args, config)), args.out)


def _handle_content_tag(args: argparse.Namespace) -> None:
    config = _config(args)
    markup = content_tag(args.name, args.content, _load_attrs(args.attrs), _escape(args, config))
    _emit(markup, args.out)


def _handle_javascript(args: argparse.Namespace) -> None:
    config = _config(args)
    markup = javascript_include_tag(*args.sources, options=_load_attrs(args.attrs), config=config)
    _emit(markup, args.out)


def _handle_render(args: argparse.Namespace) -> None:
    config = _config(args)
    template_path = Path(args.template)
    template_dirs = [Path(args.templates)] if args.templates else [template_path.parent]
    name = args.template if args.templates else template_path.name

    context = load_json_argument(args.context) or {}
    if not isinstance(context, dict):
        raise SystemExit("--context must be a JSON object.")

    env = helper_env(template_dirs, config)
    rendered = env.get_template(name).render(**context)
    _emit(rendered, args.out)


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write markup to this file instead of stdout.",
    )


def _add_attr_args(parser: argparse.ArgumentParser, *, escape_flag: bool = True) -> None:
    parser.add_argument(
        "--attrs",
        default=None,
        help="Attributes as a JSON object, or @path to a JSON file.",
    )
    if escape_flag:
        parser.add_argument(
            "--no-escape",
            action="store_true",
            help="Embed attribute values and content without HTML escaping.",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taghelpers",
        description="Render HTML tags from attribute data.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="taghelpers 0.1.0",
        help="Show the taghelpers version and exit.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML settings file.",
    )

    subparsers = parser.add_subparsers(dest="command")

    tag_parser = subparsers.add_parser(
        "tag",
        help="Render an empty element such as <br />.",
        description="Render an empty element from a name and attributes.",
    )
    tag_parser.add_argument("name", help="Element name, e.g. br or input.")
    _add_attr_args(tag_parser)
    tag_parser.add_argument(
        "--html4",
        action="store_true",
        help="Render <br> instead of <br />.",
    )
    _add_output_args(tag_parser)
    tag_parser.set_defaults(func=_handle_tag)

    content_parser = subparsers.add_parser(
        "content-tag",
        help="Render an element wrapping text content.",
        description="Render <name attrs>content</name>.",
    )
    content_parser.add_argument("name", help="Element name, e.g. p or div.")
    content_parser.add_argument("content", nargs="?", default="", help="Element text.")
    _add_attr_args(content_parser)
    _add_output_args(content_parser)
    content_parser.set_defaults(func=_handle_content_tag)

    js_parser = subparsers.add_parser(
        "javascript",
        help="Render <script> include tags.",
        description="Render one <script> tag per source, joined by newlines.",
    )
    js_parser.add_argument("sources", nargs="+", help="Script names or URIs.")
    _add_attr_args(js_parser, escape_flag=False)
    _add_output_args(js_parser)
    js_parser.set_defaults(func=_handle_javascript)

    render_parser = subparsers.add_parser(
        "render",
        help="Render a Jinja template with the tag helpers available.",
        description="Render a template; tag, content_tag and javascript_include_tag are globals.",
    )
    render_parser.add_argument("template", help="Template path, or name under --templates.")
    render_parser.add_argument(
        "--templates",
        default=None,
        help="Template directory; TEMPLATE is then looked up inside it.",
    )
    render_parser.add_argument(
        "--context",
        default=None,
        help="Template variables as a JSON object, or @path to a JSON file.",
    )
    _add_output_args(render_parser)
    render_parser.set_defaults(func=_handle_render)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
