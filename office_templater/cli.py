"""Command line entry point.

Usage:
    office-templater text deck.pptx [--slide N]
    office-templater render deck.pptx out.pptx --set "{{name}}=Ada" \\
        [--values values.json] [--picture "{{logo}}=logo.png"] [--literal]

``.docx`` files are handled the same way, without the slide options.
"""

from __future__ import annotations

import argparse
import json
import logging
import mimetypes
import sys
from pathlib import Path

from office_templater.config import get_settings
from office_templater.document import DocxTemplate
from office_templater.errors import AssetNotFoundError, TemplaterError
from office_templater.presentation import PptxTemplate

logger = logging.getLogger("office_templater")


def setup_logging(level: str | None = None) -> None:
    level = level or get_settings().log_level
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level, logging.INFO))


def _pair(raw: str) -> tuple[str, str]:
    tag, sep, value = raw.partition("=")
    if not sep or not tag:
        raise argparse.ArgumentTypeError(f"expected TAG=VALUE, got {raw!r}")
    return tag, value


def _is_docx(path: Path) -> bool:
    return path.suffix.lower() == ".docx"


def cmd_text(args: argparse.Namespace) -> int:
    path = Path(args.file)
    if _is_docx(path):
        for text in DocxTemplate.open(str(path)).get_all_text():
            print(json.dumps({"text": text}, ensure_ascii=False))
        return 0

    template = PptxTemplate.open(str(path))
    slides = [args.slide] if args.slide is not None else range(template.count_slides())
    for slide in slides:
        for text in template.get_all_text(slide):
            print(json.dumps({"slide": slide, "text": text}, ensure_ascii=False))
    return 0


def _load_values(args: argparse.Namespace) -> dict[str, str]:
    values: dict[str, str] = {}
    if args.values:
        data = json.loads(Path(args.values).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise SystemExit(f"{args.values}: expected a JSON object of tag -> value")
        values.update({str(k): str(v) for k, v in data.items()})
    values.update(dict(args.set))
    return values


def cmd_render(args: argparse.Namespace) -> int:
    src = Path(args.template)
    # None falls back to the literal_tags setting.
    literal = args.literal or None
    values = _load_values(args)

    if _is_docx(src):
        if args.picture:
            raise SystemExit("--picture is only supported for .pptx templates")
        doc = DocxTemplate.open(str(src))
        total = sum(doc.replace_tag(tag, value, literal=literal).total for tag, value in values.items())
        doc.save(args.output)
        print(f"Saved to {args.output} ({total} replacements)")
        return 0

    deck = PptxTemplate.open(str(src))
    total = 0
    for tag, value in values.items():
        total += sum(r.total for r in deck.replace_tag_in_all_slides(tag, value, literal=literal))
    for tag, picture_path in args.picture:
        media_type = mimetypes.guess_type(picture_path)[0] or "application/octet-stream"
        with open(picture_path, "rb") as fh:
            for slide in range(deck.count_slides()):
                try:
                    deck.replace_picture(slide, tag, fh, media_type)
                except AssetNotFoundError as e:
                    logger.debug("slide %d: %s", slide, e)
    deck.save(args.output)
    print(f"Saved to {args.output} ({total} replacements)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="office-templater", description=__doc__.splitlines()[0])
    parser.add_argument("--log-level", default=None, help="Override OFFICE_TEMPLATER_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    text = sub.add_parser("text", help="Print the text of every paragraph as JSON lines")
    text.add_argument("file")
    text.add_argument("--slide", type=int, default=None)
    text.set_defaults(func=cmd_text)

    render = sub.add_parser("render", help="Fill tags and pictures, then save a copy")
    render.add_argument("template")
    render.add_argument("output")
    render.add_argument("--set", type=_pair, action="append", default=[], metavar="TAG=VALUE")
    render.add_argument("--values", default=None, help="JSON object mapping tags to values")
    render.add_argument("--picture", type=_pair, action="append", default=[], metavar="TAG=PATH")
    render.add_argument("--literal", action="store_true", help="Match tags literally, not as regexes")
    render.set_defaults(func=cmd_render)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level.upper() if args.log_level else None)
    try:
        return args.func(args)
    except TemplaterError as e:
        logger.error("%s: %s", e.code, e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
