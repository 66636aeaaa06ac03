import argparse
import logging
import os
import random

from . import config
from .color import format_color, hex_to_oklch, normalize_hex
from .contrast import contrast_matrix, readability_report
from .errors import PaletteEngineError
from .export import (
    EXPORT_FORMATS,
    LinearGradient,
    export_json,
    export_palette,
    gradient_css,
    gradient_svg,
    gradient_tailwind,
    render_gradient_png,
    render_palette_png,
    render_palette_svg,
    stops_from_palette,
)
from .export.image import LABELS, LAYOUTS, SIZE_WIDTHS
from .naming import NameDatabase, get_color_name, load_corpus_file
from .naming.database import css_colors
from .palette import extract_colors
from .presets import PALETTE_PRESETS, generate_preset_palette, get_preset
from .relationships import COLOR_RELATIONSHIPS, generate_related_color
from .share import decode_share_url, encode_share_url
from .storage import PaletteStore
from .variations import generate_shades, generate_tints, generate_tones

VARIATIONS = {"tints": generate_tints, "shades": generate_shades, "tones": generate_tones}


class UsageError(PaletteEngineError):
    """Arguments that parse but cannot be combined."""


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.data_dir:
        os.environ[config.DATA_DIR_ENV] = args.data_dir

    rng = random.Random(args.seed) if args.seed is not None else random
    try:
        args.func(args, rng)
    except PaletteEngineError as e:
        parser.error(str(e))


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="palette-engine",
        description="Color math, palette generation and export",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    parser.add_argument(
        "--data-dir",
        metavar="DIR",
        default=None,
        help=f"Saved palette directory (default: ${config.DATA_DIR_ENV} or ~/.palette-engine)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("convert", help="Show a color in every color space")
    p.add_argument("color")
    p.set_defaults(func=_cmd_convert)

    modes = ", ".join(value.value for value, _, _ in COLOR_RELATIONSHIPS)
    p = sub.add_parser("related", help=f"Generate a related color ({modes})")
    p.add_argument("mode")
    p.add_argument("references", nargs="*", metavar="REF")
    p.add_argument("--fallback", metavar="HEX", default=None)
    p.add_argument("--count", type=int, default=1)
    p.set_defaults(func=_cmd_related)

    p = sub.add_parser("preset", help="Generate a palette from a preset")
    p.add_argument("preset_id", metavar="ID")
    p.add_argument("--count", type=int, default=config.DEFAULT_PRESET_COUNT)
    p.set_defaults(func=_cmd_preset)

    p = sub.add_parser("presets", help="List the preset catalog")
    p.set_defaults(func=_cmd_presets)

    p = sub.add_parser("variations", help="Tints, shades or tones of a color")
    p.add_argument("color")
    p.add_argument("--kind", choices=sorted(VARIATIONS), default="tints")
    p.add_argument("--count", type=int, default=config.DEFAULT_VARIATION_COUNT)
    p.set_defaults(func=_cmd_variations)

    p = sub.add_parser("name", help="Nearest color name")
    p.add_argument("color")
    p.add_argument("--corpus", metavar="PATH", default=None, help="JSON name corpus")
    p.set_defaults(func=_cmd_name)

    p = sub.add_parser("contrast", help="WCAG readability report")
    p.add_argument("colors", nargs="+", metavar="HEX")
    p.set_defaults(func=_cmd_contrast)

    p = sub.add_parser("export", help="Export a palette")
    p.add_argument("format", choices=[f.value for f in EXPORT_FORMATS])
    p.add_argument("colors", nargs="+", metavar="HEX")
    p.add_argument("--output", "-o", metavar="PATH", default=None)
    p.add_argument(
        "--metadata",
        action="store_true",
        help="With json: include names, preset and contrast metadata",
    )
    p.set_defaults(func=_cmd_export)

    p = sub.add_parser("image", help="Render the palette as PNG or SVG")
    p.add_argument("colors", nargs="+", metavar="HEX")
    p.add_argument("--output", "-o", metavar="PATH", required=True)
    p.add_argument("--layout", choices=LAYOUTS, default="horizontal")
    p.add_argument("--labels", choices=LABELS, default="hex")
    p.add_argument("--size", choices=list(SIZE_WIDTHS), default="medium")
    p.set_defaults(func=_cmd_image)

    p = sub.add_parser("gradient", help="Linear gradient through the palette")
    p.add_argument("colors", nargs="+", metavar="HEX")
    p.add_argument("--angle", type=float, default=90)
    p.add_argument("--format", choices=["css", "svg", "tailwind", "png"], default="css")
    p.add_argument("--aspect", type=float, default=16 / 9)
    p.add_argument("--output", "-o", metavar="PATH", default=None)
    p.set_defaults(func=_cmd_gradient)

    p = sub.add_parser("extract", help="Dominant colors of an image")
    p.add_argument("image")
    p.add_argument("--count", type=int, default=config.DEFAULT_PRESET_COUNT)
    p.set_defaults(func=_cmd_extract)

    p = sub.add_parser("share", help="Build a share URL")
    p.add_argument("colors", nargs="+", metavar="HEX")
    p.add_argument("--locked", default=None, help="Comma-separated 1/0 flags per color")
    p.add_argument("--base", default=None, help="Base URL")
    p.set_defaults(func=_cmd_share)

    p = sub.add_parser("open", help="Decode a share URL")
    p.add_argument("url")
    p.set_defaults(func=_cmd_open)

    p = sub.add_parser("save", help="Save a palette")
    p.add_argument("colors", nargs="+", metavar="HEX")
    p.add_argument("--name", default=None)
    p.set_defaults(func=_cmd_save)

    p = sub.add_parser("saved", help="List saved palettes")
    p.add_argument("--remove", metavar="ID", default=None)
    p.set_defaults(func=_cmd_saved)

    return parser


def _colors(values):
    return [normalize_hex(v) for v in values]


def _write_output(path, content):
    mode = "wb" if isinstance(content, bytes) else "w"
    with open(path, mode) as f:
        f.write(content)
    print(f"Exported: {path}")


def _cmd_convert(args, rng):
    color = normalize_hex(args.color)
    lch = hex_to_oklch(color)
    print(format_color(color, "hex"))
    print(format_color(color, "rgb"))
    print(format_color(color, "hsl"))
    print(f"oklch({lch.l:.1f}% {lch.c:.3f} {lch.h:.1f})")


def _cmd_related(args, rng):
    references = _colors(args.references)
    fallback = normalize_hex(args.fallback) if args.fallback else None
    for _ in range(args.count):
        print(generate_related_color(references, args.mode, fallback=fallback, rng=rng))


def _cmd_preset(args, rng):
    preset = get_preset(args.preset_id)
    for color in generate_preset_palette(preset, args.count, rng=rng):
        print(color)


def _cmd_presets(args, rng):
    for p in PALETTE_PRESETS:
        print(
            f"{p.id:12} {p.label:12} h{p.hue[0]}-{p.hue[1]} "
            f"s{p.saturation[0]}-{p.saturation[1]} l{p.lightness[0]}-{p.lightness[1]}  "
            f"{p.description}"
        )


def _cmd_variations(args, rng):
    for color in VARIATIONS[args.kind](normalize_hex(args.color), args.count):
        print(color)


def _cmd_name(args, rng):
    color = normalize_hex(args.color)
    if args.corpus:
        names = NameDatabase(load_corpus_file(args.corpus))
        result = get_color_name(color, names=names, css=NameDatabase(css_colors()))
    else:
        result = get_color_name(color)
    if result.css_name:
        print(f"{color}  {result.name} (css: {result.css_name})")
    else:
        print(f"{color}  {result.name}")


def _cmd_contrast(args, rng):
    colors = _colors(args.colors)
    report, _ = readability_report(colors)
    print(report)

    if len(colors) > 1:
        print("\nPAIRWISE CONTRAST")
        print(" " * 8 + "".join(f"{c:>10}" for c in colors))
        for color, row in zip(colors, contrast_matrix(colors)):
            print(f"{color:8}" + "".join(f"{ratio:>9.2f}:" for ratio, _ in row))


def _cmd_export(args, rng):
    colors = _colors(args.colors)
    if args.metadata:
        if args.format != "json" or not args.output:
            raise UsageError("--metadata needs the json format and --output")
        export_json(colors, args.output)
        print(f"Exported: {args.output}")
        return

    content = export_palette(colors, args.format)
    if args.output:
        _write_output(args.output, content)
    elif isinstance(content, bytes):
        raise UsageError(f"{args.format} is a binary format, use --output")
    else:
        print(content)


def _cmd_image(args, rng):
    colors = _colors(args.colors)
    renderer = render_palette_svg if args.output.lower().endswith(".svg") else render_palette_png
    _write_output(
        args.output,
        renderer(colors, layout=args.layout, labels=args.labels, size=args.size),
    )


def _cmd_gradient(args, rng):
    gradient = LinearGradient(args.angle, stops_from_palette(_colors(args.colors)))
    if args.format == "png":
        if not args.output:
            raise UsageError("png gradients need --output")
        _write_output(args.output, render_gradient_png(gradient, args.aspect))
        return

    if args.format == "css":
        content = f"background: {gradient_css(gradient)};"
    elif args.format == "svg":
        content = gradient_svg(gradient, args.aspect)
    else:
        tailwind = gradient_tailwind(gradient)
        if tailwind.warning:
            print(f"warning: {tailwind.warning}")
        content = tailwind.css

    if args.output:
        _write_output(args.output, content)
    else:
        print(content)


def _cmd_extract(args, rng):
    print(f"Analyzing: {args.image}")
    for color in extract_colors(args.image, args.count):
        print(color)


def _cmd_share(args, rng):
    colors = _colors(args.colors)
    if args.locked:
        locked = [flag.strip() == "1" for flag in args.locked.split(",")]
    else:
        locked = [False] * len(colors)
    print(encode_share_url(colors, locked, args.base or config.share_base_url()))


def _cmd_open(args, rng):
    shared = decode_share_url(args.url)
    if shared is None:
        raise UsageError("no colors in share URL")
    for color, locked in zip(shared.colors, shared.locked):
        print(f"{color}  {'locked' if locked else ''}".rstrip())


def _cmd_save(args, rng):
    saved = PaletteStore().save(_colors(args.colors), args.name)
    print(f"Saved {saved.name} ({saved.id})")


def _cmd_saved(args, rng):
    store = PaletteStore()
    if args.remove:
        store.remove(args.remove)
        print(f"Removed {args.remove}")
        return
    palettes = store.list()
    if not palettes:
        print("No saved palettes")
    for p in palettes:
        print(f"{p.id}  {p.name:24} {' '.join(p.colors)}")


if __name__ == "__main__":
    main()
