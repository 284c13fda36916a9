"""
Command line entry point.

Examples:
  tagcloud generate -i words.txt
  tagcloud generate -i words.txt -o cloud.png -w 1200 -h 900
  tagcloud generate -i words.txt --color-scheme Frequency --max-font 80
  tagcloud generate -i words.txt --stop-words stopwords.txt
"""

import argparse
import sys
from typing import List, Optional

from .colors import parse_color
from .config import CloudConfig
from .exceptions import TagCloudError
from .pipeline import generate_tag_cloud
from .render import INDIGO
from .tags import COLOR_SCHEMES
from .text import load_stop_words


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tagcloud",
        description="Generates a tag cloud image from a text file with one word per line.",
    )
    sub = ap.add_subparsers(dest="command")

    # -h is the image height here, so the generate help lives on --help only
    gen = sub.add_parser("generate", add_help=False, help="Generate a tag cloud")
    gen.add_argument("--help", action="help", help="Show this help message and exit")
    gen.add_argument("-i", "--input", required=True,
                     help="Input text file with one word per line")
    gen.add_argument("-o", "--output", default="tagcloud.png",
                     help="Output image file name")
    gen.add_argument("--output-dir", default="out",
                     help="Directory the image is written to")
    gen.add_argument("-w", "--width", type=int, default=1200,
                     help="Image width in pixels")
    gen.add_argument("-h", "--height", type=int, default=900,
                     help="Image height in pixels")
    gen.add_argument("--auto-size", action="store_true",
                     help="Size the image to the cloud instead of --width/--height")
    gen.add_argument("--font", default="Arial",
                     help="Font family name or TrueType file")
    gen.add_argument("--min-font", type=int, default=20,
                     help="Minimum font size")
    gen.add_argument("--max-font", type=int, default=70,
                     help="Maximum font size")
    gen.add_argument("--bg-color", default="",
                     help="Background color (name, hex, R,G,B or A,R,G,B)")
    gen.add_argument("--color-scheme", default="Random", choices=list(COLOR_SCHEMES),
                     help="Word color scheme")
    gen.add_argument("--center-x", type=int, default=None,
                     help="Cloud center X (default: image center)")
    gen.add_argument("--center-y", type=int, default=None,
                     help="Cloud center Y (default: image center)")
    gen.add_argument("--stop-words", default=None,
                     help="File with stop words, one per line")
    gen.add_argument("--no-lowercase", action="store_true",
                     help="Do not convert words to lowercase")
    gen.add_argument("--seed", type=int, default=None,
                     help="Seed for the random color scheme")
    gen.add_argument("--debug", action="store_true",
                     help="Also save a copy with word rectangles outlined")

    sub.add_parser("help", help="Display help information")
    return ap


def config_from_args(args: argparse.Namespace) -> CloudConfig:
    background = parse_color(args.bg_color) or INDIGO
    image_size = None if args.auto_size else (args.width, args.height)
    if image_size is not None and (args.width <= 0 or args.height <= 0):
        raise ValueError(f"Image size must be positive, got {args.width}x{args.height}")

    center = None
    if args.center_x is not None or args.center_y is not None:
        if image_size is not None:
            default_x, default_y = args.width // 2, args.height // 2
        else:
            default_x, default_y = 0, 0
        center = (
            args.center_x if args.center_x is not None else default_x,
            args.center_y if args.center_y is not None else default_y,
        )

    return CloudConfig(
        input_file=args.input,
        output_file=args.output,
        output_dir=args.output_dir,
        font_family=args.font,
        min_font_size=args.min_font,
        max_font_size=args.max_font,
        image_size=image_size,
        background_color=background,
        color_scheme=args.color_scheme,
        center=center,
        stop_words=load_stop_words(args.stop_words),
        to_lower=not args.no_lowercase,
        seed=args.seed,
        debug_output=args.debug,
    )


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.command != "generate":
        ap.print_help()
        return 0

    try:
        config = config_from_args(args)
        path, _ = generate_tag_cloud(config)
    except (TagCloudError, OSError, ValueError) as exc:
        print(f"\nError: {exc}", file=sys.stderr)
        return 1

    print(f"\nSuccess! Tag cloud saved to:\n   {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
