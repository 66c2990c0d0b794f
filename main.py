"""
BlurHash Studio
Compact image placeholders: decode, encode and validate blurhash tokens.
"""

import argparse
import sys

from utils.log import setup_logging, get_logger

log = get_logger("cli")


def cmd_decode(args) -> int:
    """Decode a token to a PNG, or print a summary."""
    from models.decode_params import DecodeParams
    from engines.pipeline import decode_blurhash, estimate_compression
    from utils.image_io import save_image

    params = DecodeParams(width=args.width, height=args.height, punch=args.punch)
    result = decode_blurhash(args.token, params, strict=not args.lenient)
    components = result.components

    if args.output:
        save_image(result.to_array(), args.output)
        print(f"Saved: {args.output} ({result.width}x{result.height})")
        return 0

    stats = estimate_compression(args.token, result.width, result.height)
    r, g, b = components.dc_rgb
    print(f"Grid:      {components.num_x}x{components.num_y}")
    print(f"Max AC:    {components.max_ac:.4f}")
    print(f"Average:   #{r:02x}{g:02x}{b:02x}")
    print(f"Preview:   {result.width}x{result.height} ({len(result.pixels)} bytes)")
    print(f"Ratio:     {stats['compression_ratio']:.1f}:1")
    print(f"Time:      {result.decode_time_ms:.2f} ms")
    return 0


def cmd_encode(args) -> int:
    """Encode an image file (or a synthetic image) to a token."""
    from models.encode_params import EncodeParams
    from engines.pipeline import encode, placeholder_fidelity
    from utils.config import load_settings
    from utils.image_io import load_image
    from utils.test_images import generate_demo_image

    settings = load_settings()
    if not settings.enabled:
        print("BlurHash encoding is disabled (BLURHASH_ENABLED)", file=sys.stderr)
        return 1

    params = EncodeParams(
        components_x=args.components_x if args.components_x is not None else settings.component_x,
        components_y=args.components_y if args.components_y is not None else settings.component_y,
    )

    if args.synthetic:
        image = generate_demo_image(args.image)
        if image is None:
            print(f"Error: unknown synthetic image '{args.image}'", file=sys.stderr)
            return 2
    else:
        image = load_image(args.image)

    token = encode(image, params)
    print(token)

    if args.report:
        metrics = placeholder_fidelity(image, token, params=params)
        print(f"PSNR (Y):  {metrics['psnr_y']:.2f} dB")
        print(f"SSIM (Y):  {metrics['ssim_y']:.4f}")
    return 0


def cmd_validate(args) -> int:
    """Print valid/invalid per token; non-zero exit if any is invalid."""
    from engines.pipeline import is_valid

    all_valid = True
    for token in args.tokens:
        ok = is_valid(token)
        all_valid = all_valid and ok
        print(f"{'valid' if ok else 'invalid'}\t{token}")
    return 0 if all_valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blurhash-studio",
        description="Decode, encode and validate blurhash placeholders.",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--json-logs", action="store_true", help="Log as JSON lines")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("decode", help="Decode a token")
    p.add_argument("token")
    p.add_argument("-W", "--width", type=int, default=32)
    p.add_argument("-H", "--height", type=int, default=32)
    p.add_argument("--punch", type=float, default=1.0)
    p.add_argument("--lenient", action="store_true",
                   help="Ignore characters beyond the declared grid")
    p.add_argument("-o", "--output", help="Write the preview as PNG")
    p.set_defaults(func=cmd_decode)

    p = sub.add_parser("encode", help="Encode an image")
    p.add_argument("image", help="Image path, or a synthetic key with --synthetic")
    p.add_argument("-x", "--components-x", type=int, default=None)
    p.add_argument("-y", "--components-y", type=int, default=None)
    p.add_argument("--synthetic", action="store_true",
                   help="solid, checkerboard, split, gradient or chroma_stripes")
    p.add_argument("--report", action="store_true", help="Print placeholder PSNR/SSIM")
    p.set_defaults(func=cmd_encode)

    p = sub.add_parser("validate", help="Check token lengths")
    p.add_argument("tokens", nargs="+")
    p.set_defaults(func=cmd_validate)

    return parser


def main(argv=None) -> int:
    from utils.config import load_settings

    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    setup_logging(args.log_level or settings.log_level, json_format=args.json_logs)

    try:
        return args.func(args)
    except ValueError as e:
        # BlurHashError and parameter validation both land here
        log.debug("command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
