import argparse
import logging
import math
from pathlib import Path

from arcus.arc import Arc
from arcus.config import reload_config
from arcus.stream import bits, read_arc, write_arc

_logger = logging.getLogger(__name__)


def build_arc(args: argparse.Namespace) -> Arc:
    if args.read:
        with open(args.read, "rb") as f:
            return read_arc(f)
    if args.sincos:
        return Arc.from_sincos(*args.sincos)
    if args.value is None:
        return Arc.zero()
    if args.degrees:
        return Arc.from_degrees(args.value)
    if args.raw:
        return Arc.from_raw(args.value)
    return Arc(args.value)


def describe(arc: Arc) -> list[str]:
    s, c = arc.sincos()
    return [
        f"arc      {arc}",
        f"radians  {arc.radians!r}",
        f"degrees  {arc.degrees!r}",
        f"raw      {arc.raw!r}",
        f"bits     {bits(arc)}",
        f"sin      {s!r}",
        f"cos      {c!r}",
        f"tan      {arc.tan()!r}",
        f"cot      {arc.cot()!r}",
        f"sec      {arc.sec()!r}",
        f"csc      {arc.csc()!r}",
    ]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect packed angles")
    parser.add_argument("value", nargs="?", type=float, help="Angle, radians unless --degrees")
    unit = parser.add_mutually_exclusive_group()
    unit.add_argument("--degrees", action="store_true", help="VALUE is given in degrees")
    unit.add_argument("--raw", action="store_true", help="VALUE is an already packed float")
    unit.add_argument("--sincos", nargs=2, type=float, metavar=("S", "C"),
                      help="Build the angle from a sine/cosine pair")
    unit.add_argument("--read", type=Path, metavar="FILE", help="Read 8 packed bytes from FILE")
    parser.add_argument("--write", type=Path, metavar="FILE", help="Write the 8 packed bytes to FILE")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--unit", choices=("rad", "deg"), help="Display unit for the arc line")
    parser.add_argument("--digits", type=int, help="Decimals shown on the arc line")
    parser.add_argument("--save-config", metavar="FILE", help="Write the effective configuration to FILE")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    if args.value is not None and (args.sincos or args.read):
        parser.error("VALUE cannot be combined with --sincos or --read")

    config = reload_config(args.config)
    try:
        if args.unit is not None:
            config.set("display", "unit", args.unit)
        if args.digits is not None:
            config.set("display", "digits", args.digits)
    except ValueError as e:
        parser.error(str(e))
    if args.save_config:
        config.save_config(args.save_config)
        _logger.info("Saved configuration to %s", args.save_config)

    try:
        arc = build_arc(args)
    except (ValueError, EOFError, OSError) as e:
        parser.error(str(e))

    if math.isnan(arc.raw):
        _logger.warning("Input does not denote a finite angle")

    for line in describe(arc):
        print(line)

    if args.write:
        with open(args.write, "wb") as f:
            write_arc(f, arc)
        _logger.info("Stored %s in %s", arc, args.write)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
