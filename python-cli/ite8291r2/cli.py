"""
ITE 8291r2 - CLI entry point (argparse).
"""

import argparse
import logging

from ite8291r2 import __version__
from ite8291r2.effects import EFFECTS, EFFECT_ALIASES, EffectArgumentError, build_effect
from ite8291r2.values import parse_brightness, parse_color, parse_direction, parse_speed


def _arg_type(parse, metavar):
    """Adapt a values.parse_* function to argparse's type= protocol."""
    def convert(text):
        try:
            return parse(text)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
    convert.__name__ = metavar
    return convert


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ite8291r2-ctl",
        description="ITE 8291r2 keyboard backlight controller - USB HID lighting control",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every packet sent")

    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("-e", "--effect", type=str.lower,
                        choices=list(EFFECTS) + list(EFFECT_ALIASES),
                        metavar="{" + ",".join(EFFECTS) + "}",
                        help="Keyboard backlight effect")
    action.add_argument("--list", action="store_true",
                        help="List effects and the options they require")
    action.add_argument("--scan", action="store_true",
                        help="Show matching HID interfaces")

    parser.add_argument("-S", "--save", action="store_true",
                        help="Save the setting on the keyboard")
    parser.add_argument("-b", "--brightness", type=_arg_type(parse_brightness, "brightness"),
                        help="Brightness level (1-5, default 3)")
    parser.add_argument("-c", "--color", type=_arg_type(parse_color, "color"),
                        help="red, green, blue or #RRGGBB (mono)")
    parser.add_argument("-d", "--direction", type=_arg_type(parse_direction, "direction"),
                        help="left or right (wave, flash)")
    parser.add_argument("-s", "--speed", type=_arg_type(parse_speed, "speed"),
                        help="Speed level (1-5, 5 is fastest; breath, wave, flash, mix)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from ite8291r2.commands import cmd_apply, cmd_list, cmd_scan

    if args.list:
        return cmd_list()
    if args.scan:
        return cmd_scan()

    try:
        effect = build_effect(
            args.effect,
            brightness=args.brightness,
            save=args.save,
            color=args.color,
            speed=args.speed,
            direction=args.direction,
        )
    except EffectArgumentError as e:
        parser.error(str(e))

    return cmd_apply(effect)
