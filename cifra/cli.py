#!/usr/bin/env python3
"""
Cifra CLI entry point: translate text, print the reference table, or open the window
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import traceback

from cifra.__version__ import __version__
from cifra.core.maps import ROW_GROUPS
from cifra.core.translator import Direction, translate
from cifra.log import setup_logging

logger = logging.getLogger(__name__)


def _direction_arg(value: str) -> Direction:
    try:
        return Direction.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cifra',
        description='Cipher translator - convert between keyboard symbols and letters',
        epilog="Text may start with '-' (the symbol for z): cifra -d '-!' or cifra -d -- '-!'",
        allow_abbrev=False,
    )
    parser.add_argument(
        'text',
        nargs='*',
        help='Text to translate (read from stdin when omitted)'
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        '-d', '--decipher',
        dest='direction',
        action='store_const',
        const=Direction.SYMBOL_TO_LETTER,
        help='Symbols → letters'
    )
    mode.add_argument(
        '-c', '--cipher',
        dest='direction',
        action='store_const',
        const=Direction.LETTER_TO_SYMBOL,
        help='Letters → symbols'
    )
    mode.add_argument(
        '--direction',
        dest='direction',
        type=_direction_arg,
        metavar='NAME',
        help='symbol_to_letter | letter_to_symbol (or decipher | cipher)'
    )
    parser.add_argument(
        '--table',
        action='store_true',
        help='Print the symbol → letter reference table'
    )
    parser.add_argument(
        '--gui',
        action='store_true',
        help='Open the symbol keyboard window'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode with verbose logging'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to config file (default: ~/.config/cifra/config.json)'
    )
    parser.add_argument(
        '--logfile',
        type=str,
        default=None,
        help='Path to log file (default: ~/.cifra.log)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__
    )
    return parser


def _text_after_options(parser: argparse.ArgumentParser, argv: list[str]) -> list[str]:
    """Move every token that is not a known option (or its value) behind ``--``.

    Cipher text can start with ``-`` (the symbol for z), and argparse would
    reject such a token as an unrecognized option. Word order is kept.
    """
    options: list[str] = []
    text: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == '--':
            text.extend(tokens)
            break
        action = parser._option_string_actions.get(token.split('=', 1)[0])
        if not token.startswith('-') or action is None:
            text.append(token)
            continue
        options.append(token)
        if action.nargs != 0 and '=' not in token:
            value = next(tokens, None)
            if value is not None:
                options.append(value)
    return options + ['--'] + text if text else options


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(_text_after_options(parser, argv))


def format_table() -> str:
    """Render ROW_GROUPS as text blocks, one per keyboard row."""
    blocks = []
    for group in ROW_GROUPS:
        items = '  '.join(f'{item.symbol} → {item.letter}' for item in group.items)
        blocks.append(f'{group.name}\n  {items}')
    return '\n\n'.join(blocks)


def _translate_stream(stream, out, direction: Direction) -> None:
    for line in stream:
        out.write(translate(line, direction))
    out.flush()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for Cifra"""
    args = parse_args(argv)

    log = setup_logging(debug=args.debug, log_file=args.logfile)
    log.debug("Cifra %s started (PID %d)", __version__, os.getpid())

    from cifra.config import ConfigManager

    try:
        config = ConfigManager(args.config, debug=args.debug)
    except Exception as e:
        log.error("Failed to load config: %s", e)
        log.debug(traceback.format_exc())
        return 1

    direction = args.direction or config.default_direction
    log.debug("Direction: %s", direction.value)

    try:
        if args.table:
            print(format_table())

        if args.gui:
            from cifra.app import CifraApp

            app = CifraApp(debug=args.debug, config_path=args.config)
            if args.direction is not None:
                app.session.switch_direction(direction)
            if args.text:
                app.session.set_input(' '.join(args.text))
            return app.run()

        if args.text:
            print(translate(' '.join(args.text), direction))
        elif not args.table:
            _translate_stream(sys.stdin, sys.stdout, direction)
        return 0

    except KeyboardInterrupt:
        log.info("Cifra terminated by user (Ctrl+C)")
        return 130

    except BrokenPipeError:
        log.debug("Broken pipe - output was closed")
        return 1

    except ImportError as e:
        log.error("GUI unavailable: %s (install PyQt5)", e)
        log.debug(traceback.format_exc())
        return 1

    except Exception as e:
        log.error("Unhandled error: %s: %s", type(e).__name__, e)
        log.debug(traceback.format_exc())
        return 1


if __name__ == '__main__':
    sys.exit(main())
