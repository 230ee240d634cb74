"""Entry point for python -m ticktty."""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import load_config
from .durations import DurationError, parse_duration
from .fonts import FONTS
from .layout import DisplayStyle
from .log import setup_logging
from .notifications import notify_finished
from .ui import DEFAULT_LABEL, FINISHED, AppState, Mode, run_ui

logger = logging.getLogger(__name__)

console = Console()


def duration_arg(value: str) -> int:
    """argparse type for the DURATION argument."""
    try:
        return parse_duration(value)
    except DurationError as exc:
        logger.debug("Rejected duration %r: %s", value, exc)
        raise argparse.ArgumentTypeError("Invalid duration format") from exc


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="ticktty",
        description="Terminal Timer - a CLI clock and countdown timer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  q        Quit
  d/a/t    Digital, analog or text style
  f        Cycle font (digital)
  g        Toggle Nerd Font glyphs (analog)
  r        Reset timer
  Space    Start/Pause timer

Examples:
  ticktty                  # Start clock
  ticktty 10s              # Start 10s timer
  ticktty 5m -s analog     # Start 5m timer with analog style
  ticktty "1h 30m" -l Tea  # Labelled timer
""",
    )

    parser.add_argument(
        "duration",
        nargs="?",
        type=duration_arg,
        metavar="DURATION",
        help='Duration for timer (e.g. 10s, 1m, "1h 30m"); omit for a clock',
    )
    parser.add_argument(
        "-s",
        "--style",
        choices=[style.value for style in DisplayStyle],
        help="Style of display (default: last used, or digital)",
    )
    parser.add_argument(
        "-l",
        "--label",
        metavar="TEXT",
        help=f"Label for the timer (default: {DEFAULT_LABEL})",
    )

    # Notifications
    parser.add_argument(
        "--no-notify",
        action="store_true",
        help="Disable notifications (bell and system) when the timer ends",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write debug logs to PATH",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def build_state(args: argparse.Namespace) -> AppState:
    """Merge command line options over saved preferences."""
    config = load_config()
    style = args.style or config.style
    return AppState(
        mode=Mode.TIMER if args.duration else Mode.CLOCK,
        style=DisplayStyle(style),
        font_index=config.font_index % len(FONTS),
        use_glyphs=config.use_glyphs,
        label=args.label or DEFAULT_LABEL,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    if args.log_file:
        setup_logging(args.log_file)

    state = build_state(args)
    logger.info("Starting in %s mode, style %s", state.mode.name, state.style.value)

    try:
        result = run_ui(state, args.duration)
    except KeyboardInterrupt:
        result = None

    if result == FINISHED:
        console.print(f"[cyan]{escape(state.label)}[/cyan] finished.")
        if not args.no_notify:
            notify_finished(state.label)

    return 0


if __name__ == "__main__":
    sys.exit(main())
