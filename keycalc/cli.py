#!/usr/bin/env python3
"""
KeyCalc CLI entry point with file + console logging
"""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import os
import signal
import sys
import traceback
from pathlib import Path

from keycalc.__version__ import __version__
from keycalc.config import THEME_NAMES
from keycalc.log import level_for

LOG_FORMAT = '[%(asctime)s] %(levelname)-8s %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
DEFAULT_LOG_FILE = '~/.keycalc.log'


def setup_logging(debug: bool = False, log_file: str | None = None, trace: bool = False) -> logging.Logger:
    """Setup logging to both console and file

    Args:
        debug: Enable debug level logging
        log_file: Path to log file (default: ~/.keycalc.log)
        trace: Also log every key press and ignored event (implies debug)
    """
    level = level_for(debug, trace)
    logger = logging.getLogger('keycalc')
    logger.setLevel(level)

    # Reconfiguring (e.g. a second main() call in one process) replaces handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is None:
        log_file = os.path.expanduser(DEFAULT_LOG_FILE)

    fmt = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # File handler (rotate log file when it gets too large)
    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5,
        )
        file_handler.setLevel(min(level, logging.DEBUG))  # Always log everything to file
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)
    except OSError as e:
        print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    # Console handler (only warnings in production, all in debug)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level if level < logging.INFO else logging.WARNING)
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='keycalc',
        description='KeyCalc - keypad calculator with keyboard support',
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode with verbose logging'
    )
    parser.add_argument(
        '--trace',
        action='store_true',
        help='Log every key press and ignored event (very verbose)'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to config file'
    )
    parser.add_argument(
        '--logfile',
        type=str,
        default=None,
        help='Path to log file (default: ~/.keycalc.log)'
    )
    parser.add_argument(
        '--headless',
        action='store_true',
        help='Run in the terminal: type keys (e.g. "12+8=") and press Enter'
    )
    parser.add_argument(
        '--eval',
        metavar='KEYS',
        default=None,
        help='Press KEYS (e.g. "2+3*4="), print the display and exit'
    )
    parser.add_argument(
        '--theme',
        choices=THEME_NAMES,
        default=None,
        help='Colour theme for this session'
    )
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for KeyCalc"""
    args = build_parser().parse_args(argv)

    log = setup_logging(debug=args.debug, log_file=args.logfile, trace=args.trace)
    log.info("KeyCalc started (version %s, pid %d)", __version__, os.getpid())
    log.debug("Debug mode: %s", args.debug)

    # Import after args parsing to avoid import-time side effects
    from keycalc.app import CalculatorApp

    try:
        log.debug("Loading config from: %s", args.config or 'default')
        app = CalculatorApp(
            headless=args.headless or args.eval is not None,
            debug=args.debug or args.trace,
            config_path=args.config,
        )
        if args.theme is not None:
            app.set_theme(args.theme, persist=False)
    except Exception as e:
        log.error("Failed to start: %s", e)
        log.debug(traceback.format_exc())
        return 1

    if args.eval is not None:
        print(app.feed(args.eval))
        return 0

    def signal_handler(signum: int, frame) -> None:
        log.info("Received %s, shutting down", signal.Signals(signum).name)
        app.stop()
        sys.exit(0)

    signal.signal(signal.SIGTERM, signal_handler)
    if hasattr(signal, 'SIGHUP'):
        signal.signal(signal.SIGHUP, signal_handler)

    exit_reason = None
    try:
        code = app.run()
        exit_reason = "Normal completion"
        return code

    except KeyboardInterrupt:
        exit_reason = "Keyboard interrupt (Ctrl+C)"
        return 0

    except OSError as e:
        exit_reason = f"OS error: {e}"
        log.error("OS error: %s", e)
        log.debug(traceback.format_exc())
        return 1

    except Exception as e:
        exit_reason = f"Unhandled exception: {type(e).__name__}: {e}"
        log.error("Unhandled error: %s", e)
        log.debug(traceback.format_exc())
        return 1

    finally:
        log.info("KeyCalc shutdown (%s)", exit_reason)


if __name__ == '__main__':
    sys.exit(main())
