"""
Command-line interface for the duration calculator
"""
import argparse
import logging
import sys

from . import __version__
from .config import Config, find_default_config
from .core import ParseError, calculate_duration
from .errors import ConfigError

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='clock-duration',
        description='Calculates duration between two times',
    )
    parser.add_argument('start_time', help='Start time in the format HH:MMAM/PM')
    parser.add_argument('end_time', help='End time in the format HH:MMAM/PM')
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging on stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    # Exit status on invalid input
    exit_group = parser.add_mutually_exclusive_group()
    exit_group.add_argument('--strict-exit', dest='strict_exit', action='store_true',
                            help='Exit with status 1 when a time cannot be parsed')
    exit_group.add_argument('--no-strict-exit', dest='strict_exit', action='store_false',
                            help='Always exit with status 0 (default)')
    parser.set_defaults(strict_exit=None)
    return parser


def _log_level(value):
    level = logging.getLevelName(str(value).upper())
    return level if isinstance(level, int) else logging.WARNING


def report_duration(start_time, end_time, config):
    """Print the result line for one calculation.

    Returns True when a duration was printed, False when an error line was.
    """
    result = calculate_duration(start_time, end_time)
    if isinstance(result, ParseError):
        logger.debug("Rejected input (%s): %s", result.kind.value, result.message)
        print(config.render_error(result.message))
        return False
    print(config.render_success(result))
    return True


def main(argv=None):
    """Funzione principale CLI"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config_path = args.config or find_default_config()
    try:
        config = Config(config_file=config_path)
    except ConfigError as e:
        parser.error(str(e))
    config.update_from_args({'strict_exit': args.strict_exit})

    if not args.verbose:
        logging.getLogger().setLevel(_log_level(config.get('log_level')))
    # Config loading logs before log_level applies, so report the source here
    logger.debug("Configuration source: %s", config_path or 'defaults')

    ok = report_duration(args.start_time, args.end_time, config)
    if not ok and config.get('strict_exit', False):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
