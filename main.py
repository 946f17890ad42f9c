import argparse
import logging
import sys

from typing import Dict, List, Optional

from config.settings import APP_CONFIG, LOGGING_CONFIG
from controller.sender_controller import SenderController
from utils.exceptions import AdaptivePayError

logger = logging.getLogger(__name__)

def parse_options(pairs: List[str]) -> Dict[str, str]:
    """
    Turn ``key=value`` arguments into an options mapping.

    Args:
        pairs (List[str]): Raw command line arguments.
    Returns:
        Dict[str, str]: Option names mapped to their values.
    """
    options = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        if not sep or not key:
            raise ValueError(f"Expected key=value, got '{pair}'")
        options[key] = value
    return options

def main(argv: Optional[List[str]] = None) -> int:
    """Build a sender from command line options and print it."""
    parser = argparse.ArgumentParser(
        prog=APP_CONFIG['prog'],
        description=f"{APP_CONFIG['name']} {APP_CONFIG['version']} - build a payment sender from key=value options."
    )
    parser.add_argument('options', nargs='*', metavar='key=value')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    args = parser.parse_args(argv)

    level = LOGGING_CONFIG['verbose_level'] if args.verbose else LOGGING_CONFIG['level']
    logging.basicConfig(
        level=level,
        format=LOGGING_CONFIG['format'],
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    controller = SenderController()
    try:
        sender = controller.build_sender(parse_options(args.options))
    except (AdaptivePayError, ValueError) as e:
        logger.debug("[ERRO] Sender not built", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        print(f"accepted options: {', '.join(controller.accepted_options())}", file=sys.stderr)
        return 2

    for name in controller.accepted_options():
        value = getattr(sender, name)
        print(f"{name}={'' if value is None else value}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
