"""
Beacon CLI - Command line interface for checking and trying notifications.

Provides commands for:
- Configuration validation
- Listing available platforms
- Showing which channels an event is routed to
- Sending a one-off notification
"""

import argparse
import sys
from pathlib import Path

from beacon.channels import resolve_channels
from beacon.config import Config, load_config
from beacon.core import Actor, Message, RequestContext
from beacon.dispatcher import NotificationDispatcher
from beacon.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def _load(args: argparse.Namespace) -> Config | None:
    config_path = Path(args.config)

    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        return None

    try:
        return load_config(config_path)
    except Exception as e:
        print(f"✗ Configuration invalid: {e}", file=sys.stderr)
        return None


def cmd_config_validate(args: argparse.Namespace) -> int:
    """Validate configuration file."""
    config = _load(args)
    if config is None:
        return 1

    print(f"✓ Configuration valid: {args.config}")
    print(f"  - {len(config.platforms)} platform(s) configured")
    print(f"  - {len(config.document_types)} document type(s) described")

    dispatcher = NotificationDispatcher(config)
    unknown = [name for name in config.platforms if name not in dispatcher.platforms]
    for name in unknown:
        print(f"  ! '{name}' is configured but no such platform is registered")
    return 0


def cmd_platforms_list(args: argparse.Namespace) -> int:
    """List registered platforms and whether they are configured."""
    config = _load(args)
    if config is None:
        return 1

    dispatcher = NotificationDispatcher(config)
    print(f"Registered platforms ({len(dispatcher.platforms)}):\n")
    for name in dispatcher.platforms.names():
        status = "configured" if name in config.platforms else "not configured"
        print(f"  {name}: {status}")
    return 0


def cmd_channels(args: argparse.Namespace) -> int:
    """Show the channels an event is delivered to on each platform."""
    config = _load(args)
    if config is None:
        return 1

    message = Message(event=args.event, context=None, formatted="")
    print(f"Channels for '{args.event}':\n")
    for name in config.platforms:
        channels = resolve_channels(config.platforms, name, message)
        print(f"  {name}: {', '.join(channels) or '(none)'}")
    return 0


def cmd_send(args: argparse.Namespace) -> int:
    """Format a notification and deliver it right away."""
    config = _load(args)
    if config is None:
        return 1

    dispatcher = NotificationDispatcher(config)
    context = RequestContext(Actor(args.user, args.title)) if args.user else None
    message = Message(
        event=args.event,
        context=context,
        formatted=dispatcher.formatter.format(
            context.actor if context else None, args.template, *args.args
        )
    )

    print(f"Sending: {message.formatted}")
    try:
        dispatcher.send_one(message)
    except Exception as e:
        logger.debug("Delivery failed", exc_info=True)
        print(f"✗ Delivery failed: {e}", file=sys.stderr)
        return 1

    print("✓ Delivered")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="beacon",
        description="Beacon - Event notifications for chat platforms"
    )
    parser.add_argument(
        "-c", "--config",
        default="beacon.yaml",
        help="Path to configuration file (default: beacon.yaml)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--log-file",
        help="Optional log file path"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="subcommand")
    config_subparsers.add_parser("validate", help="Validate configuration file")

    platforms_parser = subparsers.add_parser("platforms", help="Platform management")
    platforms_subparsers = platforms_parser.add_subparsers(dest="subcommand")
    platforms_subparsers.add_parser("list", help="List registered platforms")

    channels_parser = subparsers.add_parser("channels", help="Show channels for an event")
    channels_parser.add_argument("event", help="Event name")

    send_parser = subparsers.add_parser("send", help="Send a one-off notification")
    send_parser.add_argument("event", help="Event name used for channel routing")
    send_parser.add_argument("template", help='Message template, e.g. "{user} deployed {string}"')
    send_parser.add_argument("args", nargs="*", help="Values for {string} placeholders")
    send_parser.add_argument("-u", "--user", help="Username of the acting user")
    send_parser.add_argument("-t", "--title", help="Display name of the acting user")

    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "config":
        if args.subcommand == "validate":
            return cmd_config_validate(args)
        parser.print_help()
        return 0

    if args.command == "platforms":
        if args.subcommand == "list":
            return cmd_platforms_list(args)
        parser.print_help()
        return 0

    if args.command == "channels":
        return cmd_channels(args)

    if args.command == "send":
        return cmd_send(args)

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
