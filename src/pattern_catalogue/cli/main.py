"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the demo application service
"""
import os
import sys
import argparse
from typing import Any, Dict, List, Optional

from pattern_catalogue._package import DESCRIPTION, __version__
from pattern_catalogue.cli.formatters import FORMATS, format_output
from pattern_catalogue.domain.base.exceptions import DomainException
from pattern_catalogue.domain.base.value_objects import PatternFamily
from pattern_catalogue.infrastructure.logging.logger import get_logger

NO_COMMAND_MESSAGE = "please choose a pattern"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-catalogue",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List every demo
  %(prog)s list --family structural --format table
  %(prog)s run singleton observer            # Run two demos in order
  %(prog)s run --family behavioral           # Run a whole family
  %(prog)s run --all                         # Run the full catalogue
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--pause', action='store_true', default=None,
                        help='Wait for Enter before exiting')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List the demo catalogue')
    list_parser.add_argument('--family', choices=PatternFamily.values(), help='Only list one family')
    list_parser.add_argument('--format', choices=FORMATS, default='list', help='Output format')

    run_parser = subparsers.add_parser('run', help='Run demos')
    run_parser.add_argument('names', nargs='*', metavar='NAME', help='Demo names, run in the given order')
    selection = run_parser.add_mutually_exclusive_group()
    selection.add_argument('--family', choices=PatternFamily.values(), help='Run every demo of a family')
    selection.add_argument('--all', action='store_true', help='Run every demo in catalogue order')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == 'run' and args.names and (args.family or args.all):
        parser.error("demo names cannot be combined with --family or --all")
    return args


def execute_command(args: argparse.Namespace, app) -> Optional[Dict[str, Any]]:
    """
    Execute the parsed command against the application.

    Returns:
        Data to format for 'list', None for commands that print their own output
    """
    service = app.get_service()

    if args.command == 'list':
        return {"demos": service.list_demos(args.family)}

    if args.command == 'run':
        if args.all:
            service.run_all()
        elif args.family:
            service.run_family(args.family)
        elif args.names:
            service.run_demos(args.names)
        elif app.config.demo.default_family:
            service.run_family(app.config.demo.default_family)
        else:
            print(NO_COMMAND_MESSAGE)
        return None

    raise ValueError(f"Unknown command: {args.command}")


def _pause() -> None:
    try:
        input("Press Enter to continue...")
    except EOFError:
        pass


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    logger = get_logger(__name__)
    args = parse_args(argv)
    pause = bool(args.pause)

    try:
        if not args.command:
            print(NO_COMMAND_MESSAGE)
            print("Use --help for usage information.")
            return

        # Initialize application
        from pattern_catalogue.bootstrap import create_application

        try:
            app = create_application(args.config, args.log_level)
        except DomainException as e:
            logger.error("Failed to initialize application", error=str(e))
            print(f"Error: {e}")
            sys.exit(1)

        if args.pause is None:
            pause = app.config.demo.pause_on_exit

        # Execute command
        try:
            result = execute_command(args, app)
            if result is not None:
                print(format_output(result, args.format))
        except DomainException as e:
            logger.error("Domain error", error_code=e.error_code, error=str(e))
            print(f"Error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)
    finally:
        if pause:
            _pause()


if __name__ == "__main__":
    main()
