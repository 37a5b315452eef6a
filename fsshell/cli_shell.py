import argparse
import logging
import sys
from typing import Optional

from fsshell.config.settings import Settings
from fsshell.container import container
from fsshell.exceptions import ConfigurationError
from fsshell.shell.rendering import make_console, print_banner, print_help
from fsshell.shell.repl import ShellRepl
from fsshell.shell.session import ShellSession

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _supports_color(settings: Settings) -> bool:
    if not settings.color:
        return False
    return sys.stdout.isatty()


def _configure_logging(level: str, log_file: Optional[str]) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        filename=log_file,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fsshell",
        description="Interactive shell for basic filesystem operations.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Logging level (default: FSSHELL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of stderr (default: FSSHELL_LOG_FILE)",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the banner and command reference at startup",
    )
    return parser


def interactive_main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = Settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    _configure_logging(args.log_level or settings.log_level, args.log_file or settings.log_file)

    color_on = not args.no_color and _supports_color(settings)
    console = make_console(color=color_on)
    err_console = make_console(stderr=True, color=color_on)

    session = ShellSession()
    dispatcher = container.create_dispatcher(session, console, err_console)

    if settings.show_banner and not args.no_banner:
        print_banner(console)
        print_help(console)

    return ShellRepl(dispatcher, console, err_console).run()


def main(argv: Optional[list[str]] = None) -> int:  # pragma: no cover
    return interactive_main(argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
