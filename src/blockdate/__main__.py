"""Start the block date editor or check date strings."""

import argparse
import pathlib

import rich

from blockdate import config
from blockdate.model import dates


def build_parser() -> argparse.ArgumentParser:
    """Define command line arguments."""
    parser = argparse.ArgumentParser(prog="blockdate")
    subparsers = parser.add_subparsers()
    parser.set_defaults(func=None)

    app_parser = subparsers.add_parser(
        "app",
        help="Run the block date editor."
    )
    app_parser.set_defaults(func=run_app)
    app_parser.add_argument(
        "-c", "--config_path",
        help="Path to config file",
        type=pathlib.Path,
        default=None
    )
    app_parser.add_argument(
        "-d", "--date",
        help="Initial date of the first block, YYYY-MM-DD",
        default=None
    )
    app_parser.add_argument(
        "-l", "--language",
        help="Message language, e.g. en, de, pt-BR",
        default=None
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Print the canonical form of each date, or None if invalid."
    )
    validate_parser.set_defaults(func=validate_dates)
    validate_parser.add_argument("values", nargs="+", help="Date strings")
    return parser


def run_app(args: argparse.Namespace) -> None:
    """Run the block date editor TUI application."""
    import blockdate.view.editor_app

    config.settings.update_from_args(args)
    blockdate.view.editor_app.BlockEditor().run()


def validate_dates(args: argparse.Namespace) -> None:
    """Check date strings."""
    for value in args.values:
        rich.print(f"{value!r}: {dates.validate(value)}")


def main() -> None:
    """Function to run the app, used for the package entry point."""
    parser = build_parser()
    args = parser.parse_args()
    if args.func is None:
        parser.print_help()
        return
    args.func(args)


if __name__ == "__main__":
    main()
