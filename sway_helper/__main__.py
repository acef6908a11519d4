"""Entry point for the sway-helper CLI."""

import sys


def main() -> int:
    """Main entry point."""
    from sway_helper.cli.commands import cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
