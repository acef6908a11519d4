"""CLI command handlers for sway-helper.

Usage:
    sway-helper resize [--flip] {up,down,left,right} [AMOUNT [px|ppt]]
    sway-helper display NAME [{above,below,left-of,right-of} OTHER]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..core.config import HelperConfig, load_config
from ..core.display import place_displays, resolve_output
from ..core.formatter import format_placements, format_resize
from ..core.resize import plan_resize
from ..core.sway_client import SwayClient
from ..core.tree import focused_container, focused_workspace
from ..errors import ConfigLoadError, PreconditionError, SwayIPCError
from ..models.geometry import DisplayRelation
from ..models.resize import Amount, Direction, ResizeDirection, ResizeRequest, Unit
from .logging_config import get_global_logger, init_logging, log_timing
from .output import OutputFormatter


RESIZE_DESCRIPTION = """\
Better resize commands.

Instead of having to specify grow/shrink, the focused container grows in the
given direction when there is a neighbor on that side and shrinks from the
opposite side otherwise:

  +---------+----------+
  | <- left | right -> |
  +---------+----------+
  | focused |          |
  +---------+----------+

`resize right` grows the container to the right, but `resize left` shrinks
the right side instead of trying to grow it. Up and down work the same way.
"""


def non_negative_int(value: str) -> int:
    """argparse type for resize amounts."""
    try:
        amount = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}")
    if amount < 0:
        raise argparse.ArgumentTypeError(f"amount must be >= 0, got {amount}")
    return amount


def run_command(client: SwayClient, command: str, args: argparse.Namespace, fmt: OutputFormatter) -> int:
    """Send ``command`` to sway unless --dry-run is set."""
    logger = get_global_logger()
    dry_run = getattr(args, "dry_run", False)

    fmt.print_running(command, dry_run=dry_run)
    if dry_run:
        logger.info(f"Dry run, not sending: {command}")
        return 0

    logger.info(f"Running: {command}")
    with log_timing("RUN_COMMAND", logger):
        client.command(command)
    return 0


# ============================================================================
# resize
# ============================================================================


def build_resize_request(args: argparse.Namespace, config: HelperConfig) -> ResizeRequest:
    """Turn parsed resize arguments into a ResizeRequest.

    The configured default amount applies only when no amount was given.
    """
    if args.amount is None:
        amount = config.default_amount()
    else:
        amount = Amount.of(args.amount, Unit(args.unit) if args.unit else None)

    return ResizeRequest(
        direction=ResizeDirection(direction=Direction(args.direction), amount=amount),
        flip=args.flip,
    )


def cmd_resize(args: argparse.Namespace, client: SwayClient, config: HelperConfig, fmt: OutputFormatter) -> int:
    """Resize the focused container towards a direction.

    Returns:
        0 on success (including when there is nothing to resize)
    """
    logger = get_global_logger()
    request = build_resize_request(args, config)

    with log_timing("GET_TREE", logger):
        tree = client.get_tree()

    decision = plan_resize(focused_container(tree), focused_workspace(tree), request)
    if decision is None:
        message = "Only tiling container on the workspace, nothing to resize"
        logger.info(message)
        fmt.set_result(status="noop", message=message)
        return 0

    return run_command(client, format_resize(decision), args, fmt)


# ============================================================================
# display
# ============================================================================


def cmd_display(args: argparse.Namespace, client: SwayClient, config: HelperConfig, fmt: OutputFormatter) -> int:
    """Show a display, or place it relative to another one.

    Returns:
        0 on success
    """
    logger = get_global_logger()

    with log_timing("GET_OUTPUTS", logger):
        outputs = client.get_outputs()

    if args.relation is None:
        fmt.display_output(resolve_output(outputs, args.name))
        return 0

    placements = place_displays(outputs, args.name, DisplayRelation(args.relation), args.reference)
    return run_command(client, format_placements(placements), args, fmt)


# ============================================================================
# Parser
# ============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="sway-helper",
        description="Context-aware commands for the sway window manager",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"sway-helper {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging (INFO level)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level, includes verbose)"
    )
    parser.add_argument(
        "--socket",
        type=Path,
        help="Sway IPC socket (default: $SWAYSOCK)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Config file (default: ~/.config/sway-helper/config.json)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the sway command instead of running it"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # sway-helper resize [--flip] <direction> [amount [unit]]
    parser_resize = subparsers.add_parser(
        "resize",
        help="Grow or shrink the focused container towards a direction",
        description=RESIZE_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    flip_help = "Flip the rules: shrink where the container would have grown, and grow where it would have shrunk"
    parser_resize.add_argument("--flip", action="store_true", help=flip_help)

    direction_parsers = parser_resize.add_subparsers(dest="direction", metavar="DIRECTION", required=True)
    for direction in Direction:
        parser_direction = direction_parsers.add_parser(
            direction.value,
            help=f"Resize the focused container {direction.value}wards" if direction.value in ("up", "down")
            else f"Resize the focused container to the {direction.value}",
            description=(
                f"First try to grow the container {direction.value}, if this is not possible shrink it "
                "from the opposite side; behaviour is flipped when --flip is set."
            ),
        )
        # SUPPRESS keeps a --flip given before the direction
        parser_direction.add_argument("--flip", action="store_true", default=argparse.SUPPRESS, help=flip_help)
        parser_direction.add_argument(
            "amount",
            nargs="?",
            type=non_negative_int,
            help="The amount to resize (check `man 5 sway` for the defaults)"
        )
        parser_direction.add_argument(
            "unit",
            nargs="?",
            choices=[unit.value for unit in Unit],
            help="px (pixels) or ppt (percentage points); requires an amount"
        )

    # sway-helper display <name> [above|below|left-of|right-of <other>]
    parser_display = subparsers.add_parser(
        "display",
        help="Interact with displays",
        description="Show a display, or position it relative to another display (two-display setups only)"
    )
    parser_display.add_argument("name", help='Display identifier (ie. "eDP-1", or "LG Display")')

    relation_parsers = parser_display.add_subparsers(dest="relation", metavar="MODIFIER")
    for relation in DisplayRelation:
        parser_relation = relation_parsers.add_parser(
            relation.value,
            help=f"Set the display {relation.value.replace('-', ' ')} another display",
        )
        parser_relation.add_argument("reference", help="The reference display")

    return parser


COMMAND_HANDLERS = {
    "resize": cmd_resize,
    "display": cmd_display,
}


def cli_main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Exit codes:
      0 - Command sent, or nothing to do
      1 - Precondition or configuration error (nothing sent)
      2 - Sway IPC error
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    init_logging(verbose=args.verbose, debug=args.debug)
    logger = get_global_logger()
    if args.debug:
        logger.debug("Debug logging enabled")

    # No command = show help
    if not args.command:
        parser.print_help()
        return 0

    fmt = OutputFormatter(json_mode=args.json)
    try:
        config = load_config(args.config)
        client = SwayClient(socket_path=config.resolve_socket(args.socket))
        return COMMAND_HANDLERS[args.command](args, client, config, fmt)
    except (PreconditionError, ConfigLoadError) as e:
        logger.debug(f"{e.code.name}: {e.context}")
        fmt.print_error(e)
        return 1
    except SwayIPCError as e:
        fmt.print_error(e)
        return 2
    finally:
        fmt.output()


if __name__ == "__main__":
    sys.exit(cli_main())
