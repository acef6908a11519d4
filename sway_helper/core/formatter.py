"""Render decisions as sway command strings."""

from typing import Iterable

from ..models.geometry import OutputPlacement
from ..models.resize import Amount, ResizeDecision


def format_amount(amount: Amount) -> str:
    """Suffix for a resize command.

    Examples:
        >>> format_amount(Amount.none())
        ''
        >>> format_amount(Amount.of(10))
        ' 10'
        >>> format_amount(Amount.of(10, "ppt"))
        ' 10 ppt'
    """
    if amount.is_empty:
        return ""
    if amount.unit is None:
        return f" {amount.value}"
    return f" {amount.value} {amount.unit.value}"


def format_resize(decision: ResizeDecision) -> str:
    """``resize <grow|shrink> <direction>[ <amount>[ <unit>]]``"""
    direction = decision.direction
    return f"resize {decision.action} {direction.direction.value}{format_amount(direction.amount)}"


def format_output_position(placement: OutputPlacement) -> str:
    """``output <name> pos <x> <y>``"""
    return f"output {placement.name} pos {placement.x} {placement.y}"


def format_placements(placements: Iterable[OutputPlacement]) -> str:
    """Join output position statements into a single command string."""
    return "; ".join(format_output_position(p) for p in placements)
