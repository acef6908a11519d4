"""Unit tests for sway-helper data models."""

import pytest
from pydantic import ValidationError

from sway_helper.models import (
    Amount,
    Direction,
    DisplayRelation,
    NodeKind,
    OutputInfo,
    Rectangle,
    ResizeDirection,
    Unit,
)


class TestAmount:

    def test_none(self):
        amount = Amount.none()
        assert amount.value is None
        assert amount.unit is None
        assert amount.is_empty

    def test_value_without_unit(self):
        amount = Amount.of(10)
        assert amount.value == 10
        assert amount.unit is None
        assert not amount.is_empty

    def test_value_with_unit(self):
        assert Amount.of(10, Unit.PPT).unit is Unit.PPT

    def test_unit_without_value_is_rejected(self):
        with pytest.raises(ValidationError, match="units should always have an amount"):
            Amount(unit=Unit.PX)

    def test_negative_value_is_rejected(self):
        with pytest.raises(ValidationError):
            Amount.of(-5)

    def test_frozen(self):
        amount = Amount.of(10)
        with pytest.raises(ValidationError):
            amount.unit = Unit.PX


class TestDirection:

    @pytest.mark.parametrize("direction,opposite", [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ])
    def test_opposite(self, direction, opposite):
        assert direction.opposite() is opposite

    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_is_involution(self, direction):
        assert direction.opposite().opposite() is direction

    def test_resize_direction_flip_keeps_amount(self):
        original = ResizeDirection(direction=Direction.LEFT, amount=Amount.of(5, Unit.PX))
        flipped = original.flip()
        assert flipped.direction is Direction.RIGHT
        assert flipped.amount == original.amount
        assert original.direction is Direction.LEFT


class TestGeometryModels:

    def test_rectangle_rejects_negative_size(self):
        with pytest.raises(ValidationError):
            Rectangle(x=0, y=0, width=-1, height=10)

    def test_rectangle_allows_negative_position(self):
        rect = Rectangle(x=-1920, y=-100, width=1920, height=1080)
        assert rect.x == -1920

    @pytest.mark.parametrize("node_type,kind", [
        ("con", NodeKind.TILING_CONTAINER),
        ("floating_con", NodeKind.FLOATING_CONTAINER),
        ("workspace", NodeKind.WORKSPACE),
        ("output", NodeKind.OTHER),
        ("root", NodeKind.OTHER),
        (None, NodeKind.OTHER),
    ])
    def test_node_kind_from_ipc(self, node_type, kind):
        assert NodeKind.from_ipc(node_type) is kind

    def test_output_description(self):
        output = OutputInfo(name="DP-1", make="LG Electronics", model="LG ULTRAFINE", serial="Unknown")
        assert output.description == "LG Electronics LG ULTRAFINE"

    def test_output_description_empty(self):
        assert OutputInfo(name="HEADLESS-1").description == ""

    def test_display_relation_axis(self):
        assert DisplayRelation.ABOVE.is_vertical
        assert DisplayRelation.BELOW.is_vertical
        assert not DisplayRelation.LEFT_OF.is_vertical
        assert not DisplayRelation.RIGHT_OF.is_vertical
