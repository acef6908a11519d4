"""Unit tests for two-display placement."""

import pytest

from sway_helper.core.display import find_output, place_displays, place_pair, resolve_output
from sway_helper.errors import (
    DisplayNotFoundError,
    ErrorCode,
    SameDisplayError,
    TooManyOutputsError,
)
from sway_helper.models import DisplayRelation, OutputInfo, OutputPlacement, Rectangle


def output(name: str, width: int, height: int, make: str = None, model: str = None, active: bool = True) -> OutputInfo:
    return OutputInfo(
        name=name,
        make=make,
        model=model,
        active=active,
        rect=Rectangle(x=0, y=0, width=width, height=height),
    )


@pytest.fixture
def external():
    return output("DP-1", 1920, 1080, make="LG Display", model="0x060A")


@pytest.fixture
def laptop():
    return output("eDP-1", 1280, 1024)


class TestFindOutput:

    def test_by_name(self, external, laptop):
        assert find_output([external, laptop], "eDP-1") is laptop

    def test_by_description(self, external, laptop):
        assert find_output([external, laptop], "LG Display") is external

    def test_description_is_case_insensitive(self, external, laptop):
        assert find_output([external, laptop], "lg display") is external

    def test_name_wins_over_description(self):
        confusing = output("HDMI-A-1", 1920, 1080, make="eDP-1 vendor")
        exact = output("eDP-1", 1280, 1024)
        assert find_output([confusing, exact], "eDP-1") is exact

    def test_missing(self, external, laptop):
        assert find_output([external, laptop], "HDMI-A-1") is None

    def test_resolve_missing_lists_available(self, external, laptop):
        with pytest.raises(DisplayNotFoundError) as exc_info:
            resolve_output([external, laptop], "HDMI-A-1")
        error = exc_info.value
        assert "HDMI-A-1" in error.message
        assert error.context["available"] == ["DP-1", "eDP-1"]
        assert error.code is ErrorCode.OUTPUT_NOT_FOUND


class TestPlacePair:

    def test_above_centers_narrower_below(self, external, laptop):
        placed, reference = place_pair(external, DisplayRelation.ABOVE, laptop)
        assert placed == OutputPlacement(name="DP-1", x=0, y=0)
        assert reference == OutputPlacement(name="eDP-1", x=320, y=1080)

    def test_below(self, external, laptop):
        placed, reference = place_pair(external, DisplayRelation.BELOW, laptop)
        assert placed == OutputPlacement(name="DP-1", x=0, y=1024)
        assert reference == OutputPlacement(name="eDP-1", x=320, y=0)

    def test_narrow_display_above_wide_one(self, external, laptop):
        placed, reference = place_pair(laptop, DisplayRelation.ABOVE, external)
        assert placed == OutputPlacement(name="eDP-1", x=320, y=0)
        assert reference == OutputPlacement(name="DP-1", x=0, y=1024)

    def test_left_of_centers_vertically(self, external, laptop):
        placed, reference = place_pair(external, DisplayRelation.LEFT_OF, laptop)
        assert placed == OutputPlacement(name="DP-1", x=0, y=0)
        assert reference == OutputPlacement(name="eDP-1", x=1920, y=28)

    def test_right_of(self, external, laptop):
        placed, reference = place_pair(external, DisplayRelation.RIGHT_OF, laptop)
        assert placed == OutputPlacement(name="DP-1", x=1280, y=0)
        assert reference == OutputPlacement(name="eDP-1", x=0, y=28)

    def test_equal_sizes_have_no_offset(self):
        a = output("DP-1", 1920, 1080)
        b = output("DP-2", 1920, 1080)
        placed, reference = place_pair(a, DisplayRelation.BELOW, b)
        assert (placed.x, placed.y) == (0, 1080)
        assert (reference.x, reference.y) == (0, 0)


class TestPlaceDisplays:

    def test_success(self, external, laptop):
        placements = place_displays([external, laptop], "DP-1", DisplayRelation.ABOVE, "eDP-1")
        assert placements == (
            OutputPlacement(name="DP-1", x=0, y=0),
            OutputPlacement(name="eDP-1", x=320, y=1080),
        )

    def test_by_description(self, external, laptop):
        placed, _ = place_displays([external, laptop], "LG Display", DisplayRelation.RIGHT_OF, "eDP-1")
        assert placed.name == "DP-1"

    def test_same_display(self, external, laptop):
        with pytest.raises(SameDisplayError, match="relative to itself"):
            place_displays([external, laptop], "DP-1", DisplayRelation.ABOVE, "DP-1")

    def test_same_display_through_alias(self, external, laptop):
        with pytest.raises(SameDisplayError):
            place_displays([external, laptop], "DP-1", DisplayRelation.ABOVE, "LG Display")

    def test_three_outputs_fail_fast(self, external, laptop):
        third = output("HDMI-A-1", 2560, 1440)
        with pytest.raises(TooManyOutputsError) as exc_info:
            place_displays([external, laptop, third], "DP-1", DisplayRelation.ABOVE, "eDP-1")
        assert exc_info.value.context["outputs"] == ["DP-1", "eDP-1", "HDMI-A-1"]
        assert "disabled outputs are ignored" in exc_info.value.suggestion

    def test_inactive_outputs_are_ignored(self, external, laptop):
        disabled = output("HDMI-A-1", 0, 0, active=False)
        placements = place_displays([external, laptop, disabled], "DP-1", DisplayRelation.BELOW, "eDP-1")
        assert [p.name for p in placements] == ["DP-1", "eDP-1"]

    def test_unknown_display(self, external, laptop):
        with pytest.raises(DisplayNotFoundError, match="'HDMI-A-1' not found"):
            place_displays([external, laptop], "HDMI-A-1", DisplayRelation.ABOVE, "eDP-1")

    def test_single_output(self, laptop):
        with pytest.raises(DisplayNotFoundError):
            place_displays([laptop], "DP-1", DisplayRelation.ABOVE, "eDP-1")
