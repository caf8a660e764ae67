# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""Tests for the stop editor."""

import pytest

from gradpick.errors import MinStopsViolation, OutOfRange
from gradpick.schema import ColorToken, GradientKind
from gradpick.value.editor import (
    DEFAULT_STOP_POSITION,
    add_stop,
    delete_stop,
    move_stop,
    recolor_selected,
    select_stop,
    set_angle,
    set_kind,
)
from gradpick.value.parser import parse_value
from gradpick.value.serializer import serialize_value

TWO_STOPS = "linear-gradient(90deg, #FF0000 0%, #00ff00 100%)"
THREE_STOPS = "linear-gradient(90deg, #ff0000 0%, #0000FF 50%, #00ff00 100%)"


@pytest.fixture
def two():
    return parse_value(TWO_STOPS)


@pytest.fixture
def three():
    return parse_value(THREE_STOPS)


def _selected_count(gradient):
    return sum(1 for s in gradient.stops if s.selected)


class TestSelect:

    def test_select_moves_selection(self, two):
        g = select_stop(two, 1)
        assert g.selected_index == 1
        assert _selected_count(g) == 1
        assert serialize_value(g) == "linear-gradient(90deg, #ff0000 0%, #00FF00 100%)"

    def test_input_unchanged(self, two):
        select_stop(two, 1)
        assert two.selected_index == 0

    @pytest.mark.parametrize("index", [-1, 2, 10, 1.0, "0", True])
    def test_bad_index(self, two, index):
        with pytest.raises(OutOfRange):
            select_stop(two, index)


class TestAdd:

    def test_add_selects_new_stop(self, two):
        g = add_stop(two, 50)
        assert len(g.stops) == 3
        assert _selected_count(g) == 1
        assert g.selected_stop.position == 50
        assert g.selected_stop.color == ColorToken.parse("#ff0000")
        assert serialize_value(g) == (
            "linear-gradient(90deg, #ff0000 0%, #FF0000 50%, #00ff00 100%)"
        )

    def test_default_position(self, two):
        assert add_stop(two).selected_stop.position == DEFAULT_STOP_POSITION

    @pytest.mark.parametrize("position,expected", [(150, 100), (-10, 0), (33.5, 34)])
    def test_position_clamped(self, two, position, expected):
        assert add_stop(two, position).selected_stop.position == expected

    def test_explicit_color(self, two):
        blue = ColorToken.parse("#0000ff")
        assert add_stop(two, 25, blue).selected_stop.color == blue

    def test_non_numeric_position(self, two):
        with pytest.raises(ValueError):
            add_stop(two, "50")


class TestDelete:

    def test_two_stops_is_minimum(self, two):
        with pytest.raises(MinStopsViolation):
            delete_stop(two)

    def test_out_of_range_checked_first(self, two):
        with pytest.raises(OutOfRange):
            delete_stop(two, 5)

    def test_delete_unselected(self, three):
        g = delete_stop(three, 0)
        assert len(g.stops) == 2
        assert g.selected_stop.color == ColorToken.parse("#0000ff")

    def test_delete_selected_reselects_lowest_position(self, three):
        g = delete_stop(three)
        assert _selected_count(g) == 1
        assert g.selected_stop.position == 0
        assert serialize_value(g) == "linear-gradient(90deg, #FF0000 0%, #00ff00 100%)"

    def test_reselect_uses_position_not_storage_order(self):
        g = parse_value("linear-gradient(90deg, #00ff00 100%, #FF0000 50%, #0000ff 20%)")
        g = delete_stop(g, 1)
        assert g.selected_stop.position == 20


class TestMove:

    @pytest.mark.parametrize("position,expected", [(150, 100), (-10, 0), (75, 75)])
    def test_move_clamps(self, two, position, expected):
        assert move_stop(two, 0, position).stops[0].position == expected

    def test_other_stops_untouched(self, three):
        g = move_stop(three, 1, 10)
        assert [s.position for s in g.stops] == [0, 10, 100]
        assert g.selected_index == 1

    def test_bad_index(self, two):
        with pytest.raises(OutOfRange):
            move_stop(two, 2, 10)


class TestRecolorAndKind:

    def test_recolor_selected(self, three):
        white = ColorToken.parse("#ffffff")
        g = recolor_selected(three, white)
        assert g.stops[1].color == white
        assert g.stops[1].position == 50
        assert g.selected_index == 1

    def test_to_radial_drops_angle(self, two):
        g = set_kind(two, GradientKind.RADIAL)
        assert g.angle is None
        assert serialize_value(g) == "radial-gradient(circle, #FF0000 0%, #00ff00 100%)"

    def test_to_linear_default_angle(self):
        g = parse_value("radial-gradient(circle, #FF0000 0%, #00ff00 100%)")
        assert set_kind(g, GradientKind.LINEAR).angle == 90

    @pytest.mark.parametrize("degrees,expected", [(45, 45), (400, 360), (-5, 0), (12.5, 13)])
    def test_set_angle_clamps(self, two, degrees, expected):
        assert set_angle(two, degrees).angle == expected

    def test_set_angle_makes_linear(self):
        g = parse_value("radial-gradient(circle, #FF0000 0%, #00ff00 100%)")
        g = set_angle(g, 180)
        assert g.kind == GradientKind.LINEAR
        assert g.angle == 180

    def test_non_numeric_angle(self, two):
        with pytest.raises(ValueError):
            set_angle(two, "45deg")
