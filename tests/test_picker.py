# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""Tests for the ColorPicker session."""

import logging

import pytest

from gradpick.errors import OutOfRange, ParseError
from gradpick.runtime.config import PickerConfig
from gradpick.runtime.picker import ColorPicker, DiagnosticCode

LINEAR = "linear-gradient(90deg, #FF0000 0%, #00ff00 100%)"
RADIAL = "radial-gradient(circle, #FF0000 0%, #00ff00 100%)"


class Recorder:
    """Collects on_change and on_diagnostic calls."""

    def __init__(self):
        self.changes = []
        self.diagnostics = []

    def picker(self, **kwargs):
        return ColorPicker(
            on_change=self.changes.append,
            on_diagnostic=self.diagnostics.append,
            **kwargs,
        )

    @property
    def codes(self):
        return [d.code for d in self.diagnostics]


@pytest.fixture
def rec():
    return Recorder()


@pytest.fixture
def picker(rec):
    return rec.picker()


class TestScenarios:

    def test_solid_to_hsl(self, picker):
        assert picker.value_to_hsl("#ff0000") == "hsl(0, 100%, 50%)"

    def test_add_point(self, picker, rec):
        out = picker.add_point(LINEAR, 50)
        assert out == "linear-gradient(90deg, #ff0000 0%, #FF0000 50%, #00ff00 100%)"
        assert rec.changes == [out]
        assert rec.diagnostics == []

    def test_delete_at_minimum(self, picker, rec):
        out = picker.delete_point(LINEAR)
        assert out == LINEAR
        assert rec.codes == [DiagnosticCode.MIN_STOPS]
        assert rec.changes == []

    def test_out_of_range_lightness(self, picker, rec):
        out = picker.set_lightness(LINEAR, 150)
        assert out == LINEAR
        assert rec.codes == [DiagnosticCode.INVALID_COLOR]
        assert rec.changes == []


class TestDiagnostics:

    def test_warning_logged(self, picker, caplog):
        with caplog.at_level(logging.WARNING, logger="gradpick.runtime.picker"):
            picker.set_red("#ff0000", 300)
        assert "invalid_color" in caplog.text

    def test_without_receiver(self):
        picker = ColorPicker(on_change=lambda text: None)
        assert picker.set_hue("#ff0000", -1) == "#ff0000"

    def test_default_position(self, picker, rec):
        out = picker.add_point(LINEAR)
        assert rec.codes == [DiagnosticCode.DEFAULT_POSITION]
        assert "#FF0000 50%" in out

    def test_config_default_position(self, rec):
        picker = rec.picker(config=PickerConfig(default_stop_position=25))
        assert "#FF0000 25%" in picker.add_point(LINEAR)

    def test_default_index(self, picker, rec):
        value = picker.add_point(LINEAR, 50)
        out = picker.delete_point(value)
        assert out == "linear-gradient(90deg, #FF0000 0%, #00ff00 100%)"
        assert rec.codes == [DiagnosticCode.DEFAULT_INDEX]

    def test_gradient_only_on_solid(self, picker, rec):
        assert picker.add_point("#ff0000", 50) == "#ff0000"
        assert picker.set_radial("#ff0000") == "#ff0000"
        assert rec.codes == [DiagnosticCode.GRADIENT_ONLY, DiagnosticCode.GRADIENT_ONLY]
        assert rec.changes == []

    def test_degrees_on_radial(self, picker, rec):
        out = picker.set_degrees(RADIAL, 45)
        assert out == "linear-gradient(45deg, #FF0000 0%, #00ff00 100%)"
        assert rec.codes == [DiagnosticCode.KIND_MISMATCH]


class TestFatal:

    @pytest.mark.parametrize("value", ["", "linear-gradient(90deg, #ff0000 0%)", "#xyz"])
    def test_parse_error_propagates(self, picker, rec, value):
        with pytest.raises(ParseError):
            picker.set_red(value, 10)
        assert rec.changes == []
        assert rec.diagnostics == []

    def test_out_of_range_propagates(self, picker, rec):
        with pytest.raises(OutOfRange):
            picker.select_point(LINEAR, 2)
        with pytest.raises(OutOfRange):
            picker.delete_point(LINEAR, 7)
        assert rec.changes == []


class TestChannels:

    def test_set_red_on_selected_stop(self, picker):
        assert picker.set_red(LINEAR, 0) == (
            "linear-gradient(90deg, RGBA(0, 0, 0, 1) 0%, #00ff00 100%)"
        )

    def test_set_green_blue(self, picker):
        out = picker.set_blue(picker.set_green("#000000", 10), 20)
        assert out == "rgba(0, 10, 20, 1)"

    def test_fractional_channel_rejected(self, picker, rec):
        assert picker.set_green("#000000", 10.5) == "#000000"
        assert rec.codes == [DiagnosticCode.INVALID_COLOR]

    def test_set_alpha_percent(self, picker):
        assert picker.set_alpha("#ff0000", 50) == "rgba(255, 0, 0, 0.5)"

    def test_set_lightness(self, picker):
        assert picker.set_lightness("#ff0000", 25) == "rgba(128, 0, 0, 1)"

    def test_set_hue(self, picker):
        assert picker.set_hue("#ff0000", 120) == "rgba(0, 255, 0, 1)"

    def test_set_saturation(self, picker):
        assert picker.set_saturation("#ff0000", 0) == "rgba(128, 128, 128, 1)"

    def test_hsv_channels(self, picker):
        assert picker.set_value("#ff0000", 0) == "rgba(0, 0, 0, 1)"
        assert picker.set_hsv_saturation("#ff0000", 0) == "rgba(255, 255, 255, 1)"
        assert picker.set_hsv_hue("#ff0000", 240) == "rgba(0, 0, 255, 1)"

    def test_set_hex_keeps_alpha(self, picker):
        assert picker.set_hex("rgba(255, 0, 0, 0.5)", "#00ff00") == "rgba(0, 255, 0, 0.5)"

    def test_set_hex_invalid(self, picker, rec):
        assert picker.set_hex("#ff0000", "green") == "#ff0000"
        assert rec.codes == [DiagnosticCode.INVALID_COLOR]

    def test_set_hex_on_gradient(self, picker):
        assert picker.set_hex(LINEAR, "#0000ff") == (
            "linear-gradient(90deg, RGBA(0, 0, 255, 1) 0%, #00ff00 100%)"
        )

    def test_set_cmyk(self, picker):
        assert picker.set_cmyk("#ffffff", 0, 1, 1, 0) == "rgba(255, 0, 0, 1)"

    def test_set_cmyk_out_of_range(self, picker, rec):
        assert picker.set_cmyk("#ffffff", 0, 2, 0, 0) == "#ffffff"
        assert rec.codes == [DiagnosticCode.INVALID_COLOR]


class TestModes:

    def test_set_solid_default(self, picker, rec):
        assert picker.set_solid() == "rgba(175, 51, 242, 1)"
        assert len(rec.changes) == 1

    def test_set_solid_lower_cases(self, picker):
        assert picker.set_solid("#ABCDEF") == "#abcdef"

    def test_set_solid_rejects_gradient(self, picker):
        with pytest.raises(ParseError):
            picker.set_solid(LINEAR)

    def test_set_gradient_default(self, picker):
        assert picker.set_gradient() == (
            "linear-gradient(90deg, RGBA(96,93,93,1) 0%, rgba(255,255,255,1) 100%)"
        )

    def test_set_radial(self, picker):
        assert picker.set_radial(LINEAR) == RADIAL

    def test_set_linear_from_radial(self, picker):
        assert picker.set_linear(RADIAL) == LINEAR

    def test_set_linear_keeps_angle(self, picker):
        value = "linear-gradient(30deg, #FF0000 0%, #00ff00 100%)"
        assert picker.set_linear(value) == value

    def test_set_degrees_clamps(self, picker):
        assert picker.set_degrees(LINEAR, 500).startswith("linear-gradient(360deg,")


class TestStops:

    def test_select_point(self, picker):
        assert picker.select_point(LINEAR, 1) == (
            "linear-gradient(90deg, #ff0000 0%, #00FF00 100%)"
        )

    def test_delete_by_index(self, picker, rec):
        value = picker.add_point(LINEAR, 50)
        out = picker.delete_point(value, 1)
        assert out == "linear-gradient(90deg, #ff0000 0%, #FF0000 50%)"
        assert rec.diagnostics == []

    def test_set_point_left_clamps(self, picker):
        assert picker.set_point_left(LINEAR, 150) == (
            "linear-gradient(90deg, #FF0000 100%, #00ff00 100%)"
        )


class TestSession:

    def test_history_follows_commits(self, picker):
        picker.set_solid("#00ff00")
        picker.set_solid("#0000ff")
        picker.set_solid("#0000FF")
        assert picker.previous_colors == ("#0000ff", "#00ff00")

    def test_discarded_edit_not_recorded(self, picker):
        picker.set_lightness("#ff0000", 150)
        assert picker.previous_colors == ()

    def test_history_size_from_config(self, rec):
        picker = rec.picker(config=PickerConfig(history_size=2))
        for c in ("#ff0000", "#00ff00", "#0000ff"):
            picker.set_solid(c)
        assert picker.previous_colors == ("#0000ff", "#00ff00")

    def test_observe(self, picker, rec):
        assert picker.observe(LINEAR)
        assert picker.previous_colors == ("#ff0000",)
        assert rec.changes == []

    def test_context_manager_clears_history(self, rec):
        with rec.picker() as picker:
            picker.set_solid("#ff0000")
            assert len(picker.previous_colors) == 1
        assert picker.previous_colors == ()


class TestAccessors:

    def test_string_forms(self, picker):
        assert picker.value_to_hsv("#ff0000") == "hsv(0, 100%, 100%)"
        assert picker.value_to_hex(LINEAR) == "#ff0000"
        assert picker.value_to_cmyk("#ff0000") == "cmyk(0, 1, 1, 0)"
        assert picker.value_to_hsl("rgba(255, 0, 0, 0.5)") == "hsla(0, 100%, 50%, 0.5)"

    def test_details_gradient(self, picker):
        d = picker.details(picker.select_point(LINEAR, 1))
        assert d.is_gradient
        assert d.gradient_type == "linear-gradient"
        assert d.degrees == 90
        assert d.selected_point == 1
        assert d.current_left == 100
        assert d.rgba == (0, 255, 0, 1.0)
        assert d.hsl == pytest.approx((120.0, 100.0, 50.0))

    def test_details_solid(self, picker):
        d = picker.details("#ff0000")
        assert not d.is_gradient
        assert d.gradient_type is None
        assert d.current_color == "#ff0000"

    def test_gradient_object(self, picker):
        assert picker.gradient_object(RADIAL) == {
            "is_gradient": True,
            "gradient_type": "radial-gradient",
            "degrees": "circle",
            "colors": [
                {"value": "#ff0000", "left": 0, "selected": True},
                {"value": "#00ff00", "left": 100, "selected": False},
            ],
        }
