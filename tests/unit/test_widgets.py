"""Theme tokens reach the markup the result block renders."""

from coinswap.ui.theme import THEME
from coinswap.ui.widgets import ToneText


def test_tone_text_uses_theme_colour():
    assert THEME["color"]["success"] in ToneText("+$200.00", "success")
    assert THEME["color"]["danger"] in ToneText("-$125.00", "danger")


def test_unknown_tone_falls_back_to_muted():
    assert THEME["color"]["muted"] in ToneText("n/a", "sparkly")


def test_text_is_escaped():
    assert "<b>" not in ToneText("<b>x</b>", "success")


def test_theme_only_carries_tokens_the_widgets_read():
    assert set(THEME) == {"color", "font"}
    assert set(THEME["color"]) == {"muted", "success", "warning", "danger"}
    assert THEME["font"]["size"]["xl"] > 0
