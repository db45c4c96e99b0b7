import pytest

from models import Screen
from sample_data import GRID_MENU
from tabs.dashboard import greeting_for


@pytest.mark.parametrize(
    ("hour", "greeting"),
    [(0, "Good Morning"), (11, "Good Morning"), (12, "Good Afternoon"), (16, "Good Afternoon"), (17, "Good Evening"), (23, "Good Evening")],
)
def test_greeting_for(hour, greeting):
    assert greeting_for(hour) == greeting


def test_grid_menu_targets_are_screens():
    assert [item["target"] for item in GRID_MENU] == [Screen.CHAT, Screen.SCAN, Screen.VAULT, Screen.INSIGHTS]
