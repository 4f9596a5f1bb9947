import dataclasses

import pytest

from alers.display import DisplaySetting, Rect, TargetMonitor


def test_defaults_target_primary_and_visible():
    setting = DisplaySetting(Rect((0, 0), (800, 600)))
    assert setting.initial_target is TargetMonitor.PRIMARY
    assert setting.is_hidden is False


def test_screen_size_follows_dimension():
    setting = DisplaySetting(Rect((10, 20), (1024, 768)), TargetMonitor.SECOND, True)
    assert setting.screen_size == (1024, 768)
    assert setting.dimension.position == (10, 20)
    assert setting.is_hidden is True


def test_copy_is_independent():
    setting = DisplaySetting(Rect((0, 0), (800, 600)))
    copy = dataclasses.replace(setting, is_hidden=True)
    assert setting.is_hidden is False
    assert copy.is_hidden is True
    assert copy.dimension == setting.dimension


def test_rect_is_immutable():
    rect = Rect((0, 0), (1, 1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        rect.size = (2, 2)
    assert rect.size == (1, 1)