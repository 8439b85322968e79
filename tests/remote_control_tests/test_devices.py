import logging

import pytest
from remote_control.devices import Device, Light, Fan, MusicPlayer, DeviceError


@pytest.mark.unit
def test_switch_is_idempotent():
    light = Light("hall")
    assert light.is_on is False
    light.on()
    light.on()
    assert light.is_on is True
    light.off()
    light.off()
    assert light.is_on is False


def test_state_changes_are_logged(caplog):
    with caplog.at_level(logging.INFO, logger="remote_control.devices"):
        Light("hall").on()
        Fan("ceiling").set_speed(2)
    assert "Light 'hall' is ON" in caplog.text
    assert "Fan 'ceiling' speed set to 2" in caplog.text


def test_setters_return_previous_value():
    assert Fan("ceiling", speed=3).set_speed(5) == 3
    assert MusicPlayer("kitchen", volume=10).set_volume(40) == 10


def test_fan_rejects_bad_initial_speed():
    with pytest.raises(DeviceError, match="Speed must be between"):
        Fan("ceiling", speed=-1)


def test_device_is_abstract():
    with pytest.raises(TypeError):
        Device("generic")


def test_repr():
    assert repr(Light("hall")) == "Light(name='hall', is_on=False)"
