import pytest
from remote_control.devices import Light, TV, Fan, MusicPlayer, DeviceError
from remote_control.device_commands import (
    TurnOnCommand, TurnOffCommand, PlayMusicCommand, StopMusicCommand,
    SetFanSpeedCommand, SetVolumeCommand,
)


@pytest.mark.unit
def test_turn_on_and_undo():
    light = Light("hall")
    cmd = TurnOnCommand(light)
    cmd.execute()
    assert light.is_on is True
    cmd.undo()
    assert light.is_on is False


@pytest.mark.unit
def test_turn_off_undo_without_execute_turns_on():
    tv = TV("living")
    TurnOffCommand(tv).undo()
    assert tv.is_on is True


def test_fan_speed_restored_on_undo():
    fan = Fan("ceiling", speed=1)
    cmd = SetFanSpeedCommand(fan, 3)
    cmd.execute()
    assert fan.speed == 3
    cmd.undo()
    assert fan.speed == 1


def test_fan_speed_undo_before_execute_leaves_fan_alone():
    fan = Fan("ceiling", speed=2)
    SetFanSpeedCommand(fan, 4).undo()
    assert fan.speed == 2


def test_captured_speed_is_reapplied():
    fan = Fan("ceiling")
    cmd = SetFanSpeedCommand(fan, 3)
    cmd.execute()
    fan.set_speed(1)
    cmd.execute()
    assert fan.speed == 3
    assert cmd.speed == 3


def test_fan_rejects_invalid_speed():
    fan = Fan("ceiling")
    with pytest.raises(DeviceError):
        SetFanSpeedCommand(fan, Fan.MAX_SPEED + 1).execute()
    assert fan.speed == 0


def test_music_commands():
    player = MusicPlayer("kitchen", volume=20)
    PlayMusicCommand(player).execute()
    assert player.is_playing is True
    stop = StopMusicCommand(player)
    stop.execute()
    assert player.is_playing is False
    stop.undo()
    assert player.is_playing is True

    vol = SetVolumeCommand(player, 80)
    vol.execute()
    assert player.volume == 80
    vol.undo()
    assert player.volume == 20


def test_volume_out_of_range():
    player = MusicPlayer("kitchen")
    with pytest.raises(DeviceError):
        player.set_volume(-1)
    with pytest.raises(DeviceError):
        MusicPlayer("bad", volume=101)


def test_turn_on_works_for_any_device():
    player = MusicPlayer("kitchen")
    cmd = TurnOnCommand(player)
    cmd.execute()
    assert player.is_playing is True
    assert cmd.description == "TurnOn(kitchen)"
