from __future__ import annotations

from typing import Optional

from remote_control.commands import Command
from remote_control.devices import Device, Fan, MusicPlayer

__all__ = [
    "TurnOnCommand",
    "TurnOffCommand",
    "PlayMusicCommand",
    "StopMusicCommand",
    "SetFanSpeedCommand",
    "SetVolumeCommand",
]


# ==========================
# Module: device_commands
# Purpose: Concrete commands binding one device (and an optional value)
#          to an action and its inverse.
# ==========================


class TurnOnCommand(Command):
    """
    Turns a device on. Undo turns it off.

    :param device: Target device.
    """

    def __init__(self, device: Device) -> None:
        super().__init__(description=f"TurnOn({device.name})")
        self._device = device

    def execute(self) -> None:
        self._device.on()

    def undo(self) -> None:
        self._device.off()


class TurnOffCommand(Command):
    """
    Turns a device off. Undo turns it back on.

    :param device: Target device.
    """

    def __init__(self, device: Device) -> None:
        super().__init__(description=f"TurnOff({device.name})")
        self._device = device

    def execute(self) -> None:
        self._device.off()

    def undo(self) -> None:
        self._device.on()


class PlayMusicCommand(Command):
    """
    Starts playback. Undo stops it.

    :param player: Target music player.
    """

    def __init__(self, player: MusicPlayer) -> None:
        super().__init__(description=f"PlayMusic({player.name})")
        self._player = player

    def execute(self) -> None:
        self._player.play()

    def undo(self) -> None:
        self._player.stop()


class StopMusicCommand(Command):
    def __init__(self, player: MusicPlayer) -> None:
        super().__init__(description=f"StopMusic({player.name})")
        self._player = player

    def execute(self) -> None:
        self._player.stop()

    def undo(self) -> None:
        self._player.play()


class SetFanSpeedCommand(Command):
    """
    Sets a fan speed; compensates by restoring the previous speed.

    The speed is fixed at construction, so every execution applies the
    same value.

    :param fan: Target fan.
    :param speed: Speed to apply.
    """

    def __init__(self, fan: Fan, speed: int) -> None:
        super().__init__(description=f"SetFanSpeed({fan.name}={speed})")
        self._fan = fan
        self._speed = speed
        self._prev: Optional[int] = None

    @property
    def speed(self) -> int:
        return self._speed

    def execute(self) -> None:
        self._prev = self._fan.set_speed(self._speed)

    def undo(self) -> None:
        # Nothing recorded yet: there is no earlier speed to go back to.
        if self._prev is None:
            return
        self._fan.set_speed(self._prev)


class SetVolumeCommand(Command):
    """
    Sets a music player volume; compensates by restoring the previous volume.

    :param player: Target music player.
    :param volume: Volume to apply.
    """

    def __init__(self, player: MusicPlayer, volume: int) -> None:
        super().__init__(description=f"SetVolume({player.name}={volume})")
        self._player = player
        self._volume = volume
        self._prev: Optional[int] = None

    @property
    def volume(self) -> int:
        return self._volume

    def execute(self) -> None:
        self._prev = self._player.set_volume(self._volume)

    def undo(self) -> None:
        if self._prev is None:
            return
        self._player.set_volume(self._prev)
