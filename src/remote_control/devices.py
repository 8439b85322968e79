from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

__all__ = [
    "DeviceError",
    "Device",
    "SwitchableDevice",
    "Light",
    "TV",
    "Fan",
    "MusicPlayer",
]

# ==========================
# Module: devices
# Purpose: Receivers owned by the client. Commands act on them; the remote
#          control never constructs or inspects them.
# ==========================


class DeviceError(RuntimeError):
    """
    Raised when a device operation is rejected (e.g., a speed or volume out of range).
    """


class Device(ABC):
    """
    Receiver contract: a primary action and its inverse.

    Both actions are synchronous and idempotent.

    :param name: Device identifier used in logs and command descriptions.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def on(self) -> None:
        """
        Primary action.
        """

    @abstractmethod
    def off(self) -> None:
        """
        Inverse action.
        """

    @property
    @abstractmethod
    def is_on(self) -> bool:
        """
        :return: True after `on()`, False after `off()`.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, is_on={self.is_on})"


class SwitchableDevice(Device):
    """
    Device with a single power flag, initially off.

    :param name: Device identifier.
    """

    label = "Device"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._on = False

    @property
    def is_on(self) -> bool:
        return self._on

    def on(self) -> None:
        self._on = True
        logger.info("%s '%s' is ON", self.label, self.name)

    def off(self) -> None:
        self._on = False
        logger.info("%s '%s' is OFF", self.label, self.name)


class Light(SwitchableDevice):
    label = "Light"


class TV(SwitchableDevice):
    label = "TV"


class Fan(SwitchableDevice):
    """
    Fan with an adjustable speed.

    :param name: Device identifier.
    :param speed: Initial speed in [0, MAX_SPEED].
    """

    label = "Fan"
    MAX_SPEED = 5

    def __init__(self, name: str, speed: int = 0) -> None:
        super().__init__(name)
        self._check_speed(speed)
        self.speed = speed

    def _check_speed(self, speed: int) -> None:
        if not isinstance(speed, int) or not 0 <= speed <= self.MAX_SPEED:
            raise DeviceError(f"[{self.name}] Speed must be between 0 and {self.MAX_SPEED}, got {speed!r}.")

    def set_speed(self, speed: int) -> int:
        """
        Sets the fan speed and returns the previous one (for undo).

        :param speed: New speed.
        :return: Previous speed.
        :raises DeviceError: If the speed is out of range.
        """
        self._check_speed(speed)
        prev = self.speed
        self.speed = speed
        logger.info("Fan '%s' speed set to %d", self.name, speed)
        return prev


class MusicPlayer(Device):
    """
    Music player. `play()` and `stop()` are its primary and inverse actions.

    :param name: Device identifier.
    :param volume: Initial volume in [0, MAX_VOLUME].
    """

    MAX_VOLUME = 100

    def __init__(self, name: str, volume: int = 50) -> None:
        super().__init__(name)
        self._playing = False
        self._check_volume(volume)
        self.volume = volume

    def _check_volume(self, volume: int) -> None:
        if not isinstance(volume, int) or not 0 <= volume <= self.MAX_VOLUME:
            raise DeviceError(f"[{self.name}] Volume must be between 0 and {self.MAX_VOLUME}, got {volume!r}.")

    @property
    def is_on(self) -> bool:
        return self._playing

    @property
    def is_playing(self) -> bool:
        return self._playing

    def play(self) -> None:
        self._playing = True
        logger.info("MusicPlayer '%s' is playing", self.name)

    def stop(self) -> None:
        self._playing = False
        logger.info("MusicPlayer '%s' is stopped", self.name)

    def on(self) -> None:
        self.play()

    def off(self) -> None:
        self.stop()

    def set_volume(self, volume: int) -> int:
        """
        Sets the volume and returns the previous one (for undo).

        :param volume: New volume.
        :return: Previous volume.
        :raises DeviceError: If the volume is out of range.
        """
        self._check_volume(volume)
        prev = self.volume
        self.volume = volume
        logger.info("MusicPlayer '%s' volume set to %d", self.name, volume)
        return prev
