"""The synthesizer's set of MIDI channels."""

from __future__ import annotations

from typing import Iterator

from .channel import Channel
from .settings import InterpolationMethod


class ChannelOutOfRangeError(IndexError):
    """A channel number beyond the channels the synthesizer has."""


class ChannelPool:
    """Fixed-size collection of channels, numbered from 0."""

    def __init__(self, count: int, interpolation: InterpolationMethod) -> None:
        self._channels = []
        for channel_id in range(count):
            channel = Channel(channel_id)
            channel.interp_method = interpolation
            self._channels.append(channel)

    def get(self, id: int) -> Channel:
        """Return channel ``id``; raises :class:`ChannelOutOfRangeError` if there is none."""
        if not 0 <= id < len(self._channels):
            raise ChannelOutOfRangeError(f"channel {id} is out of range")
        return self._channels[id]

    def __len__(self) -> int:
        return len(self._channels)

    def __iter__(self) -> Iterator[Channel]:
        return iter(self._channels)

    def __getitem__(self, id: int) -> Channel:
        return self.get(id)