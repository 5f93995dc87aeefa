"""Building blocks of a SoundFont synthesizer: chorus and reverb effects, unit conversions, tunings, generators, settings, channels and a font bank."""

__version__ = "0.1.0"

__all__ = [
    "arena",
    "channel",
    "channel_pool",
    "chorus",
    "conv",
    "font_bank",
    "generator",
    "reverb",
    "settings",
    "tuning",
]