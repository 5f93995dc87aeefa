# oxisynth

The core pieces of a SoundFont synthesizer, in pure Python with no
third-party dependencies:

- `oxisynth.chorus`: a modulated delay-line chorus (`Chorus`, `ChorusParams`, `ChorusMode`).
- `oxisynth.reverb`: a stereo comb/all-pass reverb (`Reverb`, `ReverbParams`).
- `oxisynth.conv`: unit conversions. It covers cents to Hz (`ct2hz`, `ct2hz_real`,
  `act2hz`), centibels to amplitude (`cb2amp`, `atten2amp`), timecents to
  seconds (`tc2sec`, `tc2sec_delay`, `tc2sec_attack`, `tc2sec_release`), the
  pan law (`pan`) and the concave/convex modulator curves (`concave`, `convex`).
- `oxisynth.tuning`: key-based and octave-based tunings (`Tuning`).
- `oxisynth.generator`: SoundFont 2 generator numbers, their defaults and
  NRPN scaling (`GeneratorType`, `Generator`, `GeneratorList`,
  `default_values`, `gen_scale_nrpn`).
- `oxisynth.settings`: validated synth settings (`SynthDescriptor`,
  `Settings`, `InterpolationMethod`, `SettingsError`, `RangeError`).
- `oxisynth.channel` and `oxisynth.channel_pool`: per-channel MIDI state
  (`Channel`, `ChannelPool`, `ChannelOutOfRangeError`).
- `oxisynth.arena` and `oxisynth.font_bank`: a generational arena (`Arena`,
  `Index`) and the stack of loaded fonts with bank offsets (`FontBank`,
  `BankOffsets`).

## Installation

```
pip install .
```

## Examples

Run a block of samples through the effects. `process_mix` does not change
its arguments. It returns new left and right lists with the wet signal added.
`process_replace` returns the wet signal alone.

```python
from oxisynth.chorus import Chorus, ChorusParams, ChorusMode
from oxisynth.reverb import Reverb, ReverbParams

chorus = Chorus(44100.0)
chorus.set_params(ChorusParams(nr=3, level=2.0, speed=0.3, depth=8.0, mode=ChorusMode.SINE))

reverb = Reverb()
reverb.set_params(ReverbParams(roomsize=0.2, damp=0.0, width=0.5, level=0.9))

dry = [0.0] * 64
dry[0] = 1.0
left = [0.0] * 64
right = [0.0] * 64
left, right = reverb.process_mix(dry, left, right)
left, right = chorus.process_mix(dry, left, right)

wet_left, wet_right = reverb.process_replace(dry)
```

When a setting is out of range, the effect clamps it and logs a warning
through the `logging` module. `params()` reports the values that are in
effect.

Validate settings:

```python
from oxisynth.settings import Settings, SynthDescriptor, SettingsError

settings = Settings.from_descriptor(SynthDescriptor(sample_rate=48000.0))
print(settings.min_note_length_ticks)  # 480

try:
    Settings.from_descriptor(SynthDescriptor(midi_channels=20))
except SettingsError as err:
    print("rejected:", err)
```

A value outside its range raises `RangeError`, which is a subclass of
`SettingsError`.

Tunings and conversions:

```python
from oxisynth.tuning import Tuning
from oxisynth.conv import ct2hz

tuning = Tuning.new_octave_tuning([-33.0] + [0.0] * 11)
print(tuning.pitch[60])  # 5967.0
print(ct2hz(6900.0))     # 440.0
```

Channels:

```python
from oxisynth.channel_pool import ChannelPool, ChannelOutOfRangeError
from oxisynth.settings import InterpolationMethod

pool = ChannelPool(16, InterpolationMethod.FOURTH_ORDER)
print(pool.get(0).cc(7))  # 100, the default channel volume

try:
    pool.get(16)
except ChannelOutOfRangeError:
    print("no such channel")
```

Font management works with any object that has a `preset(bank, prognum)`
method:

```python
from oxisynth.font_bank import FontBank

class Font:
    def preset(self, bank, prognum):
        return f"preset {bank}:{prognum}" if bank == 0 else None

bank = FontBank()
font_id = bank.add_font(Font())
print(bank.find_preset(0, 5))   # (Index(id=0, generation=0), 'preset 0:5')
bank.bank_offsets.set(font_id, 1)
print(bank.preset(font_id, 1, 5))  # 'preset 0:5'
bank.remove_font(font_id)
print(bank.count())  # 0
```

## What this package does not do

These are building blocks, not a complete synthesizer. The package has
these limits:

- It does not read SoundFont files, and it defines no font or preset types
  of its own.
- It has no voices, so it does no sample playback, envelopes or filtering.
- It does not handle MIDI events or note-on and note-off logic.
- It does not write audio output or drive an audio device.
- It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```