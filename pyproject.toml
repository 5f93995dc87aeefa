[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oxisynth"
version = "0.1.0"
description = "Building blocks of a SoundFont synthesizer: chorus, reverb, unit conversions, generators, channels and font bank"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "soundfont", "synthesizer", "midi", "chorus", "reverb"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oxisynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
