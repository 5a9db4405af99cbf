[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "morsewav"
version = "0.1.0"
description = "Render text as Morse code audio in 16-bit mono WAV/RF64 or raw PCM"
requires-python = ">=3.10"
dependencies = []
keywords = ["morse", "cw", "wav", "rf64", "audio", "synthesis", "ham radio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
morsewav = "morsewav.app:main"

[tool.hatch.build.targets.wheel]
packages = ["morsewav"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
