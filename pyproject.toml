[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spotkit"
version = "0.1.0"
description = "Building blocks for a networked music player: playback configuration, audio sinks, catalogue metadata models and a local-network discovery endpoint."
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "audio",
    "player",
    "metadata",
    "playlist",
    "lyrics",
    "discovery",
    "sink",
]
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
    "Topic :: Multimedia :: Sound/Audio :: Players",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["spotkit"]

[tool.hatch.build.targets.sdist]
include = [
    "spotkit",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
