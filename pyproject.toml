[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "g729dsp"
version = "1.1.1"
description = "Bit-exact fixed-point signal processing blocks of the G.729 speech codec"
requires-python = ">=3.10"
dependencies = []
keywords = ["g729", "speech", "codec", "fixed-point", "dsp", "lsp", "postfilter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
    "Topic :: Communications :: Internet Phone",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["g729dsp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
