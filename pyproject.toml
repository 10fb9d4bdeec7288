[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "irdecode"
version = "0.1.0"
description = "Decode infrared remote-control bursts (Sony SIRC-12, JVC, NEC) from edge timings"
requires-python = ">=3.10"
dependencies = []
keywords = ["infrared", "ir", "remote control", "sony", "sirc", "jvc", "nec", "decoder"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["irdecode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
