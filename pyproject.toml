[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chipemu"
version = "0.1.0"
description = "Building blocks for a CHIP-8 machine: registers, frame buffer, pygame window, scancodes and bit helpers"
requires-python = ">=3.10"
keywords = ["chip-8", "chip8", "emulator", "retro", "pygame", "framebuffer"]
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
    "Topic :: System :: Emulators",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chipemu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
