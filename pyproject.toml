[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mac128k"
version = "0.1.0"
description = "Macintosh 128K emulator core: memory bus, VIA, IWM and a monochrome framebuffer display"
requires-python = ">=3.10"
keywords = ["emulator", "macintosh", "m68k", "via", "iwm", "retrocomputing"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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
packages = ["mac128k"]

[tool.pytest.ini_options]
addopts = "-ra"
