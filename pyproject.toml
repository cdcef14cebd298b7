[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toycpu"
version = "0.1.0"
description = "A tiny four-instruction processor with byte-addressed memory and a demo program"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "cpu", "instruction-set", "simulation", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toycpu = "toycpu.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["toycpu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
