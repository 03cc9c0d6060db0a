[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hackasm"
version = "0.1.0"
description = "Assembler for the Hack machine language: turns .asm sources into .hack text files of binary words"
requires-python = ">=3.10"
dependencies = []
keywords = ["hack", "assembler", "nand2tetris", "machine-code"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Assemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hackasm = "hackasm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hackasm"]

[tool.pytest.ini_options]
addopts = "-ra"
