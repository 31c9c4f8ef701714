[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hackvm"
version = "0.1.0"
description = "Translate Hack VM stack-machine code into Hack assembly"
requires-python = ">=3.10"
keywords = ["hack", "vm", "assembly", "translator", "stack machine", "compiler"]
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
    "Topic :: Software Development :: Compilers",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vm-translator = "hackvm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hackvm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
