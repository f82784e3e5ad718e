[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flujo"
version = "0.1.0"
description = "Timed copy, encrypt, hash and verify pipeline over a file, run in a staged and an in-memory variant"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "pipeline", "caesar", "cipher", "checksum", "file-io"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flujo = "flujo.pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["flujo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
