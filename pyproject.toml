[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elfprovider"
version = "0.1.0"
description = "Helpers for running Kubernetes cluster machines on ELF virtualization: provider IDs, network status, Tower value conversions, error checks, version info and controller contexts."
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "cluster-api", "elf", "tower", "virtualization", "provider"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["elfprovider"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
