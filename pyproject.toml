[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sponge_tcp"
version = "0.1.0"
description = "The sending half of a TCP endpoint: segmentation, windowing and retransmission."
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "networking", "retransmission", "sequence numbers", "protocol"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sponge_tcp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
