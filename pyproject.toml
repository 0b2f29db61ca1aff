[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "packemon"
version = "0.1.0"
description = "Packet building and parsing helpers: OSPF, UDP, TCP options, captured-packet decoding and checksums"
requires-python = ">=3.10"
dependencies = []
keywords = ["packet", "ospf", "udp", "tcp", "arp", "dns", "network", "checksum"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["packemon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
