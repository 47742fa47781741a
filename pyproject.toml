[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ofdmkit"
version = "0.1.0"
description = "Building blocks for an audio-band OFDM modem: scrambling PRNGs, Huffman symbol trees, sample buffers, WAVE headers and plot output"
requires-python = ">=3.10"
dependencies = []
keywords = ["ofdm", "modem", "huffman", "drand48", "prng", "wave", "dsp", "ham radio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["ofdmkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
