[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernelbench"
version = "0.1.0"
description = "Small, self-checking compute kernels for benchmarking: Montgomery multiplication, cubic solving, fixed-point DSP filters, MD5, matrix inversion, n-body energy and SHA-256."
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "kernels", "montgomery", "cubic", "dsp", "md5", "sha256", "matrix-inversion", "nbody"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["kernelbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
