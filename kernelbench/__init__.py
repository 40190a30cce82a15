"""Deterministic, self-checking compute kernels for benchmarking."""

__version__ = "0.1.0"

__all__ = [
    "cubic",
    "edn",
    "md5",
    "minver",
    "montgomery",
    "nbody",
    "sha256",
]