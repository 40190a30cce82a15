# kernelbench

A collection of small, deterministic compute kernels written in pure
Python. Each kernel comes with a fixed workload and a check on its result,
so it can serve as a repeatable benchmark or as a correctness test.

## Kernels

| Module | What it computes |
| --- | --- |
| `kernelbench.montgomery` | (a*b)**4 mod m with 64-bit words, by plain 128-bit reduction and by Montgomery multiplication |
| `kernelbench.cubic` | Real roots of cubic polynomials |
| `kernelbench.edn` | Fixed-point DSP kernels: vector multiply, dot product, FIR, IIR, lattice synthesis, JPEG DCT |
| `kernelbench.md5` | MD5 digests |
| `kernelbench.minver` | Square matrix inversion with partial pivoting, and matrix multiplication |
| `kernelbench.nbody` | Momentum offset and total energy of the Sun and the four outer planets |
| `kernelbench.sha256` | SHA-256 with incremental updates and truncated digests |

Every module provides `benchmark(...)`, which runs its workload a given
number of times and returns the result of the last run, and `verify(...)`,
which returns `True` when that result matches the known-good value:

| Module | `benchmark` returns | Check |
| --- | --- | --- |
| `montgomery` | `benchmark(rpt)` → error flag (0 or 1) | `verify(errors)` |
| `cubic` | `benchmark(rpt)` → `(three_roots, one_root)` | `verify(results)` |
| `edn` | `benchmark(rpt)` → `EdnResult(output, c, d, e)` | `verify(result)` |
| `md5` | `benchmark(rpt, length=1000)` → sum of the four state words; prints the hex digest after each run | `verify(result)` |
| `minver` | `benchmark(rpt)` → `(product, inverse, det)` | `verify(result)` |
| `nbody` | `benchmark(rpt)` → `(bodies, total_energy)` | `verify(bodies, total_energy)` |
| `sha256` | `benchmark(rpt)` → 32-byte digest | `verify(digest)` |

## Installation

```
pip install kernelbench
```

The package has no runtime dependencies.

## Usage

```python
from kernelbench import cubic, md5, minver, montgomery, sha256

# Hashes
md5.md5_digest(b"abc")          # 16 bytes
sha256.sha256(b"abc")           # 32 bytes

h = sha256.Sha256()
h.update(b"ab")
h.update(b"c")
h.digest(16)                    # first 16 bytes; the context is reset

# Roots of x^3 - 10.5x^2 + 32x - 30
cubic.solve_cubic(1.0, -10.5, 32.0, -30.0)

# 64-bit modular arithmetic
montgomery.fourth_power_montgomery(3, 5, 0xFAE849273928F89F)

# Matrix inversion; raises minver.SingularMatrixError on a tiny pivot
inverse, det = minver.minver([[4.0, 7.0], [2.0, 6.0]])

# Run a workload and check it
errors = montgomery.benchmark(10)
assert montgomery.verify(errors)
```

`cubic.solve_cubic` raises `ValueError` when the leading coefficient is
zero; `minver.mmul` and `minver.minver` raise `ValueError` for matrices of
unsuitable shape.

## What this package does not do

There is no command-line runner and no timing or reporting harness. The
package only performs the workloads and checks their results; to time a
kernel, wrap its `benchmark` call with `timeit` or any timer you like:

```python
import timeit
from kernelbench import nbody

seconds = timeit.timeit(lambda: nbody.benchmark(10), number=1)
```

## Running the tests

```
pip install "kernelbench[test]"
pytest
```