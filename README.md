# pastaposeidon

Pure-Python arithmetic in the Pallas base field, together with the
parameters of the Poseidon-128 permutation with the x⁵ S-box, width 3 and
rate 2 (8 full rounds, 56 partial rounds, secure MDS index 0).

## What it provides

- `pastaposeidon.field`
  - `Fp`: an element of the Pallas base field, kept in canonical form.
    - `Fp.from_raw(limbs)` builds an element from four little-endian 64-bit
      limbs and reduces it modulo p. It raises `ValueError` if there are
      not exactly four limbs or if a limb does not fit in 64 bits.
    - `Fp.from_repr(data)` decodes a 32-byte little-endian encoding. It
      raises `ValueError` for the wrong length or for a value that is not
      below p. `to_repr()` gives the encoding back.
    - Elements support `+`, `-`, `*` and unary `-`, also with plain ints.
      They can be compared and hashed, and `int(x)` gives the value.
    - `invert()` raises `ZeroDivisionError` for zero. `pow(n)` takes a
      non-negative exponent. There are also `square()` and `is_zero()`.
    - `sqrt()` returns a square root, or raises `ValueError` if the value
      is not a quadratic residue.
  - `sqrt_tonelli_shanks(value, t_minus_1_over_2)`: the Tonelli–Shanks
    square root that `sqrt` uses. It takes (T − 1)/2 either as an int or
    as four limbs.
  - The constants `MODULUS`, `S`, `T`, `GENERATOR`, `ZERO`, `ONE` and
    `ROOT_OF_UNITY`.
- `pastaposeidon.mds.generate_mds(elements, width, select)`: builds a
  `width × width` Cauchy MDS matrix and its inverse from an iterable of
  field elements.
  - It draws elements in batches of `2 * width`, throws away batches that
    contain repeats, and skips the first `select` valid batches.
  - It raises `ValueError` if the supply runs out or if a matrix entry
    would have a zero denominator.
- `pastaposeidon.pallas_constants`: the standard Pallas parameters.
  `round_constants()` gives 64 rounds of 3 elements each, `mds()` gives the
  3 × 3 MDS matrix and `mds_inv()` gives its inverse.
  `pastaposeidon.pallas_early_rounds.early_round_constants()` gives the
  first 32 of those rounds.
- `pastaposeidon.spec`
  - `P128Pow5T3` has `full_rounds()` (8), `partial_rounds()` (56),
    `sbox(x)` (x⁵) and `constants()`. `constants()` returns the round
    constants, the MDS matrix and its inverse.
  - `P128Pow5T3Compact` returns the same matrices, but its round constants
    are transformed. In each partial round the second and third constants
    are moved through the MDS matrix into the following round.
  - `mat_mul(matrix, vector)` multiplies a square matrix by a vector.

## What it does not do

The package provides the field, the parameters and the specification
objects. It does not apply the permutation to a state, and it has no
sponge or hash function. It has no command-line interface.

## Installation

```
pip install .
```

No third-party libraries are needed at runtime.

## Example

```python
from pastaposeidon.field import Fp
from pastaposeidon.spec import P128Pow5T3

spec = P128Pow5T3()
round_constants, mds, mds_inv = spec.constants()
assert len(round_constants) == spec.full_rounds() + spec.partial_rounds()

x = Fp.from_raw([2, 0, 0, 0])
assert spec.sbox(x) == x.pow(5)
assert x * x.invert() == Fp.from_raw([1, 0, 0, 0])
```

## Running the tests

```
pip install .[test]
pytest
```