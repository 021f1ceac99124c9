"""Prime field descriptors built on the galois library.

A PrimeField bundles a galois FieldArray class with the constants an
evaluation domain needs from its field: the 2-adicity s of p - 1 and a fixed
multiplicative generator. Descriptors are plain values, so any number of
fields can be used side by side.

Conventions:
    - Field elements are galois scalars, vectors are galois FieldArrays.
    - Coefficient vectors are in ascending order [a0, a1, a2, ...].
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

import galois
import numpy as np

ElementLike = Union[int, galois.FieldArray]
VectorLike = Union[Sequence[int], np.ndarray, galois.FieldArray]

# --- Field Descriptor ---

@dataclass(frozen=True)
class PrimeField:
    """Arithmetic parameters of GF(p) used by the radix-2 domains.

    Fields:
        name: Human readable name (e.g. "goldilocks")
        GF: galois FieldArray class for GF(p)
        two_adicity: Largest s with 2^s | p - 1
        multiplicative_generator: Generator of the multiplicative group
    """
    name: str
    GF: type
    two_adicity: int
    multiplicative_generator: int

    @property
    def order(self) -> int:
        return self.GF.order

    @property
    def zero(self) -> galois.FieldArray:
        return self.GF(0)

    @property
    def one(self) -> galois.FieldArray:
        return self.GF(1)

    @property
    def generator(self) -> galois.FieldArray:
        return self.GF(self.multiplicative_generator)

    @property
    def odd_factor(self) -> int:
        """Odd part t of p - 1 = 2^s * t."""
        return (self.order - 1) >> self.two_adicity

    def element(self, x: ElementLike) -> galois.FieldArray:
        """Lift an int (or galois scalar) into this field."""
        if isinstance(x, self.GF):
            return x
        return self.GF(int(x) % self.order)

    def array(self, xs: VectorLike) -> galois.FieldArray:
        """Lift a sequence of ints into a FieldArray of this field."""
        if isinstance(xs, self.GF):
            return xs
        if len(xs) == 0:
            return self.GF.Zeros(0)
        return self.GF([int(x) % self.order for x in xs])

    def zeros(self, n: int) -> galois.FieldArray:
        return self.GF.Zeros(n)

    def __repr__(self) -> str:
        return f"PrimeField({self.name}, p={self.order}, s={self.two_adicity})"


def prime_field(name: str, prime: int, generator: Optional[int] = None) -> PrimeField:
    """Build a PrimeField descriptor for GF(prime).

    The galois class is always the default GF(prime), so its roots of unity
    are the ones galois.ntt / galois.intt transform with. The generator is
    kept separately for the coset shift and coset division.

    Args:
        name: Descriptor name
        prime: Field characteristic (must be prime)
        generator: Multiplicative generator; galois's primitive element if None

    Returns:
        PrimeField with the 2-adicity computed from prime - 1

    Raises:
        ValueError: If generator is not a primitive root modulo prime
    """
    GF = galois.GF(prime)
    if generator is None:
        generator = int(GF.primitive_element)
    elif not galois.is_primitive_root(int(generator) % prime, prime):
        raise ValueError(f"{generator} is not a multiplicative generator of GF({prime})")

    return PrimeField(
        name=name,
        GF=GF,
        two_adicity=_two_adicity(prime - 1),
        multiplicative_generator=int(generator) % prime,
    )


def _two_adicity(n: int) -> int:
    """Exponent of the largest power of two dividing n."""
    assert n > 0
    s = 0
    while n % 2 == 0:
        n //= 2
        s += 1
    return s


# --- Preset Fields ---

GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

GOLDILOCKS = prime_field("goldilocks", GOLDILOCKS_PRIME, generator=7)
"""Goldilocks field p = 2^64 - 2^32 + 1 (s = 32)."""


# --- Unity Roots ---

def get_root_of_unity(field: PrimeField, n: int) -> galois.FieldArray:
    """Return galois's primitive n-th root of unity, n a power of two.

    This is the generator galois.ntt uses for a transform of size n.

    Raises:
        ValueError: If n is not a power of two or exceeds 2^s
    """
    if n <= 0 or (n & (n - 1)) != 0:
        raise ValueError(f"Root of unity order must be a power of two, got {n}")
    log_n = n.bit_length() - 1
    if log_n > field.two_adicity:
        raise ValueError(
            f"Root of unity order 2^{log_n} exceeds 2-adicity {field.two_adicity} of {field.name}"
        )
    return field.GF.primitive_root_of_unity(n)


# --- Coset Shift ---

def get_coset_shift(field: PrimeField) -> galois.FieldArray:
    """Fixed element outside every radix-2 subgroup: generator squared.

    g^2 has order (p-1)/2 = 2^(s-1) * t, so it escapes the 2^s subgroup
    whenever t > 1.
    """
    g = field.generator
    return g * g
