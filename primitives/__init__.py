"""Primitives - field descriptors and power-of-two transforms."""

from primitives.batch_inverse import batch_inverse
from primitives.field import (
    GOLDILOCKS,
    GOLDILOCKS_PRIME,
    PrimeField,
    get_coset_shift,
    get_root_of_unity,
    prime_field,
)
from primitives.ntt import (
    NTT,
    multiply_by_powers,
    radix2_evaluate_all_lagrange_polynomials,
)
from primitives.polynomial import (
    evaluate_on_points,
    evaluate_polynomial,
    vanishing_coefficients,
)

__all__ = [
    # Field
    "PrimeField",
    "prime_field",
    "GOLDILOCKS",
    "GOLDILOCKS_PRIME",
    "get_root_of_unity",
    "get_coset_shift",
    # NTT
    "NTT",
    "radix2_evaluate_all_lagrange_polynomials",
    "multiply_by_powers",
    # Batch inversion
    "batch_inverse",
    # Polynomials
    "evaluate_polynomial",
    "evaluate_on_points",
    "vanishing_coefficients",
]
