"""Number Theoretic Transform over power-of-two subgroups of a prime field.

Provides the two power-of-two primitives the evaluation domains are built on:

- NTT: transform engine for one subgroup size (galois.ntt / galois.intt)
- radix2_evaluate_all_lagrange_polynomials: Lagrange basis of a subgroup at t
"""

import galois
import numpy as np

from primitives.batch_inverse import batch_inverse
from primitives.field import ElementLike, PrimeField, VectorLike, get_root_of_unity

# --- NTT Engine ---

class NTT:
    """NTT engine for the order-n subgroup generated by omega.

    omega is get_root_of_unity(field, n), the root galois.ntt transforms with.
    """

    def __init__(self, field: PrimeField, domain_size: int) -> None:
        """Initialize NTT engine for given domain size."""
        assert domain_size > 0, "Domain size must be positive"
        assert (domain_size & (domain_size - 1)) == 0, "Domain size must be power of 2"

        self.field = field
        self.n = domain_size
        self.n_bits = _log2(domain_size)
        self.omega = get_root_of_unity(field, domain_size)

        # roots[k] = omega^k
        self.roots = _precompute_roots(field.GF, self.omega, domain_size)

    def ntt(self, coeffs: VectorLike) -> galois.FieldArray:
        """Forward NTT: coefficients -> evaluations at omega^i."""
        coeffs = self.field.array(coeffs)
        assert len(coeffs) == self.n, f"Expected {self.n} coefficients, got {len(coeffs)}"
        return self.field.array(galois.ntt(coeffs))

    def intt(self, evals: VectorLike, scaled: bool = True) -> galois.FieldArray:
        """Inverse NTT: evaluations at omega^i -> coefficients.

        With scaled=False the 1/n normalisation is skipped, giving
        sum_k X[k] * omega^(-j*k).
        """
        evals = self.field.array(evals)
        assert len(evals) == self.n, f"Expected {self.n} evaluations, got {len(evals)}"
        return self.field.array(galois.intt(evals, scaled=scaled))


# --- Lagrange Basis ---

def radix2_evaluate_all_lagrange_polynomials(
    field: PrimeField,
    n: int,
    t: ElementLike,
) -> galois.FieldArray:
    """Evaluate every Lagrange basis polynomial of the order-n subgroup at t.

    For t outside the subgroup:
        L_i(t) = (t^n - 1) / n * w^i / (t - w^i)
    For t = w^j the result is the unit vector e_j.

    Args:
        field: Field descriptor
        n: Subgroup order (power of two)
        t: Evaluation point

    Returns:
        FieldArray of length n with result[i] = L_i(t)
    """
    t = field.element(t)
    if n == 1:
        return field.GF.Ones(1)

    omega = get_root_of_unity(field, n)
    points = _precompute_roots(field.GF, omega, n)

    z = t ** n - field.one
    if z == 0:
        # t is a subgroup point
        return field.GF(np.where(points == t, 1, 0))

    scale = z * field.element(n) ** -1
    return scale * points * batch_inverse(t - points)


# --- Helpers ---

def multiply_by_powers(a: galois.FieldArray, g: galois.FieldArray) -> galois.FieldArray:
    """Return a[i] * g^i, i.e. the coefficients of p(g*X)."""
    return a * _precompute_roots(type(a), g, len(a))


def _log2(size: int) -> int:
    """Compute log2 of size (must be power of 2)."""
    assert size != 0
    res = 0
    while size != 1:
        size >>= 1
        res += 1
    return res


def _precompute_roots(field_type: type, omega: galois.FieldArray, n_roots: int) -> galois.FieldArray:
    """Precompute powers: roots[k] = omega^k for k < n_roots."""
    roots = field_type.Zeros(n_roots)
    if n_roots == 0:
        return roots
    roots[0] = field_type(1)
    for i in range(1, n_roots):
        roots[i] = roots[i - 1] * omega
    return roots
