"""Evaluation domain interface and shared buffer handling.

An evaluation domain is an ordered set of m field points. A polynomial of
degree < m is held either as m coefficients or as its m values on those
points; fft / inverse_fft convert between the two.

Every domain strategy (BasicRadix2Domain, ExtendedRadix2Domain) satisfies the
EvaluationDomain protocol structurally; there is no shared base class.
"""

from typing import Protocol

import galois

from domains.errors import PreconditionViolated, SizeMismatch
from primitives.field import ElementLike, PrimeField, VectorLike


class EvaluationDomain(Protocol):
    field: PrimeField
    m: int

    def fft(self, a: VectorLike) -> galois.FieldArray: ...

    def inverse_fft(self, a: VectorLike) -> galois.FieldArray: ...

    def evaluate_all_lagrange_polynomials(self, t: ElementLike) -> galois.FieldArray: ...

    def get_domain_element(self, idx: int) -> galois.FieldArray: ...

    def compute_vanishing_polynomial(self, t: ElementLike) -> galois.FieldArray: ...

    def add_poly_z(self, coeff: ElementLike, H: VectorLike) -> galois.FieldArray: ...

    def divide_by_z_on_coset(self, P: VectorLike) -> galois.FieldArray: ...


# --- Buffer Handling ---
# Transforms accept lists or FieldArrays. Short inputs are zero-padded, long
# inputs are rejected. A FieldArray argument of the exact length is also
# overwritten with the result.

def fit_to_domain(field: PrimeField, a: VectorLike, m: int, op: str) -> galois.FieldArray:
    """Return a as a length-m FieldArray, zero-padding short input."""
    a = field.array(a)
    if len(a) > m:
        raise SizeMismatch(f"{op}: expected at most {m} elements, got {len(a)}")
    if len(a) < m:
        padded = field.zeros(m)
        padded[:len(a)] = a
        return padded
    return a


def require_length(field: PrimeField, a: VectorLike, n: int, op: str) -> galois.FieldArray:
    """Return a as a FieldArray, insisting on exactly n elements."""
    a = field.array(a)
    if len(a) != n:
        raise PreconditionViolated(f"{op}: expected {n} elements, got {len(a)}")
    return a


def write_back(field: PrimeField, target: VectorLike, result: galois.FieldArray) -> galois.FieldArray:
    """Copy result into target when target is a same-length FieldArray of the field."""
    if isinstance(target, field.GF) and target.shape == result.shape:
        target[:] = result
    return result


def check_index(idx: int, m: int) -> None:
    if not 0 <= idx < m:
        raise PreconditionViolated(f"get_domain_element: index {idx} out of range [0, {m})")
