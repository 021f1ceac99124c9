"""Coefficient-form polynomial helpers.

Coefficients are ascending: coeffs[i] multiplies X^i. These are the reference
evaluators the domains are checked against; the domains themselves never go
through them.
"""

import galois

from primitives.field import ElementLike, PrimeField, VectorLike


def evaluate_polynomial(field: PrimeField, coeffs: VectorLike, x: ElementLike) -> galois.FieldArray:
    """Evaluate sum_i coeffs[i] * x^i by Horner's rule."""
    coeffs = field.array(coeffs)
    x = field.element(x)

    acc = field.zero
    for c in reversed(coeffs):
        acc = acc * x + c
    return acc


def evaluate_on_points(field: PrimeField, coeffs: VectorLike, points: VectorLike) -> galois.FieldArray:
    """Evaluate one polynomial at many points (Horner, vectorised over points)."""
    coeffs = field.array(coeffs)
    points = field.array(points)

    acc = field.zeros(len(points))
    for c in reversed(coeffs):
        acc = acc * points + c
    return acc


def vanishing_coefficients(field: PrimeField, points: VectorLike) -> galois.FieldArray:
    """Coefficients of prod_j (X - points[j]), length len(points) + 1.

    Example:
        vanishing_coefficients(F, [1, 2]) -> [2, -3, 1]   # X^2 - 3X + 2
    """
    points = field.array(points)

    coeffs = field.zeros(len(points) + 1)
    coeffs[0] = field.one
    for k, p in enumerate(points):
        # Multiply the degree-k polynomial in coeffs[:k+1] by (X - p)
        shifted = field.zeros(len(coeffs))
        shifted[1:k + 2] = coeffs[:k + 1]
        coeffs = shifted - p * coeffs
    return coeffs
