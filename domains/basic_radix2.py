"""Plain radix-2 evaluation domain: the subgroup of order m = 2^k."""

import logging

import galois

from domains.errors import InvalidDomainSize, PreconditionViolated
from domains.evaluation_domain import check_index, fit_to_domain, require_length, write_back
from primitives.field import ElementLike, PrimeField, VectorLike
from primitives.ntt import NTT, radix2_evaluate_all_lagrange_polynomials

logger = logging.getLogger(__name__)


class BasicRadix2Domain:
    """Evaluation domain {omega^i : 0 <= i < m} for m a power of two.

    Attributes:
        field: Field descriptor
        m: Domain size, 1 < m <= 2^s
        omega: Primitive m-th root of unity
    """

    def __init__(self, field: PrimeField, m: int) -> None:
        if m <= 1:
            raise InvalidDomainSize(f"basic_radix2: expected m > 1, got {m}")
        if (m & (m - 1)) != 0:
            raise InvalidDomainSize(f"basic_radix2: expected m to be a power of two, got {m}")
        log_m = m.bit_length() - 1
        if log_m > field.two_adicity:
            raise InvalidDomainSize(
                f"basic_radix2: expected log2(m) <= {field.two_adicity} for {field.name}, got {log_m}"
            )

        self.field = field
        self.m = m
        self._ntt = NTT(field, m)
        self.omega = self._ntt.omega

        logger.debug("basic_radix2 domain over %s: m=%d omega=%s", field.name, m, self.omega)

    def fft(self, a: VectorLike) -> galois.FieldArray:
        coeffs = fit_to_domain(self.field, a, self.m, "basic_radix2.fft")
        return write_back(self.field, a, self._ntt.ntt(coeffs))

    def inverse_fft(self, a: VectorLike) -> galois.FieldArray:
        evals = fit_to_domain(self.field, a, self.m, "basic_radix2.inverse_fft")
        return write_back(self.field, a, self._ntt.intt(evals))

    def evaluate_all_lagrange_polynomials(self, t: ElementLike) -> galois.FieldArray:
        return radix2_evaluate_all_lagrange_polynomials(self.field, self.m, t)

    def get_domain_element(self, idx: int) -> galois.FieldArray:
        check_index(idx, self.m)
        return self._ntt.roots[idx]

    def compute_vanishing_polynomial(self, t: ElementLike) -> galois.FieldArray:
        """Z(t) = t^m - 1."""
        return self.field.element(t) ** self.m - self.field.one

    def add_poly_z(self, coeff: ElementLike, H: VectorLike) -> galois.FieldArray:
        """H += coeff * (X^m - 1), H of length m + 1."""
        coeff = self.field.element(coeff)
        out = require_length(self.field, H, self.m + 1, "basic_radix2.add_poly_z").copy()

        out[self.m] += coeff
        out[0] -= coeff
        return write_back(self.field, H, out)

    def divide_by_z_on_coset(self, P: VectorLike) -> galois.FieldArray:
        """Divide values on the coset g * <omega> by Z(g * omega^i) = g^m - 1."""
        values = require_length(self.field, P, self.m, "basic_radix2.divide_by_z_on_coset")

        z = self.field.generator ** self.m - self.field.one
        if z == 0:
            raise PreconditionViolated("basic_radix2.divide_by_z_on_coset: Z vanishes on the coset")
        return write_back(self.field, P, values * z ** -1)

    def __repr__(self) -> str:
        return f"BasicRadix2Domain({self.field.name}, m={self.m})"
