"""Extended radix-2 evaluation domain.

A domain of size m = 2 * small_m glued from two radix-2 halves:

    index i < small_m:   omega^i                 (the subgroup H)
    index i >= small_m:  shift * omega^(i - small_m)   (the coset shift * H)

omega is a primitive small_m-th root of unity and shift lies outside H, so the
halves are disjoint. Both transforms reduce to two independent size-small_m
radix-2 FFTs plus an O(m) mixing step.

Because small_m must be 2^s, this domain doubles the largest subgroup the
field offers: m = 2^(s+1).

Vanishing polynomial:
    Z(X) = (X^small_m - 1) * (X^small_m - shift^small_m)
         = X^m - (shift^small_m + 1) * X^small_m + shift^small_m
"""

import logging

import galois

from domains.errors import InvalidDomainSize, PreconditionViolated
from domains.evaluation_domain import check_index, fit_to_domain, require_length, write_back
from primitives.field import ElementLike, PrimeField, VectorLike, get_coset_shift
from primitives.ntt import NTT, multiply_by_powers, radix2_evaluate_all_lagrange_polynomials

logger = logging.getLogger(__name__)


class ExtendedRadix2Domain:
    """Evaluation domain H u shift*H of size m = 2^(s+1).

    Attributes:
        field: Field descriptor
        m: Domain size
        small_m: Size of each half, m // 2
        omega: Primitive small_m-th root of unity
        shift: Coset generator, shift^small_m != 1
    """

    def __init__(self, field: PrimeField, m: int) -> None:
        if m <= 1:
            raise InvalidDomainSize(f"extended_radix2: expected m > 1, got {m}")

        log_m = (m - 1).bit_length()  # ceil(log2(m))
        if log_m != field.two_adicity + 1:
            raise InvalidDomainSize(
                f"extended_radix2: expected ceil(log2(m)) == {field.two_adicity + 1} "
                f"for {field.name}, got {log_m}"
            )
        if m != 1 << log_m:
            raise InvalidDomainSize(f"extended_radix2: expected m == 2^{log_m}, got {m}")

        shift = get_coset_shift(field)
        shift_to_small_m = shift ** (m // 2)
        if shift_to_small_m == 1:
            # p - 1 has no odd factor, so shift * H would coincide with H
            raise InvalidDomainSize(
                f"extended_radix2: coset shift {shift} lies in the order-{m // 2} subgroup of {field.name}"
            )

        self.field = field
        self.m = m
        self.small_m = m // 2
        self._ntt = NTT(field, self.small_m)
        self.omega = self._ntt.omega
        self.shift = shift

        self._shift_inv = self.shift ** -1
        self._shift_to_small_m = shift_to_small_m

        logger.debug(
            "extended_radix2 domain over %s: m=%d omega=%s shift=%s",
            field.name, m, self.omega, self.shift,
        )

    # --- Transforms ---

    def fft(self, a: VectorLike) -> galois.FieldArray:
        """Coefficients -> values at the m domain points, in index order.

        Writing p(X) = sum_{i<small_m} (a[i] + a[small_m+i] * X^small_m) * X^i:
            on H:        X^small_m = 1, so p reduces to a0[i] = a[i] + a[small_m+i]
            on shift*H:  X = shift*Y, giving a1[i] = shift^i * (a[i] + shift^small_m * a[small_m+i])
        and each half is a plain radix-2 FFT with omega.

        Short input is zero-padded; input longer than m raises SizeMismatch.
        """
        a_fit = fit_to_domain(self.field, a, self.m, "extended_radix2.fft")
        lo = a_fit[:self.small_m]
        hi = a_fit[self.small_m:]

        a0 = lo + hi
        a1 = multiply_by_powers(lo + self._shift_to_small_m * hi, self.shift)

        result = self.field.zeros(self.m)
        result[:self.small_m] = self._ntt.ntt(a0)
        result[self.small_m:] = self._ntt.ntt(a1)
        return write_back(self.field, a, result)

    def inverse_fft(self, a: VectorLike) -> galois.FieldArray:
        """Values at the m domain points -> coefficients; exact inverse of fft.

        The halves are inverted separately (unnormalized, with omega^-1) and
        recombined with sconst = (small_m * (1 - shift^small_m))^-1:
            a[i]          = sconst * (-shift^small_m * a0[i] + shift^-i * a1[i])
            a[small_m+i]  = sconst * (a0[i] - shift^-i * a1[i])
        """
        a_fit = fit_to_domain(self.field, a, self.m, "extended_radix2.inverse_fft")

        a0 = self._ntt.intt(a_fit[:self.small_m], scaled=False)
        a1 = self._ntt.intt(a_fit[self.small_m:], scaled=False)

        sconst = (self.field.element(self.small_m) * (self.field.one - self._shift_to_small_m)) ** -1
        a1_unshifted = multiply_by_powers(a1, self._shift_inv)

        result = self.field.zeros(self.m)
        result[:self.small_m] = sconst * (-self._shift_to_small_m * a0 + a1_unshifted)
        result[self.small_m:] = sconst * (a0 - a1_unshifted)
        return write_back(self.field, a, result)

    # --- Point Evaluations ---

    def evaluate_all_lagrange_polynomials(self, t: ElementLike) -> galois.FieldArray:
        """Values at t of the m Lagrange basis polynomials of this domain.

        The basis of H is rescaled by the factor of Z that vanishes on
        shift*H, and the basis of shift*H (H's basis at t/shift) by the factor
        that vanishes on H; each factor is normalised to 1 on its own half.
        """
        t = self.field.element(t)
        T0 = radix2_evaluate_all_lagrange_polynomials(self.field, self.small_m, t)
        T1 = radix2_evaluate_all_lagrange_polynomials(self.field, self.small_m, t * self._shift_inv)

        t_to_small_m = t ** self.small_m
        one_over_denom = (self._shift_to_small_m - self.field.one) ** -1
        T0_coeff = (t_to_small_m - self._shift_to_small_m) * (-one_over_denom)
        T1_coeff = (t_to_small_m - self.field.one) * one_over_denom

        result = self.field.zeros(self.m)
        result[:self.small_m] = T0 * T0_coeff
        result[self.small_m:] = T1 * T1_coeff
        return result

    def get_domain_element(self, idx: int) -> galois.FieldArray:
        check_index(idx, self.m)
        if idx < self.small_m:
            return self.omega ** idx
        return self.shift * self.omega ** (idx - self.small_m)

    def compute_vanishing_polynomial(self, t: ElementLike) -> galois.FieldArray:
        t_to_small_m = self.field.element(t) ** self.small_m
        return (t_to_small_m - self.field.one) * (t_to_small_m - self._shift_to_small_m)

    # --- Vanishing Polynomial Algebra ---

    def add_poly_z(self, coeff: ElementLike, H: VectorLike) -> galois.FieldArray:
        """H += coeff * Z(X) in coefficient form; H must have m + 1 entries."""
        coeff = self.field.element(coeff)
        out = require_length(self.field, H, self.m + 1, "extended_radix2.add_poly_z").copy()

        out[self.m] += coeff
        out[self.small_m] -= coeff * (self._shift_to_small_m + self.field.one)
        out[0] += coeff * self._shift_to_small_m
        return write_back(self.field, H, out)

    def divide_by_z_on_coset(self, P: VectorLike) -> galois.FieldArray:
        """Divide values on the coset g * (H u shift*H) by Z there.

        g is the field's multiplicative generator. Z is constant on each half
        of that coset:
            Z0 = Z(g * omega^i)         = (g^small_m - 1) * (g^small_m - shift^small_m)
            Z1 = Z(g * shift * omega^i) = ((g*shift)^small_m - 1) * ((g*shift)^small_m - shift^small_m)
        """
        values = require_length(self.field, P, self.m, "extended_radix2.divide_by_z_on_coset")

        coset_to_small_m = self.field.generator ** self.small_m
        Z0 = (coset_to_small_m - self.field.one) * (coset_to_small_m - self._shift_to_small_m)
        Z1 = (coset_to_small_m * self._shift_to_small_m - self.field.one) * (
            coset_to_small_m * self._shift_to_small_m - self._shift_to_small_m
        )
        if Z0 == 0 or Z1 == 0:
            raise PreconditionViolated(
                f"extended_radix2.divide_by_z_on_coset: Z vanishes on the generator coset of {self.field.name}"
            )

        result = self.field.zeros(self.m)
        result[:self.small_m] = values[:self.small_m] * Z0 ** -1
        result[self.small_m:] = values[self.small_m:] * Z1 ** -1
        return write_back(self.field, P, result)

    def __repr__(self) -> str:
        return f"ExtendedRadix2Domain({self.field.name}, m={self.m})"
