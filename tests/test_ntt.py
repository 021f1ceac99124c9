"""Tests for the NTT engine and the subgroup Lagrange basis.

Verifies transforms against naive evaluation and mathematical properties.
"""

import numpy as np
import pytest

from primitives.field import get_root_of_unity
from primitives.ntt import (
    NTT,
    multiply_by_powers,
    radix2_evaluate_all_lagrange_polynomials,
)
from primitives.polynomial import evaluate_on_points, evaluate_polynomial


def _subgroup(field, n):
    omega = get_root_of_unity(field, n)
    return field.GF([int(omega ** i) for i in range(n)])


class TestNTTTransform:
    """Test that the engine transforms over the subgroup generated by omega."""

    def test_matches_naive_evaluation(self, field) -> None:
        n = 1 << field.two_adicity
        coeffs = field.GF.Random(n, seed=1)
        evals = NTT(field, n).ntt(coeffs)
        assert np.array_equal(evals, evaluate_on_points(field, coeffs, _subgroup(field, n)))

    def test_unscaled_intt_scales_by_n(self, field) -> None:
        n = 1 << field.two_adicity
        ntt = NTT(field, n)
        coeffs = field.GF.Random(n, seed=2)

        back = ntt.intt(ntt.ntt(coeffs), scaled=False)
        assert np.array_equal(back, coeffs * field.element(n))

    def test_unscaled_intt_matches_naive_evaluation(self, f41) -> None:
        ntt = NTT(f41, 8)
        evals = f41.GF.Random(8, seed=3)
        inverse_points = f41.GF([int(ntt.omega ** -i) for i in range(8)])
        assert np.array_equal(ntt.intt(evals, scaled=False), evaluate_on_points(f41, evals, inverse_points))

    def test_input_not_modified(self, f41) -> None:
        coeffs = f41.GF.Random(8, seed=3)
        before = coeffs.copy()
        NTT(f41, 8).ntt(coeffs)
        assert np.array_equal(coeffs, before)

    def test_output_in_descriptor_field(self, goldilocks) -> None:
        evals = NTT(goldilocks, 8).ntt(list(range(8)))
        assert type(evals) is goldilocks.GF

    @pytest.mark.parametrize("n", [0, 3, 6])
    def test_rejects_non_power_of_two(self, f41, n: int) -> None:
        with pytest.raises(AssertionError):
            NTT(f41, n)


class TestRadix2Lagrange:
    """Test evaluation of all Lagrange basis polynomials of a subgroup."""

    def test_kronecker_at_subgroup_points(self, field) -> None:
        n = 1 << field.two_adicity
        points = _subgroup(field, n)
        for j in range(n):
            L = radix2_evaluate_all_lagrange_polynomials(field, n, points[j])
            expected = field.GF.Zeros(n)
            expected[j] = 1
            assert np.array_equal(L, expected)

    def test_interpolates_at_random_point(self, field) -> None:
        n = 1 << field.two_adicity
        coeffs = field.GF.Random(n, seed=4)
        evals = NTT(field, n).ntt(coeffs)

        t = field.generator  # never a subgroup point
        L = radix2_evaluate_all_lagrange_polynomials(field, n, t)
        assert np.sum(L * evals) == evaluate_polynomial(field, coeffs, t)

    def test_partition_of_unity(self, field) -> None:
        n = 1 << field.two_adicity
        L = radix2_evaluate_all_lagrange_polynomials(field, n, field.generator)
        assert np.sum(L) == 1

    def test_order_one(self, f11) -> None:
        assert list(radix2_evaluate_all_lagrange_polynomials(f11, 1, 5)) == [1]


class TestNTT:
    """Test the NTT engine."""

    def test_ntt_intt_roundtrip(self, field) -> None:
        """Test that INTT(NTT(x)) == x."""
        N = 1 << field.two_adicity
        ntt = NTT(field, N)

        coeffs = field.GF.Random(N, seed=5)
        recovered = ntt.intt(ntt.ntt(coeffs))
        assert np.array_equal(coeffs, recovered), "NTT/INTT roundtrip failed"

    def test_intt_ntt_roundtrip(self, field) -> None:
        """Test that NTT(INTT(x)) == x."""
        N = 1 << field.two_adicity
        ntt = NTT(field, N)

        evals = field.GF.Random(N, seed=6)
        assert np.array_equal(ntt.ntt(ntt.intt(evals)), evals), "INTT/NTT roundtrip failed"

    def test_ntt_linearity(self, f353) -> None:
        """Test that NTT is linear: NTT(a*x + b*y) == a*NTT(x) + b*NTT(y)."""
        N = 32
        ntt = NTT(f353, N)

        x = f353.GF.Random(N, seed=7)
        y = f353.GF.Random(N, seed=8)
        a = f353.GF(5)
        b = f353.GF(7)

        lhs = ntt.ntt(a * x + b * y)
        rhs = a * ntt.ntt(x) + b * ntt.ntt(y)
        assert np.array_equal(lhs, rhs), "NTT linearity property violated"

    def test_ntt_of_constant(self, f353) -> None:
        """All evaluations of a constant polynomial equal the constant."""
        N = 16
        ntt = NTT(f353, N)

        coeffs = f353.GF.Zeros(N)
        coeffs[0] = 5
        assert np.all(ntt.ntt(coeffs) == 5)

    def test_ntt_of_zero_is_zero(self, field) -> None:
        N = 1 << field.two_adicity
        assert np.all(NTT(field, N).ntt(field.GF.Zeros(N)) == 0)

    def test_precomputed_roots_correct(self, f353) -> None:
        """roots[k] should equal omega^k."""
        ntt = NTT(f353, 16)
        omega = get_root_of_unity(f353, 16)
        for k in range(16):
            assert ntt.roots[k] == omega ** k, f"Root mismatch at index {k}"

    def test_rejects_wrong_length(self, f41) -> None:
        with pytest.raises(AssertionError):
            NTT(f41, 8).ntt(f41.GF.Zeros(4))


class TestMultiplyByPowers:
    def test_scales_coefficients(self, f41) -> None:
        a = f41.GF([1, 1, 1, 1])
        assert list(multiply_by_powers(a, f41.GF(3))) == [1, 3, 9, 27]

    def test_composes_with_evaluation(self, f41) -> None:
        coeffs = f41.GF.Random(8, seed=10)
        g = f41.GF(6)
        x = f41.GF(5)
        assert evaluate_polynomial(f41, multiply_by_powers(coeffs, g), x) == evaluate_polynomial(f41, coeffs, g * x)
