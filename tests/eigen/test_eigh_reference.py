"""
Validation of eigh() against scipy.linalg.eigh.

Eigenvectors are compared up to sign, column by column, since each is only
determined up to a factor of -1 for a simple eigenvalue.
"""

import numpy as np
import pytest
from scipy import linalg

from densela import eigh, eigvalsh
from densela.core.compute.tolerances import CPU_FP64


SIZES = [2, 3, 7, 12]


def _random_symmetric(n, seed):
    rng = np.random.default_rng(seed)
    a = rng.standard_normal((n, n))
    return 0.5 * (a + a.T)


@pytest.mark.parametrize("strategy", ["classical", "cyclic"])
@pytest.mark.parametrize("n", SIZES)
class TestAgainstScipy:

    def test_eigenvalues(self, n, strategy):
        A = _random_symmetric(n, seed=n)
        expected = linalg.eigh(A, eigvals_only=True)
        w = eigvalsh(A, strategy=strategy)
        np.testing.assert_allclose(w.to_numpy(), expected, rtol=1e-10, atol=1e-12)

    def test_eigenvectors_up_to_sign(self, n, strategy):
        A = _random_symmetric(n, seed=100 + n)
        _, expected = linalg.eigh(A)
        V = eigh(A, strategy=strategy).eigenvectors.to_numpy()
        for j in range(n):
            sign = np.sign(V[:, j] @ expected[:, j])
            np.testing.assert_allclose(sign * V[:, j], expected[:, j], atol=1e-9)


class TestScaling:

    def test_large_magnitudes(self):
        A = 1e150 * _random_symmetric(6, seed=7)
        expected = linalg.eigh(A, eigvals_only=True)
        w = eigvalsh(A).to_numpy()
        np.testing.assert_allclose(w, expected, rtol=CPU_FP64.rtol)

    def test_tiny_magnitudes(self):
        A = 1e-150 * _random_symmetric(6, seed=8)
        expected = linalg.eigh(A, eigvals_only=True)
        w = eigvalsh(A).to_numpy()
        np.testing.assert_allclose(w, expected, rtol=CPU_FP64.rtol)

    def test_spd_matches_scipy(self, spd):
        expected = linalg.eigh(spd, eigvals_only=True)
        np.testing.assert_allclose(
            eigvalsh(spd).to_numpy(), expected, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol
        )


@pytest.mark.parametrize("strategy", ["classical", "cyclic"])
class TestLargeMatrices:
    """A few hundred rows is the intended working size."""

    def test_two_hundred(self, strategy):
        A = _random_symmetric(200, seed=200)
        expected = linalg.eigvalsh(A)
        sol = eigh(A, strategy=strategy, eigenvectors=False)
        assert sol.converged
        np.testing.assert_allclose(
            sol.eigenvalues.to_numpy(), expected, rtol=1e-10, atol=1e-11
        )
