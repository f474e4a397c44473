"""
Tests for the in-place Cholesky primitives.

Validates:
    - cholesky_decompose overwrites the buffer with L, L L^H = A
    - Only the lower triangle of the input is read
    - Non-positive pivots raise FactorizationError with the failing order
    - cholesky_solve and cholesky_inverse against NumPy references
    - Real and complex (Hermitian) data
"""

import numpy as np
import pytest

from pylstsq.core.compute.linalg import (
    cholesky_decompose,
    cholesky_inverse,
    cholesky_solve,
)
from pylstsq.core.compute.tolerances import FP64
from pylstsq.core.exceptions import (
    DimensionError,
    FactorizationError,
    PyLstSqError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# cholesky_decompose
# ═══════════════════════════════════════════════════════════════════════


class TestDecompose:
    """cholesky_decompose factorizes in place."""

    def test_known_factor(self):
        A = np.array([[4.0, 2.0], [2.0, 3.0]])
        cholesky_decompose(A)
        expected = np.array([[2.0, 0.0], [1.0, np.sqrt(2.0)]])
        np.testing.assert_allclose(A, expected, rtol=FP64.rtol, atol=FP64.atol)

    def test_returns_same_buffer(self, spd_matrix):
        A = spd_matrix.copy()
        out = cholesky_decompose(A)
        assert out is A

    def test_reconstructs_original(self, spd_matrix):
        L = cholesky_decompose(spd_matrix.copy())
        np.testing.assert_allclose(L @ L.T, spd_matrix, rtol=1e-10)

    def test_upper_triangle_zeroed(self, spd_matrix):
        L = cholesky_decompose(spd_matrix.copy())
        assert np.all(np.triu(L, 1) == 0.0)

    def test_only_lower_triangle_read(self, spd_matrix):
        A = spd_matrix.copy()
        A[np.triu_indices(5, 1)] = 1e6
        L = cholesky_decompose(A)
        np.testing.assert_allclose(L @ L.T, spd_matrix, rtol=1e-10)

    def test_complex_hermitian(self, hpd_matrix):
        L = cholesky_decompose(hpd_matrix.copy())
        assert np.iscomplexobj(L)
        np.testing.assert_allclose(L @ L.conj().T, hpd_matrix, rtol=1e-10)

    def test_float32_preserved(self, spd_matrix):
        A = spd_matrix.astype(np.float32)
        cholesky_decompose(A)
        assert A.dtype == np.float32


class TestDecomposeFailures:
    """Non-positive pivots and bad buffers."""

    def test_indefinite_raises(self):
        A = np.array([[1.0, 2.0], [2.0, 1.0]])
        with pytest.raises(FactorizationError) as exc_info:
            cholesky_decompose(A, matrix_name="G")
        assert exc_info.value.order == 2
        assert exc_info.value.matrix_name == "G"

    def test_zero_pivot_raises(self):
        """Exactly zero counts as non-positive (rank deficiency)."""
        A = np.array([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [3.0, 6.0, 9.0]])
        with pytest.raises(FactorizationError) as exc_info:
            cholesky_decompose(A)
        assert exc_info.value.order == 2

    def test_zero_matrix_fails_at_first_pivot(self):
        with pytest.raises(FactorizationError) as exc_info:
            cholesky_decompose(np.zeros((3, 3)))
        assert exc_info.value.order == 1

    def test_negative_diagonal_complex(self):
        """Plain-transpose Gram of imaginary data has a negative diagonal."""
        A = np.array([[-2.0 + 0j]])
        with pytest.raises(FactorizationError):
            cholesky_decompose(A)

    def test_non_square_raises_dimension_error(self):
        with pytest.raises(DimensionError, match="square"):
            cholesky_decompose(np.ones((2, 3)))

    def test_list_rejected(self):
        with pytest.raises(ValidationError, match="ndarray"):
            cholesky_decompose([[1.0, 0.0], [0.0, 1.0]])

    def test_integer_buffer_rejected(self):
        with pytest.raises(ValidationError, match="floating point"):
            cholesky_decompose(np.eye(2, dtype=np.int64))

    def test_read_only_rejected(self):
        A = np.eye(2)
        A.flags.writeable = False
        with pytest.raises(ValidationError, match="read-only"):
            cholesky_decompose(A)


# ═══════════════════════════════════════════════════════════════════════
# cholesky_solve
# ═══════════════════════════════════════════════════════════════════════


class TestSolve:
    """cholesky_solve back-solves in place."""

    def test_matches_numpy_solve(self, spd_matrix, rng):
        b = rng.standard_normal(5)
        expected = np.linalg.solve(spd_matrix, b)
        L = cholesky_decompose(spd_matrix.copy())
        x = b.copy()
        out = cholesky_solve(L, x)
        assert out is x
        np.testing.assert_allclose(x, expected, rtol=1e-10)

    def test_multiple_right_hand_sides(self, spd_matrix, rng):
        B = rng.standard_normal((5, 3))
        expected = np.linalg.solve(spd_matrix, B)
        L = cholesky_decompose(spd_matrix.copy())
        X = B.copy()
        cholesky_solve(L, X)
        np.testing.assert_allclose(X, expected, rtol=1e-10)

    def test_complex(self, hpd_matrix, rng):
        b = rng.standard_normal(4) + 1j * rng.standard_normal(4)
        expected = np.linalg.solve(hpd_matrix, b)
        L = cholesky_decompose(hpd_matrix.copy())
        x = b.copy()
        cholesky_solve(L, x)
        np.testing.assert_allclose(x, expected, rtol=1e-10)

    def test_row_mismatch_raises(self, spd_matrix):
        L = cholesky_decompose(spd_matrix.copy())
        with pytest.raises(DimensionError, match="rows"):
            cholesky_solve(L, np.ones(4))

    def test_narrow_dtype_rejected(self, spd_matrix):
        L = cholesky_decompose(spd_matrix.copy())
        with pytest.raises(ValidationError, match="cannot hold"):
            cholesky_solve(L, np.ones(5, dtype=np.float32))

    def test_real_rhs_for_complex_factor_rejected(self, hpd_matrix):
        L = cholesky_decompose(hpd_matrix.copy())
        with pytest.raises(ValidationError):
            cholesky_solve(L, np.ones(4))

    def test_non_square_factor_raises_dimension_error(self):
        with pytest.raises(DimensionError, match="L: expected square"):
            cholesky_solve(np.ones((2, 3)), np.ones(2))

    def test_list_factor_rejected(self):
        with pytest.raises(ValidationError, match="L: expected numpy.ndarray"):
            cholesky_solve([[1.0, 0.0], [0.0, 1.0]], np.ones(2))

    def test_integer_factor_rejected(self):
        with pytest.raises(ValidationError, match="floating point"):
            cholesky_solve(np.eye(2, dtype=np.int64), np.ones(2))

    def test_list_rhs_rejected(self, spd_matrix):
        L = cholesky_decompose(spd_matrix.copy())
        with pytest.raises(ValidationError, match="b: expected numpy.ndarray"):
            cholesky_solve(L, [1.0, 2.0, 3.0, 4.0, 5.0])

    def test_read_only_rhs_rejected(self, spd_matrix):
        L = cholesky_decompose(spd_matrix.copy())
        b = np.ones(5)
        b.flags.writeable = False
        with pytest.raises(ValidationError, match="read-only"):
            cholesky_solve(L, b)

    def test_read_only_factor_accepted(self, spd_matrix):
        L = cholesky_decompose(spd_matrix.copy())
        L.flags.writeable = False
        x = np.ones(5)
        cholesky_solve(L, x)
        np.testing.assert_allclose(spd_matrix @ x, np.ones(5), rtol=1e-10)

    def test_errors_are_library_errors(self):
        with pytest.raises(PyLstSqError):
            cholesky_solve(np.ones((2, 3)), np.ones(2))


# ═══════════════════════════════════════════════════════════════════════
# cholesky_inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:
    """cholesky_inverse forms the full inverse from the factor."""

    def test_matches_numpy_inverse(self, spd_matrix):
        A = cholesky_decompose(spd_matrix.copy())
        out = cholesky_inverse(A)
        assert out is A
        np.testing.assert_allclose(A, np.linalg.inv(spd_matrix), rtol=1e-9, atol=1e-12)

    def test_both_triangles_filled(self, spd_matrix):
        A = cholesky_inverse(cholesky_decompose(spd_matrix.copy()))
        np.testing.assert_array_equal(A, A.T)

    def test_identity_product(self, spd_matrix):
        A_inv = cholesky_inverse(cholesky_decompose(spd_matrix.copy()))
        np.testing.assert_allclose(A_inv @ spd_matrix, np.eye(5), atol=1e-10)

    def test_complex_hermitian_inverse(self, hpd_matrix):
        A_inv = cholesky_inverse(cholesky_decompose(hpd_matrix.copy()))
        np.testing.assert_allclose(A_inv, A_inv.conj().T, atol=1e-12)
        np.testing.assert_allclose(A_inv @ hpd_matrix, np.eye(4), atol=1e-10)

    def test_zero_diagonal_factor_raises(self):
        L = np.array([[1.0, 0.0], [0.5, 0.0]])
        with pytest.raises(FactorizationError):
            cholesky_inverse(L)

    def test_diagonal(self):
        A = np.diag([4.0, 0.25])
        cholesky_inverse(cholesky_decompose(A))
        np.testing.assert_allclose(A, np.diag([0.25, 4.0]))
