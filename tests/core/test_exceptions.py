"""
Tests for densela exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via DenselaError)
    - Diagnostic attributes on SingularMatrixError, OutOfRangeError,
      NotSquareError, NotSymmetricError
    - Default attribute values (None for optional attributes)
"""

import pytest

from densela.core.exceptions import (
    DenselaError,
    DimensionError,
    NotSquareError,
    NotSymmetricError,
    NumericalError,
    OutOfRangeError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via DenselaError."""

    def test_validation_error_is_densela_error(self):
        with pytest.raises(DenselaError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_not_square_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise NotSquareError("not square")

    def test_out_of_range_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise OutOfRangeError("index 5 out of range [0, 3)")

    def test_out_of_range_is_index_error(self):
        """Plain Python code catching IndexError still works."""
        with pytest.raises(IndexError):
            raise OutOfRangeError("index 5 out of range [0, 3)")

    def test_not_symmetric_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise NotSymmetricError("asymmetric")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_is_not_validation_error(self):
        """Numerical degeneracy is distinguishable from a programming error."""
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)

    def test_numerical_error_is_densela_error(self):
        with pytest.raises(DenselaError):
            raise NumericalError("overflow")


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries pivot diagnostics."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A is singular",
            matrix_name="A",
            pivot_index=1,
            pivot_value=0.0,
            tolerance=1e-15,
        )
        assert str(err) == "A is singular"
        assert err.matrix_name == "A"
        assert err.pivot_index == 1
        assert err.pivot_value == 0.0
        assert err.tolerance == 1e-15

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.pivot_index is None
        assert err.pivot_value is None
        assert err.tolerance is None


class TestOutOfRangeError:

    def test_attributes(self):
        err = OutOfRangeError("out of range", index=7, bound=3)
        assert err.index == 7
        assert err.bound == 3

    def test_defaults_are_none(self):
        err = OutOfRangeError("out of range")
        assert err.index is None
        assert err.bound is None


class TestNotSquareError:

    def test_shape_attribute(self):
        err = NotSquareError("not square", shape=(2, 3))
        assert err.shape == (2, 3)

    def test_default_shape_none(self):
        assert NotSquareError("not square").shape is None


class TestNotSymmetricError:

    def test_attributes(self):
        err = NotSymmetricError("asymmetric", max_asymmetry=0.5, tolerance=1e-10)
        assert err.max_asymmetry == 0.5
        assert err.tolerance == 1e-10

    def test_catchable_with_attributes(self):
        with pytest.raises(NotSymmetricError) as exc_info:
            raise NotSymmetricError("asymmetric", max_asymmetry=2.0)
        assert exc_info.value.max_asymmetry == 2.0
        assert exc_info.value.tolerance is None
