import math

import pytest

from tinyengine.constants import EPSILON
from tinyengine.matrix import Matrix3x3, SingularMatrixError
from tinyengine.vector import Vector2, Vector3


def test_identity():
    assert Matrix3x3.identity() == Matrix3x3(((1, 0, 0), (0, 1, 0), (0, 0, 1)))


def test_translation():
    assert Matrix3x3.translation(5.0, 3.0) == Matrix3x3(
        ((1, 0, 5), (0, 1, 3), (0, 0, 1))
    )


def test_scaling():
    assert Matrix3x3.scaling(2.0, 1.5) == Matrix3x3(
        ((2.0, 0, 0), (0, 1.5, 0), (0, 0, 1))
    )


def test_rotation():
    angle = math.pi / 4
    matrix = Matrix3x3.rotation(angle)
    cos45 = math.cos(angle)
    sin45 = math.sin(angle)
    assert matrix[0][0] == pytest.approx(cos45, abs=EPSILON)
    assert matrix[0][1] == pytest.approx(-sin45, abs=EPSILON)
    assert matrix[1][0] == pytest.approx(sin45, abs=EPSILON)
    assert matrix[1][1] == pytest.approx(cos45, abs=EPSILON)


def test_multiply():
    m1 = Matrix3x3(((1, 2, 3), (4, 5, 6), (7, 8, 9)))
    m2 = Matrix3x3(((9, 8, 7), (6, 5, 4), (3, 2, 1)))
    expected = Matrix3x3(((30, 24, 18), (84, 69, 54), (138, 114, 90)))
    assert m1.multiply(m2) == expected
    assert m1 @ m2 == expected


def test_multiply_vector():
    matrix = Matrix3x3(((2, 0, 5), (0, 3, 2), (0, 0, 1)))
    assert matrix.multiply_vector(Vector3(1, 2, 1)) == Vector3(7, 8, 1)


def test_transform_point():
    translation = Matrix3x3.translation(10, 5)
    assert translation.transform_point(Vector2(3, 4)) == Vector2(13, 9)


def test_transform_vector():
    scale = Matrix3x3.scaling(2, 3)
    assert scale.transform_vector(Vector2(4, 2)) == Vector2(8, 6)


def test_transform_vector_ignores_translation():
    translation = Matrix3x3.translation(10, 5)
    assert translation.transform_vector(Vector2(3, 4)) == Vector2(3, 4)


def test_determinant():
    assert Matrix3x3(((1, 2, 3), (4, 5, 6), (7, 8, 9))).determinant() == 0.0
    assert Matrix3x3(((2, 0, 0), (0, 3, 0), (0, 0, 1))).determinant() == 6.0


def test_inverse():
    matrix = Matrix3x3(((2, 0, 1), (1, 1, 0), (0, 1, 1)))
    product = matrix.multiply(matrix.inverse())
    expected = Matrix3x3.identity()
    for row, expected_row in zip(product, expected):
        assert list(row) == pytest.approx(list(expected_row), abs=EPSILON)
    assert product.is_identity()


def test_inverse_singular():
    matrix = Matrix3x3(((1, 2, 3), (4, 5, 6), (7, 8, 9)))
    with pytest.raises(SingularMatrixError, match="singular matrix"):
        matrix.inverse()


def test_singular_error_is_value_error():
    with pytest.raises(ValueError):
        Matrix3x3.scaling(0, 1).inverse()


def test_transformation_chain():
    translation = Matrix3x3.translation(2, 3)
    rotation = Matrix3x3.rotation(math.pi / 2)
    scale = Matrix3x3.scaling(2, 2)
    combined = scale.multiply(rotation).multiply(translation)
    result = combined.transform_point(Vector2(1, 0))
    assert result.x == pytest.approx(-6.0, abs=EPSILON)
    assert result.y == pytest.approx(6.0, abs=EPSILON)


def test_transpose_round_trip():
    matrix = Matrix3x3(((1, 2, 3), (4, 5, 6), (7, 8, 9)))
    assert matrix.transpose()[0] == (1.0, 4.0, 7.0)
    assert matrix.transpose().transpose() == matrix


def test_is_identity_false_for_translation():
    assert Matrix3x3.translation(1, 0).is_identity() is False


def test_equals_within_tolerance():
    base = Matrix3x3.rotation(0.3)
    near = Matrix3x3.from_rows(
        [[value + EPSILON / 10 for value in row] for row in base]
    )
    far = Matrix3x3.translation(0.1, 0)
    assert base.equals(near)
    assert not base.equals(far)


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Matrix3x3(((1, 2), (3, 4), (5, 6)))  # type: ignore[arg-type]