import math

import pytest

from doot.matrix import Mat4, identity, multiply, ortho, rotate, scale, translate
from doot.vector import Vec3


def _apply(matrix, point):
    """Transform a homogeneous row vector by ``matrix``."""
    return tuple(sum(point[k] * matrix[k][j] for k in range(4)) for j in range(4))


def _transpose(matrix):
    return Mat4(tuple(zip(*matrix.rows)))


def _assert_close(m1, m2):
    assert m1.flatten() == pytest.approx(m2.flatten(), abs=1e-9)


SAMPLE = Mat4(
    (
        (1.0, 2.0, 3.0, 4.0),
        (5.0, 6.0, 7.0, 8.0),
        (9.0, 10.0, 11.0, 12.0),
        (13.0, 14.0, 15.0, 16.0),
    )
)


def test_identity_diagonal():
    flat = identity().flatten()
    assert [flat[i] for i in (0, 5, 10, 15)] == [1.0, 1.0, 1.0, 1.0]
    assert sum(flat) == 4.0


def test_identity_is_neutral_for_multiplication():
    assert identity() @ SAMPLE == SAMPLE
    assert SAMPLE @ identity() == SAMPLE


def test_matmul_and_multiply_agree():
    other = translate(Vec3(1.0, 2.0, 3.0))
    assert SAMPLE @ other == multiply(SAMPLE, other)


def test_multiplication_is_associative():
    a = scale(Vec3(2.0, 3.0, 4.0))
    b = rotate(Vec3(1.0, 1.0, 0.0), 0.3)
    c = translate(Vec3(-1.0, 5.0, 2.0))
    _assert_close((a @ b) @ c, a @ (b @ c))


def test_rows_must_be_four_by_four():
    with pytest.raises(ValueError):
        Mat4(((1.0, 2.0), (3.0, 4.0)))


def test_translate_sets_last_row():
    flat = translate(Vec3(7.0, -2.0, 3.5)).flatten()
    assert flat[12:15] == (7.0, -2.0, 3.5)
    assert flat[15] == 1.0


def test_translate_moves_point():
    assert _apply(translate(Vec3(7.0, -2.0, 3.5)), (1.0, 1.0, 1.0, 1.0)) == (
        8.0,
        -1.0,
        4.5,
        1.0,
    )


def test_scale_sets_diagonal():
    m = scale(Vec3(2.0, 3.0, 4.0))
    assert (m[0][0], m[1][1], m[2][2], m[3][3]) == (2.0, 3.0, 4.0, 1.0)


def test_scale_then_translate_order():
    model = scale(Vec3(2.0, 2.0, 1.0)) @ translate(Vec3(5.0, 5.0, 0.0))
    x, y, z, w = _apply(model, (1.0, 1.0, 0.0, 1.0))
    assert (x, y, z, w) == (1.0 * 2.0 + 5.0, 1.0 * 2.0 + 5.0, 0.0, 1.0)


def test_rotate_zero_angle_is_identity():
    _assert_close(rotate(Vec3(0.3, -0.2, 0.9), 0.0), identity())


def test_rotate_is_orthogonal():
    r = rotate(Vec3(1.0, 2.0, 3.0), 1.1)
    _assert_close(r @ _transpose(r), identity())


def test_rotate_inverse_angle_undoes_rotation():
    axis = Vec3(0.0, 0.0, 1.0)
    _assert_close(rotate(axis, 0.8) @ rotate(axis, -0.8), identity())


def test_rotate_normalizes_axis():
    _assert_close(rotate(Vec3(0.0, 0.0, 5.0), 0.4), rotate(Vec3(0.0, 0.0, 1.0), 0.4))


def test_rotate_keeps_axis_fixed():
    axis = Vec3(1.0, 2.0, 2.0)
    moved = _apply(rotate(axis, 2.0), (*axis, 1.0))
    assert moved == pytest.approx((*axis, 1.0))


def test_rotate_quarter_turn_about_z():
    r = rotate(Vec3(0.0, 0.0, 1.0), math.pi / 2)
    assert r[0][1] == pytest.approx(-1.0)
    assert r[1][0] == pytest.approx(1.0)
    assert r[0][0] == pytest.approx(0.0, abs=1e-12)


def test_rotate_zero_axis_raises():
    with pytest.raises(ZeroDivisionError):
        rotate(Vec3(0.0, 0.0, 0.0), 1.0)


def test_ortho_maps_box_corners_to_unit_cube():
    m = ortho(0.0, 1200.0, 675.0, 0.0, -1.0, 1.0)
    assert _apply(m, (0.0, 675.0, -1.0, 1.0)) == pytest.approx((-1.0, -1.0, -1.0, 1.0))
    assert _apply(m, (1200.0, 0.0, 1.0, 1.0)) == pytest.approx((1.0, 1.0, 1.0, 1.0))


def test_ortho_maps_centre_to_origin():
    m = ortho(-3.0, 5.0, -2.0, 6.0, 1.0, 9.0)
    assert _apply(m, (1.0, 2.0, 5.0, 1.0)) == pytest.approx((0.0, 0.0, 0.0, 1.0))


def test_ortho_degenerate_box_raises():
    with pytest.raises(ZeroDivisionError):
        ortho(1.0, 1.0, 0.0, 1.0, -1.0, 1.0)