import math

import pytest

from cardquest.vecmath import (
    Matrix4x4,
    Vector3,
    add,
    add_scalar,
    dot,
    inverse,
    length,
    make_affine_matrix,
    make_identity_matrix,
    make_orthographic_matrix,
    make_perspective_fov_matrix,
    make_rotate_matrix,
    make_rotate_x_matrix,
    make_rotate_y_matrix,
    make_rotate_z_matrix,
    make_scale_matrix,
    make_translate_matrix,
    make_viewport_matrix,
    multiply,
    multiply_transposed,
    normalize,
    scale,
    subtract,
    subtract_matrix,
    transform,
    transform_normal,
    transpose,
)


def assert_matrix_close(actual, expected):
    assert actual.values() == pytest.approx(expected.values(), abs=1e-9)


def sample_matrix():
    return make_affine_matrix(
        Vector3(2.0, 3.0, 0.5), Vector3(0.3, -1.2, 0.7), Vector3(4.0, -5.0, 6.0)
    )


def test_matrix_needs_sixteen_values():
    with pytest.raises(ValueError):
        Matrix4x4.from_values(1.0, 2.0, 3.0)


def test_from_values_round_trip():
    values = tuple(float(i) for i in range(16))
    assert Matrix4x4.from_values(*values).values() == values


def test_multiply_by_identity_is_unchanged():
    m = sample_matrix()
    assert_matrix_close(multiply(m, make_identity_matrix()), m)
    assert_matrix_close(multiply(make_identity_matrix(), m), m)


def test_matmul_operator_matches_multiply():
    a = make_rotate_x_matrix(0.4)
    b = make_translate_matrix(Vector3(1.0, 2.0, 3.0))
    assert (a @ b).values() == multiply(a, b).values()


@pytest.mark.parametrize(
    "maker", [make_rotate_x_matrix, make_rotate_y_matrix, make_rotate_z_matrix]
)
def test_rotation_at_zero_is_identity(maker):
    assert_matrix_close(maker(0.0), make_identity_matrix())


@pytest.mark.parametrize(
    "maker", [make_rotate_x_matrix, make_rotate_y_matrix, make_rotate_z_matrix]
)
def test_rotation_is_orthogonal(maker):
    r = maker(1.1)
    assert_matrix_close(multiply(r, transpose(r)), make_identity_matrix())


def test_rotation_preserves_length():
    v = Vector3(1.0, -2.0, 3.5)
    r = make_rotate_matrix(Vector3(0.2, 0.9, -0.4))
    assert length(transform_normal(v, r)) == pytest.approx(length(v))


def test_rotate_x_quarter_turn_moves_y_to_z():
    v = transform_normal(Vector3(0.0, 1.0, 0.0), make_rotate_x_matrix(math.pi / 2))
    assert tuple(v) == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)


def test_transform_normal_ignores_translation():
    v = Vector3(1.5, -2.5, 3.0)
    out = transform_normal(v, make_translate_matrix(Vector3(10.0, 20.0, 30.0)))
    assert out == v


def test_scale_vector():
    assert scale(2.0, Vector3(1.0, -3.0, 0.5)) == Vector3(2.0, -6.0, 1.0)


def test_dot_of_perpendicular_vectors_is_zero():
    assert dot(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 5.0, 7.0)) == 0.0


def test_length_of_three_four_five():
    assert length(Vector3(3.0, 4.0, 0.0)) == pytest.approx(5.0)


def test_normalize_gives_unit_length_and_same_direction():
    v = Vector3(2.0, -7.0, 1.0)
    n = normalize(v)
    assert length(n) == pytest.approx(1.0)
    assert dot(n, v) == pytest.approx(length(v))


def test_normalize_zero_vector_is_unchanged():
    zero = Vector3()
    result = normalize(zero)
    assert result == zero
    assert result is not zero


def test_affine_equals_scale_rotate_translate():
    s = Vector3(2.0, 3.0, 0.5)
    r = Vector3(0.3, -1.2, 0.7)
    t = Vector3(4.0, -5.0, 6.0)
    expected = multiply(
        multiply(make_scale_matrix(s), make_rotate_matrix(r)), make_translate_matrix(t)
    )
    assert_matrix_close(make_affine_matrix(s, r, t), expected)


def test_affine_moves_origin_to_translation():
    t = Vector3(4.0, -5.0, 6.0)
    m = make_affine_matrix(Vector3(2.0, 2.0, 2.0), Vector3(0.1, 0.2, 0.3), t)
    assert tuple(transform(Vector3(), m)) == pytest.approx(tuple(t))


def test_rotate_matrix_composes_x_then_y_then_z():
    r = Vector3(0.5, -0.25, 1.0)
    expected = multiply(
        make_rotate_x_matrix(r.x),
        multiply(make_rotate_y_matrix(r.y), make_rotate_z_matrix(r.z)),
    )
    assert_matrix_close(make_rotate_matrix(r), expected)


def test_inverse_round_trip():
    m = sample_matrix()
    assert_matrix_close(multiply(m, inverse(m)), make_identity_matrix())
    assert_matrix_close(inverse(inverse(m)), m)


def test_inverse_of_translation_negates_it():
    t = Vector3(1.0, -2.0, 3.0)
    assert_matrix_close(
        inverse(make_translate_matrix(t)),
        make_translate_matrix(Vector3(-t.x, -t.y, -t.z)),
    )


def test_inverse_of_singular_matrix_raises():
    with pytest.raises(ValueError):
        inverse(Matrix4x4())


def test_transpose_twice_is_identity_operation():
    m = sample_matrix()
    assert transpose(transpose(m)).values() == m.values()
    assert transpose(m).m[3][0] == m.m[0][3]


def test_transform_with_zero_w_raises():
    with pytest.raises(ValueError):
        transform(Vector3(1.0, 2.0, 3.0), Matrix4x4())


def test_multiply_transposed_matches_transform_of_transpose():
    m = sample_matrix()
    v = Vector3(0.5, -1.5, 2.0)
    assert tuple(multiply_transposed(v, transpose(m))) == pytest.approx(
        tuple(transform(v, m))
    )


def test_subtract_matrix_from_itself_is_zero():
    m = sample_matrix()
    assert subtract_matrix(m, m).values() == Matrix4x4().values()


def test_add_and_subtract_are_inverse():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 9.0)
    assert subtract(add(a, b), b) == a


def test_add_scalar_matches_adding_uniform_vector():
    v = Vector3(1.0, -2.0, 3.0)
    assert add_scalar(v, 2.5) == add(v, Vector3(2.5, 2.5, 2.5))


def test_scale_matrix_scales_point():
    s = Vector3(2.0, 3.0, 4.0)
    out = transform(Vector3(1.0, 1.0, 1.0), make_scale_matrix(s))
    assert tuple(out) == pytest.approx(tuple(s))


def test_perspective_maps_near_and_far_depths():
    near, far = 0.1, 1000.0
    m = make_perspective_fov_matrix(0.8, 16 / 9, near, far)
    assert m.m[2][3] == 1.0
    assert m.m[3][3] == 0.0
    assert transform(Vector3(0.0, 0.0, near), m).z == pytest.approx(0.0, abs=1e-9)
    assert transform(Vector3(0.0, 0.0, far), m).z == pytest.approx(1.0)


def test_orthographic_maps_box_to_clip_space():
    m = make_orthographic_matrix(-160.0, 90.0, 160.0, -90.0, 0.0, 100.0)
    assert tuple(transform(Vector3(-160.0, 90.0, 0.0), m)) == pytest.approx((-1.0, 1.0, 0.0))
    assert tuple(transform(Vector3(160.0, -90.0, 100.0), m)) == pytest.approx((1.0, -1.0, 1.0))


def test_viewport_maps_ndc_corners_to_screen():
    left, top, width, height, min_d, max_d = 10.0, 20.0, 1280.0, 720.0, 0.0, 1.0
    m = make_viewport_matrix(left, top, width, height, min_d, max_d)
    assert tuple(transform(Vector3(-1.0, 1.0, 0.0), m)) == pytest.approx((left, top, min_d))
    assert tuple(transform(Vector3(1.0, -1.0, 1.0), m)) == pytest.approx(
        (left + width, top + height, max_d)
    )