"""
Test the operator suite: inverse, norm, composition, division, powers,
vector rotation and conversions between representations.
"""

import pytest
import numpy as np

from planar_rotations import (
    Angle2D,
    RotationMatrix2D,
    adjoint,
    inverse,
    is_rotation,
    isapprox,
    left_divide,
    norm,
    normalize,
    one,
    params,
    power,
    random_rotation,
    right_divide,
    rotate,
    rotation_angle,
    transpose,
)

REPRESENTATIONS = [RotationMatrix2D, Angle2D]
REPEATS = 100


def _angle(r):
    return np.arctan2(r[1, 0], r[0, 0])


class TestInverse:
    """Test inverse, transpose and adjoint."""

    @pytest.mark.parametrize("R", REPRESENTATIONS)
    def test_inverse(self, R, rng):
        identity = one(R)
        for _ in range(REPEATS):
            r = R.random(rng)
            assert is_rotation(r)
            assert inverse(r) == adjoint(r)
            assert inverse(r) == transpose(r)
            assert r.T == r.inverse()
            assert isapprox(inverse(r) * r, identity)
            assert isapprox(r * inverse(r), identity)

    def test_matrix_inverse_is_transpose(self, rng):
        r = RotationMatrix2D.random(rng)
        np.testing.assert_array_equal(r.inverse().matrix, r.matrix.T)

    def test_non_rotation_detected(self):
        assert not is_rotation(np.diag([1.0, -1.0]))
        assert not is_rotation(2 * np.eye(2))
        assert not is_rotation(np.eye(3))
        assert is_rotation(np.eye(2))

    def test_isapprox_plain_matrices(self):
        assert isapprox(np.eye(2), np.eye(2))
        assert not isapprox(np.eye(3), np.eye(3))
        assert not isapprox(np.ones(4), np.eye(2))


class TestNorm:
    """Test norm() and normalize()."""

    @pytest.mark.parametrize("R", REPRESENTATIONS)
    def test_norm(self, R, rng):
        for _ in range(REPEATS):
            r = R.random(rng)
            m = np.asarray(r)
            assert abs(norm(r) - np.linalg.norm(m)) < 1e-12
            assert abs(norm(r) - np.sqrt(2)) < 1e-12
            np.testing.assert_allclose(normalize(r), normalize(m))
            assert isinstance(normalize(r), np.ndarray)


class TestRotatePoints:
    """Test applying rotations to vectors."""

    @pytest.mark.parametrize("R", REPRESENTATIONS)
    def test_rotate_points(self, R, rng):
        for _ in range(REPEATS):
            r = R.random(rng)
            m = np.asarray(r)
            v = rng.standard_normal(2)

            np.testing.assert_allclose(r * v, m @ v)
            np.testing.assert_allclose(r @ v, m @ v)
            np.testing.assert_allclose(rotate(r, v), m @ v)

    @pytest.mark.parametrize("R", REPRESENTATIONS)
    def test_rotate_list_and_stack(self, R, rng):
        r = R.random(rng)
        m = r.to_matrix()

        np.testing.assert_allclose(r * [1.0, 2.0], m @ np.array([1.0, 2.0]))

        points = rng.standard_normal((2, 10))
        np.testing.assert_allclose(r * points, m @ points)

    def test_quarter_turn_moves_x_to_y(self):
        np.testing.assert_allclose(Angle2D(np.pi / 2) * [1.0, 0.0], [0.0, 1.0], atol=1e-15)

    def test_bad_vector_shape(self):
        with pytest.raises(ValueError):
            RotationMatrix2D(0.1) * np.ones(3)

    def test_plain_matrix_products(self):
        r = RotationMatrix2D(0.4)
        m = r.to_matrix()
        assert isinstance(np.eye(2) @ r, np.ndarray)
        np.testing.assert_allclose(np.eye(2) @ r, m)
        np.testing.assert_allclose(2 * r, 2 * m)
        np.testing.assert_allclose(r * 2, 2 * m)
        np.testing.assert_allclose(r / 2, m / 2)

    def test_no_addition(self):
        r = Angle2D(0.1)
        with pytest.raises(TypeError):
            r + r
        with pytest.raises(TypeError):
            np.eye(2) + RotationMatrix2D(0.1)


class TestCompose:
    """Test composition and division."""

    @pytest.mark.parametrize("R", REPRESENTATIONS)
    def test_compose(self, R, rng):
        for _ in range(REPEATS):
            r1 = R.random(rng)
            m1 = np.asarray(r1)
            r2 = R.random(rng)
            m2 = np.asarray(r2)

            assert isinstance(r1 * r2, R)
            assert isapprox(r1 * r2, m1 @ m2)

            theta1, theta2 = _angle(r1), _angle(r2)
            assert isapprox(r1 * r2, RotationMatrix2D(theta1 + theta2))
            assert isapprox(r1 / r2, RotationMatrix2D(theta1 - theta2))
            assert isapprox(r1.ldiv(r2), RotationMatrix2D(theta2 - theta1))
            assert isapprox(right_divide(r1, r2), r1 * inverse(r2))
            assert isapprox(left_divide(r1, r2), inverse(r1) * r2)

    def test_angles_add(self):
        a = Angle2D(1.5) * Angle2D(2.5)
        assert a.theta == 4.0

    def test_mixed_composition(self):
        r = Angle2D(0.3) * RotationMatrix2D(0.2)
        assert isinstance(r, RotationMatrix2D)
        assert r.isapprox(RotationMatrix2D(0.5))

        r = RotationMatrix2D(0.2) * Angle2D(0.3)
        assert isinstance(r, RotationMatrix2D)
        assert r.isapprox(Angle2D(0.5))

    def test_left_divide_vector(self):
        r = RotationMatrix2D(0.7)
        v = np.array([0.3, -1.2])
        np.testing.assert_allclose(left_divide(r, r * v), v)

    def test_angles_are_not_wrapped(self):
        a = Angle2D(3.0) * Angle2D(3.0)
        assert a.theta == 6.0
        assert (Angle2D(1.0) / Angle2D(5.0)).theta == -4.0


class TestPower:
    """Test exponentiation by a scalar."""

    def test_angle_power(self, rng):
        for _ in range(REPEATS):
            r = Angle2D.random(rng)
            assert isapprox(r ** -1, inverse(r))
            assert isapprox(r ** -1.0, inverse(r))
            assert isapprox(r ** 1, r)
            assert isapprox(r ** 1.0, r)
            assert isapprox(r ** 2, r * r)
            assert isapprox(r ** 2.0, r * r)

            x = rng.standard_normal()
            y = rng.standard_normal()
            assert isapprox(r ** (x + y), r ** x * r ** y)

    def test_angle_power_scales_theta(self):
        assert (Angle2D(0.25) ** 4).theta == 1.0
        assert power(Angle2D(0.5), -2).theta == -1.0

    def test_matrix_power(self, rng):
        for _ in range(REPEATS):
            r = RotationMatrix2D.random(rng)
            assert r ** -1 == inverse(r)
            assert isapprox(r ** 3, r * r * r)
            assert isapprox(r ** 0, one(r))
            assert isapprox(r ** 0.5 * r ** 0.5, r)


class TestConvert:
    """Test conversions between rotation types."""

    @pytest.mark.parametrize("R", REPRESENTATIONS)
    def test_identity_conversion(self, R, rng):
        for _ in range(REPEATS):
            r = R.random(rng)
            assert R(r) == r

    def test_matrix_vs_angle(self, rng):
        for _ in range(REPEATS):
            theta = rng.standard_normal()
            r1 = RotationMatrix2D(theta)
            r2 = Angle2D(theta)
            v = rng.standard_normal(2)

            assert isapprox(r1, r2)
            np.testing.assert_allclose(r1 * v, r2 * v)
            assert isapprox(RotationMatrix2D(r2), r1)
            assert isapprox(Angle2D(r1), r2)

    @pytest.mark.parametrize("R, S", [(RotationMatrix2D, Angle2D), (Angle2D, RotationMatrix2D)])
    def test_round_trip(self, R, S, rng):
        for _ in range(REPEATS):
            r = R.random(rng)
            assert isapprox(R(S(r)), r)

    @pytest.mark.parametrize("R", REPRESENTATIONS)
    def test_precision_conversion(self, R, rng):
        r = R.random(rng)
        r32 = R(r, dtype=np.float32)
        assert r32.dtype == np.float32
        np.testing.assert_allclose(np.asarray(r32), np.asarray(r), rtol=1e-5, atol=1e-6)
        assert R(r32, dtype=np.float64).isapprox(r, rtol=1e-5)


class TestAngle:
    """Test rotation_angle() and params()."""

    def test_rotation_angle(self, rng):
        for _ in range(REPEATS):
            theta = 2 * np.pi * rng.random() - np.pi
            a2d = Angle2D(theta)
            r2 = RotationMatrix2D(theta)
            assert abs(rotation_angle(r2) - theta) < 1e-12
            assert rotation_angle(a2d) == theta
            assert rotation_angle(a2d) == params(a2d)[0]

    def test_zero_angle(self):
        assert rotation_angle(Angle2D(0)) == 0
        assert abs(rotation_angle(RotationMatrix2D(0))) < 1e-15

    def test_matrix_params_column_major(self):
        r = RotationMatrix2D((1, 2, 3, 4))
        np.testing.assert_array_equal(params(r), [1, 2, 3, 4])


class TestRandom:
    """Test random rotation generation."""

    @pytest.mark.parametrize("R", REPRESENTATIONS)
    def test_seed_is_reproducible(self, R):
        assert R.random(42) == R.random(42)
        assert random_rotation(R, rng=7) == random_rotation(R, rng=7)

    @pytest.mark.parametrize("R", REPRESENTATIONS)
    def test_random_element_type(self, R, rng):
        r = R.random(rng, dtype=np.float32)
        assert isinstance(r, R)
        assert r.dtype == np.float32
        assert is_rotation(r)

    def test_angles_cover_circle(self, rng):
        angles = np.array([Angle2D.random(rng).theta for _ in range(2000)])
        assert angles.min() >= 0.0
        assert angles.max() < 2 * np.pi
        counts, _ = np.histogram(angles, bins=4, range=(0, 2 * np.pi))
        assert counts.min() > 400
