import math

import pytest

from metabolistic.geometry import Quat, Transform, Vec2, Vec3


def approx_vec(v, tol=1e-9):
    return pytest.approx(tuple(v), abs=tol)


def test_vec2_normalize_has_unit_length():
    v = Vec2(3.0, -7.0).normalize_or_zero()
    assert v.length() == pytest.approx(1.0)
    assert v.length_squared() == pytest.approx(1.0)


def test_vec2_normalize_zero_stays_zero():
    assert Vec2(0.0, 0.0).normalize_or_zero() == Vec2.ZERO


def test_vec2_normalize_keeps_direction():
    v = Vec2(2.0, 5.0)
    n = v.normalize_or_zero()
    assert tuple(n * v.length()) == pytest.approx(tuple(v))


def test_vec3_normalize_and_zero():
    assert Vec3(1.0, 2.0, -2.0).normalize_or_zero().length() == pytest.approx(1.0)
    assert Vec3.ZERO.normalize_or_zero() == Vec3.ZERO


def test_vec3_cross_is_perpendicular():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_vec3_cross_of_basis():
    assert Vec3.X.cross(Vec3.Y) == Vec3.Z


def test_vec3_lerp_endpoints_and_midpoint():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-1.0, 6.0, 0.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b
    mid = a.lerp(b, 0.5)
    assert (mid - a).length() == pytest.approx((b - mid).length())


def test_vec3_angle_between_self_is_zero_and_symmetric():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(0.0, -1.0, 4.0)
    assert a.angle_between(a * 3.0) == pytest.approx(0.0, abs=1e-7)
    assert a.angle_between(b) == pytest.approx(b.angle_between(a))
    assert a.angle_between(-a) == pytest.approx(math.pi)


def test_vec3_angle_between_zero_vector_raises():
    with pytest.raises(ValueError):
        Vec3.ZERO.angle_between(Vec3.Y)


def test_vec3_xz_drops_y():
    v = Vec3(1.5, 9.0, -2.5)
    assert v.xz() == Vec2(v.x, v.z)


def test_quat_rotate_preserves_length():
    q = Quat.from_axis_angle(Vec3(1.0, 1.0, 0.0), 1.1)
    v = Vec3(0.3, -2.0, 5.0)
    assert q.rotate(v).length() == pytest.approx(v.length())


def test_quat_zero_axis_raises():
    with pytest.raises(ValueError):
        Quat.from_axis_angle(Vec3.ZERO, 1.0)


def test_quat_composition_adds_angles():
    v = Vec3(1.0, 0.5, -2.0)
    combined = Quat.from_rotation_y(0.4) * Quat.from_rotation_y(0.7)
    assert tuple(combined * v) == approx_vec(Quat.from_rotation_y(1.1) * v)


def test_quat_rotation_keeps_axis_fixed():
    assert tuple(Quat.from_rotation_x(0.9) * Vec3.X) == approx_vec(Vec3.X)
    assert tuple(Quat.from_rotation_y(0.9) * Vec3.Y) == approx_vec(Vec3.Y)


@pytest.mark.parametrize("angle", [-1.2, -0.3, 0.0, 0.5, 1.4])
def test_euler_roundtrip_yaw(angle):
    yaw, pitch, roll = Quat.from_rotation_y(angle).to_euler_yxz()
    assert yaw == pytest.approx(angle)
    assert pitch == pytest.approx(0.0, abs=1e-9)
    assert roll == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("angle", [-1.5, -0.2, 0.6, 1.5])
def test_euler_roundtrip_pitch(angle):
    yaw, pitch, _ = Quat.from_rotation_x(angle).to_euler_yxz()
    assert pitch == pytest.approx(angle)
    assert yaw == pytest.approx(0.0, abs=1e-9)


def test_euler_roundtrip_combined():
    q = Quat.from_rotation_y(0.8) * Quat.from_rotation_x(-0.4)
    yaw, pitch, _ = q.to_euler_yxz()
    assert (yaw, pitch) == pytest.approx((0.8, -0.4))


@pytest.mark.parametrize(
    "direction", [Vec3(1.0, 0.0, 0.0), Vec3(0.3, -0.5, -2.0), Vec3(-1.0, 2.0, 1.0), Vec3(0.0, 0.0, 1.0)]
)
def test_looking_to_points_forward(direction):
    t = Transform(rotation=Quat.looking_to(direction, Vec3.Y))
    assert tuple(t.forward()) == approx_vec(direction.normalize_or_zero())
    assert t.right().dot(Vec3.Y) == pytest.approx(0.0, abs=1e-9)
    assert t.up().y > 0.0


def test_looking_to_parallel_up_still_valid():
    t = Transform(rotation=Quat.looking_to(Vec3(0.0, -1.0, 0.0), Vec3.Y))
    assert tuple(t.forward()) == approx_vec(Vec3(0.0, -1.0, 0.0))
    assert t.right().length() == pytest.approx(1.0)


def test_looking_at_from_camera_start():
    t = Transform.from_xyz(0.0, 1.5, 4.0).looking_at(Vec3.ZERO, Vec3.Y)
    expected = (Vec3.ZERO - t.translation).normalize_or_zero()
    assert tuple(t.forward()) == approx_vec(expected)
    assert tuple(t.back()) == approx_vec(-expected)


def test_looking_at_leaves_original_untouched():
    t = Transform.from_xyz(1.0, 2.0, 3.0)
    t.looking_at(Vec3.ZERO, Vec3.Y)
    assert t.rotation == Quat.IDENTITY


def test_rotate_around_keeps_distance_and_height():
    t = Transform.from_xyz(0.0, 1.5, 4.0).looking_at(Vec3.ZERO, Vec3.Y)
    point = Vec3(0.0, 0.5, 0.0)
    before = (t.translation - point).length()
    t.rotate_around(point, Quat.from_rotation_y(0.5))
    assert (t.translation - point).length() == pytest.approx(before)
    assert t.translation.y == pytest.approx(1.5)
    expected = (point - t.translation).normalize_or_zero()
    dir_to_origin = (Vec3(0.0, 0.0, 0.0) + Vec3(0.0, 0.0, 0.0) - t.translation)
    assert t.forward().dot(dir_to_origin.normalize_or_zero()) > 0.0
    assert expected.length() == pytest.approx(1.0)


def test_rotate_local_inverse_restores():
    t = Transform.from_xyz(0.0, 0.0, 0.0).looking_at(Vec3(1.0, -1.0, -2.0), Vec3.Y)
    original = t.forward()
    t.rotate_local(Quat.from_rotation_x(0.3))
    assert tuple(t.forward()) != approx_vec(original)
    t.rotate_local(Quat.from_rotation_x(-0.3))
    assert tuple(t.forward()) == approx_vec(original)


def test_rotate_local_pitch_changes_euler_pitch():
    t = Transform(rotation=Quat.from_rotation_y(0.7))
    t.rotate_local(Quat.from_rotation_x(0.25))
    yaw, pitch, _ = t.rotation.to_euler_yxz()
    assert yaw == pytest.approx(0.7)
    assert pitch == pytest.approx(0.25)