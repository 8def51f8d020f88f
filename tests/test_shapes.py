"""Tests for geometric shapes."""

import pytest
import math
import itertools

from rayforge.vec3 import Vec3, Point3, Color
from rayforge.ray import Ray
from rayforge.shapes import HitRecord, Sphere, HittableList
from rayforge.materials import Lambertian, Metal

INF = float('inf')


def analytic_roots(ray, center, radius):
    """Both roots of |O + tD - C|^2 = r^2 from the full quadratic."""
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    b = 2.0 * oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    disc = b * b - 4 * a * c
    if disc < 0:
        return []
    return sorted([(-b - math.sqrt(disc)) / (2 * a), (-b + math.sqrt(disc)) / (2 * a)])


class TestSphereCreation:
    """Test Sphere construction and validation."""

    def test_creation(self):
        center = Point3(0, 0, 0)
        sphere = Sphere(center, 1.0)
        assert sphere.center == center
        assert sphere.radius == 1.0

    @pytest.mark.parametrize("radius", [-1.0, 0.0, INF, float('nan')])
    def test_rejects_invalid_radius(self, radius):
        with pytest.raises(ValueError):
            Sphere(Point3(0, 0, 0), radius)

    def test_rejects_non_vector_center(self):
        with pytest.raises(ValueError):
            Sphere((0, 0, 0), 1.0)

    def test_repr(self):
        assert "Sphere" in repr(Sphere(Point3(0, 0, 0), 2.0))


class TestSphereHit:
    """Test ray-sphere intersection."""

    def test_hit_toward_center(self):
        sphere = Sphere(Point3(0, 0, -1), 0.5)
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, -1))
        hit = sphere.hit(ray, 0.001, INF)

        assert hit is not None
        assert abs(hit.t - 0.5) < 1e-12
        assert hit.point == Point3(0, 0, -0.5)

    @pytest.mark.parametrize("distance,radius", [(5.0, 1.0), (3.0, 0.25), (100.0, 40.0)])
    def test_hit_distance_is_d_minus_r(self, distance, radius):
        sphere = Sphere(Point3(distance, 0, 0), radius)
        ray = Ray(Point3(0, 0, 0), Vec3(1, 0, 0))
        hit = sphere.hit(ray, 0.001, INF)
        assert abs(hit.t - (distance - radius)) < 1e-9

    def test_hit_front_face(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, -5), Vec3(0, 0, 1))
        hit = sphere.hit(ray, 0.001, INF)

        assert hit.front_face is True
        assert hit.normal == Vec3(0, 0, -1)

    def test_hit_from_inside(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, 1))
        hit = sphere.hit(ray, 0.001, INF)

        assert hit is not None
        assert hit.front_face is False
        assert abs(hit.t - 1.0) < 1e-12
        # Outward normal is +z; stored normal is flipped against the ray
        assert hit.normal == Vec3(0, 0, -1)

    def test_miss(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 5, -5), Vec3(0, 0, 1))
        assert sphere.hit(ray, 0.001, INF) is None

    def test_behind_ray(self):
        sphere = Sphere(Point3(0, 0, -5), 1.0)
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, 1))
        assert sphere.hit(ray, 0.001, INF) is None

    def test_t_min_selects_far_root(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, -5), Vec3(0, 0, 1))
        hit = sphere.hit(ray, 4.5, INF)
        assert abs(hit.t - 6.0) < 1e-12
        assert hit.front_face is False

    def test_t_max_excludes_hit(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, -5), Vec3(0, 0, 1))
        assert sphere.hit(ray, 0.001, 3.5) is None

    def test_window_bounds_are_exclusive(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, -5), Vec3(0, 0, 1))
        assert sphere.hit(ray, 0.001, 4.0) is None
        assert sphere.hit(ray, 4.0, 6.0) is None

    def test_unnormalized_direction(self):
        sphere = Sphere(Point3(0, 0, -10), 2.0)
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, -4))
        hit = sphere.hit(ray, 0.001, INF)
        assert abs(hit.t - 2.0) < 1e-12
        assert abs(hit.normal.length() - 1.0) < 1e-12

    def test_zero_direction_misses(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, 0))
        assert sphere.hit(ray, 0.001, INF) is None

    def test_tangent_ray(self):
        sphere = Sphere(Point3(0, 1, -5), 1.0)
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, -1))
        hit = sphere.hit(ray, 0.001, INF)
        assert hit is not None
        assert abs(hit.t - 5.0) < 1e-9

    def test_with_material(self):
        material = Lambertian(Color(1, 0, 0))
        sphere = Sphere(Point3(0, 0, 0), 1.0, material)
        hit = sphere.hit(Ray(Point3(0, 0, -5), Vec3(0, 0, 1)), 0.001, INF)
        assert hit.material is material

    def test_matches_analytic_root(self):
        rays = [
            Ray(Point3(0.2, -0.3, 2.0), Vec3(-0.1, 0.2, -1.0)),
            Ray(Point3(3.0, 1.0, 0.5), Vec3(-1.0, -0.3, -0.4)),
            Ray(Point3(0.1, 0.1, -1.0), Vec3(0.3, 0.9, 0.2)),
        ]
        center = Point3(0, 0, -1)
        radius = 0.9
        sphere = Sphere(center, radius)

        for ray in rays:
            roots = [t for t in analytic_roots(ray, center, radius) if t > 0.001]
            hit = sphere.hit(ray, 0.001, INF)
            assert hit is not None
            assert abs(hit.t - roots[0]) < 1e-9


class TestNormalOrientation:
    """Test HitRecord.set_face_normal."""

    @pytest.mark.parametrize("direction,outward", [
        (Vec3(0, 0, -1), Vec3(0, 0, 1)),
        (Vec3(0, 0, -1), Vec3(0, 0, -1)),
        (Vec3(1, 2, 3), Vec3(0, 1, 0)),
        (Vec3(-1, -2, 0.5), Vec3(0.6, 0.8, 0)),
        (Vec3(0.3, 0.1, -0.7), Vec3(-1, 0, 0)),
    ])
    def test_normal_opposes_ray(self, direction, outward):
        ray = Ray(Point3(0, 0, 0), direction)
        record = HitRecord(point=Point3(0, 0, 0), normal=outward, t=1.0, front_face=True)
        record.set_face_normal(ray, outward)
        assert record.normal.dot(ray.direction) <= 0
        assert record.front_face == (ray.direction.dot(outward) < 0)

    def test_random_orientations(self):
        for _ in range(200):
            ray = Ray(Point3(0, 0, 0), Vec3.random(-1, 1))
            outward = Vec3.random_unit_vector()
            record = HitRecord(point=Point3(0, 0, 0), normal=outward, t=1.0, front_face=True)
            record.set_face_normal(ray, outward)
            assert record.normal.dot(ray.direction) <= 0
            assert abs(record.normal.length() - 1.0) < 1e-10


class TestHittableList:
    """Test HittableList nearest-hit queries."""

    def test_empty_list_misses(self):
        world = HittableList()
        assert world.hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), 0.001, INF) is None

    def test_add_and_len(self):
        world = HittableList()
        world.add(Sphere(Point3(0, 0, -1), 0.5))
        world.add(Sphere(Point3(0, 0, -3), 0.5))
        assert len(world) == 2

    def test_clear(self):
        world = HittableList([Sphere(Point3(0, 0, -1), 0.5)])
        world.clear()
        assert len(world) == 0

    def test_iteration_keeps_insertion_order(self):
        a = Sphere(Point3(0, 0, -1), 0.5)
        b = Sphere(Point3(0, 0, -3), 0.5)
        assert list(HittableList([a, b])) == [a, b]

    def test_closest_hit(self):
        world = HittableList()
        world.add(Sphere(Point3(0, 0, -10), 1.0))
        world.add(Sphere(Point3(0, 0, -5), 1.0))
        hit = world.hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), 0.001, INF)
        assert abs(hit.t - 4.0) < 1e-9

    def test_order_independent(self):
        near = Lambertian(Color(1, 0, 0))
        spheres = [
            Sphere(Point3(0, 0, -10), 1.0, Lambertian(Color(0, 0, 1))),
            Sphere(Point3(0, 0, -5), 1.0, near),
            Sphere(Point3(0.5, 0, -7), 1.5, Metal(Color(0, 1, 0))),
        ]
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, -1))

        for ordering in itertools.permutations(spheres):
            hit = HittableList(ordering).hit(ray, 0.001, INF)
            assert abs(hit.t - 4.0) < 1e-9
            assert hit.material is near

    def test_respects_t_max(self):
        world = HittableList([Sphere(Point3(0, 0, -5), 1.0)])
        assert world.hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), 0.001, 2.0) is None

    def test_tie_keeps_first_inserted(self):
        first = Lambertian(Color(1, 0, 0))
        second = Lambertian(Color(0, 1, 0))
        world = HittableList([
            Sphere(Point3(0, 0, -2), 1.0, first),
            Sphere(Point3(0, 0, -2), 1.0, second),
        ])
        hit = world.hit(Ray(Point3(0, 0, 0), Vec3(0, 0, -1)), 0.001, INF)
        assert hit.material is first

    def test_shared_material(self):
        shared = Metal(Color(0.8, 0.8, 0.8))
        world = HittableList([
            Sphere(Point3(-2, 0, -5), 1.0, shared),
            Sphere(Point3(2, 0, -5), 1.0, shared),
        ])
        left = world.hit(Ray(Point3(-2, 0, 0), Vec3(0, 0, -1)), 0.001, INF)
        right = world.hit(Ray(Point3(2, 0, 0), Vec3(0, 0, -1)), 0.001, INF)
        assert left.material is shared
        assert right.material is shared
