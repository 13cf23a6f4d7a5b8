"""Closed-form formulas for sums, circles, triangles, polygons and solids.

Angles are in radians unless a function says otherwise.
"""

from __future__ import annotations

import math


def range_sum(low: int, high: int) -> int:
    """Return low + (low + 1) + ... + high."""
    return (low + high) * (high - low + 1) // 2


def chord_length(radius: float, angle: float) -> float:
    """Length of the chord subtending angle at the centre."""
    return 2 * radius * math.sin(angle / 2)


def arc_length(radius: float, angle: float) -> float:
    """Length of the arc subtending angle at the centre."""
    return radius * angle


def sector_area(radius: float, angle: float) -> float:
    """Area of the circular sector with the given central angle."""
    return radius * radius * angle / 2


def segment_area(radius: float, angle: float) -> float:
    """Area of the circular segment cut off by the chord of the given angle."""
    return radius * radius * (angle - math.sin(angle)) / 2


def common_chord_length(big_radius: float, small_radius: float, distance: float) -> float:
    """Length of the common chord of two circles whose centres are distance apart."""
    if distance <= 0:
        raise ValueError("centres must be a positive distance apart")
    offset = (distance * distance + big_radius * big_radius - small_radius * small_radius) / (2 * distance)
    square = big_radius * big_radius - offset * offset
    if square < 0:
        raise ValueError("circles do not intersect")
    return 2 * math.sqrt(square)


def kissing_curvatures(k1: float, k2: float, k3: float) -> tuple[float, float]:
    """Curvatures of the inner and outer circles tangent to three mutually tangent circles.

    Returns ``(inner, outer)``; an outer curvature below zero means the
    enclosing circle contains the three.
    """
    square = k1 * k2 + k2 * k3 + k3 * k1
    if square < 0:
        raise ValueError("curvatures admit no tangent circle")
    root = 2 * math.sqrt(square)
    base = k1 + k2 + k3
    return base + root, base - root


def heron_area(a: float, b: float, c: float) -> float:
    """Area of the triangle with sides a, b, c."""
    if min(a, b, c) <= 0:
        raise ValueError("sides must be positive")
    s = (a + b + c) / 2
    product = s * (s - a) * (s - b) * (s - c)
    if product < 0:
        raise ValueError(f"sides {a}, {b}, {c} do not form a triangle")
    return math.sqrt(product)


def triangle_area_from_medians(ma: float, mb: float, mc: float) -> float:
    """Area of the triangle whose medians have the given lengths."""
    return 4 / 3 * heron_area(ma, mb, mc)


def _check_sides(sides: int) -> None:
    if sides < 3:
        raise ValueError(f"a polygon needs at least 3 sides, got {sides}")


def polygon_interior_angle(sides: int) -> float:
    """Each interior angle of a regular polygon, in radians."""
    _check_sides(sides)
    return (sides - 2) * math.pi / sides


def polygon_diagonals(sides: int) -> int:
    """Number of diagonals of a polygon."""
    _check_sides(sides)
    return sides * (sides - 3) // 2


def regular_polygon_side(circumradius: float, sides: int) -> float:
    """Side length of a regular polygon from its circumradius."""
    _check_sides(sides)
    return 2 * circumradius * math.sin(math.pi / sides)


def regular_polygon_apothem(side: float, sides: int) -> float:
    """Apothem (inradius) of a regular polygon from its side length."""
    _check_sides(sides)
    return side / (2 * math.tan(math.pi / sides))


def regular_polygon_circumradius(side: float, sides: int) -> float:
    """Circumradius of a regular polygon from its side length."""
    _check_sides(sides)
    return side / (2 * math.sin(math.pi / sides))


def regular_polygon_central_angle(sides: int) -> float:
    """Central angle of a regular polygon, in degrees."""
    _check_sides(sides)
    return 360 / sides


def regular_polygon_area_from_side(side: float, sides: int) -> float:
    """Area of a regular polygon from its side length."""
    _check_sides(sides)
    return sides * side * side / (4 * math.tan(math.pi / sides))


def regular_polygon_area_from_apothem(side: float, apothem: float, sides: int) -> float:
    """Area of a regular polygon as half its perimeter times its apothem."""
    _check_sides(sides)
    return sides * side * apothem / 2


def regular_polygon_area_from_circumradius(circumradius: float, sides: int) -> float:
    """Area of a regular polygon from its circumradius."""
    _check_sides(sides)
    return sides * circumradius * circumradius * math.sin(2 * math.pi / sides) / 2


def spherical_cap_volume(radius: float, height: float) -> float:
    """Volume of a cap of the given height cut from a sphere."""
    return math.pi * height * height * (3 * radius - height) / 3


def sphere_volume(radius: float) -> float:
    """Volume of a sphere."""
    return 4 / 3 * math.pi * radius**3


def hemisphere_volume(radius: float) -> float:
    """Volume of a hemisphere."""
    return 2 / 3 * math.pi * radius**3


def inradius(a: float, b: float, c: float) -> float:
    """Radius of the incircle of a triangle."""
    return heron_area(a, b, c) / ((a + b + c) / 2)


def circumradius(a: float, b: float, c: float) -> float:
    """Radius of the circumcircle of a triangle."""
    area = heron_area(a, b, c)
    if area == 0:
        raise ValueError("a degenerate triangle has no circumcircle")
    return a * b * c / (4 * area)


def exradius(a: float, b: float, c: float) -> float:
    """Radius of the excircle opposite side a."""
    area = heron_area(a, b, c)
    gap = (a + b + c) / 2 - a
    if gap == 0:
        raise ValueError("a degenerate triangle has no excircle opposite its longest side")
    return area / gap


def equilateral_triangle_area(side: float) -> float:
    """Area of an equilateral triangle."""
    return math.sqrt(3) / 4 * side * side


def isosceles_triangle_area(leg: float, base: float) -> float:
    """Area of an isosceles triangle with two legs and a base."""
    square = 4 * leg * leg - base * base
    if square < 0:
        raise ValueError("legs too short for the base")
    return base / 4 * math.sqrt(square)


def cylinder_volume(radius: float, height: float) -> float:
    """Volume of a cylinder."""
    return math.pi * radius * radius * height


def cone_volume(radius: float, height: float) -> float:
    """Volume of a cone."""
    return math.pi * radius * radius * height / 3


def triangular_prism_volume(base: float, height: float, length: float) -> float:
    """Volume of a prism whose cross-section is a triangle of given base and height."""
    return base * height * length / 2


def pyramid_volume(base_area: float, height: float) -> float:
    """Volume of a pyramid."""
    return base_area * height / 3


def tetrahedron_volume(edge: float) -> float:
    """Volume of a regular tetrahedron."""
    return edge**3 / (6 * math.sqrt(2))


def frustum_volume(big_radius: float, small_radius: float, height: float) -> float:
    """Volume of a conical frustum."""
    return math.pi * height * (big_radius**2 + small_radius**2 + big_radius * small_radius) / 3


def torus_volume(big_radius: float, small_radius: float) -> float:
    """Volume of a torus with tube radius small_radius centred big_radius from the axis."""
    return 2 * math.pi**2 * big_radius * small_radius**2