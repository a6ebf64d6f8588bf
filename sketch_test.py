import math

import pytest

import sketch

from sketch import Point, Line, Circle, AnalyticError


def close(p, x, y):
  return abs(p.x - x) < 1e-9 and abs(p.y - y) < 1e-9


def test_line_is_normalized():
  l = Line(Point(0, 0), Point(2, 0))
  a, b, c = l.coefficients
  assert abs(a*a + b*b - 1.) < 1e-12
  assert abs(l.signed_distance(Point(5, 0))) < 1e-12
  assert abs(abs(l.signed_distance(Point(0, 3))) - 3.) < 1e-12


def test_degenerate_line():
  with pytest.raises(AnalyticError):
    Line(Point(1, 1), Point(1, 1))


def test_intersect_line_line():
  x_axis = Line(Point(0, 0), Point(1, 0))
  x_is_1 = Line(Point(1, 0), Point(1, 1))
  assert close(sketch.line_line_intersection(x_axis, x_is_1), 1, 0)

  with pytest.raises(AnalyticError):
    sketch.line_line_intersection(x_axis, x_axis.parallel_line(Point(0, 1)))


def test_projection_and_reflection():
  x_axis = Line(Point(0, 0), Point(1, 0))
  assert close(x_axis.projection(Point(0.5, 1)), 0.5, 0)
  assert close(x_axis.reflection(Point(0.5, 1)), 0.5, -1)

  perp = x_axis.perpendicular_line(Point(2, 0))
  assert abs(perp.signed_distance(Point(2, 7))) < 1e-12


def test_circumcircle():
  circle = sketch.circumcircle(Point(1, 0), Point(0, 1), Point(-1, 0))
  assert close(circle.center, 0, 0)
  assert abs(circle.radius - 1.) < 1e-12

  with pytest.raises(AnalyticError):
    sketch.circumcircle(Point(0, 0), Point(1, 1), Point(2, 2))


def test_circle_needs_positive_radius():
  with pytest.raises(AnalyticError):
    Circle(Point(0, 0), 0.)


def test_internal_angle_bisector():
  bisector = sketch.internal_angle_bisector(
      Point(0, 0), Point(1, 0), Point(0, 3))
  assert abs(bisector.signed_distance(Point(1, 1))) < 1e-12

  with pytest.raises(AnalyticError):
    sketch.internal_angle_bisector(Point(0, 0), Point(1, 0), Point(-1, 0))


def test_second_intersection():
  x_axis = Line(Point(0, 0), Point(1, 0))
  unit = Circle(Point(0, 0), 1.)
  assert close(sketch.second_intersection(x_axis, unit, Point(1, 0)), -1, 0)

  tangent = Line(Point(0, 1), Point(1, 1))
  with pytest.raises(AnalyticError):
    sketch.second_intersection(tangent, unit, Point(0, 1))


def test_points_on_objects():
  unit = Circle(Point(0, 0), 1.)
  p = unit.point_at(math.pi / 2)
  assert close(p, 0, 1)

  l = Line(Point(0, 1), Point(1, 1))
  assert abs(l.signed_distance(l.point_at(3.))) < 1e-12


def test_vectors():
  assert list(Point(1, 2).vector()) == [1., 2.]
  assert list(Circle(Point(1, 2), 3.).vector()) == [1., 2., 3.]
  assert Line(Point(0, 0), Point(1, 0)).vector().shape == (3,)
  assert not Point(float('inf'), 0).is_finite()


if __name__ == '__main__':
  test_line_is_normalized()
  test_degenerate_line()
  test_intersect_line_line()
  test_projection_and_reflection()
  test_circumcircle()
  test_circle_needs_positive_radius()
  test_internal_angle_bisector()
  test_second_intersection()
  test_points_on_objects()
  test_vectors()
  print('\n [OK!]')
