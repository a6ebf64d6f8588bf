import itertools

import numpy as np
import pytest

import layouts
import sketch

from geometry import POINT, LINE


_value_class = {POINT: sketch.Point, LINE: sketch.Line}


def test_every_layout_samples_its_types():
  random_state = np.random.RandomState(0)
  for layout in layouts.all_layouts():
    values = layout.sample(random_state)
    assert len(values) == len(layout.object_types)
    for value, object_type in zip(values, layout.object_types):
      assert isinstance(value, _value_class[object_type])


def test_symmetries_are_permutations():
  for layout in layouts.all_layouts():
    n = len(layout.object_types)
    assert tuple(range(n)) in layout.symmetry_permutations
    for permutation in layout.symmetry_permutations:
      assert sorted(permutation) == list(range(n))
      # Only objects of the same type are exchanged.
      for i, j in enumerate(permutation):
        assert layout.object_types[i] == layout.object_types[j]


def test_right_triangle():
  random_state = np.random.RandomState(1)
  for _ in range(20):
    a, b, c = layouts.RIGHT_TRIANGLE.sample(random_state)
    assert abs((b - a).dot(c - a)) < 1e-9


def test_scalene_acute_triangle():
  random_state = np.random.RandomState(2)
  for _ in range(20):
    angles = layouts._angles(*layouts.SCALENE_ACUTE_TRIANGLE.sample(random_state))
    assert max(angles) < 90.
    for x, y in itertools.combinations(angles, 2):
      assert x != y


def test_cyclic_quadrilateral():
  random_state = np.random.RandomState(3)
  for _ in range(20):
    a, b, c, d = layouts.CYCLIC_QUADRILATERAL.sample(random_state)
    circle = sketch.circumcircle(a, b, c)
    assert abs(circle.center.distance(d) - circle.radius) < 1e-9


def test_quadrilateral_is_convex():
  random_state = np.random.RandomState(4)
  for _ in range(20):
    assert layouts._is_convex(layouts.QUADRILATERAL.sample(random_state))


def test_line_and_points():
  random_state = np.random.RandomState(5)
  line, p, q = layouts.LINE_AND_TWO_POINTS.sample(random_state)
  assert abs(line.signed_distance(p)) >= layouts.MIN_DISTANCE
  assert abs(line.signed_distance(q)) >= layouts.MIN_DISTANCE


def test_same_seed_same_picture():
  v1 = layouts.TRIANGLE.sample(np.random.RandomState(7))
  v2 = layouts.TRIANGLE.sample(np.random.RandomState(7))
  assert [p.vector().tolist() for p in v1] == [p.vector().tolist() for p in v2]


def test_get_layout():
  assert layouts.get_layout('Triangle') is layouts.TRIANGLE
  with pytest.raises(KeyError):
    layouts.get_layout('Pentagon')


if __name__ == '__main__':
  test_every_layout_samples_its_types()
  test_symmetries_are_permutations()
  test_right_triangle()
  test_scalene_acute_triangle()
  test_cyclic_quadrilateral()
  test_quadrilateral_is_convex()
  test_line_and_points()
  test_same_seed_same_picture()
  test_get_layout()
  print('\n [OK!]')
