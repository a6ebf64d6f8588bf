"""Layouts of loose objects and how each is drawn in a random picture."""

import itertools
import math

from collections import OrderedDict as odict

import sketch

from geometry import POINT, LINE


# Rejection sampling gives up after this many draws.
MAX_SAMPLING_TRIES = 10000

# Minimal distance between sampled objects, on a [-1, 1]^2 canvas.
MIN_DISTANCE = 0.1

MIN_ANGLE = 10.0


class LooseObjectsLayout(object):

  def __init__(self, name, object_types, sampler, symmetry_permutations):
    self.name = name
    self.object_types = tuple(object_types)
    self.symmetry_permutations = tuple(tuple(p) for p in symmetry_permutations)
    self._sampler = sampler

  def sample(self, random_state):
    """Draws one numeric value per loose object satisfying the layout."""
    for _ in range(MAX_SAMPLING_TRIES):
      values = self._sampler(random_state)
      if values is not None:
        return values
    raise RuntimeError('Could not sample layout {} in {} tries.'.format(
        self.name, MAX_SAMPLING_TRIES))

  def __repr__(self):
    return self.name


def _random_point(random_state):
  x, y = random_state.uniform(-1.0, 1.0, size=2)
  return sketch.Point(x, y)


def _line_segment(random_state):
  points = [_random_point(random_state) for _ in range(2)]
  return points if points[0].distance(points[1]) >= MIN_DISTANCE else None


def _angles(a, b, c):
  """Angles of triangle ABC at A, B and C, in degrees."""
  result = []
  for p, q, r in [(a, b, c), (b, c, a), (c, a, b)]:
    u, v = q - p, r - p
    cos = u.dot(v) / (u.norm() * v.norm())
    result.append(math.degrees(math.acos(max(-1.0, min(1.0, cos)))))
  return result


def _is_triangle(a, b, c):
  if min(a.distance(b), b.distance(c), c.distance(a)) < MIN_DISTANCE:
    return False
  return min(_angles(a, b, c)) >= MIN_ANGLE


def _triangle(random_state):
  points = [_random_point(random_state) for _ in range(3)]
  return points if _is_triangle(*points) else None


def _scalene_acute_triangle(random_state):
  points = [_random_point(random_state) for _ in range(3)]
  if not _is_triangle(*points):
    return None
  angles = _angles(*points)
  if max(angles) > 90.0 - MIN_ANGLE:
    return None
  for x, y in itertools.combinations(angles, 2):
    if abs(x - y) < MIN_ANGLE / 2:
      return None
  return points


def _right_triangle(random_state):
  a, b = _random_point(random_state), _random_point(random_state)
  c = a + (b - a).rotate90() * random_state.uniform(0.5, 2.0)
  return [a, b, c] if _is_triangle(a, b, c) else None


def _is_convex(points):
  signs = []
  n = len(points)
  for i in range(n):
    p, q, r = points[i], points[(i + 1) % n], points[(i + 2) % n]
    signs.append((q - p).cross(r - q))
  return all(s > 0 for s in signs) or all(s < 0 for s in signs)


def _quadrilateral(random_state):
  points = [_random_point(random_state) for _ in range(4)]
  if not _is_convex(points):
    return None
  for triple in itertools.combinations(points, 3):
    if not _is_triangle(*triple):
      return None
  return points


def _cyclic_quadrilateral(random_state):
  center = _random_point(random_state)
  circle = sketch.Circle(center, random_state.uniform(0.5, 1.5))
  angles = sorted(random_state.uniform(0., 2 * math.pi, size=4))
  gaps = [b - a for a, b in zip(angles, angles[1:] + [angles[0] + 2 * math.pi])]
  if min(gaps) < math.radians(2 * MIN_ANGLE):
    return None
  return [circle.point_at(angle) for angle in angles]


def _line_and_points(count):
  def sampler(random_state):
    p, q = _random_point(random_state), _random_point(random_state)
    if p.distance(q) < MIN_DISTANCE:
      return None
    line = sketch.Line(p, q)
    points = [_random_point(random_state) for _ in range(count)]
    if any(abs(line.signed_distance(x)) < MIN_DISTANCE for x in points):
      return None
    for x, y in itertools.combinations(points, 2):
      if x.distance(y) < MIN_DISTANCE:
        return None
    return [line] + points
  return sampler


def _dihedral(n):
  rotations = [[(i + k) % n for i in range(n)] for k in range(n)]
  return rotations + [list(reversed(r)) for r in rotations]


LINE_SEGMENT = LooseObjectsLayout(
    'LineSegment', [POINT] * 2, _line_segment, [(0, 1), (1, 0)])

TRIANGLE = LooseObjectsLayout(
    'Triangle', [POINT] * 3, _triangle,
    itertools.permutations(range(3)))

SCALENE_ACUTE_TRIANGLE = LooseObjectsLayout(
    'ScaleneAcuteTriangle', [POINT] * 3, _scalene_acute_triangle,
    itertools.permutations(range(3)))

RIGHT_TRIANGLE = LooseObjectsLayout(
    'RightTriangle', [POINT] * 3, _right_triangle,
    [(0, 1, 2), (0, 2, 1)])

QUADRILATERAL = LooseObjectsLayout(
    'Quadrilateral', [POINT] * 4, _quadrilateral, _dihedral(4))

CYCLIC_QUADRILATERAL = LooseObjectsLayout(
    'CyclicQuadrilateral', [POINT] * 4, _cyclic_quadrilateral, _dihedral(4))

LINE_AND_POINT = LooseObjectsLayout(
    'LineAndPoint', [LINE, POINT], _line_and_points(1), [(0, 1)])

LINE_AND_TWO_POINTS = LooseObjectsLayout(
    'LineAndTwoPoints', [LINE, POINT, POINT], _line_and_points(2),
    [(0, 1, 2), (0, 2, 1)])


_layouts = odict((layout.name, layout) for layout in [
    LINE_SEGMENT,
    TRIANGLE,
    SCALENE_ACUTE_TRIANGLE,
    RIGHT_TRIANGLE,
    QUADRILATERAL,
    CYCLIC_QUADRILATERAL,
    LINE_AND_POINT,
    LINE_AND_TWO_POINTS,
])


def get_layout(name):
  if name not in _layouts:
    raise KeyError('Unknown layout {}. Available: {}'.format(
        name, ', '.join(_layouts)))
  return _layouts[name]


def all_layouts():
  return list(_layouts.values())
