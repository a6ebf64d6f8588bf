r"""Statements of theorems about configuration objects.

Theorem objects:

TheoremObject
  |
  +-- BaseTheoremObject (may name an explicit configuration object)
  |     |
  |     +-- PointTheoremObject
  |     +-- TheoremObjectWithPoints (+ points known to lie on it)
  |           |
  |           +-- LineTheoremObject    (2 points define a line)
  |           +-- CircleTheoremObject  (3 points define a circle)
  |
  +-- PairTheoremObject (unordered pair)
        |
        +-- LineSegmentTheoremObject  (two points)
        +-- AngleTheoremObject        (two lines)

Two line (circle) objects are equivalent when they share an explicit object
or at least 2 (3) points, since that many points pin the object down.

Remapping takes a dictionary from configuration objects to configuration
objects (see Configuration.symmetry_mapping) and returns None when the
theorem cannot be expressed after the remap.
"""

import itertools

from geometry import POINT, LINE, CIRCLE


COLLINEAR_POINTS = 'CollinearPoints'
CONCYCLIC_POINTS = 'ConcyclicPoints'
CONCURRENT_LINES = 'ConcurrentLines'
PARALLEL_LINES = 'ParallelLines'
PERPENDICULAR_LINES = 'PerpendicularLines'
EQUAL_LINE_SEGMENTS = 'EqualLineSegments'
LINE_TANGENT_TO_CIRCLE = 'LineTangentToCircle'
TANGENT_CIRCLES = 'TangentCircles'
EQUAL_ANGLES = 'EqualAngles'


def _map(configuration_object, mapping):
  if configuration_object is None:
    return None
  return mapping.get(configuration_object)


class TheoremObject(object):

  def is_equivalent_to(self, other):
    raise NotImplementedError('Abstract class TheoremObject.')

  def remap(self, mapping):
    raise NotImplementedError('Abstract class TheoremObject.')


class BaseTheoremObject(TheoremObject):

  object_type = None

  def __init__(self, configuration_object=None):
    if (configuration_object is not None and
        configuration_object.object_type != self.object_type):
      raise ValueError('{} needs a {}, got {!r}.'.format(
          type(self).__name__, self.object_type, configuration_object))
    self.configuration_object = configuration_object

  def is_equivalent_to(self, other):
    return self is other or (
        isinstance(other, BaseTheoremObject) and
        self.configuration_object is not None and
        other.configuration_object is not None and
        self.configuration_object == other.configuration_object)


class PointTheoremObject(BaseTheoremObject):

  object_type = POINT

  def __init__(self, configuration_object):
    if configuration_object is None:
      raise ValueError('A point theorem object needs its point.')
    super(PointTheoremObject, self).__init__(configuration_object)

  def remap(self, mapping):
    obj = _map(self.configuration_object, mapping)
    return None if obj is None else PointTheoremObject(obj)

  def __repr__(self):
    return self.configuration_object.name


class TheoremObjectWithPoints(BaseTheoremObject):

  number_of_needed_points = None

  def __init__(self, configuration_object=None, points=()):
    super(TheoremObjectWithPoints, self).__init__(configuration_object)
    points = frozenset(points)
    for point in points:
      if point.object_type != POINT:
        raise ValueError('{!r} is not a point.'.format(point))
    if configuration_object is None and len(points) < self.number_of_needed_points:
      raise ValueError('{} needs {} distinct points, got {}.'.format(
          type(self).__name__, self.number_of_needed_points, len(points)))
    self.points = points

  def is_equivalent_to(self, other):
    if super(TheoremObjectWithPoints, self).is_equivalent_to(other):
      return True
    return (type(other) == type(self) and
            len(self.points & other.points) >= self.number_of_needed_points)

  def remap_object_and_points(self, mapping):
    """Returns (object, points) after the remap, or None if undefinable."""
    obj = _map(self.configuration_object, mapping)
    points = set(_map(point, mapping) for point in self.points)
    points.discard(None)
    if obj is None and len(points) < self.number_of_needed_points:
      return None
    return obj, points

  def remap(self, mapping):
    remapped = self.remap_object_and_points(mapping)
    if remapped is None:
      return None
    return type(self)(*remapped)

  def __repr__(self):
    name = self.configuration_object.name if self.configuration_object else ''
    points = ', '.join(sorted(p.name for p in self.points))
    return self._format.format(name, points)


class LineTheoremObject(TheoremObjectWithPoints):

  object_type = LINE
  number_of_needed_points = 2
  _format = '{}[{}]'


class CircleTheoremObject(TheoremObjectWithPoints):

  object_type = CIRCLE
  number_of_needed_points = 3
  _format = '{}({})'


class PairTheoremObject(TheoremObject):

  def __init__(self, object1, object2):
    self.object1 = object1
    self.object2 = object2

  def is_equivalent_to(self, other):
    if self is other:
      return True
    if type(other) != type(self):
      return False
    return ((self.object1.is_equivalent_to(other.object1) and
             self.object2.is_equivalent_to(other.object2)) or
            (self.object1.is_equivalent_to(other.object2) and
             self.object2.is_equivalent_to(other.object1)))

  def remap(self, mapping):
    object1 = self.object1.remap(mapping)
    object2 = self.object2.remap(mapping)
    if object1 is None or object2 is None:
      return None
    return type(self)(object1, object2)

  def __repr__(self):
    return '{}{!r}, {!r}{}'.format(self._brackets[0], self.object1,
                                   self.object2, self._brackets[1])


class LineSegmentTheoremObject(PairTheoremObject):

  _brackets = '<>'

  def __init__(self, point1, point2):
    if not isinstance(point1, TheoremObject):
      point1 = PointTheoremObject(point1)
    if not isinstance(point2, TheoremObject):
      point2 = PointTheoremObject(point2)
    super(LineSegmentTheoremObject, self).__init__(point1, point2)


class AngleTheoremObject(PairTheoremObject):

  _brackets = '<>'

  def __init__(self, line1, line2):
    if not isinstance(line1, LineTheoremObject) or not isinstance(
        line2, LineTheoremObject):
      raise ValueError('An angle is made of two lines.')
    super(AngleTheoremObject, self).__init__(line1, line2)


# theorem type -> (kind of every object, minimal count, maximal count)
_theorem_signatures = {
    COLLINEAR_POINTS: (PointTheoremObject, 3, None),
    CONCYCLIC_POINTS: (PointTheoremObject, 4, None),
    CONCURRENT_LINES: (LineTheoremObject, 3, None),
    PARALLEL_LINES: (LineTheoremObject, 2, 2),
    PERPENDICULAR_LINES: (LineTheoremObject, 2, 2),
    EQUAL_LINE_SEGMENTS: (LineSegmentTheoremObject, 2, 2),
    LINE_TANGENT_TO_CIRCLE: ((LineTheoremObject, CircleTheoremObject), 2, 2),
    TANGENT_CIRCLES: (CircleTheoremObject, 2, 2),
    EQUAL_ANGLES: (AngleTheoremObject, 2, 2),
}


def _can_match(objects1, objects2):
  """Can objects1 be paired up with equivalent objects2, in any order?"""
  if len(objects1) != len(objects2):
    return False
  if not objects1:
    return True

  first, rest = objects1[0], objects1[1:]
  for i, candidate in enumerate(objects2):
    if (first.is_equivalent_to(candidate) and
        _can_match(rest, objects2[:i] + objects2[i+1:])):
      return True
  return False


class Theorem(object):

  def __init__(self, configuration, theorem_type, objects):
    if theorem_type not in _theorem_signatures:
      raise ValueError('Unknown theorem type {}.'.format(theorem_type))

    objects = list(objects)
    kinds, min_count, max_count = _theorem_signatures[theorem_type]
    if len(objects) < min_count or (max_count and len(objects) > max_count):
      raise ValueError('{} cannot have {} objects.'.format(
          theorem_type, len(objects)))

    if isinstance(kinds, tuple):
      valid = all(isinstance(obj, kind) for obj, kind in zip(objects, kinds))
    else:
      valid = all(isinstance(obj, kinds) for obj in objects)
    if not valid:
      raise ValueError('Wrong objects for {}: {}.'.format(theorem_type, objects))

    for x, y in itertools.combinations(objects, 2):
      if x.is_equivalent_to(y):
        raise ValueError('{} has equivalent objects {!r} and {!r}.'.format(
            theorem_type, x, y))

    self.configuration = configuration
    self.theorem_type = theorem_type
    self.objects = objects

  def is_equivalent_to(self, other):
    return (self is other or
            (other.theorem_type == self.theorem_type and
             _can_match(self.objects, other.objects)))

  def remap(self, mapping):
    """The theorem in terms of remapped objects, or None."""
    objects = [obj.remap(mapping) for obj in self.objects]
    if any(obj is None for obj in objects):
      return None
    try:
      return Theorem(self.configuration, self.theorem_type, objects)
    except ValueError:
      # Remapped objects collapsed into equivalent ones.
      return None

  def is_symmetric(self, mapping):
    """Does the theorem say the same after a symmetry of the configuration?"""
    remapped = self.remap(self.configuration.symmetry_mapping(mapping))
    return remapped is not None and remapped.is_equivalent_to(self)

  def __repr__(self):
    return '{}: {}'.format(self.theorem_type, ', '.join(map(repr, self.objects)))
