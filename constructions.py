"""Registry of constructions.

Constructions available to configurations ({} marks an unordered set):

I. Predefined (16)

  1. Points
    a. CenterOfCircle                               C
    b. IntersectionOfLines                          {L, L}
    c. Midpoint                                     {P, P}
    d. PerpendicularProjection                      P, L
    e. PointReflection                              P, P
    f. ReflectionInLine                             L, P
    g. SecondIntersectionOfCircleAndLineFromPoints  P, P, {P, P}

  2. Lines
    a. LineFromPoints                               {P, P}
    b. InternalAngleBisector                        P, {P, P}
    c. PerpendicularLine                            P, L
    d. ParallelLine                                 P, L

  3. Circles
    a. Circumcircle                                 {P, P, P}
    b. CircleWithCenterThroughPoint                 P, P

  4. Random
    a. RandomPointOnLine                            L
    b. RandomPointOnCircle                          C
    c. RandomPointOnLineSegment                     {P, P}

II. Composed from predefined ones (9)

  PerpendicularBisector, Circumcenter, Centroid, Orthocenter, Incenter,
  NinePointCircle, ParallelogramPoint, PerpendicularProjectionOnLineFromPoints,
  ReflectionInLineFromPoints.

III. RandomPointOn<Name>: a random point on the line or circle any of the
  above produces, created on lookup.

The tables are filled once at import and never change afterwards.
"""

import math

from collections import OrderedDict as odict

import geometry
import sketch

from arguments import Signature
from arguments import ObjectConstructionParameter, SetConstructionParameter
from geometry import POINT, LINE, CIRCLE


class UnknownConstructionError(KeyError):
  pass


CENTER_OF_CIRCLE = 'CenterOfCircle'
CIRCLE_WITH_CENTER_THROUGH_POINT = 'CircleWithCenterThroughPoint'
CIRCUMCIRCLE = 'Circumcircle'
INTERNAL_ANGLE_BISECTOR = 'InternalAngleBisector'
INTERSECTION_OF_LINES = 'IntersectionOfLines'
LINE_FROM_POINTS = 'LineFromPoints'
MIDPOINT = 'Midpoint'
PERPENDICULAR_PROJECTION = 'PerpendicularProjection'
PERPENDICULAR_LINE = 'PerpendicularLine'
PARALLEL_LINE = 'ParallelLine'
POINT_REFLECTION = 'PointReflection'
REFLECTION_IN_LINE = 'ReflectionInLine'
SECOND_INTERSECTION_OF_CIRCLE_AND_LINE_FROM_POINTS = (
    'SecondIntersectionOfCircleAndLineFromPoints')
RANDOM_POINT_ON_LINE = 'RandomPointOnLine'
RANDOM_POINT_ON_CIRCLE = 'RandomPointOnCircle'
RANDOM_POINT_ON_LINE_SEGMENT = 'RandomPointOnLineSegment'

RANDOM_POINT_ON_PREFIX = 'RandomPointOn'


class Construction(object):

  def __init__(self, name, signature, output_type):
    self.name = name
    self.signature = signature
    self.output_type = output_type

  @property
  def is_random(self):
    raise NotImplementedError('Abstract class Construction.')

  def realize(self, inputs, random_state=None):
    """Numeric output for numeric inputs given in flattened argument order."""
    raise NotImplementedError('Abstract class Construction.')

  def __eq__(self, other):
    return (isinstance(other, Construction) and
            type(other) == type(self) and
            other.name == self.name)

  def __hash__(self):
    return hash(self.name)

  def __repr__(self):
    return '{}({}) -> {}'.format(self.name, self.signature, self.output_type)


class PredefinedConstruction(Construction):

  def __init__(self, construction_type, signature, output_type, function,
               is_random=False):
    super(PredefinedConstruction, self).__init__(
        construction_type, signature, output_type)
    self.construction_type = construction_type
    self._function = function
    self._is_random = is_random

  @property
  def is_random(self):
    return self._is_random

  def realize(self, inputs, random_state=None):
    if self._is_random:
      if random_state is None:
        raise ValueError('{} needs a random state.'.format(self.name))
      return self._function(random_state, *inputs)
    return self._function(*inputs)


class ComposedConstruction(Construction):
  """A chain of constructions over an internal configuration.

  The loose objects of the configuration stand for the inputs, in flattened
  order. The last constructed object is the output.
  """

  def __init__(self, name, configuration, signature):
    loose_types = [obj.object_type for obj in configuration.loose_objects]
    if loose_types != signature.object_types():
      raise ValueError('Signature ({}) does not fit loose objects {}.'.format(
          signature, loose_types))
    if not configuration.constructed_objects:
      raise ValueError('Composed construction {} constructs nothing.'.format(name))

    self.configuration = configuration
    self._output = configuration.constructed_objects[-1]
    self._is_random = any(obj.construction.is_random
                          for obj in configuration.constructed_objects)
    super(ComposedConstruction, self).__init__(
        name, signature, self._output.object_type)

  @property
  def is_random(self):
    return self._is_random

  def realize(self, inputs, random_state=None):
    values = {obj.id: value
              for obj, value in zip(self.configuration.loose_objects, inputs)}
    for obj in self.configuration.constructed_objects:
      inner_inputs = [values[x.id] for x in obj.arguments.flattened_list]
      values[obj.id] = obj.construction.realize(inner_inputs, random_state)
    return values[self._output.id]


def _object(object_type):
  return ObjectConstructionParameter(object_type)


def _set(object_type, count):
  return SetConstructionParameter(ObjectConstructionParameter(object_type), count)


def _circle_with_center_through_point(center, point):
  return sketch.Circle(center, center.distance(point))


def _point_reflection(point, center):
  return center * 2.0 - point


def _second_intersection(a, b, c, d):
  # Line AB and circle ACD share A.
  return sketch.second_intersection(
      sketch.Line(a, b), sketch.circumcircle(a, c, d), a)


def _random_point_on_line(random_state, line):
  return line.point_at(random_state.uniform(-1.0, 1.0))


def _random_point_on_circle(random_state, circle):
  return circle.point_at(random_state.uniform(0., 2 * math.pi))


def _random_point_on_line_segment(random_state, a, b):
  return a + (b - a) * random_state.uniform(0., 1.)


_predefined = odict((c.construction_type, c) for c in [
    PredefinedConstruction(
        CENTER_OF_CIRCLE, Signature([_object(CIRCLE)]), POINT,
        lambda circle: circle.center),
    PredefinedConstruction(
        CIRCLE_WITH_CENTER_THROUGH_POINT,
        Signature([_object(POINT), _object(POINT)]), CIRCLE,
        _circle_with_center_through_point),
    PredefinedConstruction(
        CIRCUMCIRCLE, Signature([_set(POINT, 3)]), CIRCLE,
        sketch.circumcircle),
    PredefinedConstruction(
        INTERNAL_ANGLE_BISECTOR,
        Signature([_object(POINT), _set(POINT, 2)]), LINE,
        sketch.internal_angle_bisector),
    PredefinedConstruction(
        INTERSECTION_OF_LINES, Signature([_set(LINE, 2)]), POINT,
        sketch.line_line_intersection),
    PredefinedConstruction(
        LINE_FROM_POINTS, Signature([_set(POINT, 2)]), LINE,
        sketch.Line),
    PredefinedConstruction(
        MIDPOINT, Signature([_set(POINT, 2)]), POINT,
        lambda a, b: a.midpoint(b)),
    PredefinedConstruction(
        PERPENDICULAR_PROJECTION,
        Signature([_object(POINT), _object(LINE)]), POINT,
        lambda point, line: line.projection(point)),
    PredefinedConstruction(
        PERPENDICULAR_LINE,
        Signature([_object(POINT), _object(LINE)]), LINE,
        lambda point, line: line.perpendicular_line(point)),
    PredefinedConstruction(
        PARALLEL_LINE,
        Signature([_object(POINT), _object(LINE)]), LINE,
        lambda point, line: line.parallel_line(point)),
    PredefinedConstruction(
        POINT_REFLECTION,
        Signature([_object(POINT), _object(POINT)]), POINT,
        _point_reflection),
    PredefinedConstruction(
        REFLECTION_IN_LINE,
        Signature([_object(LINE), _object(POINT)]), POINT,
        lambda line, point: line.reflection(point)),
    PredefinedConstruction(
        SECOND_INTERSECTION_OF_CIRCLE_AND_LINE_FROM_POINTS,
        Signature([_object(POINT), _object(POINT), _set(POINT, 2)]), POINT,
        _second_intersection),
    PredefinedConstruction(
        RANDOM_POINT_ON_LINE, Signature([_object(LINE)]), POINT,
        _random_point_on_line, is_random=True),
    PredefinedConstruction(
        RANDOM_POINT_ON_CIRCLE, Signature([_object(CIRCLE)]), POINT,
        _random_point_on_circle, is_random=True),
    PredefinedConstruction(
        RANDOM_POINT_ON_LINE_SEGMENT, Signature([_set(POINT, 2)]), POINT,
        _random_point_on_line_segment, is_random=True),
])


def get_predefined_construction(construction_type):
  if construction_type not in _predefined:
    raise UnknownConstructionError(
        'Unknown predefined construction {}.'.format(construction_type))
  return _predefined[construction_type]


def _compose(name, parameters, build):
  """Builds a composed construction.

  build receives fresh loose objects, one per flattened input, and returns
  the constructed objects in order, the last one being the output.
  """
  signature = Signature(parameters)
  loose_objects = [geometry.LooseConfigurationObject(t)
                   for t in signature.object_types()]
  holder = geometry.LooseObjectsHolder(loose_objects)
  configuration = geometry.Configuration(holder, build(*loose_objects))
  return ComposedConstruction(name, configuration, signature)


def _construct(construction_type, *inputs):
  return geometry.ConstructedConfigurationObject(
      get_predefined_construction(construction_type), inputs)


def _perpendicular_bisector(a, b):
  m = _construct(MIDPOINT, a, b)
  ab = _construct(LINE_FROM_POINTS, a, b)
  return [m, ab, _construct(PERPENDICULAR_LINE, m, ab)]


def _circumcenter(a, b, c):
  circle = _construct(CIRCUMCIRCLE, a, b, c)
  return [circle, _construct(CENTER_OF_CIRCLE, circle)]


def _centroid(a, b, c):
  mbc = _construct(MIDPOINT, b, c)
  mca = _construct(MIDPOINT, c, a)
  median_a = _construct(LINE_FROM_POINTS, a, mbc)
  median_b = _construct(LINE_FROM_POINTS, b, mca)
  return [mbc, mca, median_a, median_b,
          _construct(INTERSECTION_OF_LINES, median_a, median_b)]


def _orthocenter(a, b, c):
  bc = _construct(LINE_FROM_POINTS, b, c)
  ca = _construct(LINE_FROM_POINTS, c, a)
  height_a = _construct(PERPENDICULAR_LINE, a, bc)
  height_b = _construct(PERPENDICULAR_LINE, b, ca)
  return [bc, ca, height_a, height_b,
          _construct(INTERSECTION_OF_LINES, height_a, height_b)]


def _incenter(a, b, c):
  bisector_a = _construct(INTERNAL_ANGLE_BISECTOR, a, b, c)
  bisector_b = _construct(INTERNAL_ANGLE_BISECTOR, b, c, a)
  return [bisector_a, bisector_b,
          _construct(INTERSECTION_OF_LINES, bisector_a, bisector_b)]


def _nine_point_circle(a, b, c):
  mab = _construct(MIDPOINT, a, b)
  mbc = _construct(MIDPOINT, b, c)
  mca = _construct(MIDPOINT, c, a)
  return [mab, mbc, mca, _construct(CIRCUMCIRCLE, mab, mbc, mca)]


def _parallelogram_point(a, b, c):
  m = _construct(MIDPOINT, b, c)
  return [m, _construct(POINT_REFLECTION, a, m)]


def _projection_on_line_from_points(p, a, b):
  ab = _construct(LINE_FROM_POINTS, a, b)
  return [ab, _construct(PERPENDICULAR_PROJECTION, p, ab)]


def _reflection_in_line_from_points(p, a, b):
  ab = _construct(LINE_FROM_POINTS, a, b)
  return [ab, _construct(REFLECTION_IN_LINE, ab, p)]


_composed = odict((c.name, c) for c in [
    _compose('PerpendicularBisector', [_set(POINT, 2)],
             _perpendicular_bisector),
    _compose('Circumcenter', [_set(POINT, 3)], _circumcenter),
    _compose('Centroid', [_set(POINT, 3)], _centroid),
    _compose('Orthocenter', [_set(POINT, 3)], _orthocenter),
    _compose('Incenter', [_set(POINT, 3)], _incenter),
    _compose('NinePointCircle', [_set(POINT, 3)], _nine_point_circle),
    _compose('ParallelogramPoint', [_object(POINT), _set(POINT, 2)],
             _parallelogram_point),
    _compose('PerpendicularProjectionOnLineFromPoints',
             [_object(POINT), _set(POINT, 2)],
             _projection_on_line_from_points),
    _compose('ReflectionInLineFromPoints', [_object(POINT), _set(POINT, 2)],
             _reflection_in_line_from_points),
])


def get_composed_construction(name):
  if name not in _composed:
    raise UnknownConstructionError(
        'Unknown composed construction {}.'.format(name))
  return _composed[name]


def random_point_on(construction):
  """A random point on the line or circle a construction outputs."""
  if construction.output_type == LINE:
    random_type = RANDOM_POINT_ON_LINE
  elif construction.output_type == CIRCLE:
    random_type = RANDOM_POINT_ON_CIRCLE
  else:
    raise ValueError('{} does not output a line or a circle.'.format(
        construction.name))

  def build(*inputs):
    carrier = geometry.ConstructedConfigurationObject(construction, inputs)
    return [carrier, _construct(random_type, carrier)]

  return _compose(RANDOM_POINT_ON_PREFIX + construction.name,
                  construction.signature.parameters, build)


def get_construction(name):
  """Looks a construction up by predefined type or composed name."""
  if name in _predefined:
    return _predefined[name]
  if name in _composed:
    return _composed[name]

  if name.startswith(RANDOM_POINT_ON_PREFIX):
    rest = name[len(RANDOM_POINT_ON_PREFIX):]
    if rest in _predefined or rest in _composed:
      carrier = get_construction(rest)
      if carrier.output_type != POINT:
        return random_point_on(carrier)

  raise UnknownConstructionError('Unknown construction {}. Available: {}'.format(
      name, ', '.join(c.name for c in all_constructions())))


def all_constructions():
  return list(_predefined.values()) + list(_composed.values())
