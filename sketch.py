"""Analytic plane geometry behind the numeric pictures.

Points are (x, y), lines are normalized coefficients (a, b, c) of
ax + by + c = 0 with a^2 + b^2 = 1, circles are a center and a radius.
Whenever a formula is undefined for its inputs (parallel lines, collinear
points, a zero radius, ...) it raises AnalyticError.
"""

import math

import numpy as np


ATOM = 1e-9

# Two results closer than this are the same point for tangency checks.
COINCIDENCE = 1e-6


class AnalyticError(Exception):
  pass


class Point(object):

  def __init__(self, x, y):
    self.x = float(x)
    self.y = float(y)

  def __add__(self, p):
    return Point(self.x + p.x, self.y + p.y)

  def __sub__(self, p):
    return Point(self.x - p.x, self.y - p.y)

  def __mul__(self, f):
    return Point(self.x * f, self.y * f)

  def __rmul__(self, f):
    return self * f

  def __truediv__(self, f):
    return Point(self.x / f, self.y / f)

  def __neg__(self):
    return Point(-self.x, -self.y)

  def midpoint(self, p):
    return Point(0.5*(self.x + p.x), 0.5*(self.y + p.y))

  def dot(self, p):
    return self.x * p.x + self.y * p.y

  def cross(self, p):
    return self.x * p.y - self.y * p.x

  def norm(self):
    return math.sqrt(self.x * self.x + self.y * self.y)

  def distance(self, p):
    return (self - p).norm()

  def rotate90(self):
    return Point(-self.y, self.x)

  def is_finite(self):
    return math.isfinite(self.x) and math.isfinite(self.y)

  def vector(self):
    return np.array([self.x, self.y])

  def __repr__(self):
    return 'Point({:.6f}, {:.6f})'.format(self.x, self.y)


class Line(object):

  def __init__(self, p1=None, p2=None, coefficients=None):
    if coefficients is None:
      if p1.distance(p2) < ATOM:
        raise AnalyticError('A line needs two distinct points.')
      coefficients = (p1.y - p2.y,
                      p2.x - p1.x,
                      p1.x * p2.y - p2.x * p1.y)

    a, b, c = map(float, coefficients)
    d = math.sqrt(a*a + b*b)
    if d < ATOM:
      raise AnalyticError('Degenerate line coefficients {}.'.format(coefficients))
    self.coefficients = (a / d, b / d, c / d)

  @property
  def normal(self):
    a, b, _ = self.coefficients
    return Point(a, b)

  @property
  def direction(self):
    a, b, _ = self.coefficients
    return Point(b, -a)

  def signed_distance(self, p):
    a, b, c = self.coefficients
    return a * p.x + b * p.y + c

  def parallel_line(self, p):
    a, b, _ = self.coefficients
    return Line(coefficients=(a, b, -a*p.x-b*p.y))

  def perpendicular_line(self, p):
    return Line(p, p + self.normal)

  def projection(self, p):
    return p - self.normal * self.signed_distance(p)

  def reflection(self, p):
    return p - self.normal * (2.0 * self.signed_distance(p))

  def point_at(self, t):
    """The point at signed distance t from the foot of the origin."""
    return self.projection(Point(0., 0.)) + self.direction * t

  def is_finite(self):
    return all(math.isfinite(x) for x in self.coefficients)

  def vector(self):
    return np.array(self.coefficients)

  def __repr__(self):
    return 'Line({:.6f}, {:.6f}, {:.6f})'.format(*self.coefficients)


class Circle(object):

  def __init__(self, center, radius):
    radius = float(radius)
    if not radius > ATOM:
      raise AnalyticError('Circle radius {} is not positive.'.format(radius))
    self.center = center
    self.radius = radius

  def point_at(self, angle):
    return self.center + Point(math.cos(angle), math.sin(angle)) * self.radius

  def is_finite(self):
    return self.center.is_finite() and math.isfinite(self.radius)

  def vector(self):
    return np.array([self.center.x, self.center.y, self.radius])

  def __repr__(self):
    return 'Circle({!r}, {:.6f})'.format(self.center, self.radius)


def line_line_intersection(l1, l2):
  a1, b1, c1 = l1.coefficients
  a2, b2, c2 = l2.coefficients
  # a1x + b1y + c1 = 0
  # a2x + b2y + c2 = 0
  d = a1 * b2 - a2 * b1
  if abs(d) < ATOM:
    raise AnalyticError('Lines are parallel.')
  return Point((c2 * b1 - c1 * b2) / d,
               (c1 * a2 - c2 * a1) / d)


def line_circle_intersection(line, circle):
  foot = line.projection(circle.center)
  d = abs(line.signed_distance(circle.center))
  r = circle.radius
  if d > r + ATOM:
    raise AnalyticError('Line misses the circle.')
  h = math.sqrt(max(r * r - d * d, 0.))
  return foot + line.direction * h, foot - line.direction * h


def circumcircle(p1, p2, p3):
  ax, ay, bx, by, cx, cy = p1.x, p1.y, p2.x, p2.y, p3.x, p3.y
  d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
  if abs(d) < ATOM:
    raise AnalyticError('Points are collinear.')
  a2, b2, c2 = ax*ax + ay*ay, bx*bx + by*by, cx*cx + cy*cy
  center = Point((a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / d,
                 (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / d)
  return Circle(center, center.distance(p1))


def internal_angle_bisector(vertex, p1, p2):
  u, v = p1 - vertex, p2 - vertex
  nu, nv = u.norm(), v.norm()
  if nu < ATOM or nv < ATOM:
    raise AnalyticError('Angle arms must not be degenerate.')
  direction = u / nu + v / nv
  if direction.norm() < ATOM:
    raise AnalyticError('Straight angle has no internal bisector here.')
  return Line(vertex, vertex + direction)


def second_intersection(line, circle, common_point):
  """Where line meets circle again, besides the point they share."""
  s1, s2 = line_circle_intersection(line, circle)
  other = s1 if s1.distance(common_point) > s2.distance(common_point) else s2
  if other.distance(common_point) < COINCIDENCE:
    raise AnalyticError('Line is tangent to the circle.')
  return other
