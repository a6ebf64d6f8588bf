import pytest

import constructions
import geometry
import layouts
import theorems

from geometry import POINT, LINE
from geometry import LooseConfigurationObject, ConstructedConfigurationObject
from geometry import LooseObjectsHolder, Configuration
from theorems import Theorem
from theorems import PointTheoremObject, LineTheoremObject, CircleTheoremObject
from theorems import LineSegmentTheoremObject, AngleTheoremObject


def construct(name, *inputs):
  return ConstructedConfigurationObject(
      constructions.get_construction(name), inputs)


def points(names):
  geometry.reset()
  return [LooseConfigurationObject(POINT, name) for name in names]


def test_lines_need_two_common_points():
  a, b, c, d = points('ABCD')
  assert LineTheoremObject(points=[a, b, c]).is_equivalent_to(
      LineTheoremObject(points=[b, c, d]))
  assert not LineTheoremObject(points=[a, b]).is_equivalent_to(
      LineTheoremObject(points=[b, c]))


def test_circles_need_three_common_points():
  a, b, c, d = points('ABCD')
  assert not CircleTheoremObject(points=[a, b, c]).is_equivalent_to(
      CircleTheoremObject(points=[b, c, d]))
  assert CircleTheoremObject(points=[a, b, c, d]).is_equivalent_to(
      CircleTheoremObject(points=[b, c, d]))
  # A line and a circle are never the same object.
  assert not LineTheoremObject(points=[a, b, c]).is_equivalent_to(
      CircleTheoremObject(points=[a, b, c]))


def test_explicit_objects():
  a, b, c = points('ABC')
  l1 = construct('LineFromPoints', a, b)
  l2 = construct('LineFromPoints', b, a)
  assert LineTheoremObject(l1).is_equivalent_to(LineTheoremObject(l2, [c]))
  assert not LineTheoremObject(l1).is_equivalent_to(LineTheoremObject(points=[a, c]))

  with pytest.raises(ValueError):
    LineTheoremObject(points=[a])
  with pytest.raises(ValueError):
    LineTheoremObject(construct('Midpoint', a, b))
  with pytest.raises(ValueError):
    CircleTheoremObject(points=[a, b, l1])


def test_pairs_are_unordered():
  a, b, c = points('ABC')
  assert LineSegmentTheoremObject(a, b).is_equivalent_to(
      LineSegmentTheoremObject(b, a))
  assert not LineSegmentTheoremObject(a, b).is_equivalent_to(
      LineSegmentTheoremObject(a, c))

  ab, ac = LineTheoremObject(points=[a, b]), LineTheoremObject(points=[a, c])
  assert AngleTheoremObject(ab, ac).is_equivalent_to(AngleTheoremObject(ac, ab))
  assert not AngleTheoremObject(ab, ac).is_equivalent_to(
      LineSegmentTheoremObject(a, b))

  with pytest.raises(ValueError):
    AngleTheoremObject(ab, PointTheoremObject(a))


def test_theorem_validation():
  a, b, c, d = points('ABCD')
  p = PointTheoremObject
  with pytest.raises(ValueError):
    Theorem(None, theorems.COLLINEAR_POINTS, [p(a), p(b)])
  with pytest.raises(ValueError):
    Theorem(None, theorems.COLLINEAR_POINTS, [p(a), p(b), p(a)])
  with pytest.raises(ValueError):
    Theorem(None, theorems.PARALLEL_LINES, [p(a), p(b)])
  with pytest.raises(ValueError):
    Theorem(None, 'Similar', [p(a), p(b), p(c)])

  line = LineTheoremObject(points=[a, b])
  circle = CircleTheoremObject(points=[b, c, d])
  Theorem(None, theorems.LINE_TANGENT_TO_CIRCLE, [line, circle])
  with pytest.raises(ValueError):
    Theorem(None, theorems.LINE_TANGENT_TO_CIRCLE, [circle, line])


def test_theorem_equivalence():
  a, b, c, d = points('ABCD')
  p = PointTheoremObject
  abc = Theorem(None, theorems.COLLINEAR_POINTS, [p(a), p(b), p(c)])
  cab = Theorem(None, theorems.COLLINEAR_POINTS, [p(c), p(a), p(b)])
  abd = Theorem(None, theorems.COLLINEAR_POINTS, [p(a), p(b), p(d)])
  assert abc.is_equivalent_to(cab)
  assert not abc.is_equivalent_to(abd)

  segments = Theorem(None, theorems.EQUAL_LINE_SEGMENTS,
                     [LineSegmentTheoremObject(a, b),
                      LineSegmentTheoremObject(c, d)])
  swapped = Theorem(None, theorems.EQUAL_LINE_SEGMENTS,
                    [LineSegmentTheoremObject(d, c),
                     LineSegmentTheoremObject(b, a)])
  assert segments.is_equivalent_to(swapped)
  assert not segments.is_equivalent_to(abc)


def test_remap_and_symmetry():
  a, b, c = points('ABC')
  m_ab = construct('Midpoint', a, b)
  m_ac = construct('Midpoint', a, c)
  configuration = Configuration(
      LooseObjectsHolder([a, b, c], layouts.TRIANGLE), [m_ab, m_ac])

  p = PointTheoremObject
  collinear = Theorem(configuration, theorems.COLLINEAR_POINTS,
                      [p(a), p(b), p(m_ab)])
  assert collinear.is_symmetric({a: b, b: a})
  # Midpoint of CB is not part of the configuration.
  assert not collinear.is_symmetric({a: c, c: a})
  assert collinear.remap({a: c, b: b, c: a}) is None

  remapped = collinear.remap(configuration.symmetry_mapping({b: c, c: b}))
  assert remapped.is_equivalent_to(
      Theorem(configuration, theorems.COLLINEAR_POINTS, [p(a), p(c), p(m_ac)]))


def test_remap_keeps_enough_points():
  a, b, c, d = points('ABCD')
  line = LineTheoremObject(points=[a, b, c])
  assert line.remap({a: a, b: d}).points == frozenset([a, d])
  assert line.remap({a: a}) is None
  assert line.remap_object_and_points({b: b, c: c}) == (None, {b, c})


if __name__ == '__main__':
  test_lines_need_two_common_points()
  test_circles_need_three_common_points()
  test_explicit_objects()
  test_pairs_are_unordered()
  test_theorem_validation()
  test_theorem_equivalence()
  test_remap_and_symmetry()
  test_remap_keeps_enough_points()
  print('\n [OK!]')
