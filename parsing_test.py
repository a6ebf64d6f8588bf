import pytest

import geometry
import parsing

from geometry import POINT
from parsing import ParserError, parse_configuration


TRIANGLE = """
# Circumcenter and a midpoint.
ScaleneAcuteTriangle: A, B, C
O = Circumcenter(A, B, C)
M = Midpoint(B, C)   # on BC
l = LineFromPoints(O, M)
"""


def test_parse_configuration():
  geometry.reset()
  configuration, names = parse_configuration(TRIANGLE)

  assert configuration.layout.name == 'ScaleneAcuteTriangle'
  assert [obj.name for obj in configuration.loose_objects] == ['A', 'B', 'C']
  assert [obj.name for obj in configuration.constructed_objects] == ['O', 'M', 'l']
  assert sorted(names) == ['A', 'B', 'C', 'M', 'O', 'l']
  assert names['O'].construction.name == 'Circumcenter'
  assert names['O'].object_type == POINT
  assert names['l'].arguments.flattened_list == [names['O'], names['M']]


def test_random_point_on_constructions():
  geometry.reset()
  configuration, names = parse_configuration(
      'Triangle: A, B, C\nX = RandomPointOnCircumcircle(A, B, C)\n')
  assert names['X'].construction.is_random
  assert len(configuration.constructed_objects) == 1


def test_only_layout():
  geometry.reset()
  configuration, names = parse_configuration('LineAndPoint: l, P')
  assert configuration.constructed_objects == ()
  assert names['l'].object_type == geometry.LINE


@pytest.mark.parametrize('content', [
    '',
    '# nothing',
    'A, B, C',
    'Pentagon: A, B, C, D, E',
    'Triangle: A, B',
    'Triangle: A, B, B',
    'Triangle: A, B, 1C',
    'Triangle: A, B, C\nM = Midpoint(A, B',
    'Triangle: A, B, C\nM = Excenter(A, B, C)',
    'Triangle: A, B, C\nM = Midpoint(A, D)',
    'Triangle: A, B, C\nM = Midpoint(A, A)',
    'Triangle: A, B, C\nM = Midpoint(A, B, C)',
    'Triangle: A, B, C\nA = Midpoint(B, C)',
    'Triangle: A, B, C\nl = LineFromPoints(A, B)\nM = Midpoint(A, l)',
])
def test_errors(content):
  geometry.reset()
  with pytest.raises(ParserError):
    parse_configuration(content)


def test_error_names_the_line():
  geometry.reset()
  with pytest.raises(ParserError) as e:
    parse_configuration('Triangle: A, B, C\n\nM = Midpoint(A, D)')
  assert 'Line 3' in str(e.value)


if __name__ == '__main__':
  test_parse_configuration()
  test_random_point_on_constructions()
  test_only_layout()
  test_error_names_the_line()
  print('\n [OK!]')
