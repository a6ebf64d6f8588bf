import pytest

import geometry

from arguments import Signature, SignatureMismatchError
from arguments import ObjectConstructionParameter, SetConstructionParameter
from geometry import POINT, LINE, LooseConfigurationObject


P = ObjectConstructionParameter(POINT)
L = ObjectConstructionParameter(LINE)


def points(*names):
  return [LooseConfigurationObject(POINT, name) for name in names]


def test_signature_size_and_types():
  signature = Signature([P, SetConstructionParameter(P, 2)])
  assert signature.size == 3
  assert signature.object_types() == [POINT, POINT, POINT]
  assert repr(signature) == 'P, {P,P}'


def test_sets_compare_unordered():
  geometry.reset()
  a, b, c = points('A', 'B', 'C')
  signature = Signature([P, SetConstructionParameter(P, 2)])

  abc = signature.match([a, b, c])
  acb = signature.match([a, c, b])
  bac = signature.match([b, a, c])
  assert abc == acb
  assert hash(abc) == hash(acb)
  assert abc != bac

  # Order of the input is kept for flattening.
  assert acb.flattened_list == [a, c, b]


def test_mismatch():
  geometry.reset()
  a, b = points('A', 'B')
  l = LooseConfigurationObject(LINE, 'l')
  signature = Signature([SetConstructionParameter(P, 2)])

  with pytest.raises(SignatureMismatchError):
    signature.match([a])
  with pytest.raises(SignatureMismatchError):
    signature.match([a, l])
  with pytest.raises(SignatureMismatchError):
    signature.match([a, a])
  # Still a ValueError for callers that do not know the module.
  with pytest.raises(ValueError):
    Signature([P, L]).match([l, a])

  assert len(signature.match([a, b])) == 1


def test_set_parameter_needs_two():
  with pytest.raises(ValueError):
    SetConstructionParameter(P, 1)


def test_remap():
  geometry.reset()
  a, b, c = points('A', 'B', 'C')
  signature = Signature([P, SetConstructionParameter(P, 2)])

  swapped = signature.match([a, b, c]).remap({a: b, b: a})
  assert swapped == signature.match([b, a, c])
  assert swapped.remap({a: b, b: a}) == signature.match([a, b, c])
  # Objects missing from the mapping stay.
  assert signature.match([a, b, c]).remap({}) == signature.match([a, b, c])


if __name__ == '__main__':
  test_signature_size_and_types()
  test_sets_compare_unordered()
  test_mismatch()
  test_set_parameter_needs_two()
  test_remap()
  print('\n [OK!]')
