"""One numeric picture of a configuration.

A container draws its loose objects once, from its own random source, and
then holds one numeric value per realized configuration object. Values of
each object type are also kept as rows of a numpy matrix so that looking
for a numerically equal value is a single vectorized comparison:

  points   [n, 2]  x, y
  lines    [n, 3]  a, b, c  (normalized, sign-free)
  circles  [n, 3]  center x, center y, radius

Containers never look at each other.
"""

import numpy as np

from geometry import POINT, LINE, CIRCLE, OBJECT_TYPES


DEFAULT_TOLERANCE = 1e-6

_WIDTH = {POINT: 2, LINE: 3, CIRCLE: 3}


class ObjectsContainer(object):

  def __init__(self, loose_objects_holder, seed, tolerance=DEFAULT_TOLERANCE):
    self.seed = int(seed)
    self.tolerance = tolerance
    self.random_state = np.random.RandomState(self.seed)

    self._objects = {}  # id -> configuration object
    self._values = {}  # id -> sketch value
    self._ids = {t: [] for t in OBJECT_TYPES}  # row -> id, per type
    self._matrices = {t: np.zeros((0, _WIDTH[t])) for t in OBJECT_TYPES}

    values = loose_objects_holder.layout.sample(self.random_state)
    for obj, value in zip(loose_objects_holder.loose_objects, values):
      if self.add(obj, value) != obj.id:
        raise ValueError('Layout {} produced coinciding loose objects.'.format(
            loose_objects_holder.layout.name))

  def random_state_for(self, configuration_object):
    """Randomness for a random construction, fixed by seed and object."""
    return np.random.RandomState(
        (self.seed * 1000003 + configuration_object.id) % (2 ** 32))

  def _find(self, object_type, vector):
    matrix = self._matrices[object_type]
    if not len(matrix):
      return None

    scale = self.tolerance * (1.0 + np.abs(vector))
    error = np.max(np.abs(matrix - vector) / scale, axis=1)
    if object_type == LINE:
      # (a, b, c) and (-a, -b, -c) are the same line.
      error = np.minimum(error, np.max(np.abs(matrix + vector) / scale, axis=1))

    best = int(np.argmin(error))
    if error[best] <= 1.0:
      return self._ids[object_type][best]
    return None

  def add(self, configuration_object, value):
    """Adds a realized value, unless an equal one is already here.

    Returns the id of the object the value belongs to: the given object's
    own id if it was added, the id of the existing equal object otherwise.
    """
    object_id = configuration_object.id
    if object_id in self._values:
      raise ValueError('Object {} is already in this container.'.format(
          configuration_object.name))

    object_type = configuration_object.object_type
    vector = value.vector()
    duplicate_id = self._find(object_type, vector)
    if duplicate_id is not None:
      return duplicate_id

    self._objects[object_id] = configuration_object
    self._values[object_id] = value
    self._ids[object_type].append(object_id)
    self._matrices[object_type] = np.concatenate(
        [self._matrices[object_type], vector[None, :]], 0)
    return object_id

  def remove(self, object_id):
    obj = self._objects.pop(object_id)
    self._values.pop(object_id)
    ids = self._ids[obj.object_type]
    row = ids.index(object_id)
    ids.pop(row)
    self._matrices[obj.object_type] = np.delete(
        self._matrices[obj.object_type], row, 0)

  def get(self, configuration_object):
    return self._values[configuration_object.id]

  def objects_of_type(self, object_type):
    """(configuration object, value) pairs of one type, in insertion order."""
    return [(self._objects[i], self._values[i]) for i in self._ids[object_type]]

  def __contains__(self, object_id):
    return object_id in self._values

  def __len__(self):
    return len(self._values)

  def __iter__(self):
    return iter(self._objects.values())
