"""Decides whether a new object is fresh, a duplicate, or unconstructible.

Symbolic equality is exact but blind to coincidences that are theorems (the
circumcenter of a right triangle IS the midpoint of its hypotenuse). Numeric
equality sees those but is noisy and can be fooled by one unlucky picture.
The holder therefore keeps K independent pictures (ObjectsContainers) and
only accepts a verdict all of them agree on:

  all fresh                        -> fresh, the object becomes resolved
  all duplicates of the same id    -> duplicate of that id
  unconstructible in some picture  -> unconstructible
  anything else                    -> InconsistentContainersError

A holder belongs to one search branch at a time, it is not thread-safe.
"""

import collections
import itertools

import numpy as np

from absl import logging

import objects_constructor

from geometry import ConstructedConfigurationObject
from objects_constructor import UNCONSTRUCTIBLE
from objects_container import ObjectsContainer, DEFAULT_TOLERANCE
from profiling import Timer


NUMBER_OF_CONTAINERS = 5

# 0 means an inconsistency is never retried.
MAX_ATTEMPTS_TO_RECONSTRUCT = 0


class AnalyzerError(Exception):
  pass


class UnconstructibleConfigurationError(AnalyzerError):
  """Some object of the configuration cannot be drawn in some picture."""


class DuplicateObjectsError(AnalyzerError):
  """All pictures agree that two declared objects are the same object."""


class InconsistentContainersError(AnalyzerError):
  """Pictures disagree about an object. Never to be downgraded."""

  def __init__(self, configuration_object, verdicts=(), message=None):
    self.configuration_object = configuration_object
    self.verdicts = list(verdicts)
    if message is None:
      message = 'Containers disagree on {!r}: {}'.format(
          configuration_object, ', '.join(map(repr, self.verdicts)))
    super(InconsistentContainersError, self).__init__(message)


FRESH = 'fresh'
DUPLICATE = 'duplicate'
UNCONSTRUCTIBLE_KIND = 'unconstructible'


class Verdict(collections.namedtuple('Verdict', ['kind', 'duplicate_id'])):
  __slots__ = ()

  @property
  def is_fresh(self):
    return self.kind == FRESH

  @property
  def is_duplicate(self):
    return self.kind == DUPLICATE

  @property
  def is_unconstructible(self):
    return self.kind == UNCONSTRUCTIBLE_KIND

  def __repr__(self):
    if self.is_duplicate:
      return 'DuplicateOf({})'.format(self.duplicate_id)
    return self.kind.capitalize()


FRESH_VERDICT = Verdict(FRESH, None)
UNCONSTRUCTIBLE_VERDICT = Verdict(UNCONSTRUCTIBLE_KIND, None)


def duplicate_of(object_id):
  return Verdict(DUPLICATE, object_id)


class GeometryHolder(object):

  def __init__(self,
               num_containers=NUMBER_OF_CONTAINERS,
               tolerance=DEFAULT_TOLERANCE,
               max_attempts_to_reconstruct=MAX_ATTEMPTS_TO_RECONSTRUCT,
               seed=None):
    if num_containers < 1:
      raise ValueError('Need at least one container, got {}.'.format(
          num_containers))
    if max_attempts_to_reconstruct < 0:
      raise ValueError('Negative number of attempts {}.'.format(
          max_attempts_to_reconstruct))

    self.num_containers = num_containers
    self.tolerance = tolerance
    self.max_attempts_to_reconstruct = max_attempts_to_reconstruct
    self._random_state = np.random.RandomState(seed)

    self._loose_objects_holder = None
    self._containers = []
    # id -> object, loose objects first, then in registration order.
    self._resolved = collections.OrderedDict()
    # structure -> id, for objects that are not random.
    self._structures = {}

  @property
  def containers(self):
    return tuple(self._containers)

  def __iter__(self):
    return iter(self._containers)

  def __len__(self):
    return len(self._containers)

  def is_resolved(self, object_id):
    return object_id in self._resolved

  def get_object(self, object_id):
    return self._resolved[object_id]

  @property
  def resolved_objects(self):
    return list(self._resolved.values())

  def initialize(self, configuration):
    """Draws K fresh pictures of the configuration.

    Raises:
      UnconstructibleConfigurationError: an object cannot be drawn.
      DuplicateObjectsError: two declared objects coincide in all pictures.
      InconsistentContainersError: pictures disagree, after all attempts.
      ValueError: the configuration has no layout to draw loose objects by.
    """
    if configuration.layout is None:
      raise ValueError('Cannot draw a configuration without a layout.')

    with Timer('holder/initialize'):
      for attempt in itertools.count():
        try:
          self._build(configuration.loose_objects_holder,
                      configuration.constructed_objects)
          logging.debug('Initialized %d containers with %d objects.',
                        len(self._containers), len(self._resolved))
          return
        except InconsistentContainersError as e:
          if attempt >= self.max_attempts_to_reconstruct:
            raise
          logging.warning('%s Reconstructing all pictures (attempt %d of %d).',
                          e, attempt + 1, self.max_attempts_to_reconstruct)

  def register(self, configuration_object):
    """Adds a new constructed object to all pictures, if it is fresh.

    Returns:
      FRESH_VERDICT, duplicate_of(id of the existing equal object), or
      UNCONSTRUCTIBLE_VERDICT. Only a fresh object is kept.

    Raises:
      InconsistentContainersError: pictures disagree, after all attempts.
    """
    if not isinstance(configuration_object, ConstructedConfigurationObject):
      raise TypeError('Only constructed objects can be registered, got {!r}.'.format(
          configuration_object))
    if not self._containers:
      raise RuntimeError('The holder has not been initialized.')

    if configuration_object.id in self._resolved:
      return duplicate_of(configuration_object.id)

    with Timer('holder/register'):
      for attempt in itertools.count():
        try:
          return self._register(configuration_object)
        except InconsistentContainersError as e:
          if attempt >= self.max_attempts_to_reconstruct:
            raise
          logging.warning('%s Reconstructing all pictures (attempt %d of %d).',
                          e, attempt + 1, self.max_attempts_to_reconstruct)
          self._reconstruct()

  def remove(self, object_ids):
    """Forgets resolved constructed objects in all pictures."""
    object_ids = list(collections.OrderedDict.fromkeys(object_ids))
    removed = set(object_ids)

    for object_id in object_ids:
      obj = self._resolved[object_id]
      if not isinstance(obj, ConstructedConfigurationObject):
        raise ValueError('Loose object {} cannot be removed.'.format(obj.name))

    for obj in self._resolved.values():
      if obj.id in removed or not isinstance(obj, ConstructedConfigurationObject):
        continue
      for argument in obj.arguments.flattened_list:
        if argument.id in removed:
          raise ValueError('Cannot remove {} while {} depends on it.'.format(
              argument.name, obj.name))

    for object_id in object_ids:
      obj = self._resolved.pop(object_id)
      if self._structures.get(obj) == object_id:
        del self._structures[obj]
      for container in self._containers:
        container.remove(object_id)

  def _build(self, loose_objects_holder, constructed_objects):
    self._loose_objects_holder = loose_objects_holder
    self._containers = [
        ObjectsContainer(loose_objects_holder,
                         seed=self._random_state.randint(2 ** 31 - 1),
                         tolerance=self.tolerance)
        for _ in range(self.num_containers)]
    self._resolved = collections.OrderedDict(
        (obj.id, obj) for obj in loose_objects_holder)
    self._structures = {}

    for obj in constructed_objects:
      verdict = self._register(obj)
      if verdict.is_unconstructible:
        raise UnconstructibleConfigurationError(
            '{!r} cannot be constructed.'.format(obj))
      if verdict.is_duplicate:
        raise DuplicateObjectsError('{!r} is the same object as {}.'.format(
            obj, self._resolved[verdict.duplicate_id].name))

  def _reconstruct(self):
    constructed_objects = [obj for obj in self._resolved.values()
                           if isinstance(obj, ConstructedConfigurationObject)]
    try:
      self._build(self._loose_objects_holder, constructed_objects)
    except AnalyzerError as e:
      raise InconsistentContainersError(
          None, message='Reconstructing the pictures failed: {}'.format(e)) from e

  def _register(self, configuration_object):
    obj = configuration_object
    if not obj.construction.is_random and obj in self._structures:
      return duplicate_of(self._structures[obj])

    verdicts = []
    added = []
    for container in self._containers:
      value = objects_constructor.construct(obj, container)
      if value is UNCONSTRUCTIBLE:
        verdicts.append(UNCONSTRUCTIBLE_VERDICT)
        continue

      result_id = container.add(obj, value)
      if result_id == obj.id:
        added.append(container)
        verdicts.append(FRESH_VERDICT)
      else:
        verdicts.append(duplicate_of(result_id))

    def rollback():
      for container in added:
        container.remove(obj.id)

    if UNCONSTRUCTIBLE_VERDICT in verdicts:
      rollback()
      return UNCONSTRUCTIBLE_VERDICT

    if len(set(verdicts)) != 1:
      rollback()
      error = InconsistentContainersError(obj, verdicts)
      logging.error('%s', error)
      raise error

    verdict = verdicts[0]
    if verdict.is_fresh:
      self._resolved[obj.id] = obj
      if not obj.construction.is_random:
        self._structures[obj] = obj.id
    return verdict
