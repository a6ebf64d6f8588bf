"""Symbolic configuration objects.

Representation of a configuration:

  LooseObjectsHolder (layout + loose objects)
        |
        |
  ConstructedConfigurationObject = Construction(Arguments)
        |          |
        |          +-- leaves are loose or earlier constructed objects
        |
  Configuration (constructed objects in dependency order)

Everything here is immutable. Every object gets its id from a process-wide
bank the moment it is created, ids are never reassigned. Constructed objects
are compared structurally: by construction and by arguments, never by id.
"""

import itertools

import arguments as arguments_lib


POINT = 'Point'
LINE = 'Line'
CIRCLE = 'Circle'

OBJECT_TYPES = (POINT, LINE, CIRCLE)


_name_prefix = {
    POINT: 'P',
    LINE: 'l',
    CIRCLE: 'c',
}


_id_bank = itertools.count()


def reset():
  global _id_bank
  _id_bank = itertools.count()


def _next_id():
  return next(_id_bank)


class ConfigurationObject(object):

  def __init__(self, object_type, name=None):
    if object_type not in OBJECT_TYPES:
      raise ValueError('Unknown object type {}.'.format(object_type))
    self._id = _next_id()
    self._object_type = object_type
    self.name = name or '{}{}'.format(_name_prefix[object_type], self._id)

  @property
  def id(self):
    return self._id

  @property
  def object_type(self):
    return self._object_type

  def remap(self, mapping):
    raise NotImplementedError('Abstract class ConfigurationObject.')

  def __repr__(self):
    return self.name


class LooseConfigurationObject(ConfigurationObject):
  """A free object, equal only to itself."""

  def remap(self, mapping):
    # Loose objects missing from the mapping stay where they are.
    return mapping.get(self, self)


class ConstructedConfigurationObject(ConfigurationObject):

  def __init__(self, construction, arguments, name=None):
    """Builds the object from an Arguments tree or a flat list of inputs.

    A flat list is matched against the construction's signature, which
    raises arguments.SignatureMismatchError when it does not fit.
    """
    if not isinstance(arguments, arguments_lib.Arguments):
      arguments = construction.signature.match(arguments)
    self.construction = construction
    self.arguments = arguments
    super(ConstructedConfigurationObject, self).__init__(
        construction.output_type, name)

  def remap(self, mapping):
    return ConstructedConfigurationObject(
        self.construction, self.arguments.remap(mapping))

  def __eq__(self, other):
    if self is other:
      return True
    if not isinstance(other, ConstructedConfigurationObject):
      return False
    # Outputs of random constructions cannot be reproduced from arguments.
    if self.construction.is_random or other.construction.is_random:
      return False
    return (self.construction == other.construction and
            self.arguments == other.arguments)

  def __hash__(self):
    if self.construction.is_random:
      return hash(self._id)
    return hash((self.construction, self.arguments))

  def __repr__(self):
    return '{}={}({})'.format(self.name, self.construction.name, self.arguments)


class LooseObjectsHolder(object):

  def __init__(self, loose_objects, layout=None):
    loose_objects = tuple(loose_objects)
    for obj in loose_objects:
      if not isinstance(obj, LooseConfigurationObject):
        raise TypeError('{!r} is not a loose object.'.format(obj))

    if layout is not None:
      types = [obj.object_type for obj in loose_objects]
      if types != list(layout.object_types):
        raise ValueError('Layout {} needs objects {}, got {}.'.format(
            layout.name, list(layout.object_types), types))

    self.loose_objects = loose_objects
    self.layout = layout

  def symmetry_mappings(self):
    """Yields the loose-object bijections the layout is symmetric under."""
    if self.layout is None:
      yield {obj: obj for obj in self.loose_objects}
      return

    for permutation in self.layout.symmetry_permutations:
      yield {obj: self.loose_objects[i]
             for obj, i in zip(self.loose_objects, permutation)}

  def __iter__(self):
    return iter(self.loose_objects)

  def __len__(self):
    return len(self.loose_objects)

  def __eq__(self, other):
    return (isinstance(other, LooseObjectsHolder) and
            other.loose_objects == self.loose_objects and
            other.layout == self.layout)

  def __hash__(self):
    return hash(self.loose_objects)


class Configuration(object):

  def __init__(self, loose_objects_holder, constructed_objects=()):
    constructed_objects = tuple(constructed_objects)

    known_ids = set(obj.id for obj in loose_objects_holder)
    for obj in constructed_objects:
      if not isinstance(obj, ConstructedConfigurationObject):
        raise TypeError('{!r} is not a constructed object.'.format(obj))
      if obj.id in known_ids:
        raise ValueError('Object {} is declared twice.'.format(obj.name))
      for argument in obj.arguments.flattened_list:
        if argument.id not in known_ids:
          raise ValueError('{} uses {} before it is declared.'.format(
              obj.name, argument.name))
      known_ids.add(obj.id)

    self.loose_objects_holder = loose_objects_holder
    self.constructed_objects = constructed_objects
    self._constructed_set = frozenset(constructed_objects)

  @property
  def loose_objects(self):
    return self.loose_objects_holder.loose_objects

  @property
  def layout(self):
    return self.loose_objects_holder.layout

  @property
  def all_objects(self):
    return self.loose_objects + self.constructed_objects

  def objects_of_type(self, object_type):
    return [obj for obj in self.all_objects if obj.object_type == object_type]

  def derive(self, constructed_object):
    """A new configuration extended by one more constructed object."""
    return Configuration(self.loose_objects_holder,
                         self.constructed_objects + (constructed_object,))

  def contains(self, configuration_object):
    return (configuration_object in self.loose_objects or
            configuration_object in self._constructed_set)

  def remap(self, mapping):
    """The configuration with loose objects replaced according to mapping."""
    running = dict(mapping)
    loose_objects = [mapping.get(obj, obj) for obj in self.loose_objects]
    constructed_objects = []
    for obj in self.constructed_objects:
      image = obj.remap(running)
      running[obj] = image
      constructed_objects.append(image)
    holder = LooseObjectsHolder(loose_objects, self.layout)
    return Configuration(holder, constructed_objects)

  def is_symmetric(self, mapping):
    """Is the set of constructed objects invariant under a loose bijection?"""
    return all(obj.remap(mapping) in self._constructed_set
               for obj in self.constructed_objects)

  def symmetry_mapping(self, mapping):
    """Maps each object to the object of this configuration it remaps to.

    Objects whose image is not part of the configuration are left out.
    """
    by_structure = {obj: obj for obj in self.constructed_objects}
    result = {}
    for obj in self.loose_objects:
      image = mapping.get(obj, obj)
      if image in self.loose_objects:
        result[obj] = image
    for obj in self.constructed_objects:
      image = obj.remap(mapping)
      if image in by_structure:
        result[obj] = by_structure[image]
    return result

  def __eq__(self, other):
    return (isinstance(other, Configuration) and
            other.loose_objects_holder == self.loose_objects_holder and
            other._constructed_set == self._constructed_set)

  def __hash__(self):
    return hash((self.loose_objects_holder, self._constructed_set))

  def __repr__(self):
    lines = ['{}: {}'.format(
        self.layout.name if self.layout else 'Loose',
        ', '.join(obj.name for obj in self.loose_objects))]
    lines += [repr(obj) for obj in self.constructed_objects]
    return '\n'.join(lines)
