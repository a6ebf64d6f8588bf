"""Construction signatures and the argument trees matched against them.

A signature is an ordered list of parameters. A parameter is either a single
object of a given type, or a set of a fixed number of inner parameters whose
order is irrelevant:

  Midpoint                {P, P}
  InternalAngleBisector   P, {P, P}
  IntersectionOfLines     {L, L}

Matching a flat list of configuration objects against a signature gives an
Arguments tree with the same shape. Two trees are equal when their ordered
parts are equal position by position and their set parts are equal as sets,
so Midpoint(A, B) and Midpoint(B, A) have equal arguments. The tree still
remembers the order its objects came in, which is what flattened_list
returns.
"""


class SignatureMismatchError(ValueError):
  pass


class ConstructionParameter(object):

  @property
  def size(self):
    """Number of objects this parameter consumes from a flat list."""
    raise NotImplementedError('Abstract class ConstructionParameter.')

  def object_types(self):
    raise NotImplementedError('Abstract class ConstructionParameter.')


class ObjectConstructionParameter(ConstructionParameter):

  def __init__(self, object_type):
    self.object_type = object_type

  @property
  def size(self):
    return 1

  def object_types(self):
    return [self.object_type]

  def __eq__(self, other):
    return (isinstance(other, ObjectConstructionParameter) and
            other.object_type == self.object_type)

  def __hash__(self):
    return hash(self.object_type)

  def __repr__(self):
    return self.object_type[0]


class SetConstructionParameter(ConstructionParameter):

  def __init__(self, parameter, count):
    if count < 2:
      raise ValueError('A set parameter needs at least 2 elements, got {}.'.format(count))
    self.parameter = parameter
    self.count = count

  @property
  def size(self):
    return self.parameter.size * self.count

  def object_types(self):
    return self.parameter.object_types() * self.count

  def __eq__(self, other):
    return (isinstance(other, SetConstructionParameter) and
            other.parameter == self.parameter and
            other.count == self.count)

  def __hash__(self):
    return hash((self.parameter, self.count))

  def __repr__(self):
    return '{' + ','.join([repr(self.parameter)] * self.count) + '}'


class ConstructionArgument(object):

  def flatten(self):
    raise NotImplementedError('Abstract class ConstructionArgument.')

  def remap(self, mapping):
    raise NotImplementedError('Abstract class ConstructionArgument.')


class ObjectConstructionArgument(ConstructionArgument):

  def __init__(self, configuration_object):
    self.configuration_object = configuration_object

  def flatten(self):
    yield self.configuration_object

  def remap(self, mapping):
    obj = self.configuration_object
    if obj in mapping:
      return ObjectConstructionArgument(mapping[obj])
    return ObjectConstructionArgument(obj.remap(mapping))

  def __eq__(self, other):
    return (isinstance(other, ObjectConstructionArgument) and
            other.configuration_object == self.configuration_object)

  def __hash__(self):
    return hash(self.configuration_object)

  def __repr__(self):
    return repr(self.configuration_object)


class SetConstructionArgument(ConstructionArgument):

  def __init__(self, arguments):
    # Keep the given order for flattening, compare as a set.
    self.arguments = tuple(arguments)
    self._set = frozenset(self.arguments)

  def flatten(self):
    for argument in self.arguments:
      for obj in argument.flatten():
        yield obj

  def remap(self, mapping):
    return SetConstructionArgument([a.remap(mapping) for a in self.arguments])

  def __eq__(self, other):
    return (isinstance(other, SetConstructionArgument) and
            other._set == self._set)

  def __hash__(self):
    return hash(self._set)

  def __repr__(self):
    return '{' + ', '.join(map(repr, self.arguments)) + '}'


class Arguments(object):

  def __init__(self, arguments):
    self.arguments = tuple(arguments)
    self._hash = None

  @property
  def flattened_list(self):
    result = []
    for argument in self.arguments:
      result.extend(argument.flatten())
    return result

  def remap(self, mapping):
    return Arguments([a.remap(mapping) for a in self.arguments])

  def __iter__(self):
    return iter(self.arguments)

  def __len__(self):
    return len(self.arguments)

  def __eq__(self, other):
    return isinstance(other, Arguments) and other.arguments == self.arguments

  def __hash__(self):
    if self._hash is None:
      self._hash = hash(self.arguments)
    return self._hash

  def __repr__(self):
    return ', '.join(map(repr, self.arguments))


def _match_parameter(parameter, objects):
  if isinstance(parameter, ObjectConstructionParameter):
    obj = next(objects)
    object_type = getattr(obj, 'object_type', None)
    if object_type != parameter.object_type:
      raise SignatureMismatchError(
          'Expected a {}, got {!r}.'.format(parameter.object_type, obj))
    return ObjectConstructionArgument(obj)

  elif isinstance(parameter, SetConstructionParameter):
    arguments = [_match_parameter(parameter.parameter, objects)
                 for _ in range(parameter.count)]
    if len(set(arguments)) != len(arguments):
      raise SignatureMismatchError(
          'Objects passed as a set must be distinct: {}.'.format(
              ', '.join(map(repr, arguments))))
    return SetConstructionArgument(arguments)

  raise TypeError('Unhandled parameter {!r}'.format(parameter))


class Signature(object):

  def __init__(self, parameters):
    self.parameters = tuple(parameters)

  @property
  def size(self):
    return sum(p.size for p in self.parameters)

  def object_types(self):
    """Types of the objects in a flat list that matches this signature."""
    return sum([p.object_types() for p in self.parameters], [])

  def match(self, objects):
    objects = list(objects)
    if len(objects) != self.size:
      raise SignatureMismatchError(
          'Signature ({}) needs {} objects, got {}.'.format(
              self, self.size, len(objects)))
    objects = iter(objects)
    return Arguments([_match_parameter(p, objects) for p in self.parameters])

  def __eq__(self, other):
    return isinstance(other, Signature) and other.parameters == self.parameters

  def __hash__(self):
    return hash(self.parameters)

  def __repr__(self):
    return ', '.join(map(repr, self.parameters))
