"""Realizes a constructed configuration object inside one picture."""

from absl import logging

import sketch

from profiling import Timer


class _Unconstructible(object):

  def __repr__(self):
    return 'UNCONSTRUCTIBLE'


# Returned when the construction is undefined in this particular picture.
UNCONSTRUCTIBLE = _Unconstructible()


class UnresolvedArgumentError(Exception):
  """An argument has no value in the container yet.

  Only happens when objects are realized out of their dependency order.
  """


def construct(configuration_object, container):
  """Numeric value of configuration_object in container, or UNCONSTRUCTIBLE.

  Every argument must already be realized in the container.
  """
  with Timer('constructor/construct'):
    inputs = []
    for argument in configuration_object.arguments.flattened_list:
      if argument.id not in container:
        raise UnresolvedArgumentError(
            'Argument {} of {!r} has not been realized.'.format(
                argument.name, configuration_object))
      inputs.append(container.get(argument))

    construction = configuration_object.construction
    random_state = None
    if construction.is_random:
      random_state = container.random_state_for(configuration_object)

    try:
      value = construction.realize(inputs, random_state)
    except sketch.AnalyticError as e:
      logging.debug('%r is unconstructible: %s', configuration_object, e)
      return UNCONSTRUCTIBLE

    if not value.is_finite():
      logging.debug('%r is not finite: %r', configuration_object, value)
      return UNCONSTRUCTIBLE
    return value
