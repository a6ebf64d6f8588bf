"""Reads configurations written as text.

  # comment
  ScaleneAcuteTriangle: A, B, C
  O = Circumcenter(A, B, C)
  M = Midpoint(B, C)

The first line names a layout and its loose objects, every other line
declares one constructed object from objects declared above it.
"""

import re

import constructions
import geometry
import layouts

from arguments import SignatureMismatchError


class ParserError(ValueError):
  pass


_NAME = r'[A-Za-z][A-Za-z0-9_]*'
_LAYOUT_LINE = re.compile(r'^({0})\s*:\s*(.*)$'.format(_NAME))
_OBJECT_LINE = re.compile(r'^({0})\s*=\s*({0})\s*\((.*)\)$'.format(_NAME))
_NAME_ONLY = re.compile(r'^{}$'.format(_NAME))


def _split_names(text, line_number, line):
  names = [name.strip() for name in text.split(',')] if text.strip() else []
  for name in names:
    if not _NAME_ONLY.match(name):
      raise ParserError('Line {}: bad name "{}" in "{}".'.format(
          line_number, name, line))
  return names


def _content_lines(content):
  for line_number, line in enumerate(content.splitlines(), 1):
    line = line.split('#', 1)[0].strip()
    if line:
      yield line_number, line


def parse_configuration(content):
  """Parses a configuration.

  Returns:
    (Configuration, dict from names to configuration objects).

  Raises:
    ParserError: for malformed text, unknown names or wrong arguments.
  """
  lines = list(_content_lines(content))
  if not lines:
    raise ParserError('No layout declared.')

  line_number, line = lines[0]
  match = _LAYOUT_LINE.match(line)
  if not match:
    raise ParserError('Line {}: expected "Layout: names", got "{}".'.format(
        line_number, line))
  try:
    layout = layouts.get_layout(match.group(1))
  except KeyError as e:
    raise ParserError('Line {}: {}'.format(line_number, e.args[0]))

  loose_names = _split_names(match.group(2), line_number, line)
  if len(loose_names) != len(layout.object_types):
    raise ParserError('Line {}: {} needs {} objects, got {}.'.format(
        line_number, layout.name, len(layout.object_types), len(loose_names)))

  names = {}

  def declare(name, obj):
    if name in names:
      raise ParserError('Line {}: {} is declared twice.'.format(
          line_number, name))
    names[name] = obj

  for name, object_type in zip(loose_names, layout.object_types):
    declare(name, geometry.LooseConfigurationObject(object_type, name))
  holder = geometry.LooseObjectsHolder(
      [names[name] for name in loose_names], layout)

  constructed_objects = []
  for line_number, line in lines[1:]:
    match = _OBJECT_LINE.match(line)
    if not match:
      raise ParserError(
          'Line {}: expected "name = Construction(args)", got "{}".'.format(
              line_number, line))
    name, construction_name, argument_text = match.groups()

    try:
      construction = constructions.get_construction(construction_name)
    except constructions.UnknownConstructionError:
      raise ParserError('Line {}: unknown construction {}.'.format(
          line_number, construction_name))

    inputs = []
    for argument_name in _split_names(argument_text, line_number, line):
      if argument_name not in names:
        raise ParserError('Line {}: {} is used before it is declared.'.format(
            line_number, argument_name))
      inputs.append(names[argument_name])

    try:
      obj = geometry.ConstructedConfigurationObject(construction, inputs, name)
    except SignatureMismatchError as e:
      raise ParserError('Line {}: wrong arguments of {}: {}'.format(
          line_number, construction_name, e))

    declare(name, obj)
    constructed_objects.append(obj)

  return geometry.Configuration(holder, constructed_objects), names
