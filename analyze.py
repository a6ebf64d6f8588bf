"""Registers the objects of a configuration file one by one.

  geogen-analyze --input=right_triangle.txt --num_containers=5

where the input is written in the format parsing.py reads:

  RightTriangle: A, B, C
  O = Circumcenter(A, B, C)
  M = Midpoint(B, C)

Prints whether each constructed object is fresh, a duplicate of an earlier
object, or unconstructible.
"""

import sys

from absl import app
from absl import flags
from absl import logging

import geometry
import geometry_holder
import objects_container
import parsing
import profiling


flags.DEFINE_string('input', None, 'Configuration file to analyze.')
flags.DEFINE_integer('num_containers', geometry_holder.NUMBER_OF_CONTAINERS,
                     'Number of independent numeric pictures.')
flags.DEFINE_float('tolerance', objects_container.DEFAULT_TOLERANCE,
                   'Relative tolerance of numeric equality.')
flags.DEFINE_integer('max_attempts_to_reconstruct',
                     geometry_holder.MAX_ATTEMPTS_TO_RECONSTRUCT,
                     'How many times to redraw all pictures on disagreement.')
flags.DEFINE_integer('seed', None, 'Seed of the pictures.')
flags.DEFINE_boolean('verbose', False, '')
flags.DEFINE_boolean('enable_profiling', False, '')

FLAGS = flags.FLAGS


def analyze(configuration, holder):
  """Registers every constructed object of configuration into holder.

  The holder is initialized with the loose objects only. Objects depending
  on a rejected object are skipped.

  Returns:
    list of (object, verdict or None when skipped) in declaration order.
  """
  loose_only = geometry.Configuration(configuration.loose_objects_holder)
  holder.initialize(loose_only)

  rejected = set()
  results = []
  for obj in configuration.constructed_objects:
    if any(x.id in rejected for x in obj.arguments.flattened_list):
      rejected.add(obj.id)
      results.append((obj, None))
      continue

    verdict = holder.register(obj)
    if not verdict.is_fresh:
      rejected.add(obj.id)
    results.append((obj, verdict))
  return results


def describe(verdict, holder):
  if verdict is None:
    return 'skipped'
  if verdict.is_duplicate:
    return 'duplicate of {}'.format(
        holder.get_object(verdict.duplicate_id).name)
  return verdict.kind


def main(argv):
  if len(argv) > 1:
    raise app.UsageError('Too many command-line arguments.')
  if FLAGS.input is None:
    raise app.UsageError('--input is required.')

  if FLAGS.verbose:
    logging.set_verbosity(logging.DEBUG)
  if FLAGS.enable_profiling:
    profiling.enable_profiling()

  with open(FLAGS.input) as f:
    configuration, _ = parsing.parse_configuration(f.read())

  holder = geometry_holder.GeometryHolder(
      num_containers=FLAGS.num_containers,
      tolerance=FLAGS.tolerance,
      max_attempts_to_reconstruct=FLAGS.max_attempts_to_reconstruct,
      seed=FLAGS.seed)

  try:
    results = analyze(configuration, holder)
  except geometry_holder.AnalyzerError as e:
    logging.error('Analysis aborted: %s', e)
    sys.exit(1)

  for obj, verdict in results:
    logging.info('%s: %s', obj.name, describe(verdict, holder))

  if FLAGS.enable_profiling:
    profiling.log_records()


def run():
  app.run(main)


if __name__ == '__main__':
  run()
