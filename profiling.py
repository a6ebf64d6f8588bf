"""Scoped wall-clock timers for the engine's hot paths.

  with Timer('holder/register'):
    ...

Timers are no-ops until enable_profiling() is called. Names are '/'
separated scopes; log_records() reports every scope's average time, hit
count and share of its parent scope.
"""

import time

from absl import logging


_ENABLE_PROFILING = False
_ALL_RECORDERS = {}


def enable_profiling():
  global _ENABLE_PROFILING
  _ENABLE_PROFILING = True


def disable_profiling():
  global _ENABLE_PROFILING
  _ENABLE_PROFILING = False


def reset_records():
  _ALL_RECORDERS.clear()


class Recorder(object):

  def __init__(self, name):
    self.name = name
    self.count = 0
    self.sum = 0.

  def add(self, t):
    self.sum += t
    self.count += 1

  def avg(self):
    return self.sum / self.count if self.count else 0.


def records():
  return dict(_ALL_RECORDERS)


def log_records():
  if not _ALL_RECORDERS:
    logging.info('No profiling records.')
    return

  # Total time spent directly under each scope prefix.
  totals = {}
  for name, rec in _ALL_RECORDERS.items():
    parent = name.rsplit('/', 1)[0] if '/' in name else ''
    totals[parent] = totals.get(parent, 0.) + rec.sum

  max_name_len = max(len(name) for name in _ALL_RECORDERS)
  name_format = '{' + ':<{}'.format(max_name_len) + '}'

  logging.info('Profiling averages * hit times:')
  for name, rec in sorted(_ALL_RECORDERS.items()):
    parent = name.rsplit('/', 1)[0] if '/' in name else ''
    share = rec.sum / totals[parent] if totals[parent] else 0.
    logging.info((name_format + ': {:>8}e-6 * {:<10} ({:2.0%})').format(
        name, int(rec.avg() * 1e6), rec.count, share))


class _Timer(object):

  def __init__(self, name, start=False):
    if name not in _ALL_RECORDERS:
      _ALL_RECORDERS[name] = Recorder(name)
    self.recorder = _ALL_RECORDERS[name]
    if start:
      self.start()

  def start(self):
    self.start_time = time.time()

  def stop(self):
    self.recorder.add(time.time() - self.start_time)

  def __enter__(self):
    self.start()

  def __exit__(self, type, value, traceback):
    self.stop()


class _NullTimer(object):

  def __init__(self, name, start=False):
    pass

  def start(self):
    pass

  def stop(self):
    pass

  def __enter__(self):
    pass

  def __exit__(self, type, value, traceback):
    pass


def Timer(name, start=False):
  if _ENABLE_PROFILING:
    return _Timer(name, start=start)
  else:
    return _NullTimer(name, start=start)
