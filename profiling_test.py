import profiling


def test_timers_are_off_by_default():
  profiling.reset_records()
  with profiling.Timer('test/off'):
    pass
  assert 'test/off' not in profiling.records()


def test_records():
  profiling.reset_records()
  profiling.enable_profiling()
  try:
    with profiling.Timer('test/scope'):
      pass
    timer = profiling.Timer('test/scope', start=True)
    timer.stop()
  finally:
    profiling.disable_profiling()

  recorder = profiling.records()['test/scope']
  assert recorder.count == 2
  assert recorder.avg() >= 0.
  profiling.log_records()
  profiling.reset_records()
  assert profiling.records() == {}


if __name__ == '__main__':
  test_timers_are_off_by_default()
  test_records()
  print('\n [OK!]')
