from pyfn import *
import itertools


def test_break_on_infinite_source():
    calls = []

    def cb(x):
        calls.append(x)
        if x == 3:
            return Flow.BREAK

    assert try_for_each(itertools.count(1), cb) is Flow.BREAK
    assert calls == [1, 2, 3]

def test_stops_pulling_immediately():
    pulled = []

    def source():
        for i in range(10):
            pulled.append(i)
            yield i

    try_for_each(source(), lambda x: Flow.BREAK if x == 1 else Flow.CONTINUE)
    assert pulled == [0, 1]

def test_default_signal_is_continue():
    seen = []
    assert try_for_each(range(5), seen.append) is Flow.CONTINUE
    assert seen == [0, 1, 2, 3, 4]

def test_empty_source():
    assert try_for_each([], lambda x: Flow.BREAK) is Flow.CONTINUE

def test_foreach_capability():
    class Countdown(ForEach):
        def __init__(self, n):
            self.n = n

        def __iter__(self):
            n = self.n
            while n > 0:
                yield n
                n -= 1

    seen = []
    assert Countdown(5).for_each(lambda x: seen.append(x) or (Flow.BREAK if x == 2 else None)) is Flow.BREAK
    assert seen == [5, 4, 3, 2]

def test_foreach_virtual_subclasses():
    assert isinstance([1, 2], ForEach)
    assert isinstance((x for x in range(3)), ForEach)
    assert isinstance(itertools.count(), ForEach)
    assert not isinstance(42, ForEach)

def test_foreach_opt_out():
    class Seq:
        def __iter__(self):
            return iter([1])

    class NotIterable(Seq):
        __iter__ = None

    assert isinstance(Seq(), ForEach)
    assert not isinstance(NotIterable(), ForEach)
