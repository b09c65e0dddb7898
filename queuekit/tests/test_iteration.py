import time

from queuekit import *

def test_iteration_views_agree():
    q = Queue(["a", "b", "c"])
    assert list(q) == list(q.values())
    assert [v for _, v in q.entries()] == list(q)
    assert list(q.entries()) == [(0, "a"), (1, "b"), (2, "c")]
    assert list(q.keys()) == [0, 1, 2]

def test_iteration_unpacking():
    a, b, c = Queue([1, 2, 3])
    assert (a, b, c) == (1, 2, 3)

def test_iteration_empty():
    q = Queue()
    assert list(q) == []
    assert list(q.entries()) == []
    assert list(q.keys()) == []
    assert list(q.values()) == []

def test_iteration_independent_cursors():
    q = Queue([1, 2, 3])
    first, second = iter(q), iter(q)
    assert next(first) == 1
    assert next(first) == 2
    assert next(second) == 1
    assert list(first) == [3]
    assert list(second) == [2, 3]

def test_iteration_not_restartable():
    q = Queue([1, 2])
    it = q.values()
    assert iter(it) is it
    assert list(it) == [1, 2]
    assert list(it) == []
    entries = q.entries()
    assert list(entries) == [(0, 1), (1, 2)]
    assert list(entries) == []

def test_iteration_does_not_consume():
    q = Queue([1, 2])
    list(q)
    list(q.entries())
    assert q.size == 2
    assert q.peek() == 1

def test_default_iteration_is_live():
    q = Queue([1, 2])
    it = iter(q)
    assert next(it) == 1
    q.enqueue(3)
    assert list(it) == [2, 3]

def test_values_bounded_by_creation_size():
    q = Queue([1, 2])
    values = q.values()
    entries = q.entries()
    q.enqueue(3)
    assert list(values) == [1, 2]
    assert list(entries) == [(0, 1), (1, 2)]

def test_values_read_live_storage():
    q = Queue([1, 2, 3])
    values = q.values()
    assert next(values) == 1
    q.dequeue()
    # the front was removed, so position 1 now holds 3
    assert list(values) == [3]

def test_entries_stop_when_shrunk():
    q = Queue([1, 2, 3])
    entries = q.entries()
    q.dequeue()
    q.dequeue()
    assert list(entries) == [(0, 3)]

def test_keys_fixed_at_creation():
    q = Queue([1, 2, 3])
    keys = q.keys()
    q.enqueue(4)
    q.dequeue()
    q.dequeue()
    assert list(keys) == [0, 1, 2]
    assert list(q.keys()) == [0, 1]

def test_cursor_survives_clear():
    q = Queue([1, 2])
    it = iter(q)
    values = q.values()
    q.clear()
    q.enqueue(9)
    assert list(it) == [1, 2]
    assert list(values) == [1, 2]
    assert list(q) == [9]

def test_cursor_close():
    q = Queue([1, 2, 3])
    it = q.values()
    assert not it.closed
    assert next(it) == 1
    it.close()
    assert it.closed
    assert list(it) == []

def test_cursor_context_manager():
    q = Queue([1, 2, 3])
    with q.entries() as entries:
        assert next(entries) == (0, 1)
    assert entries.closed
    assert list(entries) == []

def test_cursor_repr():
    q = Queue([1, 2])
    assert repr(q.entries()) == '[Queue Entries] { [ 0, 1 ], [ 1, 2 ] }'
    assert repr(q.values()) == '[Queue Iterator] { 1, 2 }'
    assert repr(q.keys()) == '[Queue Iterator] { 0, 1 }'
    assert repr(Queue().values()) == '[Queue Iterator] {}'

def test_iteration_after_front_removal():
    q = Queue(range(10))
    for _ in range(6):
        q.dequeue()
    q.enqueue(10)
    assert list(q) == [6, 7, 8, 9, 10]
    assert list(q.entries()) == [(0, 6), (1, 7), (2, 8), (3, 9), (4, 10)]
    assert q.peek() == 6
    seen = []
    q.for_each(lambda v, k, queue: seen.append(v))
    assert seen == [6, 7, 8, 9, 10]

def test_iteration_cursor_across_compaction():
    q = Queue(range(8))
    values = iter(q)
    assert next(values) == 0
    assert next(values) == 1
    # enough removals to drop the dead prefix of the storage
    for _ in range(5):
        q.dequeue()
    assert list(values) == [7]

def _best_of(f, repeat=3):
    best = None
    for _ in range(repeat):
        start = time.perf_counter()
        f()
        elapsed = time.perf_counter() - start
        best = elapsed if best is None else min(best, elapsed)
    return best

def test_iteration_linear():
    small = Queue(range(50_000))
    large = Queue(range(400_000))
    small.dequeue()
    large.dequeue()
    ts = _best_of(lambda: (list(small), list(small.entries()),
                           small.for_each(lambda v, k, q: None)))
    tl = _best_of(lambda: (list(large), list(large.entries()),
                           large.for_each(lambda v, k, q: None)))
    # eight times the elements, quadratic traversal would be ~64 times slower
    assert tl / ts < 24
