from __future__ import annotations

import copy
import itertools
import types
from typing import Callable, Generic, Iterable, Iterator, List, Optional, \
    Tuple, TypeVar

from . import config
from .logger import log, QUEUE
from .register import Debuggable
from . import util
from .util import ABSENT

T = TypeVar('T')
V = TypeVar('V')

def _value(i, storage):
    return storage[i]

def _entry(i, storage):
    return i, storage[i]

def _key(i, storage):
    return i

def _render_value(i, v) -> str:
    return repr(v)

def _render_entry(i, v) -> str:
    return f'[ {i!r}, {v!r} ]'

def _render_key(i, v) -> str:
    return repr(i)


class _Buffer(Generic[T]):
    """A list read from a moving head offset.

    Indexing is relative to the head, so positions stay constant time and
    removing from the front only moves the head. The dead prefix is
    dropped once it makes up half of the list.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self.items: List[T] = list(values)
        self.head = 0

    def __len__(self) -> int:
        return len(self.items) - self.head

    def __getitem__(self, i: int) -> T:
        if i < 0 or i >= len(self):
            raise IndexError(i)
        return self.items[self.head + i]

    def __iter__(self) -> Iterator[T]:
        return itertools.islice(self.items, self.head, None)

    def __contains__(self, value) -> bool:
        return any(v is value or v == value for v in self)

    def append(self, value: T) -> None:
        self.items.append(value)

    def popleft(self) -> T:
        value = self.items[self.head]
        # release the reference held by the dead prefix
        self.items[self.head] = None
        self.head += 1
        if self.head * 2 >= len(self.items):
            del self.items[:self.head]
            self.head = 0
        return value


class QueueIterator(Generic[V]):
    """An independent cursor over the storage of a queue.

    The cursor holds on to the storage the queue had when the cursor was
    created and reads it as it advances, so changes made to the queue in
    the meantime are visible. Removing elements shifts the remaining ones
    towards the front, which can make a cursor skip values. Clearing a
    queue gives it new storage; cursors created before the clear keep
    reading the old contents.
    """

    def __init__(self, storage: _Buffer, project: Callable, limit: Optional[int],
                 live: bool, title: str, render: Callable[..., str]) -> None:
        """

        Args:
            storage: The queue's backing storage.
            project: Turns a position and the storage into the yielded value.
            limit: Stop before this position. None follows the live length.
            live: Also stop once the position passes the live length.
            title: Heading used by repr.
            render: Formats one position and value for repr.
        """
        self._storage = storage
        self._project = project
        self._limit = limit
        self._live = live
        self._title = title
        self._render = render
        self._index = 0
        self._closed = False

    def __iter__(self) -> QueueIterator[V]:
        return self

    def __next__(self) -> V:
        i = self._index
        if self._closed \
                or (self._limit is not None and i >= self._limit) \
                or (self._live and i >= len(self._storage)):
            self._closed = True
            raise StopIteration
        self._index = i + 1
        return self._project(i, self._storage)

    def close(self) -> None:
        """Exhaust the cursor. Further calls to next raise StopIteration."""
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> QueueIterator[V]:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        body = ', '.join(self._render(i, v) for i, v in enumerate(self._storage))
        return f'[{self._title}] {{ {body} }}' if body else f'[{self._title}] {{}}'


class ReadonlyQueue(Generic[T]):
    """The read-only side of a queue."""

    @property
    def size(self) -> int:
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.size == 0

    def peek(self, default=ABSENT):
        raise NotImplementedError

    def has(self, value: T) -> bool:
        raise NotImplementedError

    def for_each(self, f: Callable[[T, T, ReadonlyQueue[T]], None],
                 this_arg=ABSENT) -> None:
        raise NotImplementedError

    def __iter__(self) -> QueueIterator[T]:
        raise NotImplementedError

    def entries(self) -> QueueIterator[Tuple[int, T]]:
        raise NotImplementedError

    def keys(self) -> QueueIterator[int]:
        raise NotImplementedError

    def values(self) -> QueueIterator[T]:
        raise NotImplementedError

    def __len__(self) -> int:
        return self.size

    def __contains__(self, value) -> bool:
        return self.has(value)


class Queue(ReadonlyQueue[T], Debuggable):
    """A first-in first-out queue.

    Reading from an empty queue is not an error: dequeue and peek return
    the ABSENT sentinel, or the default the caller passes. None is an
    ordinary element.

    Not thread-safe. Concurrent mutation needs an external lock.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        """

        Args:
            values: Initial elements, front first. They are copied, so the
                queue and the caller's iterable do not affect each other.
        """
        Debuggable.__init__(self)
        self._items: _Buffer[T] = _Buffer(() if values is None else values)
        if config.debug:
            self.register()

    @property
    def size(self) -> int:
        """The number of elements in the queue."""
        return len(self._items)

    def enqueue(self, value: T) -> None:
        """Append value to the back of the queue.

        Args:
            value: The element to add.

        Returns: None

        """
        self._items.append(value)
        log(lambda: f'enqueue {value!r}, size {len(self._items)}', QUEUE)

    def dequeue(self, default=ABSENT):
        """Remove the element at the front of the queue.

        Args:
            default: Returned, with the queue left untouched, when the
                queue is empty.

        Returns: The front element, or default.

        """
        if not self._items:
            return default
        value = self._items.popleft()
        log(lambda: f'dequeue {value!r}, size {len(self._items)}', QUEUE)
        return value

    def peek(self, default=ABSENT):
        """

        Args:
            default: Returned when the queue is empty.

        Returns: The front element without removing it, or default.

        """
        if not self._items:
            return default
        return self._items[0]

    def clear(self) -> None:
        """Remove every element."""
        # fresh storage, cursors that already exist keep the old one
        self._items = _Buffer()
        log('clear', QUEUE)

    def has(self, value: T) -> bool:
        """Whether value is in the queue, compared by identity then ==."""
        return value in self._items

    def for_each(self, f: Callable[[T, T, ReadonlyQueue[T]], None],
                 this_arg=ABSENT) -> None:
        """Call f(value, value, queue) for each element, front to back.

        Each step reads the queue as it is at that moment, so changes f
        makes to the queue are seen by the following steps.

        Args:
            f: The function to call.
            this_arg: When given, f is bound to it as a method and is
                called as f(this_arg, value, value, queue).

        Returns: None

        """
        if not callable(f):
            raise TypeError(f'{f!r} is not callable')
        if this_arg is not ABSENT:
            f = types.MethodType(f, this_arg)
        i = 0
        while i < len(self._items):
            value = self._items[i]
            f(value, value, self)
            i += 1

    def elements(self) -> List[T]:
        """A copy of the elements, front first."""
        return list(self._items)

    def __iter__(self) -> QueueIterator[T]:
        return QueueIterator(self._items, _value, None, True,
                             'Queue Iterator', _render_value)

    def entries(self) -> QueueIterator[Tuple[int, T]]:
        """A cursor over (index, value) pairs, front first.

        Stops after as many pairs as the queue held when it was created,
        or earlier if the queue has since shrunk.
        """
        return QueueIterator(self._items, _entry, len(self._items), True,
                             'Queue Entries', _render_entry)

    def keys(self) -> QueueIterator[int]:
        """A cursor over 0 .. size - 1, size taken when it was created."""
        return QueueIterator(self._items, _key, len(self._items), False,
                             'Queue Iterator', _render_key)

    def values(self) -> QueueIterator[T]:
        """A cursor over the values, bounded like entries()."""
        return QueueIterator(self._items, _value, len(self._items), True,
                             'Queue Iterator', _render_value)

    def __copy__(self) -> Queue[T]:
        return Queue(self._items)

    def __deepcopy__(self, memo) -> Queue[T]:
        return Queue(copy.deepcopy(list(self._items), memo))

    def __repr__(self) -> str:
        body = ', '.join(repr(v) for v in self._items)
        return f'Queue({len(self._items)}) {{ {body} }}' if body \
            else f'Queue({len(self._items)}) {{}}'

    def show_state(self, file):
        util.synced_print(repr(self), file=file)
