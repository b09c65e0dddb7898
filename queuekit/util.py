from __future__ import annotations

import threading
import time
from typing import Dict


class Singleton(type):
    _instances: Dict[type, type] = {}
    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]


class _Absent(metaclass=Singleton):
    """Returned by empty-queue reads. Distinct from every element value,
    None included."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'ABSENT'

    __str__ = __repr__

    def __reduce__(self):
        return 'ABSENT'

ABSENT = _Absent()


class Nanoseconds(float):
    def to_seconds(self) -> float:
        return self * 1e-9


def nano_time():
    return Nanoseconds(time.time_ns())


_print_lock = threading.Lock()
def synced_print(*args, **kwargs):
    kwargs['flush'] = True
    with _print_lock:
        print(*args, **kwargs)
