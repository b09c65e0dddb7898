from __future__ import annotations

import itertools
import traceback
from typing import Dict, List, Optional
import weakref

from . import util

class StateKey(int):
    pass

_state_keys = itertools.count(1)

registered: Dict[StateKey, weakref.ReferenceType[Debuggable]] = {}

def register(obj: Debuggable) -> StateKey:
    key = StateKey(next(_state_keys))
    registered[key] = weakref.ref(obj, lambda _, key=key: registered.pop(key, None))
    return key

class Debuggable:
    """Something that can describe its state in a debug dump."""

    def __init__(self):
        self._key: StateKey = StateKey(-1)

    def register(self):
        if self._key < 0:
            self._key = register(self)

    def unregister(self):
        if self._key > 0:
            registered.pop(self._key, None)
            self._key = StateKey(-1)

    @property
    def is_registered(self) -> bool:
        return self._key > 0

    def show_state(self, file):
        raise NotImplementedError

    @property
    def has_state(self):
        return True

def registered_objects() -> List[Debuggable]:
    result = []
    for key in sorted(registered):
        ref = registered.get(key)
        obj: Optional[Debuggable] = None if ref is None else ref()
        if obj is not None:
            result.append(obj)
    return result

def show_state(file):
    """Write the state of every live registered object to file."""
    objects = registered_objects()
    if len(objects) == 0:
        return
    util.synced_print('== Registered Objects ==', file=file)
    for obj in objects:
        try:
            if obj.has_state:
                util.synced_print('', file=file)
            obj.show_state(file=file)
        except Exception:
            util.synced_print('Exception while determining state'
                              ' of a registered object', file=file)
            traceback.print_exc(file=file)
