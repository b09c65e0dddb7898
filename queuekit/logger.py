import collections
from dataclasses import dataclass
import inspect
import threading
import types
from typing import Deque, Optional

from . import config
from .register import Debuggable
from . import util
from .util import Nanoseconds

# bits callers pass to Logger.log
QUEUE = 0x1

@dataclass
class Event:
    timestamp: Nanoseconds
    thread_id: str
    tb: Optional[inspect.Traceback]
    text: str

    def __str__(self):
        fn: str = "unknown" if self.tb is None else str(self.tb.function)
        return f'{self.timestamp.to_seconds():.6f}:: {self.thread_id}@{fn}: {self.text}'

class Logger(Debuggable):
    """A bounded in-memory log which shows up in debug dumps."""

    def __init__(self, name: str, log_size: int, mask: int = 0xFFFFFFFF):
        """

        Args:
            name: Shown as the heading of the log in debug dumps.
            log_size: The number of events kept, oldest dropped first.
                Zero keeps everything.
            mask: Calls to log whose bits are all set in mask are dropped.
        """
        super().__init__()
        self.name = name
        self.log_size = log_size
        self.mask = mask
        self.entries: Deque[Event] = collections.deque()
        self.lock = threading.Lock()
        self.register()

    def enabled(self, bits: Optional[int] = None) -> bool:
        return bits is None or self.mask & bits != bits

    def log(self, text, bits: Optional[int] = None):
        """Record an event.

        Args:
            text: The message, or a callable producing it. The callable is
                only invoked when the event is recorded.
            bits: Category bits checked against the mask.

        """
        if not self.enabled(bits):
            return
        if callable(text):
            text = text()
        with self.lock:
            frame: Optional[types.FrameType] = inspect.currentframe()
            caller = None if frame is None else frame.f_back
            tb = None if caller is None else inspect.getframeinfo(caller)
            message = Event(
                util.nano_time(),
                threading.current_thread().name,
                tb,
                str(text)
            )
            self.entries.append(message)
            if self.log_size > 0 and len(self.entries) > self.log_size:
                self.entries.popleft()

    __call__ = log

    @property
    def num_entries(self) -> int:
        return len(self.entries)

    def clear(self) -> None:
        with self.lock:
            self.entries.clear()

    def __str__(self):
        return f'Logger({self.name})'

    def show_state(self, file):
        util.synced_print(f'{str(self)} Log', *self.entries, file=file)

log = Logger("Logging", config.log_size, config.logging)
