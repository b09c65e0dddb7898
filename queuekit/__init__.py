__version__ = '1.0'

import sys as _sys
MIN_PYTHON = (3, 7)
if _sys.version_info < MIN_PYTHON:
    _sys.exit('Python 3.7+ is required')

from .logger import Logger, log
from .queue import Queue, QueueIterator, ReadonlyQueue
from .register import Debuggable, show_state
from .util import ABSENT
