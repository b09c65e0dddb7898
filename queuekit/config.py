"""Settings read from QUEUEKIT_* environment variables at import time."""

import os

PREFIX = 'QUEUEKIT_'

_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off', '')


def _coerce(name: str, raw: str, default):
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f'{name}: expected a boolean, got {raw!r}')
    if isinstance(default, int):
        try:
            return int(raw.strip(), 0)
        except ValueError:
            raise ValueError(f'{name}: expected an integer, got {raw!r}') from None
    if isinstance(default, float):
        try:
            return float(raw)
        except ValueError:
            raise ValueError(f'{name}: expected a number, got {raw!r}') from None
    return raw


def get(name: str, default):
    """Look up QUEUEKIT_<NAME>, coerced to the type of default.

    Args:
        name: The setting name, case-insensitive.
        default: Returned when the variable is unset. Its type decides
            how the raw string is parsed.

    Returns: The parsed setting.

    """
    key = PREFIX + name.upper()
    raw = os.environ.get(key)
    if raw is None:
        return default
    return _coerce(key, raw, default)


# zero means unbounded
log_size: int = get('log_size', 1000)
# set bits suppress log calls carrying them
logging: int = get('logging', 0xFFFFFFFF)
debug: bool = get('debug', False)
