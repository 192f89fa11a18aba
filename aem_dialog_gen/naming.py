"""Node naming and fallback name allocation.

A field without a ``name`` still needs a node name and a property path. The
allocator that hands those out is passed down the generation call chain, so
a dialog's output depends only on its config unless a caller opts into
timestamp names.
"""

import re
import time
from abc import ABC, abstractmethod

_LEADING_DOT_SLASH_RE = re.compile(r'^\./')
_INVALID_NODE_CHARS_RE = re.compile(r'[^a-zA-Z0-9_-]')


def sanitize_node_name(name: str) -> str:
    """Turn a JCR property path into a node name.

    >>> sanitize_node_name('./my-field:name')
    'my-field_name'
    """
    node_name = _INVALID_NODE_CHARS_RE.sub('_', _LEADING_DOT_SLASH_RE.sub('', name))
    # XML element names cannot start with a digit or a hyphen
    if node_name[:1].isdigit() or node_name.startswith('-'):
        node_name = f'_{node_name}'
    return node_name


class NameAllocator(ABC):
    """Hands out names for unnamed fields, e.g. ``field_1``."""

    @abstractmethod
    def allocate(self, prefix: str) -> str:
        pass


class SequentialNameAllocator(NameAllocator):
    """Counts per prefix: ``field_1``, ``field_2``, ``button_1``..."""

    def __init__(self):
        self._counters: dict[str, int] = {}

    def allocate(self, prefix: str) -> str:
        count = self._counters.get(prefix, 0) + 1
        self._counters[prefix] = count
        return f'{prefix}_{count}'


class TimestampNameAllocator(NameAllocator):
    """Embeds the wall-clock time in milliseconds.

    Legacy naming scheme, kept for projects whose checked-in dialogs use it.
    Output is not reproducible across runs and two names taken within the
    same millisecond collide.
    """

    def allocate(self, prefix: str) -> str:
        return f'{prefix}_{int(time.time() * 1000)}'
