"""Bounded FIFO cache of translation outputs."""
import hashlib
import json
from collections import OrderedDict
from typing import Any, Optional


class TranslationCache:
    """Maps ``source:target:md5(content)`` to converted output.

    Insertion ordered; once the size exceeds ``max_size`` the oldest entry
    is dropped.  Reads do not refresh an entry's position.
    """

    def __init__(self, max_size: int = 100):
        self.max_size = max_size
        self._entries: "OrderedDict[str, str]" = OrderedDict()

    @staticmethod
    def make_key(content: Any, source: str, target: str) -> str:
        if isinstance(content, str):
            payload = content.encode("utf-8")
        elif isinstance(content, bytes):
            payload = content
        else:
            payload = json.dumps(content, sort_keys=True, default=str).encode("utf-8")
        return f"{source}:{target}:{hashlib.md5(payload).hexdigest()}"

    def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def set(self, key: str, output: str) -> None:
        self._entries[key] = output
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
