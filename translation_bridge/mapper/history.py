"""In-process record of past mapping decisions."""
from typing import Any, Dict, Optional


class TranslationHistory:
    """Attempts, successes and running average confidence per mapping key.

    Purely additive. Swap in a subclass to persist the table elsewhere.
    """

    def __init__(self):
        self._entries: Dict[str, Dict[str, Any]] = {}

    @staticmethod
    def key(source_framework: str, source_type: str, target_framework: str, target_type: str) -> str:
        return f"{source_framework}:{source_type}->{target_framework}:{target_type}"

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        entry = self._entries.get(key)
        return dict(entry) if entry else None

    def success_rate(self, key: str) -> float:
        """Share of successful attempts, 0.5 when nothing is known yet."""
        entry = self._entries.get(key)
        if not entry or not entry["attempts"]:
            return 0.5
        return entry["successful"] / entry["attempts"]

    def record(self, key: str, confidence: float, successful: bool) -> Dict[str, Any]:
        entry = self._entries.setdefault(
            key, {"attempts": 0, "successful": 0, "avg_confidence": 0.0}
        )
        entry["attempts"] += 1
        if successful:
            entry["successful"] += 1

        attempts = entry["attempts"]
        entry["avg_confidence"] = (entry["avg_confidence"] * (attempts - 1) + confidence) / attempts
        return dict(entry)

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        return {key: dict(entry) for key, entry in self._entries.items()}

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
