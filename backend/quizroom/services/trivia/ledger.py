from typing import Dict, List, Tuple


class ScoreLedger:
    """Display name -> points, kept for the lifetime of the process.

    Scores only grow; the only way down is :meth:`clear`.
    """

    def __init__(self):
        # dicts keep insertion order, which doubles as the tie-break order
        self._scores: Dict[str, int] = {}

    def ensure_entry(self, name: str) -> None:
        self._scores.setdefault(name, 0)

    def increment(self, name: str) -> int:
        """Add a point and return the new score. Unknown names start at 1."""
        self._scores[name] = self._scores.get(name, 0) + 1
        return self._scores[name]

    def get(self, name: str) -> int:
        return self._scores.get(name, 0)

    def snapshot(self) -> List[Tuple[str, int]]:
        """Copy of the standings, highest score first, ties by join order."""
        return sorted(self._scores.items(), key=lambda item: -item[1])

    def as_dict(self) -> Dict[str, int]:
        return dict(self.snapshot())

    def clear(self) -> None:
        self._scores.clear()

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, name) -> bool:
        return name in self._scores
