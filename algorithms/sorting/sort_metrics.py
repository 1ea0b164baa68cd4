"""
Operation counters for a single sort call.
"""

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass
class SortStats:
    """Counts collected while sorting one range."""
    comparisons: int = 0   # element comparisons, sentinel ones included
    writes: int = 0        # assignments back into the caller's sequence
    merges: int = 0        # merge calls that did work
    max_depth: int = 0     # deepest recursion level reached (root = 0)

    def reset(self):
        self.comparisons = 0
        self.writes = 0
        self.merges = 0
        self.max_depth = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
