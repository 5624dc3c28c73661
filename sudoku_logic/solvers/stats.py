"""Statistics and step records shared by solver runs."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class StepRecord:
    """One technique application inside a solve."""
    technique: str
    changed: bool
    elapsed: float
    iteration: int


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    iterations: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "iterations": self.iterations,
            "algorithm": self.algorithm,
            **self.extra
        }
