"""Network state: a fixed population of competing units.

Each unit holds a weight vector (its current direction estimate over one
sub-band of the incoming frame) and a running eigenvalue estimate of the
energy it has captured by winning. Units are index-addressed; unit ``i``
always refers to the same learner for the lifetime of the network.
"""
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from .config import NetworkConfig
from .errors import InvalidConfiguration


@dataclass
class CompetitiveUnit:
    """A single learner in the population.

    Attributes:
        weights: Direction estimate (synapse_count floats, not necessarily unit-norm)
        eigenvalue: Exponentially-weighted average of squared winning alignments
        win_count: Number of steps this unit has won
    """

    weights: np.ndarray
    eigenvalue: float = 0.0
    win_count: int = 0

    def record_win(self) -> None:
        """Record that this unit won the current step."""
        self.win_count += 1

    @property
    def direction(self) -> np.ndarray:
        """Unit-norm copy of the weights (zeros if the weights vanish)."""
        norm = np.linalg.norm(self.weights)
        if norm == 0:
            return np.zeros_like(self.weights)
        return self.weights / norm


@dataclass
class Network:
    """Container for the competing units and their shared constants.

    The unit list is created once and never resized. Mutation happens only
    through StepEngine; readers should take a NetworkSnapshot.

    Attributes:
        config: Construction-time settings
        units: Ordered units, len == config.n_units
        step_count: Number of frames accepted so far
        last_winner: Winner of the most recent step, None before the first
            step or when no unit qualified
    """

    config: NetworkConfig
    units: list[CompetitiveUnit]
    step_count: int = 0
    last_winner: Optional[int] = None

    def __post_init__(self):
        if len(self.units) != self.config.n_units:
            raise InvalidConfiguration(
                f"Expected {self.config.n_units} units, got {len(self.units)}"
            )
        for i, unit in enumerate(self.units):
            if unit.weights.shape != (self.config.synapse_count,):
                raise InvalidConfiguration(
                    f"Unit {i} weights have shape {unit.weights.shape}, "
                    f"expected ({self.config.synapse_count},)"
                )

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[CompetitiveUnit]:
        return iter(self.units)

    def __getitem__(self, index: int) -> CompetitiveUnit:
        return self.units[index]

    @property
    def synapse_count(self) -> int:
        return self.config.synapse_count

    @property
    def weights(self) -> np.ndarray:
        """Copy of all weights as an (n_units, synapse_count) array."""
        return np.stack([unit.weights for unit in self.units]).copy()

    @property
    def eigenvalues(self) -> np.ndarray:
        """Copy of all eigenvalue estimates."""
        return np.array([unit.eigenvalue for unit in self.units], dtype=np.float64)

