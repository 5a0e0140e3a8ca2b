"""Online competitive learning of recurring spectral shapes.

A fixed population of units watches a stream of magnitude frames. Each
frame, every unit reads its own sub-band window, the best-aligned unit is
pulled toward its input (winner-take-all Hebbian update), every unit
drifts slightly toward noise (forgetting), and the winner's eigenvalue
estimate absorbs the squared alignment.

Key components:
- NetworkConfig: Construction-time settings (unit count, window, rates)
- CompetitiveUnit / Network: The mutable learning state
- create_network: Random initial state from a shared generator
- StepEngine: The per-frame update rule
- NetworkSnapshot: Read-only copy of the state for presenters
- LearningSession: Single-writer owner that serializes steps
"""

from spectral_eigen.network.config import NetworkConfig
from spectral_eigen.network.errors import (
    InvalidConfiguration,
    InvalidFrameLength,
    NetworkError,
)
from spectral_eigen.network.frames import ArrayFrameSource, FrameSource, as_frame
from spectral_eigen.network.initializer import (
    create_network,
    make_rng,
    network_from_weights,
)
from spectral_eigen.network.session import LearningSession
from spectral_eigen.network.snapshot import NetworkSnapshot
from spectral_eigen.network.step_engine import StepEngine, StepResult
from spectral_eigen.network.units import CompetitiveUnit, Network

__all__ = [
    "NetworkConfig",
    "NetworkError",
    "InvalidConfiguration",
    "InvalidFrameLength",
    "ArrayFrameSource",
    "FrameSource",
    "as_frame",
    "create_network",
    "make_rng",
    "network_from_weights",
    "LearningSession",
    "NetworkSnapshot",
    "StepEngine",
    "StepResult",
    "CompetitiveUnit",
    "Network",
]
