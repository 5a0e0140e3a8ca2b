"""Configuration for the competitive-learning network."""
import math
from dataclasses import asdict, dataclass
from typing import Literal

from .errors import InvalidConfiguration

# Scope of the sign flag raised when a unit aligns negatively with its input
SignScope = Literal["step", "unit"]

DEFAULT_N_UNITS = 10
DEFAULT_SYNAPSE_COUNT = 40
DEFAULT_LEARNING_RATE = 1e-2  # alpha
DEFAULT_FORGET_RATE = 1e-5  # beta

# Added to every input window's magnitude before normalizing
INPUT_EPSILON = 1e-6


@dataclass(frozen=True)
class NetworkConfig:
    """Construction-time settings for a Network.

    There is no runtime reconfiguration: changing any value means building
    a new network.

    Attributes:
        n_units: Number of competing units
        synapse_count: Weight vector length per unit (input window width)
        learning_rate: Winner update rate (alpha)
        forget_rate: Per-step drift of every weight toward uniform noise (beta)
        sign_scope: "step" carries a negative-alignment sign flip across the
            rest of the unit loop; "unit" resets it for every unit
        clamp_rate: Clamp the winner's effective rate into [0, 1]
    """

    n_units: int = DEFAULT_N_UNITS
    synapse_count: int = DEFAULT_SYNAPSE_COUNT
    learning_rate: float = DEFAULT_LEARNING_RATE
    forget_rate: float = DEFAULT_FORGET_RATE
    sign_scope: SignScope = "step"
    clamp_rate: bool = False

    def __post_init__(self):
        for name in ("n_units", "synapse_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(
                    f"{name} must be an integer, got {type(value).__name__} {value!r}"
                )
        if self.n_units <= 0:
            raise InvalidConfiguration(f"n_units must be positive, got {self.n_units}")
        if self.synapse_count <= 0:
            raise InvalidConfiguration(
                f"synapse_count must be positive, got {self.synapse_count}"
            )
        for name in ("learning_rate", "forget_rate"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidConfiguration(
                    f"{name} must be finite and non-negative, got {value}"
                )
        if self.sign_scope not in ("step", "unit"):
            raise InvalidConfiguration(f"Unknown sign_scope: {self.sign_scope!r}")

    @property
    def required_frame_length(self) -> int:
        """Shortest frame every unit can read a full window from."""
        return self.synapse_count

    @property
    def characteristic_frames(self) -> float:
        """Frames of consecutive wins for a unit's EMA to cover ~63% of a step change.

        Uses τ = -1 / ln(1 - α). Infinite when α is 0 (no learning) and
        undefined (NaN) once α reaches 1.
        """
        if self.learning_rate == 0:
            return math.inf
        if self.learning_rate >= 1:
            return math.nan
        return -1.0 / math.log(1.0 - self.learning_rate)

    def to_dict(self) -> dict:
        return asdict(self)
