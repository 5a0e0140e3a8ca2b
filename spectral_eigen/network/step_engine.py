"""Per-frame update rule for the competitive-learning network.

Every frame is split into one input window per unit. Windows start
``shift = (L - synapse_count) // n_units`` samples apart, so depending on
the frame length they may overlap or leave gaps; each unit attends to its
own sub-band. One step then:

1. Normalizes each unit's window and measures its alignment with the
   unit's weights (dot product against the normalized window).
2. Runs a winner-take-all competition on the signed alignment.
3. Drifts every unit's weights slightly toward uniform noise (forgetting),
   winner or not, so no unit freezes permanently.
4. Pulls the winner's weights toward its input and folds the squared
   alignment into its eigenvalue estimate with the same effective rate.

Sign handling:
    A negative alignment is flipped to positive and raises a sign flag.
    With ``sign_scope="step"`` the flag is carried for the rest of the
    unit loop and drives the final update, so one unit's flip changes the
    competition for every later unit. With ``sign_scope="unit"`` the flag
    is reset per unit, competition uses the unsigned alignment, and the
    winner is pulled toward its own signed input.

The engine holds no lock. Concurrent steps on the same Network race;
serialize them with LearningSession or an equivalent single writer.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .config import INPUT_EPSILON
from .errors import InvalidFrameLength
from .frames import FrameLike, as_frame
from .units import Network
from .vector_ops import dot, magnitude, scale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """Outcome of one accepted frame.

    Attributes:
        winner: Index of the winning unit, None if no unit qualified
        alignment: Winner's unsigned alignment with its normalized input
        sign: Sign applied to the winner update (+1.0 or -1.0)
        effective_rate: Rate actually used for the winner update
        shift: Stride between consecutive units' input windows
    """

    winner: Optional[int]
    alignment: float
    sign: float
    effective_rate: float
    shift: int


class StepEngine:
    """Applies the competitive-learning update to a Network, one frame at a time.

    Attributes:
        network: The network mutated in place by every step
        rng: Shared random source for forgetting noise
    """

    def __init__(self, network: Network, rng: np.random.Generator):
        self.network = network
        self.rng = rng

    def step(self, frame: FrameLike) -> Optional[int]:
        """Feed one frame and return the index of the winning unit.

        Raises:
            InvalidFrameLength: If the frame is shorter than synapse_count.
                The network is left untouched.
        """
        return self.step_detailed(frame).winner

    def step_detailed(self, frame: FrameLike) -> StepResult:
        """Feed one frame and return the full outcome of the step.

        Args:
            frame: Magnitude vector of length L >= synapse_count

        Returns:
            StepResult describing the competition and the winner update.

        Raises:
            InvalidFrameLength: If the frame is not 1-D or is shorter than
                synapse_count. Raised before any mutation or random draw.
        """
        config = self.network.config
        values = as_frame(frame)
        length = values.shape[0]
        synapses = config.synapse_count

        if length < synapses:
            logger.warning(f"Rejected frame of length {length}, need at least {synapses}")
            raise InvalidFrameLength(frame_length=length, required=synapses)

        shift = (length - synapses) // config.n_units
        alpha = config.learning_rate
        beta = config.forget_rate
        per_unit_sign = config.sign_scope == "unit"

        sign = 1.0
        best = -1.0
        winner: Optional[int] = None
        winner_input: Optional[np.ndarray] = None
        winner_sign = 1.0

        for i, unit in enumerate(self.network.units):
            if per_unit_sign:
                sign = 1.0

            start = i * shift
            raw = values[start:start + synapses]
            xnorm = magnitude(raw) + INPUT_EPSILON
            x = scale(raw, 1.0 / xnorm)

            d = dot(unit.weights, x)
            if d < 0:
                d = -d
                sign = -1.0

            signed_align = d if per_unit_sign else sign * d
            if signed_align > best:
                # Record the unsigned alignment, not the compared value
                best = d
                winner = i
                winner_input = x
                winner_sign = sign

            # Forget: drift toward uniform noise, every unit, every step
            unit.weights[:] = (1 - beta) * unit.weights + beta * self.rng.random(synapses)

        self.network.step_count += 1
        self.network.last_winner = winner

        if winner is None:
            logger.debug(f"Step {self.network.step_count}: no unit qualified as winner")
            return StepResult(
                winner=None, alignment=best, sign=sign, effective_rate=0.0, shift=shift
            )

        if per_unit_sign:
            update_sign = winner_sign
            rate = alpha * best
        else:
            update_sign = sign
            rate = alpha * sign * best

        if config.clamp_rate:
            rate = min(max(rate, 0.0), 1.0)
        elif not 0.0 <= 1.0 - rate <= 1.0:
            logger.warning(
                f"Winner decay factor {1.0 - rate:.4f} outside [0, 1] "
                f"(alpha={alpha}, alignment={best:.4f}, sign={update_sign:+.0f})"
            )

        unit = self.network.units[winner]
        unit.weights[:] = (1 - rate) * unit.weights + rate * update_sign * winner_input
        unit.eigenvalue = (1 - rate) * unit.eigenvalue + rate * best ** 2
        unit.record_win()

        logger.debug(
            f"Step {self.network.step_count}: winner={winner}, align={best:.4f}, "
            f"sign={update_sign:+.0f}, rate={rate:.6f}"
        )
        return StepResult(
            winner=winner,
            alignment=best,
            sign=update_sign,
            effective_rate=rate,
            shift=shift,
        )
