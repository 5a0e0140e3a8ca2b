"""Single-writer driver for a network.

LearningSession owns the network, its step engine and the shared random
source, and serializes every step behind one lock. The frame pacing lives
with the caller: ``run`` pulls frames from a source until it is exhausted
or a frame budget is met, and stopping early is just not calling again.

Example:
    session = LearningSession.create(seed=7)
    session.on_step = lambda winner, snapshot: draw(snapshot)
    session.run(ArrayFrameSource(spectra))
"""

import logging
import threading
from typing import Callable, Optional

import numpy as np

from .config import NetworkConfig
from .frames import FrameLike, FrameSource
from .initializer import create_network, make_rng
from .snapshot import NetworkSnapshot
from .step_engine import StepEngine, StepResult
from .units import Network

logger = logging.getLogger(__name__)

StepCallback = Callable[[Optional[int], NetworkSnapshot], None]


class LearningSession:
    """Serializes frames into one network and hands snapshots to readers.

    Attributes:
        network: The owned network
        engine: Step engine bound to the network
        on_step: Optional presenter hook, called after each accepted frame
            with (winner, snapshot), outside the lock
    """

    def __init__(
        self,
        network: Network,
        rng: np.random.Generator,
        on_step: Optional[StepCallback] = None,
    ):
        self.network = network
        self.engine = StepEngine(network, rng)
        self.on_step = on_step
        self._step_lock = threading.Lock()

    @classmethod
    def create(
        cls,
        config: Optional[NetworkConfig] = None,
        seed: Optional[int] = None,
        on_step: Optional[StepCallback] = None,
    ) -> "LearningSession":
        """Build a fresh random network and a session around it.

        The same generator seeds the initial weights and all later
        forgetting noise.
        """
        rng = make_rng(seed)
        network = create_network(config, rng)
        return cls(network, rng, on_step=on_step)

    @property
    def config(self) -> NetworkConfig:
        return self.network.config

    @property
    def last_winner(self) -> Optional[int]:
        return self.network.last_winner

    def feed(self, frame: FrameLike) -> Optional[int]:
        """Apply one frame and return the winner."""
        return self.feed_detailed(frame).winner

    def feed_detailed(self, frame: FrameLike) -> StepResult:
        """Apply one frame and return the full step outcome.

        Raises:
            InvalidFrameLength: Propagated from the engine; state unchanged.
        """
        with self._step_lock:
            result = self.engine.step_detailed(frame)
            on_step = self.on_step
            snapshot = NetworkSnapshot.from_network(self.network) if on_step else None

        if on_step is not None:
            on_step(result.winner, snapshot)
        return result

    def snapshot(self) -> NetworkSnapshot:
        """Take a consistent copy of the current network state."""
        with self._step_lock:
            return NetworkSnapshot.from_network(self.network)

    def run(self, source: FrameSource, max_frames: Optional[int] = None) -> int:
        """Pull frames from ``source`` and feed them one by one.

        Args:
            source: Any iterable of frames
            max_frames: Stop after this many frames (None = until exhausted)

        Returns:
            Number of frames consumed.
        """
        consumed = 0
        if max_frames is not None and max_frames <= 0:
            return consumed

        for frame in source:
            self.feed(frame)
            consumed += 1
            if max_frames is not None and consumed >= max_frames:
                break

        logger.info(
            f"Session run finished: {consumed} frames, "
            f"{self.network.step_count} total steps, last winner={self.network.last_winner}"
        )
        return consumed
