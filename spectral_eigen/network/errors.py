"""Error taxonomy for the competitive-learning network.

Both concrete errors also subclass ValueError so callers that already guard
configuration and input parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations


class NetworkError(Exception):
    """Base class for competitive-learning network errors."""

    pass


class InvalidConfiguration(NetworkError, ValueError):
    """Raised when a network cannot be constructed from the given settings.

    Examples of causes:
    - Zero or negative unit count
    - Zero or negative synapse count
    - Negative or non-finite learning/forget rate
    - Explicit weight rows that disagree with the configured shape

    No partially-initialized network is ever returned alongside this error.
    """

    pass


class InvalidFrameLength(NetworkError, ValueError):
    """Raised when a frame cannot feed every unit's input window.

    The step is rejected in full: no weight, eigenvalue or random draw is
    consumed before this is raised.

    Attributes:
        frame_length: Length of the rejected frame (-1 if it was not 1-D)
        required: Minimum frame length the network accepts
    """

    def __init__(self, frame_length: int, required: int, message: str | None = None):
        self.frame_length = frame_length
        self.required = required
        super().__init__(
            message
            or f"Frame length {frame_length} is shorter than required window {required}"
        )
