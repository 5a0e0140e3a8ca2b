"""Frame plumbing between a frequency analyser and the network.

The analyser itself (capture, decoding, FFT) lives outside this package.
Anything that yields fixed-length magnitude vectors satisfies FrameSource.
"""

from __future__ import annotations

from typing import Iterator, Protocol, Sequence, Union

import numpy as np

from .errors import InvalidFrameLength

FrameLike = Union[np.ndarray, Sequence[float]]


class FrameSource(Protocol):
    """Supplies one magnitude frame per tick, constant length per session."""

    def __iter__(self) -> Iterator[FrameLike]: ...


def as_frame(frame: FrameLike) -> np.ndarray:
    """Coerce a frame into a float64 vector.

    Byte-valued frames (uint8 spectra, as browser-style analysers emit) are
    widened so squaring and scaling cannot overflow.

    Raises:
        InvalidFrameLength: If the frame is not one-dimensional.
    """
    arr = np.asarray(frame, dtype=np.float64)
    if arr.ndim != 1:
        raise InvalidFrameLength(
            frame_length=-1,
            required=0,
            message=f"Frame must be one-dimensional, got shape {arr.shape}",
        )
    return arr


class ArrayFrameSource:
    """Replays the rows of a 2-D array as frames, first row first."""

    def __init__(self, frames: FrameLike):
        data = np.asarray(frames, dtype=np.float64)
        if data.ndim != 2:
            raise ValueError(f"Expected a 2-D array of frames, got shape {data.shape}")
        self._frames = data

    def __len__(self) -> int:
        return self._frames.shape[0]

    def __iter__(self) -> Iterator[np.ndarray]:
        for row in self._frames:
            yield row.copy()

    @property
    def frame_length(self) -> int:
        return self._frames.shape[1]
