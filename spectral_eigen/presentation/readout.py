"""Presenter-side readouts computed from a NetworkSnapshot.

These are the numbers a display draws: eigenvalue bars scaled to the
largest eigenvalue, per-unit weight loadings scaled to that unit's largest
weight, and frequency labels for the analyser's bins. Nothing here touches
the live network.
"""

import math

import numpy as np

from spectral_eigen.network.snapshot import NetworkSnapshot


def eigenvalue_bars(snapshot: NetworkSnapshot) -> np.ndarray:
    """Eigenvalues divided by the largest one.

    Returns zeros while no eigenvalue is positive (e.g. before the first win).
    """
    evals = np.asarray(snapshot.eigenvalues, dtype=np.float64)
    peak = evals.max() if evals.size else 0.0
    if not peak > 0:
        return np.zeros_like(evals)
    return evals / peak


def loading_bars(snapshot: NetworkSnapshot) -> np.ndarray:
    """Each unit's weights divided by that unit's largest weight.

    Returns:
        Array of shape (n_units, synapse_count). Rows whose largest weight
        is not positive are left as zeros.
    """
    weights = np.asarray(snapshot.weights, dtype=np.float64)
    bars = np.zeros_like(weights)
    peaks = weights.max(axis=1) if weights.size else np.zeros(0)
    for i, peak in enumerate(peaks):
        if peak > 0:
            bars[i] = weights[i] / peak
    return bars


def bin_count_for_fft(fft_size: int) -> int:
    """Number of magnitude bins an analyser with this FFT size produces."""
    if fft_size <= 0 or fft_size % 2:
        raise ValueError(f"fft_size must be a positive even number, got {fft_size}")
    return fft_size // 2


def band_frequencies(bin_count: int, sample_rate: float) -> np.ndarray:
    """Frequency in Hz at the start of each bin, 0 .. Nyquist."""
    nyquist = sample_rate / 2
    return np.arange(bin_count + 1) * nyquist / bin_count


def _tenths(value: float) -> str:
    """Format a count of tenths rounded half up, dropping a trailing ".0"."""
    tenths = math.floor(value + 0.5)
    whole, frac = divmod(tenths, 10)
    return str(whole) if frac == 0 else f"{whole}.{frac}"


def format_frequency(hz: float) -> str:
    """Label a frequency in Hz below 1 kHz, else in kHz.

    One decimal at most, halves rounded up: 0 -> "0 Hz", 187.5 -> "187.5 Hz",
    1050 -> "1.1 kHz", 24000 -> "24 kHz".
    """
    if hz < 1000:
        return f"{_tenths(hz * 10)} Hz"
    return f"{_tenths(hz * 10 / 1000)} kHz"


def band_labels(bin_count: int, sample_rate: float, every: int = 4) -> list[str]:
    """Labels for bins 0, every, 2*every, ... up to and including bin_count."""
    freqs = band_frequencies(bin_count, sample_rate)
    return [format_frequency(float(freqs[i])) for i in range(0, bin_count + 1, every)]
