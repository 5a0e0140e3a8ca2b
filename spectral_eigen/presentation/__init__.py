"""Read-only views of network state for display loops."""

from spectral_eigen.presentation.readout import (
    band_frequencies,
    band_labels,
    bin_count_for_fft,
    eigenvalue_bars,
    format_frequency,
    loading_bars,
)

__all__ = [
    "band_frequencies",
    "band_labels",
    "bin_count_for_fft",
    "eigenvalue_bars",
    "format_frequency",
    "loading_bars",
]
