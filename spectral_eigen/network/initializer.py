"""Creation of the initial network state.

Initial weights are uniform random in [0, 1) per synapse and every
eigenvalue starts at zero. The random source is a numpy Generator shared
with the StepEngine so that a fixed seed reproduces a whole session.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .config import NetworkConfig
from .errors import InvalidConfiguration
from .units import CompetitiveUnit, Network

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the shared pseudo-random source.

    Args:
        seed: Fixed seed for reproducible sessions, None for fresh entropy
    """
    return np.random.default_rng(seed)


def create_network(
    config: Optional[NetworkConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> Network:
    """Build a network with random initial weights.

    Consumes exactly n_units * synapse_count uniform draws from ``rng``,
    unit by unit.

    Args:
        config: Network settings (defaults to NetworkConfig())
        rng: Shared random source (a fresh unseeded one if omitted)

    Returns:
        A Network whose weights lie in [0, 1) and eigenvalues are 0.

    Raises:
        InvalidConfiguration: Raised by NetworkConfig for invalid settings.
    """
    config = config or NetworkConfig()
    rng = rng if rng is not None else make_rng()

    units = [
        CompetitiveUnit(weights=rng.random(config.synapse_count))
        for _ in range(config.n_units)
    ]
    network = Network(config=config, units=units)

    logger.info(
        f"Created network: {config.n_units} units x {config.synapse_count} synapses, "
        f"alpha={config.learning_rate}, beta={config.forget_rate}"
    )
    return network


def network_from_weights(
    config: NetworkConfig,
    weights: Sequence[Sequence[float]],
    eigenvalues: Optional[Sequence[float]] = None,
) -> Network:
    """Build a network from explicit weight rows.

    Args:
        config: Network settings; must agree with the shape of ``weights``
        weights: One row of synapse_count values per unit
        eigenvalues: Optional starting eigenvalues (zeros if omitted)

    Raises:
        InvalidConfiguration: If the rows do not match n_units x synapse_count
            (checked by Network) or the eigenvalue count differs from the rows.
    """
    rows = [np.array(row, dtype=np.float64) for row in weights]

    if eigenvalues is None:
        eigenvalues = [0.0] * len(rows)
    elif len(eigenvalues) != len(rows):
        raise InvalidConfiguration(
            f"Got {len(eigenvalues)} eigenvalues for {len(rows)} weight rows"
        )

    units = [
        CompetitiveUnit(weights=row, eigenvalue=float(ev))
        for row, ev in zip(rows, eigenvalues)
    ]
    return Network(config=config, units=units)
