"""Read-only view of network state for presenters.

A snapshot copies every value out of the live network, so a display loop
can hold on to it while the next frame is being processed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from .units import Network


class NetworkSnapshot(BaseModel):
    """Post-step state of every unit plus the most recent winner."""

    model_config = ConfigDict(frozen=True)

    synapse_count: int = Field(gt=0)
    weights: list[list[float]]
    eigenvalues: list[float]
    winner: Optional[int] = None
    step_count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_shape(self) -> "NetworkSnapshot":
        if len(self.weights) != len(self.eigenvalues):
            raise ValueError(
                f"{len(self.weights)} weight rows but {len(self.eigenvalues)} eigenvalues"
            )
        for i, row in enumerate(self.weights):
            if len(row) != self.synapse_count:
                raise ValueError(
                    f"Weight row {i} has {len(row)} values, expected {self.synapse_count}"
                )
        if self.winner is not None and not 0 <= self.winner < len(self.weights):
            raise ValueError(f"Winner index {self.winner} out of range")
        return self

    @property
    def n_units(self) -> int:
        return len(self.weights)

    @classmethod
    def from_network(cls, network: "Network") -> "NetworkSnapshot":
        """Copy the current state of ``network``."""
        return cls(
            synapse_count=network.synapse_count,
            weights=[unit.weights.tolist() for unit in network.units],
            eigenvalues=[float(unit.eigenvalue) for unit in network.units],
            winner=network.last_winner,
            step_count=network.step_count,
        )
