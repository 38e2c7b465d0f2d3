"""Neuron state record."""

from dataclasses import dataclass


@dataclass(slots=True)
class Neuron:
    """A neuron with a fixed position, oscillator tag and double-buffered spike state."""

    id: int
    x: int = 0
    y: int = 0
    z: int = 0
    phase: int = 0
    target_rate: int = 128
    spike_mask_curr: int = 0
    spike_mask_prev: int = 0

    def forward_intrinsic(self) -> None:
        """Advance the intrinsic oscillator: keep the old mask and toggle the lowest bit."""
        self.spike_mask_prev = self.spike_mask_curr
        self.spike_mask_curr ^= 1