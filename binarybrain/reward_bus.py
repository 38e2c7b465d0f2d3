"""Global reward bits broadcast to every plasticity rule."""

from dataclasses import dataclass


@dataclass
class RewardBus:
    """Four reward bits: pleasure, pain, surprise and homeostasis."""

    r_pos: bool = False
    r_neg: bool = False
    s: bool = False
    h: bool = True

    def update(self, prediction_err: float, danger_flag: bool, firing_rate_dev: float) -> None:
        """Recompute the bits from prediction and firing-rate statistics."""
        self.s = prediction_err > 0.5
        self.r_neg = bool(danger_flag)
        self.h = firing_rate_dev < 0.1
        self.r_pos = self.s and not self.r_neg and self.h