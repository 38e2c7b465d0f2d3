"""Word-parallel plasticity rules over packed weight words."""

from typing import Sequence


def plasticity_step(
    pre_spike: Sequence[int], synapse_words: Sequence[int], flip_prob256: int
) -> list[int]:
    """Flip the lowest weight bit wherever it disagrees with the presynaptic bit.

    Flipping happens only when ``flip_prob256`` (0-255) is non-zero.
    Returns the updated words.
    """
    if not 0 <= flip_prob256 <= 0xFF:
        raise ValueError(f"flip_prob256 must be in 0..255, got {flip_prob256}")
    if len(pre_spike) < len(synapse_words):
        raise ValueError(
            f"pre_spike has {len(pre_spike)} words, need {len(synapse_words)}"
        )
    return [
        w ^ 1 if (p ^ w) & 1 and flip_prob256 > 0 else w
        for p, w in zip(pre_spike, synapse_words)
    ]


def structural_pass(
    synapse_words: Sequence[int], usage_counters: Sequence[int], prune_threshold: float
) -> list[int]:
    """Clear every word whose usage counter is below ``prune_threshold``."""
    if len(usage_counters) != len(synapse_words):
        raise ValueError(
            f"{len(usage_counters)} usage counters for {len(synapse_words)} words"
        )
    return [
        0 if used < prune_threshold else w
        for w, used in zip(synapse_words, usage_counters)
    ]