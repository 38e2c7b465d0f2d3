"""Compile-time tunables and fixed-width value ranges."""

TILE_BITS = 64
"""Number of binary synapses packed into one weight word."""

TICK_SEC = 0.010
"""Nominal clock tick in seconds."""

PRUNE_FREQ = 1.0
"""Interval in seconds between structural passes."""

FLIP_PROB = 0.01
"""Base probability of a stochastic weight-bit flip."""

WORD_MASK = (1 << TILE_BITS) - 1
"""Mask that keeps a value inside one packed weight word."""

COORD_MASK = 0xFFFF
"""Mask of a 16-bit fixed-point coordinate."""

NEURON_ID_MAX = 0xFFFF_FFFF
"""Largest representable neuron identifier."""