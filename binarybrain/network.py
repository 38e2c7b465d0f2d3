"""A binary spiking network driven tick by tick."""

import random

from . import config
from .neuron import Neuron
from .pools import ActuatorPool, SensorPool
from .reward_bus import RewardBus
from .synapse import SynapseBlock, xnor_popcount


class Network:
    """Neurons with one packed weight word each, trained by stochastic bit flips."""

    def __init__(self, num_neurons: int, seed: int | None = None) -> None:
        if num_neurons < 0:
            raise ValueError(f"num_neurons must be non-negative, got {num_neurons}")
        self._rng = random.Random(seed)
        self._neurons = [
            Neuron(id=i, x=i & config.COORD_MASK) for i in range(num_neurons)
        ]
        self._synapses = SynapseBlock([self._random_word() for _ in range(num_neurons)])
        self._usage = [0] * num_neurons
        self._sensors = SensorPool(num_neurons)
        self._actuators = ActuatorPool(num_neurons)
        self._reward = RewardBus()
        self._structural_timer = 0.0

    @property
    def reward(self) -> RewardBus:
        """The reward bits of the last tick."""
        return self._reward

    @property
    def neurons(self) -> tuple[Neuron, ...]:
        return tuple(self._neurons)

    @property
    def weights(self) -> tuple[int, ...]:
        return tuple(self._synapses.weights)

    @property
    def usage_counters(self) -> tuple[int, ...]:
        return tuple(self._usage)

    @property
    def sensors(self) -> SensorPool:
        return self._sensors

    @property
    def actuators(self) -> ActuatorPool:
        return self._actuators

    def step(self, dt_sec: float) -> None:
        """Run one clock tick of ``dt_sec`` seconds."""
        self._sense()
        self._compute_reward()
        self._forward_pass()
        self._apply_plasticity()
        self._structural_timer += dt_sec
        if self._structural_timer >= config.PRUNE_FREQ:
            self._structural_pass()
            self._structural_timer = 0.0

    def _random_word(self) -> int:
        return self._rng.getrandbits(config.TILE_BITS)

    def _sense(self) -> None:
        data = self._sensors.data
        data[:] = bytes(self._rng.getrandbits(1) for _ in range(len(data)))

    def _compute_reward(self) -> None:
        self._reward.update(0.0, False, 0.0)

    def _pre_word(self) -> int:
        bits = self._sensors.data[: config.TILE_BITS]
        return sum((value & 1) << j for j, value in enumerate(bits))

    def _forward_pass(self) -> None:
        pre = self._pre_word()
        threshold = config.TILE_BITS // 2
        for i, (neuron, weight) in enumerate(zip(self._neurons, self._synapses.weights)):
            spike = xnor_popcount(pre, weight) > threshold
            neuron.spike_mask_prev = neuron.spike_mask_curr
            neuron.spike_mask_curr = 1 if spike else 0
            if spike:
                self._usage[i] += 1

    def _apply_plasticity(self) -> None:
        pre = self._pre_word()
        weights = self._synapses.weights
        for i, neuron in enumerate(self._neurons):
            post = neuron.spike_mask_curr & 1
            wrong = pre ^ (config.WORD_MASK if post else 0)
            for b in range(config.TILE_BITS):
                if wrong >> b & 1 and self._rng.random() < config.FLIP_PROB:
                    weights[i] ^= 1 << b

    def _structural_pass(self) -> None:
        weights = self._synapses.weights
        for i, used in enumerate(self._usage):
            if used == 0:
                weights[i] = self._random_word()
            self._usage[i] = 0