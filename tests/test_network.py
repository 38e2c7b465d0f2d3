import pytest

from binarybrain.config import COORD_MASK, TICK_SEC, WORD_MASK
from binarybrain.network import Network


def test_step_on_large_network():
    net = Network(1024, seed=1)
    net.step(0.010)
    assert len(net.neurons) == 1024
    assert all(n.spike_mask_curr in (0, 1) for n in net.neurons)
    assert all(0 <= w <= WORD_MASK for w in net.weights)


def test_reward_after_step_reflects_zero_statistics():
    net = Network(8, seed=2)
    net.step(TICK_SEC)
    bus = net.reward
    assert (bus.r_pos, bus.r_neg, bus.s, bus.h) == (False, False, False, True)


def test_neurons_are_initialised_in_order():
    net = Network(5, seed=3)
    assert [n.id for n in net.neurons] == list(range(5))
    assert [n.x for n in net.neurons] == list(range(5))
    assert all(n.target_rate == 128 for n in net.neurons)


def test_coordinates_wrap_at_sixteen_bits():
    net = Network(COORD_MASK + 3, seed=0)
    assert net.neurons[-1].x == (COORD_MASK + 2) & COORD_MASK


def test_usage_counts_spikes_before_structural_pass():
    net = Network(32, seed=4)
    net.step(TICK_SEC)
    assert list(net.usage_counters) == [n.spike_mask_curr for n in net.neurons]


def test_structural_pass_resets_usage():
    net = Network(32, seed=5)
    net.step(1.0)
    assert all(c == 0 for c in net.usage_counters)


def test_spike_buffers_shift_each_tick():
    net = Network(16, seed=6)
    net.step(TICK_SEC)
    first = [n.spike_mask_curr for n in net.neurons]
    net.step(TICK_SEC)
    assert [n.spike_mask_prev for n in net.neurons] == first


def test_sensors_are_binary():
    net = Network(64, seed=8)
    net.step(TICK_SEC)
    assert set(net.sensors.data) <= {0, 1}
    assert len(net.actuators) == 64


def test_same_seed_is_deterministic():
    a = Network(16, seed=7)
    b = Network(16, seed=7)
    for _ in range(5):
        a.step(0.3)
        b.step(0.3)
    assert a.weights == b.weights
    assert a.usage_counters == b.usage_counters


def test_empty_network_steps():
    net = Network(0, seed=0)
    net.step(2.0)
    assert net.weights == ()


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Network(-1)