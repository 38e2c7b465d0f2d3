# binarybrain

A small simulated brain made of binary neurons. Each neuron holds 64 one-bit
synapses packed into a single integer. On every tick the network does four things:

1. It fills its sensor pool with random bits, one per channel.
2. It updates a set of reward bits.
3. It fires each neuron whose synapse word agrees with the first 64 sensor bits
   on more than half of its 64 bits. Agreement is measured with XNOR and a
   popcount. Each firing adds one to that neuron's usage counter.
4. It flips synapse bits that disagree with the neuron's outcome, each with
   probability `config.FLIP_PROB`.

Once the accumulated tick time reaches `config.PRUNE_FREQ` seconds, a
structural pass runs. It re-randomises the weight word of every neuron whose
usage counter is still zero, then resets all usage counters.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Usage

```python
from binarybrain.network import Network

net = Network(1024, seed=42)     # seed is optional; it makes runs repeatable
for _ in range(200):
    net.step(0.010)              # advance one 10 ms tick

bus = net.reward                 # a property, not a method
print(bus.r_pos, bus.r_neg, bus.s, bus.h)
```

`Network` exposes read-only views of its state:

- `neurons`: a tuple of `Neuron` records.
- `weights`: a tuple of packed 64-bit weight words, one per neuron.
- `usage_counters`: a tuple of firing counts since the last structural pass.
- `sensors`: the network's `SensorPool`.
- `actuators`: the network's `ActuatorPool`.

Passing a negative neuron count raises `ValueError`.

### Reward bits

`RewardBus` is a dataclass with four flags:

- `r_pos`: pleasure. Defaults to `False`.
- `r_neg`: pain or danger. Defaults to `False`.
- `s`: surprise. Defaults to `False`.
- `h`: homeostasis is OK. Defaults to `True`.

`update(prediction_err, danger_flag, firing_rate_dev)` recomputes them as follows:

- `s` is set when the prediction error exceeds 0.5.
- `r_neg` follows `danger_flag`.
- `h` is set when the firing-rate deviation is below 0.1.
- `r_pos` is set only when `s` and `h` hold and there is no danger.

```python
from binarybrain.reward_bus import RewardBus

bus = RewardBus()
bus.update(1.0, False, 0.0)
assert bus.s and bus.h and bus.r_pos
```

### Building blocks

- `binarybrain.synapse.xnor_popcount(a, b)` counts the bits on which two 64-bit
  words agree.
- `binarybrain.synapse.SynapseBlock` holds a list of weight words in `weights`
  and reports their number as `word_count`. Its `dot_xnor_popcount(a)` method
  sums `xnor_popcount` over the activity words `a` and the weights. It raises
  `ValueError` if `a` is shorter than the block.
- `binarybrain.kernels.plasticity_step(pre_spike, synapse_words, flip_prob256)`
  returns a new list of words. In that list, the lowest bit of each word is
  flipped wherever it differs from the lowest bit of the matching presynaptic
  word, provided `flip_prob256` is non-zero. It raises `ValueError` in two
  cases: if `flip_prob256` is outside 0..255, or if `pre_spike` is shorter
  than `synapse_words`.
- `binarybrain.kernels.structural_pass(synapse_words, usage_counters, prune_threshold)`
  returns a new list in which every word whose usage counter is below the
  threshold is cleared to zero. It raises `ValueError` if the two sequences
  differ in length.
- `binarybrain.neuron.Neuron` holds the state of one neuron: `id`, coordinates
  `x`, `y` and `z`, `phase`, `target_rate`, and the spike masks
  `spike_mask_curr` and `spike_mask_prev`. Its `forward_intrinsic()` method
  copies the current mask into the previous one, then toggles the lowest bit of
  the current mask.
- `binarybrain.pools.SensorPool` and `binarybrain.pools.ActuatorPool` are
  fixed-size, zero-initialised byte pools. Each keeps its bytes in a
  `bytearray` named `data`, and `len()` gives the number of channels.

Tunables live in `binarybrain.config`:

- `TILE_BITS`
- `TICK_SEC`
- `PRUNE_FREQ`
- `FLIP_PROB`
- `WORD_MASK`
- `COORD_MASK`
- `NEURON_ID_MAX`

## What it does not do

- There is no way to feed real inputs to the network. On each tick, `step`
  overwrites the sensor pool with random bits.
- The actuator pool is never written, so the network produces no outputs.
- The network always updates its reward bits from zero prediction error, no
  danger and zero rate deviation. After a tick, `s` and `r_pos` are therefore
  false and `h` is true.
- The network computes its forward pass, plasticity and structural pass
  internally. It does not use `binarybrain.kernels`, the `forward_intrinsic`
  oscillator or neuron phases.
- Everything runs in plain Python on the CPU. There is no command-line tool and
  no way to save or load a network.

## Tests

```
pytest
```