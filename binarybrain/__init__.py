"""Binary spiking network with reward bits, XNOR-popcount synapses and bit-flip plasticity."""

__version__ = "0.1.0"
__all__ = ["config", "kernels", "network", "neuron", "pools", "reward_bus", "synapse"]