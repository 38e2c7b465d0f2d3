"""Fixed-size byte pools for sensor inputs and actuator outputs."""


class _BytePool:
    """A fixed number of 8-bit channels, all starting at zero."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self.data = bytearray(count)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.data)})"


class SensorPool(_BytePool):
    """Sensor readings, one byte per channel."""

    def __len__(self) -> int:
        return len(self.data)


class ActuatorPool(_BytePool):
    """Actuator commands, one byte per channel."""

    def __len__(self) -> int:
        return len(self.data)