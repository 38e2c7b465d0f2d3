import pytest

from binarybrain.pools import ActuatorPool, SensorPool


@pytest.mark.parametrize("cls", [SensorPool, ActuatorPool])
def test_pool_starts_zeroed(cls):
    pool = cls(8)
    assert len(pool) == 8
    assert all(v == 0 for v in pool.data)


@pytest.mark.parametrize("cls", [SensorPool, ActuatorPool])
def test_pool_write_read_round_trip(cls):
    pool = cls(4)
    pool.data[2] = 200
    assert pool.data[2] == 200
    assert len(pool) == 4


@pytest.mark.parametrize("cls", [SensorPool, ActuatorPool])
def test_pool_rejects_values_beyond_a_byte(cls):
    pool = cls(2)
    with pytest.raises(ValueError):
        pool.data[0] = 256
    assert pool.data[0] == 0
    assert len(pool) == 2


@pytest.mark.parametrize("cls", [SensorPool, ActuatorPool])
def test_pool_rejects_negative_count(cls):
    with pytest.raises(ValueError):
        cls(-1)


def test_empty_pool():
    assert len(SensorPool(0)) == 0
    assert len(ActuatorPool(0)) == 0


def test_repr_names_class_and_size():
    assert repr(SensorPool(3)) == "SensorPool(3)"
    assert repr(ActuatorPool(5)) == "ActuatorPool(5)"