import dataclasses

import pytest

from bogglesolver.config import BoardConfig, ConfigError


def test_defaults():
    cfg = BoardConfig()
    assert cfg.dims == (4, 4)
    assert cfg.num_cells == 16
    assert cfg.max_length == 16
    assert cfg.min_length == 3


def test_max_length_defaults_to_board_size():
    assert BoardConfig(5, 3).max_length == 15
    assert BoardConfig(5, 3, 10).max_length == 10


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(width=1),
        dict(height=1),
        dict(width=0, height=0),
        dict(min_length=1),
        dict(max_length=17),
        dict(min_length=5, max_length=4),
        dict(width=2, height=2, min_length=5),
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(ConfigError):
        BoardConfig(**kwargs)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        BoardConfig(min_length=0)


def test_config_is_frozen():
    cfg = BoardConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.width = 5
