import pytest

from config import Policy, SimulatorConfig, parse_config_line, parse_policy
from errors import ConfigError


@pytest.mark.parametrize('name, policy', [
    ('FIFO', Policy.FIFO),
    ('lru', Policy.LRU),
    ('Optimal', Policy.OPTIMAL),
    ('opt', Policy.OPTIMAL),
    (Policy.LRU, Policy.LRU),
])
def test_parse_policy(name, policy):
    assert parse_policy(name) is policy


def test_unknown_policy():
    with pytest.raises(ConfigError):
        parse_policy('CLOCK')
    with pytest.raises(ConfigError):
        SimulatorConfig(16, 2, 8, 8, 'RAND')


def test_valid_config():
    config = SimulatorConfig(4096, 32, 128, 128, 'LRU').validate()
    assert config.policy is Policy.LRU
    assert 'policy=LRU' in repr(config)


@pytest.mark.parametrize('sizes', [
    (0, 2, 8, 8),
    (16, 0, 8, 8),
    (16, 2, 0, 8),
    (16, 2, 8, 0),
    (-16, 2, 8, 8),
    (16, True, 8, 8),
    (16.0, 2, 8, 8),
])
def test_non_positive_sizes(sizes):
    with pytest.raises(ConfigError):
        SimulatorConfig(*sizes).validate()


def test_backing_slots_must_cover_pages():
    with pytest.raises(ConfigError, match='slots'):
        SimulatorConfig(16, 2, 8, 7).validate()
    SimulatorConfig(16, 2, 8, 9).validate()


def test_with_policy():
    config = SimulatorConfig(16, 2, 8, 8, 'FIFO')
    other = config.with_policy('OPT')

    assert other.policy is Policy.OPTIMAL
    assert config.policy is Policy.FIFO
    assert other.num_pages == 8


def test_parse_config_line():
    config = parse_config_line("  16 4 32   32 ", 'LRU')
    assert (config.page_size, config.num_frames, config.num_pages,
            config.num_backing_slots) == (16, 4, 32, 32)


@pytest.mark.parametrize('line', ['16 4 32', '16 4 32 32 1', '16 four 32 32', '16 4 -1 32'])
def test_bad_config_line(line):
    with pytest.raises(ConfigError):
        parse_config_line(line)


def test_config_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_config_line('x')
