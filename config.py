from enum import Enum

from errors import ConfigError


class Policy(Enum):
    FIFO = 'FIFO'
    LRU = 'LRU'
    OPTIMAL = 'OPTIMAL'


POLICY_ALIASES = {
    'FIFO': Policy.FIFO,
    'LRU': Policy.LRU,
    'OPTIMAL': Policy.OPTIMAL,
    'OPT': Policy.OPTIMAL,
}


def parse_policy(name):
    if isinstance(name, Policy):
        return name
    try:
        return POLICY_ALIASES[str(name).strip().upper()]
    except KeyError:
        raise ConfigError(f"Unknown algorithm: {name}") from None


class SimulatorConfig:
    """Sizes of every table plus the replacement policy, fixed for a run."""

    FIELDS = ('page_size', 'num_frames', 'num_pages', 'num_backing_slots')

    def __init__(self, page_size, num_frames, num_pages, num_backing_slots,
                 policy=Policy.FIFO):
        self.page_size = page_size
        self.num_frames = num_frames
        self.num_pages = num_pages
        self.num_backing_slots = num_backing_slots
        self.policy = parse_policy(policy)

    def validate(self):
        for field in self.FIELDS:
            value = getattr(self, field)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigError(f"Invalid {field.replace('_', ' ')}: {value!r}")

        # The backing store is addressed by page number
        if self.num_backing_slots < self.num_pages:
            raise ConfigError(
                f"Backing store has {self.num_backing_slots} slots "
                f"but {self.num_pages} pages need one each")
        return self

    def with_policy(self, policy):
        return SimulatorConfig(self.page_size, self.num_frames, self.num_pages,
                               self.num_backing_slots, policy)

    def __repr__(self):
        return (f"SimulatorConfig(page_size={self.page_size}, "
                f"num_frames={self.num_frames}, num_pages={self.num_pages}, "
                f"num_backing_slots={self.num_backing_slots}, "
                f"policy={self.policy.value})")


def parse_config_line(line, policy=Policy.FIFO):
    """
    Parse 'page_size num_frames num_pages num_backing_slots' from a trace file.
    """
    tokens = line.split()
    if len(tokens) != len(SimulatorConfig.FIELDS):
        raise ConfigError(
            f"Expected {len(SimulatorConfig.FIELDS)} values on the configuration "
            f"line, got {len(tokens)}: {line.strip()!r}")

    values = []
    for field, token in zip(SimulatorConfig.FIELDS, tokens):
        try:
            values.append(int(token))
        except ValueError:
            raise ConfigError(
                f"Invalid {field.replace('_', ' ')}: {token!r}") from None

    return SimulatorConfig(*values, policy=policy).validate()
