import re

from config import Policy, parse_config_line
from errors import ConfigError, MalformedRecord

READ = 'r'
WRITE = 'w'

PRINT = 'print'
DEBUG = 'debug'
NODEBUG = 'nodebug'
CONTROL_TOKENS = (PRINT, DEBUG, NODEBUG)

HEX_ADDRESS = re.compile(r'^(0[xX])?[0-9a-fA-F]+$')


class AccessRecord:
    def __init__(self, operation, address, address_hex=None, line_number=None):
        self.operation = operation
        self.address = address
        self.address_hex = address_hex if address_hex is not None else format(address, 'x')
        self.line_number = line_number

    def __eq__(self, other):
        if not isinstance(other, AccessRecord):
            return NotImplemented
        return (self.operation, self.address) == (other.operation, other.address)

    def __repr__(self):
        return f"AccessRecord({self.operation!r}, 0x{self.address:x})"


def parse_access_record(line, line_number=None):
    """
    Split 'r1a2f' / 'w 0x1A2F' into the operation and the numeric address.
    """
    text = line.strip()
    if not text:
        raise MalformedRecord("empty access record", line_number)

    operation = text[0].lower()
    if operation not in (READ, WRITE):
        raise MalformedRecord(f"unknown operation {text[0]!r} in {text!r}", line_number)

    address_hex = text[1:].strip()
    if not HEX_ADDRESS.match(address_hex):
        raise MalformedRecord(f"invalid hexadecimal address {address_hex!r}", line_number)

    return AccessRecord(operation, int(address_hex, 16), address_hex, line_number)


class Trace:
    """
    A parsed trace file: the configuration line plus the remaining entries
    in file order. Each entry is either an AccessRecord or a control token.
    Control tokens that appear before the configuration line are kept apart
    in ``preamble``, since no simulator exists yet when they are seen.
    """

    def __init__(self, config, entries, preamble=None):
        self.config = config
        self.entries = entries
        self.preamble = preamble if preamble is not None else []

    @property
    def records(self):
        return [entry for entry in self.entries if isinstance(entry, AccessRecord)]


def is_skippable(line):
    stripped = line.strip()
    return not stripped or stripped.startswith('#')


def parse_trace(lines, policy=Policy.FIFO):
    config = None
    preamble = []
    entries = []

    for line_number, line in enumerate(lines, 1):
        if is_skippable(line):
            continue

        stripped = line.strip()
        if stripped in CONTROL_TOKENS:
            (preamble if config is None else entries).append(stripped)
        elif config is None:
            config = parse_config_line(stripped, policy)
        else:
            entries.append(parse_access_record(stripped, line_number))

    if config is None:
        raise ConfigError("Trace has no configuration line")

    return Trace(config, entries, preamble)


def read_trace(filename, policy=Policy.FIFO):
    with open(filename, 'r') as f:
        return parse_trace(f, policy)
