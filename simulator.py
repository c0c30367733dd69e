import argparse
import sys
from enum import Enum

from config import Policy, POLICY_ALIASES
from errors import MalformedRecord, SimulatorError
from memory_manager import BackingStore, PhysicalMemory, Statistics
from page_table import PageState, PageTable
from replacement import make_policy
from trace_reader import DEBUG, NODEBUG, PRINT, READ, WRITE, read_trace


class AccessResult(Enum):
    HIT = 'hit'
    MISS = 'miss'


class VirtualMemorySimulator:

    def __init__(self, config, debug=False):
        config.validate()
        self.config = config
        self.page_size = config.page_size
        self.num_pages = config.num_pages
        self.page_table = PageTable(num_pages=config.num_pages)
        self.physical_memory = PhysicalMemory(num_frames=config.num_frames)
        self.backing_store = BackingStore(config.num_backing_slots)
        self.stats = Statistics()
        self.replacement = make_policy(config.policy)
        self.debug = debug
        self._in_batch = False

    @property
    def algorithm(self):
        return self.replacement.name

    @property
    def current_time(self):
        return self.stats.pages_referenced

    def _trace(self, message):
        if self.debug:
            print(message)

    def parse_address(self, address, line_number=None):
        if address < 0:
            raise MalformedRecord(f"negative address {address}", line_number)

        page_num = address // self.page_size
        if page_num >= self.num_pages:
            raise MalformedRecord(
                f"address 0x{address:x} is page {page_num}, "
                f"outside the {self.num_pages}-page table", line_number)
        return page_num

    def access(self, operation, page_number):
        """
        Process one reference to page_number and report whether it hit.

        OPTIMAL needs the rest of the trace for its decisions, so it only
        accepts references through run_batch.
        """
        if self.replacement.needs_lookahead and not self._in_batch:
            raise ValueError(f"{self.algorithm} algorithm requires the full trace; use run_batch")
        if operation not in (READ, WRITE):
            raise MalformedRecord(f"unknown operation {operation!r}")
        if not 0 <= page_number < self.num_pages:
            raise MalformedRecord(
                f"page {page_number} outside the {self.num_pages}-page table")

        return self._reference(operation, page_number)

    def access_record(self, record):
        page_number = self.parse_address(record.address, record.line_number)
        self._trace_record(record, page_number)
        return self.access(record.operation, page_number)

    def run_batch(self, records):
        """
        Process a whole sequence of access records in one call.

        Every address is translated before the first reference, so a bad
        record leaves the simulator untouched.
        """
        page_numbers = [self.parse_address(record.address, record.line_number)
                        for record in records]

        if self.replacement.needs_lookahead:
            self.replacement.load(page_numbers)

        results = []
        self._in_batch = True
        try:
            for position, (record, page_number) in enumerate(zip(records, page_numbers)):
                if self.replacement.needs_lookahead:
                    self.replacement.position = position
                self._trace_record(record, page_number)
                results.append(self.access(record.operation, page_number))
        finally:
            self._in_batch = False
            if self.replacement.needs_lookahead:
                self.replacement.unload()

        self.recompute_mapped_count()
        return results

    def _trace_record(self, record, page_number):
        self._trace(f"Operation: {record.operation} Address: {record.address_hex} "
                    f"Page number: {page_number}")

    def _reference(self, operation, page_number):
        current_time = self.stats.record_reference()
        is_write = operation == WRITE

        frame = self.physical_memory.find_page(page_number)
        if frame is not None:
            frame.touch(current_time, is_write)
            self._trace("Page hit")
            return AccessResult.HIT

        self._trace("Page miss")
        self.stats.record_page_miss()

        frame = self.physical_memory.find_free_frame()
        if frame is not None:
            self._trace(f"Empty frame found at frame {frame.frame_number}")
        else:
            frame = self.replacement.select_victim(self.physical_memory)
            self._trace(f"{self.algorithm} victim found at frame {frame.frame_number}")
            self.evict(frame, page_number)

        self.install(frame, page_number, is_write)
        return AccessResult.MISS

    def evict(self, frame, incoming_page):
        victim = self.page_table.get_entry(frame.resident_page)
        is_dirty = frame.dirty

        if is_dirty:
            self.backing_store.write(victim.page_number)
            self._trace(f"Frame {frame.frame_number} stolen and written to swapspace")

        victim.evict(written_to_disk=is_dirty)
        self.stats.record_frame_stolen(is_dirty=is_dirty)

        # Recovery concerns the page being faulted in, not the victim
        incoming = self.page_table.get_entry(incoming_page)
        if incoming.on_disk and not incoming.is_resident():
            self.stats.record_swap_recovery()
            self.backing_store.clear(incoming_page)
            incoming.on_disk = False
            self._trace(f"Page {incoming_page} recovered from swapspace")

    def install(self, frame, page_number, is_write):
        frame.install(page_number, self.current_time, is_write)
        self.page_table.get_entry(page_number).map_to(frame.frame_number)
        if is_write:
            self._trace("Dirty bit set")

    def recompute_mapped_count(self):
        self.stats.pages_mapped = self.page_table.count_mapped()
        return self.stats.pages_mapped

    def statistics(self):
        self.recompute_mapped_count()
        return self.stats.snapshot()


def format_config(config):
    return (f"Page size: {config.page_size}\n"
            f"Num frames: {config.num_frames}\n"
            f"Num pages: {config.num_pages}\n"
            f"Num backing blocks: {config.num_backing_slots}\n"
            f"Reclaim algorithm: {config.policy.value}")


def format_memory_state(simulator):
    simulator.recompute_mapped_count()
    return format_report(simulator.page_table, simulator.physical_memory, simulator.stats)


def format_report(page_table, frames, stats):
    lines = ["Page Table"]
    for entry in page_table:
        if entry.state is PageState.NEVER_MAPPED:
            lines.append(f"{entry.page_number:>5} type:{entry.state.value}")
        else:
            frame = entry.frame if entry.frame is not None else -1
            lines.append(f"{entry.page_number:>5} type:{entry.state.value} "
                         f"framenum:{frame} ondisk:{int(entry.on_disk)}")

    lines.append("Frame Table")
    for frame in frames:
        if not frame.occupied:
            lines.append(f"{frame.frame_number:>5} inuse:0")
        else:
            lines.append(f"{frame.frame_number:>5} inuse:1 dirty:{int(frame.dirty)} "
                         f"first_use:{frame.load_time} last_use:{frame.last_access_time}")

    lines.append(str(stats))
    return "\n".join(lines)


def run_simulation(filename, algorithm=Policy.FIFO, debug=False):
    trace = read_trace(filename, algorithm)
    # Tokens ahead of the configuration line see empty tables
    for token in trace.preamble:
        if token == PRINT:
            print(format_report([], [], Statistics()))
        else:
            debug = token == DEBUG

    simulator = VirtualMemorySimulator(trace.config, debug=debug)

    print(format_config(trace.config))

    if simulator.replacement.needs_lookahead:
        simulator.run_batch(trace.records)
    else:
        for entry in trace.entries:
            if entry == PRINT:
                print(format_memory_state(simulator))
            elif entry == DEBUG:
                simulator.debug = True
            elif entry == NODEBUG:
                simulator.debug = False
            else:
                simulator.access_record(entry)

    print(format_memory_state(simulator))
    return simulator


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Demand-paged virtual memory simulator for FIFO, LRU and OPTIMAL replacement')
    parser.add_argument("algorithm", type=str.upper, choices=sorted(POLICY_ALIASES),
                        help="Page replacement algorithm")
    parser.add_argument("tracefile", type=str, help="Name of the tracefile")
    parser.add_argument("-d", "--debug", action="store_true",
                        help="Print a trace line for every step of every reference")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        run_simulation(args.tracefile, args.algorithm, debug=args.debug)
    except (SimulatorError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
