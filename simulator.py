import argparse
import re
import sys
from collections import namedtuple

from address import PageSize
from frame_table import FrameTable, WRITE, frame_count
from memory_manager import SimulationStats
from replacement import make_policy


AccessRecord = namedtuple('AccessRecord', ['address', 'operation'])

TRACE_LINE_RE = re.compile(r"^\s*(?:0[xX])?([0-9A-Fa-f]+)\s+([RWrw])\s*$")


def parse_trace_line(line):
    m = TRACE_LINE_RE.match(line)
    if not m:
        return None
    return AccessRecord(int(m.group(1), 16), m.group(2).upper())


def read_trace(lines):
    """Yield AccessRecords from trace text, one `<hex-address> <R|W>` per line.

    Blank lines are skipped. The first malformed line ends the stream.
    """
    for line in lines:
        if not line.strip():
            continue
        record = parse_trace_line(line)
        if record is None:
            return
        yield record


class VirtualMemorySimulator:

    def __init__(self, algorithm='fifo', page_size=4, memory_size=128,
                 random_seed=None, verbose=False):
        self.algorithm = algorithm
        self.page_size = PageSize(page_size)
        self.memory_size = memory_size
        self.frame_table = FrameTable(frame_count(memory_size, page_size))
        self.policy, recognized = make_policy(algorithm, random_seed)
        self.stats = SimulationStats()
        self.verbose = verbose

        if not recognized and verbose:
            print(f"Unknown algorithm '{algorithm}', using {self.policy.name}")

    @property
    def policy_name(self):
        return self.policy.name

    def handle_memory_reference(self, address, operation):
        clock = self.stats.record_access()
        page = self.page_size.page_of(address)

        idx = self.frame_table.find(page)
        if idx is not None:
            self.frame_table.touch(idx, operation, clock)
            if self.verbose:
                print(f"HIT: Page {page} in frame {idx}. Dirty: {self.frame_table[idx].dirty}")
            return True

        victim = self.policy.select_victim(self.frame_table)
        frame = self.frame_table[victim]
        self.stats.record_fault(is_dirty_replacement=frame.dirty)
        if self.verbose:
            print(f"FAULT: Page {page}")
            if not frame.is_empty():
                state = "Dirty" if frame.dirty else "Clean"
                print(f"REMOVING: {state} page {frame.resident_page} from frame {victim}")

        self.frame_table.load(victim, page, operation, clock)
        if self.verbose:
            print(f"LOADED: Page {page} into frame {victim}. Dirty: {operation == WRITE}")
        return False

    def run(self, records):
        for record in records:
            self.handle_memory_reference(record.address, record.operation)
        return self.stats

    def run_simulation(self, filename):
        # Undecodable bytes become U+FFFD so the line fails to parse and ends the stream
        with open(filename, 'r', encoding='ascii', errors='replace') as f:
            return self.run(read_trace(f))


def format_report(memory_size, page_size, policy_name, stats):
    return (f"Memory size: {memory_size} KB\n"
            f"Page size: {page_size} KB\n"
            f"Replacement policy: {policy_name}\n"
            f"Memory accesses: {stats.access_count}\n"
            f"Page faults: {stats.fault_count}\n"
            f"Pages written: {stats.writeback_count}")


def print_report(simulator):
    print(format_report(simulator.memory_size, simulator.page_size.size_bytes,
                        simulator.policy_name, simulator.stats))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Replay a memory trace and count page faults and writebacks.")
    parser.add_argument("algorithm", help="fifo, lru or 2a (second chance); anything else uses random")
    parser.add_argument("tracefile", help="trace file with one '<hex-address> <R|W>' per line")
    parser.add_argument("page_size", type=int, help="page size (same unit as memory size)")
    parser.add_argument("memory_size", type=int, help="physical memory size")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random policy")
    parser.add_argument("--verbose", "-v", action="store_true", help="print every hit, fault and eviction")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        simulator = VirtualMemorySimulator(algorithm=args.algorithm,
                                           page_size=args.page_size,
                                           memory_size=args.memory_size,
                                           random_seed=args.seed,
                                           verbose=args.verbose)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        simulator.run_simulation(args.tracefile)
    except OSError as e:
        print(f"Error opening file {args.tracefile}: {e}", file=sys.stderr)
        return 1

    print_report(simulator)
    return 0


if __name__ == '__main__':
    sys.exit(main())
