import argparse
import sys

import matplotlib.pyplot as plt

from replacement import POLICY_NAMES
from simulator import VirtualMemorySimulator, read_trace

algorithms = ['fifo', 'lru', '2a', 'random']
DEFAULT_MEMORY_SIZES = [16, 32, 64, 128, 256, 512]


def compare_policies(trace_lines, page_size, memory_sizes, random_seed=None):
    """Run every policy over the same trace for each memory size.

    Each run gets its own simulator, so no state leaks between runs.
    Returns {algorithm: {memory_size: SimulationStats}}.
    """
    records = list(read_trace(trace_lines))
    results = {}
    for algorithm in algorithms:
        results[algorithm] = {}
        for memory_size in memory_sizes:
            simulator = VirtualMemorySimulator(algorithm=algorithm,
                                               page_size=page_size,
                                               memory_size=memory_size,
                                               random_seed=random_seed)
            results[algorithm][memory_size] = simulator.run(records)
    return results


def print_summary(results, memory_sizes):
    print(f"{'Algorithm':<15} {'Memory':<10} {'Page Faults':<15} {'Pages Written':<15} {'Fault Rate':<10}")
    print("-" * 66)
    for algorithm in algorithms:
        for memory_size in memory_sizes:
            s = results[algorithm][memory_size]
            print(f"{POLICY_NAMES[algorithm]:<15} {memory_size:<10} "
                  f"{s.fault_count:<15} {s.writeback_count:<15} {s.fault_rate:<10.4f}")


def plot_results(results, memory_sizes, output):
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle('Page Replacement Algorithm Comparison', fontsize=14, fontweight='bold')

    metrics = ['fault_count', 'writeback_count']
    titles = ['Page Faults', 'Pages Written']

    for ax, metric, title in zip(axes, metrics, titles):
        for algorithm in algorithms:
            ys = [getattr(results[algorithm][m], metric) for m in memory_sizes]
            ax.plot(memory_sizes, ys, marker='o', label=POLICY_NAMES[algorithm])
        ax.set_xscale('log', base=2)
        ax.set_xlabel('Memory size')
        ax.set_title(title)
        ax.grid(True, which='both', linestyle='--', alpha=0.4)
        ax.legend()

    plt.tight_layout()
    plt.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"\nGraph saved as '{output}'")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compare replacement policies over one trace.")
    parser.add_argument("tracefile")
    parser.add_argument("page_size", type=int)
    parser.add_argument("--memory-sizes",
                        default=",".join(map(str, DEFAULT_MEMORY_SIZES)),
                        help="comma-separated memory sizes")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default="algorithm_comparison.png")
    args = parser.parse_args(argv)

    memory_sizes = [int(x) for x in args.memory_sizes.split(",") if x.strip()]

    print("Running simulations...")
    try:
        with open(args.tracefile, 'r', encoding='ascii', errors='replace') as f:
            results = compare_policies(f, args.page_size, memory_sizes, args.seed)
    except OSError as e:
        print(f"Error opening file {args.tracefile}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_summary(results, memory_sizes)
    plot_results(results, memory_sizes, args.output)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
