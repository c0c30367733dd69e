import sys

import matplotlib.pyplot as plt

from config import Policy
from simulator import VirtualMemorySimulator
from trace_reader import read_trace

algorithms = [Policy.FIFO, Policy.LRU, Policy.OPTIMAL]

metrics = ['misses', 'evictions', 'swap_writes', 'swap_recoveries']
titles = ['Page Misses', 'Frames Stolen', 'Swap Writes', 'Swap Recoveries']


def collect_results(trace_files, policies=algorithms):
    results = {}
    for trace_file in trace_files:
        results[trace_file] = {}
        trace = read_trace(trace_file)
        for policy in policies:
            simulator = VirtualMemorySimulator(trace.config.with_policy(policy))
            simulator.run_batch(trace.records)
            stats = simulator.stats
            results[trace_file][simulator.algorithm] = {
                'misses': stats.page_miss_instances,
                'evictions': stats.frame_stolen_instances,
                'swap_writes': stats.stolen_frames_written_to_swapspace,
                'swap_recoveries': stats.stolen_frames_recovered_from_swapspace,
            }
    return results


def plot_results(results, output='algorithm_comparison.png'):
    trace_files = list(results)
    names = list(next(iter(results.values())))

    fig, axes = plt.subplots(1, len(metrics), figsize=(5 * len(metrics), 5))
    fig.suptitle('Page Replacement Algorithm Comparison', fontsize=14, fontweight='bold')

    width = 0.8 / len(trace_files)
    x = range(len(names))
    legend_handles = []

    for idx, (metric, title) in enumerate(zip(metrics, titles)):
        ax = axes[idx]
        for n, trace_file in enumerate(trace_files):
            data = [results[trace_file][name][metric] for name in names]
            offset = (n - (len(trace_files) - 1) / 2) * width
            bars = ax.bar([i + offset for i in x], data, width, label=trace_file)

            if idx == 0:
                legend_handles.append(bars[0])

            for bar in bars:
                height = bar.get_height()
                ax.text(bar.get_x() + bar.get_width()/2., height,
                        f'{int(height)}', ha='center', va='bottom', fontsize=9)

        ax.set_title(title)
        ax.set_xticks(list(x))
        ax.set_xticklabels(names)
        ax.grid(axis='y', alpha=0.3)

    fig.legend(legend_handles, trace_files, loc='lower center',
               ncol=len(trace_files), frameon=True)

    plt.tight_layout()
    plt.subplots_adjust(bottom=0.15)
    plt.savefig(output, dpi=300, bbox_inches='tight')
    plt.close(fig)
    return output


def main(argv=None):
    trace_files = (argv if argv is not None else sys.argv[1:]) or ['traces/sample.txt']

    print("Running simulations...")
    results = collect_results(trace_files)

    for trace_file, by_policy in results.items():
        print(f"\n{trace_file}:")
        print(f"{'Algorithm':<10} {'Misses':<10} {'Stolen':<10} {'Writes':<10} {'Recovered':<10}")
        print("-" * 52)
        for name, r in by_policy.items():
            print(f"{name:<10} {r['misses']:<10} {r['evictions']:<10} "
                  f"{r['swap_writes']:<10} {r['swap_recoveries']:<10}")

    output = plot_results(results)
    print(f"\nGraph saved as '{output}'")


if __name__ == '__main__':
    main()
