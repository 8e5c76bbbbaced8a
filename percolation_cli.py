import argparse
import sys
import time

import loguru

from percolation_stats import PercolationStats
from square_percolation import InvalidArgument
from threshold_sweep import extrapolate_threshold, sweep_thresholds

logger = loguru.logger

DEFAULT_LSTEP = 10
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def get_parser():
    parser = argparse.ArgumentParser(
        description="Estimate the site percolation threshold of an n by n grid by Monte Carlo simulation."
    )

    parser.add_argument('n', type=int, help="Size of the square grid (n x n); the smallest size when sweeping.")
    parser.add_argument('trials', type=int, help="The number of Monte Carlo trials per grid size.")

    parser.add_argument(
        '--Lmax',
        type=int,
        default=None,
        help="Sweep grid sizes from n up to Lmax and extrapolate pc(infinity).",
    )
    parser.add_argument(
        '--Lstep',
        type=int,
        default=DEFAULT_LSTEP,
        help="Step size for increasing the grid size during a sweep.",
    )
    parser.add_argument('--seed', type=int, default=None, help="Seed for the random site generator.")
    parser.add_argument('--log-level', default="INFO", choices=LOG_LEVELS, help="Log level for stderr output.")
    parser.add_argument('--quiet', action='store_true', help="Only log warnings and errors.")

    return parser


def configure_logging(quiet, level):
    """Replace loguru's default sink with a stderr sink at the chosen level."""
    logger.remove()
    logger.add(sys.stderr, level="WARNING" if quiet else level)


def run_single(n, trials, seed=None):
    timer = time.perf_counter()
    stats = PercolationStats(n, trials, seed=seed)
    stats.report()
    print(f"{time.perf_counter() - timer:.5f} seconds")
    return stats


def run_sweep(Lmin, Lmax, Lstep, trials, seed=None):
    timer = time.perf_counter()
    results = sweep_thresholds(Lmin, Lmax, Lstep, trials, seed=seed)

    print("=" * 60)
    print(f"{'n':>6} {'mean':>12} {'stddev':>12} {'95% low':>12} {'95% high':>12}")
    for L, mean, std, lo, hi in zip(results['L'], results['means'], results['stds'], results['lows'], results['highs']):
        print(f"{int(L):>6} {mean:>12.6f} {std:>12.6f} {lo:>12.6f} {hi:>12.6f}")
    print("=" * 60)

    if len(results['L']) >= 2:
        fit = extrapolate_threshold(results['L'], results['means'])
        print(f"pc(infinity) = {fit['pc_inf']:.6f}, R^2 = {fit['R2']:.4f}")
    else:
        logger.info("only one grid size in the sweep, skipping extrapolation")

    print(f"{time.perf_counter() - timer:.5f} seconds")
    return results


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)
    configure_logging(args.quiet, args.log_level)

    try:
        if args.Lmax is None:
            run_single(args.n, args.trials, seed=args.seed)
        else:
            run_sweep(args.n, args.Lmax, args.Lstep, args.trials, seed=args.seed)
    except InvalidArgument as exc:
        parser.error(str(exc))

    return 0


if __name__ == "__main__":
    sys.exit(main())
