import loguru
import numpy as np
from scipy.stats import linregress

from percolation_stats import PercolationStats
from square_percolation import InvalidArgument, isInteger

logger = loguru.logger

DEFAULT_EXPONENT = -3 / 4


def sweep_thresholds(Lmin, Lmax, Lstep, trials, seed=None):
    """
    Runs PercolationStats for every grid size L in Lmin..Lmax (step Lstep).

    Each size gets its own child seed so a seeded sweep is reproducible.
    Returns a dict of numpy arrays keyed 'L', 'means', 'stds', 'lows', 'highs'.
    """
    if not all(isInteger(x) for x in (Lmin, Lmax, Lstep, trials)):
        raise InvalidArgument("Lmin, Lmax, Lstep and trials must be integers")
    if Lmin <= 0 or Lstep <= 0:
        raise InvalidArgument("Lmin and Lstep must be positive integers")
    if Lmax < Lmin:
        raise InvalidArgument(f"Lmax ({Lmax}) must be >= Lmin ({Lmin})")
    if trials <= 0:
        raise InvalidArgument("trials count must be a positive integer")

    L_values = np.arange(Lmin, Lmax + 1, Lstep)
    seeds = np.random.SeedSequence(seed).spawn(len(L_values))

    means, stds, lows, highs = [], [], [], []
    for n_value, child in zip(L_values, seeds):
        logger.debug(f"simulate n = {n_value} with {trials} trials")
        stats = PercolationStats(int(n_value), trials, seed=child)
        means.append(stats.mean())
        stds.append(stats.stddev())
        lo, hi = stats.confidence_interval()
        lows.append(lo)
        highs.append(hi)

    return {
        'L': L_values,
        'means': np.array(means),
        'stds': np.array(stds),
        'lows': np.array(lows),
        'highs': np.array(highs),
    }


def extrapolate_threshold(L_values, means, exponent=DEFAULT_EXPONENT):
    """
    Fits mean critical probability against L^(exponent) and returns the
    intercept as the infinite-size threshold pc(infinity).
    """
    L_values = np.asarray(L_values, dtype=float)
    means = np.asarray(means, dtype=float)

    if len(L_values) != len(means):
        raise InvalidArgument("L_values and means must have the same length")
    if len(np.unique(L_values)) < 2:
        raise InvalidArgument("need at least two distinct grid sizes to extrapolate")

    X_scaling = L_values ** exponent
    fit = linregress(X_scaling, means)

    return {'pc_inf': float(fit.intercept), 'slope': float(fit.slope), 'R2': float(fit.rvalue ** 2)}
