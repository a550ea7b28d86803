"""
Benchmarking utilities for directional sampling.
"""

import numpy as np
from torch.utils import benchmark
from typing import Dict

from .config import SamplingConfig
from .sampler import sample_directions
from .scalar import check_random_state

# Default benchmark time
BENCHMARK_TIME = 2.0


def run_benchmark(config: SamplingConfig, min_run_time: float = BENCHMARK_TIME) -> Dict[str, float|str]:
    """
    Run benchmarking using torch.utils.benchmark.

    Parameters
    ----------
    config : SamplingConfig
        Experiment configuration.
    min_run_time : float, optional
        Minimum measured time in seconds.

    Returns
    -------
    dict
        Benchmark timing results.
    """
    generator = check_random_state(config.seed)
    mu = np.asarray(config.mean_direction, dtype=np.float64)

    def sample_func():
        return sample_directions(config.distribution, config.kappa, mu,
                                 config.num_samples, generator)

    timer = benchmark.Timer(
        stmt='sample_func()',
        globals={'sample_func': sample_func},
        label=f'{config.distribution} sampling',
        description=f'kappa={config.kappa}, n={config.num_samples}'
    )

    measurement = timer.blocked_autorange(
        min_run_time=min_run_time,
    )

    return {
        'mean_time': measurement.mean,
        'median_time': measurement.median,
        'std': float(np.std(measurement.raw_times)),
        'iterations per second': 1.0 / measurement.mean,
        'device': 'cpu'
    }
