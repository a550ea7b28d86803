#!/usr/bin/env python3
"""
Benchmark a directional sampler with the settings of a config file.
"""

import argparse
import logging

from dirsampling import SamplingConfig
from dirsampling.benchmark import BENCHMARK_TIME, run_benchmark
from dirsampling.logger import SamplingLogger, setup_logging

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description='Benchmark directional sampling',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_benchmark.py --config configs/base.yaml
  python run_benchmark.py distribution=watson kappa=-20
        """
    )
    parser.add_argument('--config', help='Path to configuration file (YAML)')
    parser.add_argument('--min-run-time', type=float, default=BENCHMARK_TIME)
    parser.add_argument('overrides', nargs='*', help='key=value overrides')
    args = parser.parse_args()

    config = SamplingConfig.load(args.config, args.overrides)
    setup_logging(config.verbosity)
    logger.debug(f"Final configuration: {config}")

    logger.info("=" * 60)
    logger.info(f"Benchmarking {config.distribution} (kappa={config.kappa}, n={config.num_samples})")
    timing_results = run_benchmark(config, min_run_time=args.min_run_time)
    logger.info(f"Mean time: {timing_results['mean_time']:.6f}s")
    logger.info(f"Median time: {timing_results['median_time']:.6f}s")
    logger.info(f"Std dev: {timing_results['std']:.6f}s")

    run_logger = SamplingLogger(config)
    run_logger.log_run(config, {}, timing_results)
    run_logger.finish()
    logger.info("=" * 60)


if __name__ == "__main__":
    main()
