"""Directional sample generation script."""

import argparse
import logging
import numpy as np
import torch
from pathlib import Path

from dirsampling import SamplingConfig, SphericalStatistics, sample_directions, sample_uniform_on_sphere
from dirsampling.logger import SamplingLogger, setup_logging
from dirsampling.scalar import check_random_state

logger = logging.getLogger(__name__)


def generate_samples(config: SamplingConfig) -> Path:
    """Generate samples based on configuration."""
    generator = check_random_state(config.seed)

    if config.random_mean_direction:
        mu = sample_uniform_on_sphere(generator)
    else:
        mu = np.asarray(config.mean_direction, dtype=np.float64)
    logger.debug(f"Mean direction: {mu}")

    samples = sample_directions(config.distribution, config.kappa, mu,
                                config.num_samples, generator, progress=config.progress)

    # Save samples
    Path(config.output_dir).mkdir(parents=True, exist_ok=True)
    filename = f"{config.distribution}_samples_kappa{config.kappa}_n{config.num_samples}_seed{config.seed}"

    if config.output_format == "pt":
        output_path = Path(config.output_dir) / f"{filename}.pt"
        torch.save(torch.from_numpy(samples), output_path)
    else:
        output_path = Path(config.output_dir) / f"{filename}.npy"
        np.save(output_path, samples)

    statistics = SphericalStatistics(samples).summary()
    logger.info(f"Generated {config.num_samples} samples -> {output_path}")
    logger.info(f"Mean resultant length: {statistics['mean_resultant_length']:.4f}")

    run_logger = SamplingLogger(config)
    run_logger.log_run(config, statistics)
    run_logger.finish()
    return output_path


def main():
    """Main function."""
    parser = argparse.ArgumentParser(description='Generate directional samples')
    parser.add_argument('--config', help='Config file path (optional)')
    parser.add_argument('overrides', nargs='*', help='key=value overrides, e.g. kappa=50')
    args = parser.parse_args()

    # Load configuration
    config = SamplingConfig.load(args.config, args.overrides)
    setup_logging(config.verbosity)

    generate_samples(config)


if __name__ == "__main__":
    main()
