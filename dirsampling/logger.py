import logging
from typing import Optional

import wandb

from .config import SamplingConfig

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure root logger for the entire application."""

    format_string = "%(asctime)s - %(filename)s:%(lineno)d - %(levelname)s - %(message)s"

    logging_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=logging_level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True
    )


class SamplingLogger:
    """Logger for sampling runs with wandb compatibility."""

    def __init__(self, config: SamplingConfig):
        """
        Initialize logger.

        Parameters
        ----------
        config : SamplingConfig
            With ``wandb_mode="disabled"`` every call is a no-op.
        """
        self.config = config
        self.run = wandb.init(
            project=config.wandb_project,
            mode=config.wandb_mode,
            config=config.to_dict()
        )
        if config.wandb_mode != "disabled":
            logger.info(f"wandb initialized for project: {config.wandb_project}")

    def log_run(self, config: SamplingConfig, statistics: dict[str, float],
                timing_results: Optional[dict[str, float | str]] = None):
        """
        Log the summary of a sampling run.

        Parameters
        ----------
        config : SamplingConfig
            Run configuration.
        statistics : dict
            Output of ``SphericalStatistics.summary()``.
        timing_results : dict, optional
            Output of ``run_benchmark``.
        """
        result = {
            'distribution': config.distribution,
            'kappa': config.kappa,
            'num_samples': config.num_samples,
            'seed': config.seed,
            **statistics,
            **{k: v for k, v in (timing_results or {}).items() if k != 'device'}
        }
        self.run.log(result)
        return result

    def finish(self):
        """Clean up and finish logging."""
        self.run.finish()
