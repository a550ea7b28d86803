"""Minimal configuration system using Pydantic + OmegaConf."""

from __future__ import annotations

from typing import Optional

import numpy as np
from omegaconf import OmegaConf
from pydantic import BaseModel, Field, field_validator, model_validator


class SamplingConfig(BaseModel):
    """Main configuration class."""

    # Distribution parameters
    distribution: str = Field(default="vmf_stable", pattern="^(vmf|vmf_stable|watson|uniform)$")
    kappa: float = 10.0
    mean_direction: list[float] = Field(default_factory=lambda: [0.0, 0.0, 1.0])
    normalize_mean: bool = False
    random_mean_direction: bool = False
    num_samples: int = Field(default=1000, gt=0)

    # Generation settings
    seed: Optional[int] = 42
    output_dir: str = "generated_samples/"
    output_format: str = Field(default="npy", pattern="^(npy|pt)$")
    progress: bool = False

    # Logging
    verbosity: str = Field(default="info", pattern="^(debug|info|warning|error|critical)$")

    # Wandb
    wandb_project: Optional[str] = None
    wandb_mode: str = Field(default="disabled", pattern="^(online|offline|disabled)$")

    @field_validator("mean_direction")
    @classmethod
    def _three_components(cls, value: list[float]) -> list[float]:
        if len(value) != 3:
            raise ValueError(f"mean_direction must have 3 components, got {len(value)}")
        return value

    @model_validator(mode="after")
    def _check_parameters(self) -> "SamplingConfig":
        if self.distribution in ("vmf", "vmf_stable") and self.kappa < 0:
            raise ValueError(f"kappa must be non-negative for {self.distribution}, got {self.kappa}")
        if self.normalize_mean:
            norm = float(np.linalg.norm(self.mean_direction))
            if norm == 0:
                raise ValueError("mean_direction cannot be the zero vector")
            self.mean_direction = [c / norm for c in self.mean_direction]
            self.normalize_mean = False
        return self

    def to_dict(self) -> dict:
        return self.model_dump()

    @classmethod
    def load(cls, config_path: Optional[str] = None,
             overrides: Optional[list[str]] = None) -> "SamplingConfig":
        """
        Load config from file, merging with the defaults.

        Parameters
        ----------
        config_path : str or None
            YAML file with a subset of the fields.
        overrides : list of str or None
            Dotlist overrides such as ``["kappa=50", "distribution=watson"]``,
            applied last.
        """
        merged_config = OmegaConf.create(cls().model_dump())

        if config_path:
            merged_config = OmegaConf.merge(merged_config, OmegaConf.load(config_path))
        if overrides:
            merged_config = OmegaConf.merge(merged_config, OmegaConf.from_dotlist(overrides))

        return cls(**OmegaConf.to_container(merged_config))
