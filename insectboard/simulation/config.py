"""Config — load run parameters from YAML files.

Validation limits, default file locations, and the log level live in
YAML and are parsed into a typed dataclass here.  Every key is optional;
missing keys fall back to the dataclass defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class SimulationConfig:
    """Top-level run configuration.

    Attributes:
        min_board_size: Smallest accepted board side length.
        max_board_size: Largest accepted board side length.
        min_entities: Smallest accepted insect or food count.
        max_insects: Largest accepted insect count.
        max_food_points: Largest accepted food count.
        input_path: Scenario file read when no path is given on the CLI.
        output_path: Result file written when no path is given on the CLI.
        log_level: Logging level name used when neither the CLI nor the
            environment overrides it.
    """

    min_board_size: int = 4
    max_board_size: int = 1000
    min_entities: int = 1
    max_insects: int = 16
    max_food_points: int = 200

    input_path: str = "input.txt"
    output_path: str = "output.txt"
    log_level: str = "WARNING"

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            min_board_size=data.get("min_board_size", cls.min_board_size),
            max_board_size=data.get("max_board_size", cls.max_board_size),
            min_entities=data.get("min_entities", cls.min_entities),
            max_insects=data.get("max_insects", cls.max_insects),
            max_food_points=data.get("max_food_points", cls.max_food_points),
            input_path=data.get("input_path", cls.input_path),
            output_path=data.get("output_path", cls.output_path),
            log_level=data.get("log_level", cls.log_level),
        )
