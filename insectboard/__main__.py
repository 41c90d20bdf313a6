"""Entry point for ``python -m insectboard``.

Loads the YAML config, reads and validates a scenario file, plays every
insect's turn, and writes one result line per insect (or the single
validation failure) to the output file.  With ``--view`` the turns are
played inside a Pygame window first.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from insectboard.logging_config import configure_logging
from insectboard.simulation.config import SimulationConfig
from insectboard.simulation.engine import SimulationEngine
from insectboard.simulation.errors import SimulationError
from insectboard.simulation.loader import load_scenario
from insectboard.simulation.report import write_error, write_results
from insectboard.ui.pygame_client import PygameRenderer

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the command line parser."""
    parser = argparse.ArgumentParser(
        prog="insectboard",
        description="Insectboard - foraging insects on a square grid",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml if present)",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=pathlib.Path,
        default=None,
        help="Scenario file to read (default: config input_path)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=pathlib.Path,
        default=None,
        help="Result file to write (default: config output_path)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Logging level, e.g. DEBUG or INFO (default: config log_level)",
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="Watch the turns in a Pygame window before writing results",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=24,
        help="Pixel size per grid cell in the viewer (default: 24)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=1.0,
        help="Insect turns per second in the viewer (default: 1)",
    )
    return parser


def _load_config(path: pathlib.Path | None) -> SimulationConfig:
    if path is not None:
        return SimulationConfig.from_yaml(path)
    if _DEFAULT_CONFIG.is_file():
        return SimulationConfig.from_yaml(_DEFAULT_CONFIG)
    return SimulationConfig()


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, run the simulation, write the output file.

    Returns:
        Process exit status: 0 when results were written, 1 when the
        scenario was rejected and the failure message was written instead.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args.config)
    except FileNotFoundError:
        parser.error(f"config file not found: {args.config}")
    configure_logging(level=args.log_level, default_level=config.log_level)

    input_path = args.input or pathlib.Path(config.input_path)
    output_path = args.output or pathlib.Path(config.output_path)

    try:
        scenario = load_scenario(input_path, config)
    except FileNotFoundError:
        parser.error(f"input file not found: {input_path}")
    except SimulationError as exc:
        logger.error("Scenario rejected: %s", exc)
        write_error(output_path, exc)
        return 1

    engine = SimulationEngine.from_scenario(scenario)
    if args.view:
        renderer = PygameRenderer(
            engine=engine,
            cell_size=args.cell_size,
            turns_per_second=args.speed,
        )
        renderer.run()

    write_results(output_path, engine.run())
    logger.info("Wrote %d results to %s", len(engine.results), output_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
