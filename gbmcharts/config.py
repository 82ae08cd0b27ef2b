"""Runtime configuration read from the environment and an optional .env file."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    # Also try loading from current directory
    load_dotenv()

DEFAULT_OUTPUT_DIR = "output"
DEFAULT_DPI = 150


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class GalleryConfig:
    """Settings for rendering the chart gallery.

    Parameters
    ----------
    output_dir : str, default="output"
        Directory where rendered charts are saved
    dpi : int, default=150
        Resolution of saved images
    seed : int, optional
        Seed for the GBM-driven charts. If None, every run differs.
    show_plot : bool, default=True
        Whether to display figures after rendering
    export_images : bool, default=False
        Whether charts that support it also write fixed-size image copies
    """

    output_dir: str = DEFAULT_OUTPUT_DIR
    dpi: int = DEFAULT_DPI
    seed: Optional[int] = None
    show_plot: bool = True
    export_images: bool = False

    @classmethod
    def from_env(cls, **overrides) -> "GalleryConfig":
        """Build a config from ``GBMCHARTS_*`` variables.

        Keyword arguments that are not None take precedence over the
        environment.

        Raises
        ------
        ValueError
            If GBMCHARTS_DPI or GBMCHARTS_SEED is not an integer, or the
            resulting dpi is not positive
        """
        output_dir = os.getenv("GBMCHARTS_OUTPUT_DIR", "") or DEFAULT_OUTPUT_DIR
        dpi = _parse_int("GBMCHARTS_DPI", os.getenv("GBMCHARTS_DPI", str(DEFAULT_DPI)))

        seed_str = os.getenv("GBMCHARTS_SEED", "")
        seed = _parse_int("GBMCHARTS_SEED", seed_str) if seed_str else None

        show_str = os.getenv("GBMCHARTS_SHOW", "true").lower()
        show_plot = show_str in ("true", "1", "yes")

        export_str = os.getenv("GBMCHARTS_EXPORT", "false").lower()
        export_images = export_str in ("true", "1", "yes")

        config = cls(
            output_dir=output_dir,
            dpi=dpi,
            seed=seed,
            show_plot=show_plot,
            export_images=export_images,
        )
        for key, value in overrides.items():
            if not hasattr(config, key):
                raise ValueError(f"Unknown config option: {key}")
            if value is not None:
                setattr(config, key, value)

        if config.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {config.dpi}")
        return config
