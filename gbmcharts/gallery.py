"""Registry of demo chart groups and a runner that renders them."""

from typing import Callable, Dict, Iterable, List, Optional
from pathlib import Path
import numpy as np
from matplotlib.figure import Figure
from gbmcharts import charts

GALLERY: Dict[str, List[Callable[..., Figure]]] = {
    "scatter": [
        charts.line_and_scatter_plot,
        charts.data_labels_hover,
        charts.data_labels_on_the_plot,
        charts.gbm_scatter_plot,
    ],
    "bar": [
        charts.basic_bar_chart,
        charts.grouped_bar_chart,
        charts.stacked_bar_chart,
    ],
    "error_bar": [
        charts.basic_symmetric_error_bars,
        charts.bar_chart_with_error_bars,
    ],
    "candlestick": [
        charts.simple_candlestick_chart,
        charts.gbm_candlestick_chart,
    ],
    "ohlc": [
        charts.simple_ohlc_chart,
        charts.gbm_ohlc_chart,
    ],
}

# Demos fed by simulated paths; each gets its own random stream
RANDOMIZED = {
    charts.gbm_scatter_plot,
    charts.gbm_candlestick_chart,
    charts.gbm_ohlc_chart,
}

# Demos that can also write fixed-size image copies
EXPORTING = {
    charts.gbm_ohlc_chart,
}


def _seed_sequence(seed) -> np.random.SeedSequence:
    if isinstance(seed, np.random.SeedSequence):
        return seed
    return np.random.SeedSequence(seed)


def get_group(name: str) -> List[Callable[..., Figure]]:
    """Look up the demos of a group.

    Raises
    ------
    ValueError
        If the group does not exist
    """
    try:
        return GALLERY[name]
    except KeyError:
        raise ValueError(
            f"Unknown chart group '{name}'. "
            f"Choose from: {', '.join(GALLERY)}"
        ) from None


def run_group(
    name: str,
    output_dir: Optional[str] = None,
    show_plot: bool = True,
    seed=None,
    dpi: int = 150,
    export_images: bool = False,
    callback: Optional[Callable[[str, Optional[Path]], None]] = None,
) -> Dict[str, Figure]:
    """Render every demo of a group.

    Parameters
    ----------
    name : str
        Group name (see ``GALLERY``)
    output_dir : str, optional
        Directory to save ``<demo>.png`` files in. If None, nothing is saved.
    show_plot : bool, default=True
        Whether to display each figure
    seed : int or SeedSequence, optional
        Seed for the simulated demos. Each one receives an independent
        child stream.
    dpi : int, default=150
        Resolution of saved images
    export_images : bool, default=False
        Let demos that support it write fixed-size PNG and JPG copies
        next to their output file
    callback : callable, optional
        Called with ``(demo_name, output_path)`` after each demo renders

    Returns
    -------
    dict
        Figures keyed by demo name, in rendering order
    """
    demos = get_group(name)
    randomized = [demo for demo in demos if demo in RANDOMIZED]
    streams = iter(_seed_sequence(seed).spawn(len(randomized)))

    figures: Dict[str, Figure] = {}
    for demo in demos:
        demo_name = demo.__name__
        output_path = Path(output_dir) / f"{demo_name}.png" if output_dir else None

        kwargs = {
            "output_path": str(output_path) if output_path else None,
            "show_plot": show_plot,
            "dpi": dpi,
        }
        if demo in RANDOMIZED:
            kwargs["rng"] = np.random.default_rng(next(streams))
        if demo in EXPORTING:
            kwargs["export_images"] = export_images

        figures[demo_name] = demo(**kwargs)

        if callback:
            callback(demo_name, output_path)

    return figures


def run_gallery(
    groups: Optional[Iterable[str]] = None,
    output_dir: Optional[str] = None,
    show_plot: bool = True,
    seed=None,
    dpi: int = 150,
    export_images: bool = False,
    callback: Optional[Callable[[str, Optional[Path]], None]] = None,
) -> Dict[str, Dict[str, Figure]]:
    """Render several groups, all of them by default.

    Every group is validated before anything renders.

    Returns
    -------
    dict
        Per-group figure dicts keyed by group name
    """
    groups = list(GALLERY) if groups is None else list(groups)
    for name in groups:
        get_group(name)

    group_seeds = _seed_sequence(seed).spawn(len(groups))

    return {
        name: run_group(
            name,
            output_dir=output_dir,
            show_plot=show_plot,
            seed=group_seed,
            dpi=dpi,
            export_images=export_images,
            callback=callback,
        )
        for name, group_seed in zip(groups, group_seeds)
    }
