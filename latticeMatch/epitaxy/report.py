"""Text, CSV and plot output for lattice match results."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from latticeMatch.circular.interval_set import IntervalSet
from latticeMatch.epitaxy.matcher import MatchResult

SECTION_TITLES = {
    "x_coincident": "Possible coincident lattice matches with px, qx:",
    "y_coincident": "Possible coincident lattice matches with qy, py:",
    "commensurate": "Possible commensurate lattice matches:",
}


def degree_rows(ranges: IntervalSet) -> List[Tuple[float, float]]:
    """Return the ranges of a set as degree pairs, a full circle as 0 to 360."""

    return [
        (0.0, 360.0) if interval.is_circle() else interval.as_degrees() for interval in ranges
    ]


def format_ranges(ranges: IntervalSet, precision: int = 6) -> List[str]:
    """Format the ranges of a set as ``lower upper`` lines in degrees.

    Parameters:
        ranges: Normalized interval set.
        precision: Number of decimals.

    Returns:
        One line per range.
    """

    return [f"{lower:.{precision}f} {upper:.{precision}f}" for lower, upper in degree_rows(ranges)]


def format_report(result: MatchResult, precision: int = 6) -> str:
    """Render all result sections as text.

    Parameters:
        result: Lattice match result.
        precision: Number of decimals.

    Returns:
        Report text ending with a newline.
    """

    lines: List[str] = []
    for key, ranges in result.sections().items():
        lines.append(SECTION_TITLES[key])
        lines.extend(format_ranges(ranges, precision))
    return "\n".join(lines) + "\n"


def export_csv(
    result: MatchResult, output_dir: Path, logger: Optional[logging.Logger] = None
) -> Dict[str, Path]:
    """Write one CSV file per result section.

    Parameters:
        result: Lattice match result.
        output_dir: Output directory, created if missing.
        logger: Optional logger instance.

    Returns:
        Mapping of section names to written paths.
    """

    logger = logger or logging.getLogger(__name__)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written = {}
    for key, ranges in result.sections().items():
        csv_path = output_dir / f"{key}.csv"
        data = np.array(degree_rows(ranges), dtype=float).reshape(-1, 2)
        np.savetxt(csv_path, data, delimiter=",", header="lower_deg,upper_deg", comments="")
        written[key] = csv_path
        logger.info("Exported %s (%d ranges)", csv_path, len(ranges))
    return written


def plot_ranges(
    result: MatchResult, output_path: Path, logger: Optional[logging.Logger] = None
) -> Path:
    """Draw the result sections as arcs on a polar axis.

    Parameters:
        result: Lattice match result.
        output_path: PNG path.
        logger: Optional logger instance.

    Returns:
        Path of the written figure.
    """

    logger = logger or logging.getLogger(__name__)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = plt.figure(figsize=(5, 5))
    ax = fig.add_subplot(projection="polar")
    colors = {"x_coincident": "tab:blue", "y_coincident": "tab:orange", "commensurate": "tab:red"}
    for radius, (key, ranges) in enumerate(result.sections().items(), start=1):
        for index, interval in enumerate(ranges):
            lower = interval.lower.value
            span = interval.size()
            theta = np.linspace(lower, lower + span, max(2, int(math.degrees(span)) + 2))
            ax.plot(
                theta,
                np.full_like(theta, float(radius)),
                color=colors[key],
                linewidth=4,
                label=key if index == 0 else None,
            )
    ax.set_ylim(0, len(colors) + 0.5)
    ax.set_yticks([])
    ax.set_title("Rotation ranges admitting a lattice match")
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc="lower left", fontsize="small")
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    logger.info("Exported %s", output_path)
    return output_path
