"""Lattice match calculator for heteroepitaxial interface unit cells."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER = logging.getLogger(__name__)
_FALLBACK_VERSION = "0.0.0"


def _read_version(version_file: Path) -> str:
    """Read the release number shipped next to the package.

    Parameters:
        version_file: Path of the ``VERSION`` file.

    Returns:
        Stripped version string, or the fallback when it cannot be read.
    """

    try:
        version = version_file.read_text(encoding="utf-8").strip()
    except OSError as exc:
        _LOGGER.warning(
            "Cannot read %s (%s); latticeMatch version set to %s.",
            version_file,
            exc.strerror or exc,
            _FALLBACK_VERSION,
        )
        return _FALLBACK_VERSION
    return version or _FALLBACK_VERSION


__version__ = _read_version(Path(__file__).resolve().parents[1] / "VERSION")
