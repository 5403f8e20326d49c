"""Coincident and commensurate lattice match search."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

from latticeMatch.circular.interval_set import IntervalSet
from latticeMatch.circular.ordering import SortMode, sort_mode_from_config
from latticeMatch.epitaxy.formulas import FAMILY_BUILDERS
from latticeMatch.epitaxy.model import LatticeParameters


@dataclass
class MatchResult:
    """Rotation ranges of the interface cells that admit a lattice match.

    Parameters:
        families: Normalized candidate ranges per epitaxy matrix element.
        x_coincident: Ranges where px and qx are both integer.
        y_coincident: Ranges where qy and py are both integer.
        commensurate: Ranges where all four elements are integer.
    """

    families: Dict[str, IntervalSet]
    x_coincident: IntervalSet
    y_coincident: IntervalSet
    commensurate: IntervalSet

    def sections(self) -> Dict[str, IntervalSet]:
        """Return the result sets keyed by their export name."""

        return {
            "x_coincident": self.x_coincident,
            "y_coincident": self.y_coincident,
            "commensurate": self.commensurate,
        }


class LatticeMatcher:
    """Intersect the candidate ranges of the epitaxy matrix elements."""

    def __init__(
        self,
        params: LatticeParameters,
        sort_mode: Union[SortMode, str, None] = SortMode.BY_LOWER,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the matcher.

        Parameters:
            params: Sanitized lattice parameters.
            sort_mode: Ordering applied to every result set.
            logger: Optional logger instance.

        Raises:
            ConfigurationError: If the sort mode is unknown.
        """

        self._params = params
        self._sort_mode = sort_mode_from_config(sort_mode)
        self._logger = logger or logging.getLogger(__name__)

    def build_family(self, name: str) -> IntervalSet:
        """Collect the candidate arcs of one matrix element into a set.

        Parameters:
            name: One of ``px``, ``qx``, ``qy``, ``py``.

        Returns:
            Normalized IntervalSet of candidate rotation angles.
        """

        arcs = FAMILY_BUILDERS[name](self._params)
        family = IntervalSet()
        for arc in arcs:
            family.add(arc)
        self._logger.debug(
            "Family %s: %d raw arcs normalized to %d ranges.", name, len(arcs), len(family)
        )
        return family

    def run(self) -> MatchResult:
        """Compute coincident and commensurate ranges.

        Returns:
            MatchResult with sorted result sets.
        """

        families = {name: self.build_family(name) for name in FAMILY_BUILDERS}
        x_coincident = families["px"].overlap(families["qx"])
        y_coincident = families["qy"].overlap(families["py"])
        commensurate = x_coincident.overlap(y_coincident)
        for result_set in (x_coincident, y_coincident, commensurate):
            result_set.sort(self._sort_mode)
        self._logger.info(
            "Found %d x-coincident, %d y-coincident and %d commensurate ranges.",
            len(x_coincident),
            len(y_coincident),
            len(commensurate),
        )
        return MatchResult(
            families=families,
            x_coincident=x_coincident,
            y_coincident=y_coincident,
            commensurate=commensurate,
        )
