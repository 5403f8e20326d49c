"""Epitaxy matrix formulas, match search and reporting."""

from latticeMatch.epitaxy.matcher import LatticeMatcher, MatchResult
from latticeMatch.epitaxy.model import LatticeParameters, sanitize_parameters

__all__ = [
    "LatticeMatcher",
    "LatticeParameters",
    "MatchResult",
    "sanitize_parameters",
]
