"""Trendline regression."""

from line_intersection.regression.trendline_fitting import fit_trendline

__all__ = ["fit_trendline"]
