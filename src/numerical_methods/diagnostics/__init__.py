"""Tabular diagnostics (pandas) for solver runs."""

from .tables import compare_linear_solvers, compare_root_methods, convergence_table

__all__ = ["convergence_table", "compare_root_methods", "compare_linear_solvers"]
