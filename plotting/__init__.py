"""Public exports for plotting helpers."""

from plotting.standard_plots import plot_inrush, plot_phase_u_dc

__all__ = [
    "plot_inrush",
    "plot_phase_u_dc",
]
