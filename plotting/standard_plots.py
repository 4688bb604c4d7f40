"""
    Модуль plotting/standard_plots.py.
    Состав:
    Классы: нет.
    Функции: plot_inrush, plot_phase_u_dc.
"""
from __future__ import annotations

import logging
from typing import Optional

import matplotlib
import matplotlib.pyplot as plt

from core.results import SimulationResult

matplotlib.rcParams['font.size'] = 9
matplotlib.rcParams['axes.grid'] = True
matplotlib.rcParams['figure.dpi'] = 150

logger = logging.getLogger(__name__)


def _mark_connection(ax, res: SimulationResult):
    """Затеняет паузу до включения и отмечает момент включения."""

    if res.stop_time_ms > 0:
        ax.axvspan(0, res.stop_time_ms, color='0.85', alpha=0.8, lw=0)
    ax.axvline(x=res.stop_time_ms, color='tab:orange', lw=1.5,
               label='Включение')
    ax.axhline(y=0, color='k', lw=0.5)


def _draw_waveforms(ax, res: SimulationResult, show_envelope: bool = True):
    """Фазные токи, огибающая и уровни номинальной амплитуды."""

    t = res.time_ms
    _mark_connection(ax, res)
    ax.axhline(y=res.rated_peak, color='tab:green', lw=0.8, ls='--',
               label=f'Iн ампл. = {res.rated_peak:.1f} А')
    ax.axhline(y=-res.rated_peak, color='tab:green', lw=0.8, ls='--')

    if show_envelope:
        ax.plot(t, res.envelope_positive, color='0.45', lw=0.8, ls=':',
                label='Огибающая')
        ax.plot(t, res.envelope_negative, color='0.45', lw=0.8, ls=':')

    ax.plot(t, res.phase_u, 'r-', lw=0.8, label='iU')
    ax.plot(t, res.phase_v, 'g-', lw=0.8, label='iV')
    ax.plot(t, res.phase_w, 'b-', lw=0.8, label='iW')
    ax.set(xlabel='Время, мс', ylabel='Ток, А',
           title=f'Фазные токи при пуске ({res.motor_id})')
    ax.legend(fontsize=8, loc='upper right')


def _draw_phase_u_dc(ax, res: SimulationResult):
    """Ток фазы U и её апериодическая составляющая."""

    t = res.time_ms
    _mark_connection(ax, res)
    ax.plot(t, res.phase_u, 'r-', lw=1.0, label='iU')
    ax.plot(t, res.dc_component_u, color='tab:orange', lw=1.0, ls='--',
            label='Апериодическая составляющая')
    ax.set(xlabel='Время, мс', ylabel='Ток, А',
           title='Ток фазы U и апериодическая составляющая')
    ax.legend(fontsize=8, loc='upper right')


def plot_inrush(
    res: SimulationResult,
    save_path: Optional[str] = None,
    show_envelope: bool = True,
):
    """Строит графики пускового тока: три фазы и фаза U с DC-составляющей."""

    fig, axes = plt.subplots(2, 1, figsize=(12, 8),
                             gridspec_kw={'height_ratios': [3, 2]})
    fig.suptitle(
        f'Пусковой ток: i_max = {res.observed_max_instantaneous:.1f} А '
        f'({res.peak_ratio:.1f} x Iн ампл.)',
        fontsize=12, fontweight='bold',
    )
    _draw_waveforms(axes[0], res, show_envelope=show_envelope)
    _draw_phase_u_dc(axes[1], res)

    plt.tight_layout(rect=[0, 0, 1, 0.95])
    _save_and_close(fig, save_path)
    return fig


def plot_phase_u_dc(res: SimulationResult, save_path: Optional[str] = None):
    """Отдельный график фазы U с апериодической составляющей."""

    fig, ax = plt.subplots(figsize=(12, 4))
    _draw_phase_u_dc(ax, res)
    plt.tight_layout()
    _save_and_close(fig, save_path)
    return fig


def _save_and_close(fig, save_path: Optional[str]):
    """Сохраняет рисунок в файл."""

    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches='tight')
        logger.info("Saved: %s", save_path)
    plt.close(fig)
