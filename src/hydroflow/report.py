import numpy as np
import pandas as pd

from .analysis import AnalysisResult
from .hydraulics import manning_discharge, specific_energy
from .utility import format_value as fmt

RULE = '═' * 43


def format_report(result: AnalysisResult) -> str:
    """Renders an analysis as a plain-text report."""
    i = result.inputs
    lines = [
        RULE,
        '      OPEN CHANNEL HYDRAULICS ANALYSIS',
        RULE,
        '',
        'INPUT PARAMETERS:',
        f'• Discharge (Q)      = {i.Q} m³/s',
        f'• Channel width (b)  = {i.b} m',
        f'• Bed slope (S₀)     = {i.S0}',
        f"• Manning's n        = {i.n}",
        f'• Upstream depth (y₁)= {i.y1} m',
        '',
        'NORMAL FLOW ANALYSIS:',
        f'• Normal depth (yₙ)  = {fmt(result.yn, 4)} m',
        f'• Critical depth (y_c)= {fmt(result.yc, 4)} m',
        f'• Velocity (Vₙ)      = {fmt(result.normal.velocity, 3)} m/s',
        f'• Froude number (Frₙ)= {fmt(result.Frn, 3)}',
        f'• Flow regime        = {result.regime.value} ({result.regime_label})',
        '',
        'HYDRAULIC JUMP ANALYSIS:',
        f'• Upstream Fr₁       = {fmt(result.Fr1, 3)}',
        f'• Sequent depth (y₂) = {fmt(result.y2, 4)} m',
        f'• Energy loss (ΔE)   = {fmt(result.energy_loss, 4)} m',
        f'• Jump efficiency    = {fmt(result.jump_efficiency * 100, 1)}%',
    ]
    if not result.jump_possible:
        lines.append('  (Fr₁ ≤ 1: no hydraulic jump forms)')

    lines += [
        '',
        'SPECIFIC ENERGY:',
        f'• E(yₙ)              = {fmt(result.normal.specific_energy, 4)} m',
        f'• E(y_c)             = {fmt(result.critical.specific_energy, 4)} m',
        f'• E(y₁)              = {fmt(result.upstream.specific_energy, 4)} m',
        f'• E(y₂)              = {fmt(result.sequent.specific_energy, 4)} m',
        '',
        RULE,
        '     ANALYSIS COMPLETED SUCCESSFULLY',
        RULE,
    ]
    return '\n'.join(lines)

def energy_curve(result: AnalysisResult, points: int = 100) -> pd.DataFrame:
    """Tabulates E(y) over a depth range wide enough to show all four
    characteristic depths.

    Args:
        result (AnalysisResult): A completed analysis.
        points (int, optional): Number of samples. Defaults to 100.

    Returns:
        pd.DataFrame: Columns 'depth' and 'specific_energy'.
    """
    Q, b = result.inputs.Q, result.inputs.b
    max_y = max(result.yc * 3, result.yn * 2, result.inputs.y1 * 2, result.y2 * 2, 1.0)

    y = np.linspace(0.01, max_y, points)
    return pd.DataFrame({'depth': y, 'specific_energy': specific_energy(y, Q, b)})

def rating_curve(b: float, n: float, bed_slope: float, y_max: float = 2.0, step: float = 0.02) -> pd.DataFrame:
    """Tabulates Manning's uniform-flow discharge Q(y).

    Args:
        b (float): Channel width.
        n (float): Manning's roughness coefficient.
        bed_slope (float): Bed slope.
        y_max (float, optional): Largest depth. Defaults to 2.0.
        step (float, optional): Depth increment. Defaults to 0.02.

    Returns:
        pd.DataFrame: Columns 'depth' and 'discharge'.
    """
    n_steps = int(np.floor((y_max - 0.01) / step + 1e-9)) + 1
    y = 0.01 + step * np.arange(n_steps)
    return pd.DataFrame({'depth': y, 'discharge': manning_discharge(y, n, bed_slope, b)})
