"""
Steady uniform-flow analysis of a rectangular open channel.

`analyze` validates the five channel inputs, then derives normal and
critical depths, the flow state at the upstream depth, the conjugate depth
of a hydraulic jump and its energy loss, and classifies the flow regime
from the Froude number at normal depth. Nothing here keeps state between
calls.
"""
import math
import numbers
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from enum import Enum

import structlog

from . import settings
from .cross_section import RectangularSection
from .exceptions import NumericDegeneracy, ValidationError
from .hydraulic_jump import energy_loss, jump_efficiency, sequent_depth
from .hydraulics import critical_depth, froude_number, specific_energy, velocity
from .normal_depth import SolverOptions, normal_depth

logger = structlog.get_logger()


class Regime(Enum):
    SUBCRITICAL = 'Subcritical'
    CRITICAL = 'Critical'
    SUPERCRITICAL = 'Supercritical'

    @property
    def label(self) -> str:
        return _REGIME_LABELS[self]


_REGIME_LABELS = {
    Regime.SUBCRITICAL: 'Tranquil Flow',
    Regime.CRITICAL: 'Critical Flow',
    Regime.SUPERCRITICAL: 'Rapid Flow',
}


@dataclass(frozen=True)
class RegimeThresholds:
    """Froude number band treated as near-critical flow."""
    subcritical_below: float = settings.SUBCRITICAL_BELOW
    supercritical_above: float = settings.SUPERCRITICAL_ABOVE

    def __post_init__(self):
        if self.subcritical_below > self.supercritical_above:
            raise ValueError("subcritical_below must not exceed supercritical_above.")


DEFAULT_THRESHOLDS = RegimeThresholds()


@dataclass(frozen=True)
class ChannelInputs:
    """
    The five scalars defining a problem.

    Attributes
    ----------
    Q : float
        Discharge [m3/s].
    b : float
        Channel width [m].
    S0 : float
        Bed slope [-].
    n : float
        Manning's roughness coefficient.
    y1 : float
        Depth upstream of the jump [m].
    """
    Q: float
    b: float
    S0: float
    n: float
    y1: float

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            _check_positive_finite(f.name, value)
            object.__setattr__(self, f.name, float(value))

    @classmethod
    def from_mapping(cls, data: Mapping) -> 'ChannelInputs':
        values = {}
        for f in fields(cls):
            if f.name not in data:
                raise ValidationError(f.name, None, 'present')
            values[f.name] = data[f.name]
        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FlowState:
    """Flow properties at a single depth for fixed Q and b."""
    depth: float
    area: float
    wetted_perimeter: float
    hydraulic_radius: float
    velocity: float
    froude_number: float
    specific_energy: float


@dataclass(frozen=True)
class AnalysisResult:
    inputs: ChannelInputs
    normal: FlowState
    critical: FlowState
    upstream: FlowState
    sequent: FlowState
    energy_loss: float
    jump_efficiency: float
    regime: Regime
    regime_label: str

    @property
    def yn(self) -> float:
        return self.normal.depth

    @property
    def yc(self) -> float:
        return self.critical.depth

    @property
    def y2(self) -> float:
        return self.sequent.depth

    @property
    def Frn(self) -> float:
        return self.normal.froude_number

    @property
    def Fr1(self) -> float:
        return self.upstream.froude_number

    @property
    def jump_possible(self) -> bool:
        """True when the upstream flow is supercritical, so a jump can form."""
        return self.Fr1 > 1.0

    def to_dict(self) -> dict:
        return {
            **self.inputs.to_dict(),
            'yn': self.yn,
            'yc': self.yc,
            'Vn': self.normal.velocity,
            'Frn': self.Frn,
            'V1': self.upstream.velocity,
            'Fr1': self.Fr1,
            'y2': self.y2,
            'dE': self.energy_loss,
            'efficiency': self.jump_efficiency,
            'En': self.normal.specific_energy,
            'Ec': self.critical.specific_energy,
            'E1': self.upstream.specific_energy,
            'E2': self.sequent.specific_energy,
            'regime': self.regime.value,
            'regime_label': self.regime_label,
        }


def _check_positive_finite(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(name, value, 'finite number')
    if not math.isfinite(value):
        raise ValidationError(name, value, 'finite number')
    if value <= 0:
        raise ValidationError(name, value, '> 0')

def validate_inputs(inputs, check_ranges: bool = False) -> ChannelInputs:
    """Validates channel inputs and returns them as ChannelInputs.

    Args:
        inputs (ChannelInputs | Mapping): The five inputs.
        check_ranges (bool, optional): Treat the advisory ranges in
            settings as hard limits. Defaults to False, in which case
            out-of-range values are only logged.

    Raises:
        ValidationError: On the first violated constraint, in the order
            Q, b, S0, n, y1.

    Returns:
        ChannelInputs: The validated inputs.
    """
    if isinstance(inputs, Mapping):
        inputs = ChannelInputs.from_mapping(inputs)
    elif not isinstance(inputs, ChannelInputs):
        raise TypeError("inputs must be a ChannelInputs or a mapping.")

    for name, (lo, hi) in settings.ADVISORY_RANGES.items():
        value = getattr(inputs, name)
        if lo <= value <= hi:
            continue
        if check_ranges:
            raise ValidationError(name, value, f'in [{lo}, {hi}]')
        logger.warning("Input outside advisory range", field=name, value=value, range=(lo, hi))

    return inputs

def flow_state(y: float, Q: float, b: float) -> FlowState:
    A, P, R, _ = RectangularSection(width=b).properties(y)
    V = velocity(Q, y, b)
    return FlowState(
        depth=float(y),
        area=float(A),
        wetted_perimeter=float(P),
        hydraulic_radius=float(R),
        velocity=float(V),
        froude_number=float(froude_number(V, y)),
        specific_energy=float(specific_energy(y, Q, b)),
    )

def classify_regime(froude: float, thresholds: RegimeThresholds = None) -> Regime:
    if thresholds is None:
        thresholds = DEFAULT_THRESHOLDS

    if froude < thresholds.subcritical_below:
        return Regime.SUBCRITICAL
    elif froude > thresholds.supercritical_above:
        return Regime.SUPERCRITICAL
    else:
        return Regime.CRITICAL

def analyze(inputs,
            solver: SolverOptions = None,
            thresholds: RegimeThresholds = None,
            check_ranges: bool = False) -> AnalysisResult:
    """Runs a complete channel analysis.

    Args:
        inputs (ChannelInputs | Mapping): Q, b, S0, n and y1.
        solver (SolverOptions, optional): Normal-depth solver options.
        thresholds (RegimeThresholds, optional): Regime classification band.
        check_ranges (bool, optional): Reject inputs outside the advisory
            ranges. Defaults to False.

    Raises:
        ValidationError: If an input is missing, non-finite or not positive.
        NumericDegeneracy: With a strict solver whose bracket misses the
            normal depth, or when valid but extreme inputs overflow or
            underflow floating-point arithmetic.

    Returns:
        AnalysisResult: The complete, immutable result set.
    """
    inputs = validate_inputs(inputs, check_ranges=check_ranges)

    try:
        result = _compute(inputs, solver, thresholds)
    except NumericDegeneracy:
        raise
    except ArithmeticError as e:
        raise NumericDegeneracy(f"Floating-point failure for inputs {inputs.to_dict()}: {e}") from e

    values = result.to_dict()
    for key, value in values.items():
        if isinstance(value, float) and not math.isfinite(value):
            raise NumericDegeneracy(f"{key} is not finite for inputs {inputs.to_dict()}.")

    logger.debug("Analysis completed", regime=result.regime.value, yn=result.yn, yc=result.yc, Fr1=result.Fr1)
    return result

def _compute(inputs: ChannelInputs, solver: SolverOptions, thresholds: RegimeThresholds) -> AnalysisResult:
    Q, b, S0, n, y1 = inputs.Q, inputs.b, inputs.S0, inputs.n, inputs.y1

    yn = normal_depth(Q, n, S0, b, options=solver)
    yc = critical_depth(Q, b)

    normal = flow_state(yn, Q, b)
    upstream = flow_state(y1, Q, b)

    # The jump depends on the upstream Froude number
    y2 = sequent_depth(y1, upstream.froude_number)
    sequent = flow_state(y2, Q, b)
    dE = float(energy_loss(y1, y2))

    regime = classify_regime(normal.froude_number, thresholds)

    return AnalysisResult(
        inputs=inputs,
        normal=normal,
        critical=flow_state(yc, Q, b),
        upstream=upstream,
        sequent=sequent,
        energy_loss=dE,
        jump_efficiency=float(jump_efficiency(dE, upstream.specific_energy)),
        regime=regime,
        regime_label=regime.label,
    )
