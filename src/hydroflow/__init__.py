from .analysis import (
    AnalysisResult,
    ChannelInputs,
    FlowState,
    Regime,
    RegimeThresholds,
    analyze,
    classify_regime,
)
from .exceptions import HydroFlowError, NumericDegeneracy, ValidationError
from .normal_depth import SolverOptions, normal_depth

__version__ = "2.0.0"
