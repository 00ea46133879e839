from dataclasses import dataclass

import structlog
from scipy.optimize import brentq

from . import settings
from .exceptions import NumericDegeneracy
from .hydraulics import manning_discharge

logger = structlog.get_logger()


@dataclass(frozen=True)
class SolverOptions:
    """Normal-depth solver parameters.

    Attributes:
        low (float): Lower end of the depth bracket [m].
        high (float): Upper end of the depth bracket [m].
        tolerance (float): Acceptable |Qcalc - Q| [m3/s].
        max_iterations (int): Bisection iteration budget.
        method (str): 'bisection' or 'brentq'.
        strict (bool): Raise NumericDegeneracy instead of returning a
            bracket-limited depth when the root cannot be found.
    """
    low: float = settings.BRACKET_LOW
    high: float = settings.BRACKET_HIGH
    tolerance: float = settings.TOLERANCE
    max_iterations: int = settings.MAX_ITERATIONS
    method: str = 'bisection'
    strict: bool = False

    def __post_init__(self):
        if self.method not in ['bisection', 'brentq']:
            raise ValueError("Invalid solution method.")
        if not 0 < self.low < self.high:
            raise ValueError("Bracket must satisfy 0 < low < high.")


DEFAULT_OPTIONS = SolverOptions()


def normal_depth(Q: float, n: float, bed_slope: float, b: float, options: SolverOptions = None) -> float:
    """Computes the normal depth of a rectangular channel.

    Manning's discharge increases monotonically with depth, so the root
    of Qcalc(y) - Q is unique.

    Args:
        Q (float): Target flow rate.
        n (float): Manning's roughness coefficient.
        bed_slope (float): Bed slope.
        b (float): Channel width.
        options (SolverOptions, optional): Bracket, tolerance and method.
            Defaults to the values in settings.

    Raises:
        NumericDegeneracy: Only in strict mode, when the bracket does not
            contain the root or the iteration budget runs out.

    Returns:
        float: Normal depth yn.
    """
    if options is None:
        options = DEFAULT_OPTIONS

    def f(y):
        return manning_discharge(y, n, bed_slope, b) - Q

    if options.strict:
        _check_bracket(f, options)

    if options.method == 'brentq':
        return _brentq(f, options)

    return _bisection(f, options)

def _check_bracket(f, options: SolverOptions) -> None:
    f_low, f_high = f(options.low), f(options.high)
    if f_low > options.tolerance or f_high < -options.tolerance:
        raise NumericDegeneracy(
            f"Normal depth lies outside the bracket [{options.low}, {options.high}] "
            f"(residuals {f_low:.6g}, {f_high:.6g})."
        )

def _bisection(f, options: SolverOptions) -> float:
    low, high = options.low, options.high

    for i in range(options.max_iterations):
        y = (low + high) / 2
        residual = f(y)

        if abs(residual) < options.tolerance:
            logger.debug("Normal depth converged", iterations=i + 1, depth=float(y))
            return float(y)

        # Qcalc > Q means the root lies below y
        if residual > 0:
            high = y
        else:
            low = y

    y = (low + high) / 2
    logger.warning("Normal depth iteration budget exhausted",
                   iterations=options.max_iterations,
                   depth=float(y),
                   residual=float(f(y)))

    if options.strict:
        raise NumericDegeneracy(
            f"Normal depth did not converge within {options.max_iterations} iterations."
        )

    return float(y)

def _brentq(f, options: SolverOptions) -> float:
    # Root outside the bracket: clamp to the nearer end
    if f(options.low) >= 0:
        logger.warning("Normal depth clamped to bracket", depth=options.low)
        return float(options.low)
    if f(options.high) <= 0:
        logger.warning("Normal depth clamped to bracket", depth=options.high)
        return float(options.high)

    y, r = brentq(f, options.low, options.high,
                  maxiter=options.max_iterations, full_output=True, disp=False)

    if not r.converged:
        logger.warning("Normal depth iteration budget exhausted",
                       iterations=r.iterations, depth=float(y))
        if options.strict:
            raise NumericDegeneracy(
                f"Normal depth did not converge within {options.max_iterations} iterations."
            )
    else:
        logger.debug("Normal depth converged", iterations=r.iterations, depth=float(y))

    return float(y)
