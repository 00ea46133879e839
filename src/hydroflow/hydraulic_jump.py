import numpy as np

def sequent_depth(y1: float, Fr1: float) -> float:
    """Computes the conjugate depth of a hydraulic jump (Belanger equation).

    Defined for any Fr1 >= 0. A jump only forms when Fr1 > 1; below that
    the returned depth is the mathematical conjugate and is no larger
    than y1.

    Args:
        y1 (float): Depth upstream of the jump.
        Fr1 (float): Froude number upstream of the jump.

    Returns:
        float: y2
    """
    return 0.5 * y1 * (np.sqrt(1 + 8 * Fr1**2) - 1)

def energy_loss(y1: float, y2: float) -> float:
    """Head loss across a hydraulic jump in a rectangular channel.

    Args:
        y1 (float): Upstream depth (> 0).
        y2 (float): Sequent depth (> 0).

    Returns:
        float: dE = (y2 - y1)^3 / (4 y1 y2)
    """
    return (y2 - y1)**3 / (4 * y1 * y2)

def jump_efficiency(dE: float, E1: float) -> float:
    """Fraction of the upstream specific energy dissipated by the jump."""
    return dE / E1
