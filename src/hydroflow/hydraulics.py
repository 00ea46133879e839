import numpy as np
from .cross_section import area, hydraulic_radius
from .settings import G

def conveyance(A: float, n: float, R: float) -> float:
    """Computes conveyance.

    Args:
        A (float): Flow area.
        n (float): Roughness.
        R (float): Hydraulic radius.

    Returns:
        float: K
    """
    return A * R**(2/3) / n

def manning_discharge(y: float, n: float, bed_slope: float, b: float) -> float:
    """Computes the uniform-flow discharge of a rectangular channel
    using Manning's equation.

    Args:
        y (float): Flow depth.
        n (float): Manning's roughness coefficient.
        bed_slope (float): Bed slope.
        b (float): Channel width.

    Returns:
        float: Discharge Q = K * sqrt(S0).
    """
    K = conveyance(A=area(y, b), n=n, R=hydraulic_radius(y, b))
    return K * np.sqrt(bed_slope)

def velocity(Q: float, y: float, b: float) -> float:
    """Mean flow velocity, Q/A."""
    return Q / area(y, b)

def froude_number(V: float, y: float) -> float:
    """Computes the Froude number.

    Args:
        V (float): Mean velocity.
        y (float): Flow depth (equal to hydraulic depth for a rectangle).

    Returns:
        float: The Froude number.
    """
    return V / np.sqrt(G * y)

def specific_energy(y: float, Q: float, b: float) -> float:
    """Computes specific energy: depth plus velocity head.

    Args:
        y (float): Flow depth.
        Q (float): Flow rate.
        b (float): Channel width.

    Returns:
        float: E = y + Q^2 / (2 g A^2).
    """
    A = area(y, b)
    return y + Q**2 / (2 * G * A**2)

def critical_depth(Q: float, b: float) -> float:
    """Depth of minimum specific energy in a rectangular channel.

    Args:
        Q (float): Flow rate.
        b (float): Channel width.

    Returns:
        float: yc = (q^2 / g)^(1/3), q = Q/b.
    """
    return np.cbrt(Q**2 / (G * b**2))
