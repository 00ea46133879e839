from dataclasses import dataclass


def area(y: float, b: float) -> float:
    """Return wetted area (A) of a rectangular section."""
    return b * y

def wetted_perimeter(y: float, b: float) -> float:
    """Return wetted perimeter (P): bed plus both walls."""
    return b + 2.0 * y

def hydraulic_radius(y: float, b: float) -> float:
    """Return hydraulic radius (R = A/P)."""
    return area(y, b) / wetted_perimeter(y, b)

def top_width(y: float, b: float) -> float:
    """Return top width (T). Constant for a rectangle."""
    return b


@dataclass(frozen=True)
class RectangularSection:
    """
    Rectangular channel cross-section of bottom width `width`.

    Depths are measured from the channel bed. The section does not check
    its arguments; depth and width are expected to be positive.
    """
    width: float

    def area(self, y: float) -> float:
        return area(y, self.width)

    def wetted_perimeter(self, y: float) -> float:
        return wetted_perimeter(y, self.width)

    def hydraulic_radius(self, y: float) -> float:
        return hydraulic_radius(y, self.width)

    def top_width(self, y: float) -> float:
        return top_width(y, self.width)

    def properties(self, y: float) -> tuple:
        """Return (A, P, R, T) for depth y."""
        A = self.area(y)
        P = self.wetted_perimeter(y)
        return A, P, A / P, self.top_width(y)
