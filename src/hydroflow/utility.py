import os

def create_directory_if_not_exists(directory):
    """
    Checks if a directory exists and creates it if it doesn't.

    Attributes
    ----------
    directory : str
        The path to the directory to check.
    """

    if not os.path.exists(directory):
        os.makedirs(directory)

def format_value(value: float, decimals: int) -> str:
    """Fixed-point rendering used in reports, e.g. format_value(0.5659, 3) -> '0.566'."""
    return f"{value:.{decimals}f}"
