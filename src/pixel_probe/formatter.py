"""Output line rendering for a probed pixel."""

from pixel_probe.models.color import Color
from pixel_probe.pixel import alpha_to_float


def format_pixel(
    x: int,
    y: int,
    color: Color,
    alpha_as_float: bool = False,
    precision: int = 6,
) -> str:
    """
    Render the report line for one pixel.

    Args:
        x: Queried column
        y: Queried row
        color: Normalized pixel color
        alpha_as_float: Render alpha as a fraction in [0, 1]
        precision: Decimal places for float alpha

    Returns:
        Single line without trailing newline
    """
    if alpha_as_float:
        alpha = f"{alpha_to_float(color.a):.{precision}f}"
    else:
        alpha = str(color.a)

    return (
        f"Pixel at ({x}, {y}) has RGBA values of "
        f"R: {color.r}, G: {color.g}, B: {color.b}, A: {alpha}"
    )
