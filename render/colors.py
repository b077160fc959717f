"""
particle_life module: render/colors.py

Central color palette.
"""

BG = (173, 216, 230)
FOOD = (76, 175, 80)
HUD_TEXT = (20, 20, 30)


def energy_bar_color(fraction: float) -> tuple[int, int, int]:
    """Green when full, fading to red when empty."""
    fraction = max(0.0, min(1.0, fraction))
    return (int(255 * (1.0 - fraction)), int(255 * fraction), 0)
