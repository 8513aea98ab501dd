"""Colour palette and usage-based colour selection."""


def _rgb(red: int, green: int, blue: int) -> str:
    return f"#{red:02x}{green:02x}{blue:02x}"


COLOR_BG = _rgb(30, 30, 46)
COLOR_SURFACE = _rgb(49, 50, 68)
COLOR_OVERLAY = _rgb(88, 91, 112)
COLOR_TEXT = _rgb(205, 214, 244)
COLOR_SUBTEXT = _rgb(166, 173, 200)
COLOR_LAVENDER = _rgb(180, 190, 254)
COLOR_BLUE = _rgb(137, 180, 250)
COLOR_SAPPHIRE = _rgb(116, 199, 236)
COLOR_GREEN = _rgb(166, 227, 161)
COLOR_YELLOW = _rgb(249, 226, 175)
COLOR_PEACH = _rgb(250, 179, 135)
COLOR_RED = _rgb(243, 139, 168)
COLOR_MAUVE = _rgb(203, 166, 247)


def usage_color(pct: float) -> str:
    """Return the colour that signals how heavy a usage percentage is."""
    if pct < 40.0:
        return COLOR_GREEN
    if pct < 70.0:
        return COLOR_YELLOW
    if pct < 90.0:
        return COLOR_PEACH
    return COLOR_RED