"""Responsive layout rules for the master/detail screen."""

from guestbook.config.constants import (
    BREAKPOINT_EXTRA_LARGE_TABLET,
    BREAKPOINT_LARGE_TABLET,
    BREAKPOINT_MEDIUM_TABLET,
    PANEL_WIDTH_EXTRA_LARGE,
    PANEL_WIDTH_LARGE,
    PANEL_WIDTH_MEDIUM,
    PANEL_WIDTH_SMALL,
)


def should_expand_by_default(
    screen_width: float,
    medium_breakpoint: float = BREAKPOINT_MEDIUM_TABLET,
    large_breakpoint: float = BREAKPOINT_LARGE_TABLET,
) -> bool:
    """Collapsed below the smaller breakpoint, expanded at or above it."""
    return screen_width >= min(medium_breakpoint, large_breakpoint)


def panel_width_for_screen(screen_width: float) -> float:
    """Master panel width for a screen of ``screen_width``."""
    if screen_width >= BREAKPOINT_EXTRA_LARGE_TABLET:
        return PANEL_WIDTH_EXTRA_LARGE
    if screen_width >= BREAKPOINT_LARGE_TABLET:
        return PANEL_WIDTH_LARGE
    if screen_width >= BREAKPOINT_MEDIUM_TABLET:
        return PANEL_WIDTH_MEDIUM
    return PANEL_WIDTH_SMALL
