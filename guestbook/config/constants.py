"""
Centralized constants for guestbook.

Timing, layout and limit values used by the coordinators, the CLI and the
view shell. User-tunable values can be overridden in ui_config.json.
"""

import os
from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

GUESTBOOK_CONFIG_DIR = Path(
    os.environ.get("GUESTBOOK_CONFIG_DIR", str(Path.home() / ".config" / "guestbook"))
)

# =============================================================================
# SEARCH
# =============================================================================

SEARCH_DEBOUNCE_MS = 300  # Quiet period before a typed query hits the service

# =============================================================================
# PANEL ANIMATION
# =============================================================================

PANEL_ANIMATION_MS = 300  # Expand/collapse duration
PANEL_ANIMATION_STEPS = 20  # Discrete progress emissions per animation (15ms each)

# =============================================================================
# RESPONSIVE BREAKPOINTS (logical pixels)
# =============================================================================

BREAKPOINT_SMALL_TABLET = 600.0
BREAKPOINT_MEDIUM_TABLET = 800.0
BREAKPOINT_LARGE_TABLET = 1024.0
BREAKPOINT_EXTRA_LARGE_TABLET = 1366.0

# Master panel widths per breakpoint
PANEL_WIDTH_SMALL = 250.0
PANEL_WIDTH_MEDIUM = 300.0
PANEL_WIDTH_LARGE = 350.0
PANEL_WIDTH_EXTRA_LARGE = 380.0
PANEL_WIDTH_COLLAPSED = 0.0

# =============================================================================
# TABS
# =============================================================================

NAVIGATION_TABS = (
    "Profile",
    "Reservation",
    "Payment",
    "Feedback",
    "Order History",
)
DEFAULT_TAB_INDEX = 0  # Profile

# =============================================================================
# GUEST DATA
# =============================================================================

DEFAULT_TOP_SPENDERS_LIMIT = 10
DEFAULT_FREQUENT_VISITORS_LIMIT = 10

# Note categories, in display order
NOTE_CATEGORIES = {
    "general": "General",
    "specialRelation": "Special Relation",
    "seatingPreferences": "Seating Preferences",
    "specialNote": "Special Note*",
    "allergies": "Allergies",
}

# Simulated repository latency for the demo shell (0 = instant)
DEFAULT_REPOSITORY_LATENCY_MS = 0

# =============================================================================
# TERMINAL SHELL
# =============================================================================

TERMINAL_CELL_PX = 10  # Logical pixels per terminal column for layout rules
