"""States emitted by the PanelCoordinator, plus the pure width function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class PanelInitial:
    """Panel not yet initialized."""


@dataclass(frozen=True)
class PanelExpanded:
    """Master panel visible at ``width``."""

    width: float
    animate: bool = True
    animation_duration: Optional[float] = None


@dataclass(frozen=True)
class PanelCollapsed:
    """Master panel hidden."""

    animate: bool = True
    animation_duration: Optional[float] = None


@dataclass(frozen=True)
class PanelAnimating:
    """Transient state between Expanded and Collapsed.

    ``progress`` runs 0.0 -> 1.0 over ``duration`` seconds.
    """

    to_expanded: bool
    progress: float
    duration: float


PanelState = Union[PanelInitial, PanelExpanded, PanelCollapsed, PanelAnimating]


def resolve_width(state: PanelState, expanded_width: float) -> float:
    """Width the view should draw the master panel at for ``state``."""
    if isinstance(state, PanelExpanded):
        return expanded_width
    if isinstance(state, PanelAnimating):
        if state.to_expanded:
            return expanded_width * state.progress
        return expanded_width * (1.0 - state.progress)
    return 0.0
