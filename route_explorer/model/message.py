"""Message - User-facing messages for the route explorer UI.

Architecture:
- LEFT (sidebar): ONE blue info message showing the current selection
- CENTER (under map): blue loading message while the road network loads
- RIGHT (route panel): ONE yellow instruction or blue "no routes" message
- Toasts: transient feedback for failed requests and refused actions

Messages never raise for expected user mistakes; callers decide when to
display them.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - context/status/loading
    WARNING = "warning"  # Yellow - action instructions
    ERROR = "error"  # Red - failures


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for messages displayed inline (sidebar/panels).

    Rendered as st.info/st.warning/st.error blocks that persist until
    replaced.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)


@dataclass(frozen=True)
class ToastMessage(ABC):
    """Abstract base class for transient popup notifications.

    Good for: failed requests, refused actions, quick confirmations
    Bad for: context messages, status displays, instruction panels
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for the toast notification."""
        raise NotImplementedError

    @property
    @abstractmethod
    def icon(self) -> str:
        """Icon to show in toast."""
        raise NotImplementedError

    def display(self) -> None:
        """Show this message as a toast notification and log it."""
        import streamlit as st

        logger = logging.getLogger(__name__)
        logger.info(f"[TOAST] {self.icon} {self.message}")
        st.toast(f"{self.icon} {self.message}")


# =============================================================================
# TOAST MESSAGES
# =============================================================================


@dataclass(frozen=True)
class IncompleteSelectionMessage(ToastMessage):
    """Route requested before start and goal were both placed."""

    num_markers: int

    @property
    def icon(self) -> str:
        return "📍"

    @property
    def message(self) -> str:
        return f"Please select two markers on the map. ({self.num_markers}/2 placed)"


@dataclass(frozen=True)
class RouteRequestFailedMessage(ToastMessage):
    """Routing service could not deliver routes."""

    strategy_label: str
    reason: str

    @property
    def icon(self) -> str:
        return "⚠️"

    @property
    def message(self) -> str:
        return f"{self.strategy_label} request failed — {self.reason}"


@dataclass(frozen=True)
class WaysLoadFailedMessage(ToastMessage):
    """Road network could not be loaded."""

    reason: str

    @property
    def icon(self) -> str:
        return "🛣️"

    @property
    def message(self) -> str:
        return f"Loading roads failed — {self.reason}"


@dataclass(frozen=True)
class RoutesFoundMessage(ToastMessage):
    """Confirmation after a new result set was committed."""

    num_paths: int
    strategy_label: str

    @property
    def icon(self) -> str:
        return "🧭"

    @property
    def message(self) -> str:
        return f"{self.num_paths} route(s) found ({self.strategy_label})"


# =============================================================================
# CENTER (UNDER MAP) - Loading states (BLUE)
# =============================================================================


@dataclass(frozen=True)
class WaysLoadingMessage(Message):
    """Shown while no road network is loaded yet."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return "🛣️ **Loading...** — Fetching the road network from the routing service."


# =============================================================================
# LEFT PANEL (SIDEBAR) - Context (BLUE)
# =============================================================================


@dataclass(frozen=True)
class SelectionContextMessage(Message):
    """LEFT panel: current start/goal selection."""

    start_lat: Optional[float] = None
    start_lon: Optional[float] = None
    goal_lat: Optional[float] = None
    goal_lon: Optional[float] = None

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        if self.start_lat is None or self.start_lon is None:
            return "🗺️ **No points selected**\n\n- 👆 Click the map to place the **start**"
        start = f"🟢 Start: ({self.start_lat:.5f}, {self.start_lon:.5f})"
        if self.goal_lat is None or self.goal_lon is None:
            return f"📍 **Start selected**\n\n- {start}\n- 👆 Click the map to place the **goal**"
        goal = f"🔴 Goal: ({self.goal_lat:.5f}, {self.goal_lon:.5f})"
        return f"🏁 **Start and goal selected**\n\n- {start}\n- {goal}"


# =============================================================================
# RIGHT PANEL (ROUTES) - Instructions (YELLOW) / results (BLUE)
# =============================================================================


@dataclass(frozen=True)
class RouteActionMessage(Message):
    """RIGHT panel: what to do next to get routes."""

    num_markers: int

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        if self.num_markers < 2:
            return (
                "🎯 **Select Start and Goal**\n\n"
                "- 👆 Click the map to place markers\n"
                "- ↩️ **Remove last marker** to correct a pick"
            )
        return "🧭 **Ready**\n\n- ✅ Press **Calculate Route** in the sidebar"


@dataclass(frozen=True)
class NoRoutesFoundMessage(Message):
    """RIGHT panel: the last request succeeded with zero routes."""

    strategy_label: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return f"🚫 **No routes found** — {self.strategy_label} returned an empty result."
