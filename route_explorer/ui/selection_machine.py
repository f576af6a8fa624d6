"""Selection state machine for start/goal markers.

Uses python-statemachine so that the marker rules are explicit transitions
instead of scattered length checks.

States (3 states, one per selection length):
    EMPTY: No marker placed
    ONE: Start placed
    TWO: Start and goal placed (selection full)

Transitions:
    EMPTY -> ONE: add_marker (primary click)
    ONE -> TWO: add_marker (primary click)
    TWO -> ONE: remove_marker (secondary action pops the goal)
    ONE -> EMPTY: remove_marker (secondary action pops the start)

add_marker is not allowed in TWO and remove_marker is not allowed in EMPTY.
try_add_marker()/try_remove_marker() turn those refusals into no-ops, so a
full selection ignores further clicks (no replacement, no queueing) and an
empty selection ignores cancels.

Marker 0 is always the start, marker 1 the goal. The route dispatcher is
therefore only ever invoked with exactly a start and a goal.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import streamlit as st
from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from route_explorer.constants import MarkerConfig
from route_explorer.model.marker import Marker

logger = logging.getLogger(__name__)


@dataclass
class SelectionContext:
    """Ordered start/goal markers.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model.
    """

    # State managed by python-statemachine (model pattern)
    state: Optional[str] = None

    markers: list[Marker] = field(default_factory=list)

    def clear(self) -> None:
        self.markers = []

    @property
    def start(self) -> Optional[Marker]:
        return self.markers[0] if self.markers else None

    @property
    def goal(self) -> Optional[Marker]:
        return self.markers[1] if len(self.markers) > 1 else None

    def __repr__(self) -> str:
        return f"SelectionContext(state={self.state}, markers={self.markers})"


class StreamlitRerunListener:
    """Rerun the Streamlit script after every selection change.

    The map is drawn before the click is read, so a rerun is needed to
    show the new marker set.

    Usage:
        sm = SelectionStateMachine()
        sm.add_listener(StreamlitRerunListener())
    """

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")
        st.rerun()


class SelectionStateMachine(StateMachine):
    """Start/goal selection with a hard cap of two markers."""

    empty = State("Empty", initial=True)
    one = State("One")
    two = State("Two")

    add_marker = empty.to(one) | one.to(two)
    remove_marker = two.to(one) | one.to(empty)

    def __init__(self, context: Optional[SelectionContext] = None, start_value: Optional[str] = None) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared context/model (creates new if None)
            start_value: Optional initial state value (for restoring state)
        """
        model = context or SelectionContext()
        super().__init__(model=model, start_value=start_value)

    @property
    def context(self) -> SelectionContext:
        return self.model

    @property
    def markers(self) -> list[Marker]:
        return self.model.markers

    # ==========================================================================
    # Transition Actions
    # ==========================================================================

    def before_add_marker(self, lat: float, lon: float) -> None:
        marker = Marker(lat=lat, lon=lon)
        self.model.markers.append(marker)
        label = MarkerConfig.LABELS[len(self.model.markers) - 1]
        logger.info(f"[SELECT] {label} placed at ({lat:.6f}, {lon:.6f})")

    def before_remove_marker(self) -> None:
        label = MarkerConfig.LABELS[len(self.model.markers) - 1]
        removed = self.model.markers.pop()
        logger.info(f"[SELECT] {label} removed from ({removed.lat:.6f}, {removed.lon:.6f})")

    # ==========================================================================
    # Safe entry points
    # ==========================================================================

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure.

        Returns:
            True if transition succeeded, False if not allowed from the current state.
        """
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.debug(f"[SELECT] '{event}' ignored in state {self.model.state}")
            return False

    def try_add_marker(self, lat: float, lon: float) -> bool:
        """Place the next marker; ignored when the selection is full."""
        return self.try_transition("add_marker", lat=lat, lon=lon)

    def try_remove_marker(self) -> bool:
        """Pop the last marker; ignored when nothing is selected."""
        return self.try_transition("remove_marker")

    def reset(self) -> None:
        """Drop all markers without firing transitions (no listener side effects)."""
        self.model.clear()
        self.current_state_value = self.empty.value
        logger.info("[SELECT] Selection reset")

    def __repr__(self) -> str:
        return f"SelectionStateMachine(state={self.model.state}, model={self.context!r})"
