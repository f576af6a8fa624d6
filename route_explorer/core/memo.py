"""IdentityMemo - Recompute only when the inputs change identity.

Keeps the last result together with the inputs it was computed from.
Inputs are compared by identity (``is``), so replacing a collection
wholesale invalidates the memo while unrelated state changes (hover,
toggles) do not trigger recomputation.
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()


class IdentityMemo(Generic[T]):
    """Single-entry memo keyed on the identity of positional inputs.

    Example:
        memo = IdentityMemo(assign_colors, name="way_colors")
        colors = memo(ways)  # computed
        colors = memo(ways)  # cached, same object
    """

    def __init__(self, compute: Callable[..., T], name: str = "") -> None:
        self._compute = compute
        self._name = name or getattr(compute, "__name__", "memo")
        self._inputs: tuple[Any, ...] | object = _UNSET
        self._result: T | None = None
        self.compute_count = 0

    def __call__(self, *inputs: Any) -> T:
        if self._inputs is not _UNSET and self._same_inputs(inputs):
            return self._result  # type: ignore[return-value]

        self._result = self._compute(*inputs)
        self._inputs = inputs
        self.compute_count += 1
        logger.debug(f"[MEMO] Recomputed {self._name} (#{self.compute_count})")
        return self._result

    def _same_inputs(self, inputs: tuple[Any, ...]) -> bool:
        previous = self._inputs
        assert isinstance(previous, tuple)
        return len(previous) == len(inputs) and all(a is b for a, b in zip(previous, inputs))
