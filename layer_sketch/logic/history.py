"""
History Manager for Undo/Redo

Snapshot based:
- A snapshot of the layer is saved every time a gesture completes
- Each layer keeps its own undo and redo stacks
- Stack depth is limited to keep memory in check

"""

import logging
from collections import deque

logger = logging.getLogger(__name__)


class LayerHistory:
    """Undo/redo stacks belonging to one layer"""

    def __init__(self, limit: int):
        self.undo_stack = deque(maxlen=limit)  # Most recent state last
        self.redo_stack = deque(maxlen=limit)
        # State beneath the oldest kept snapshot (None = empty layer)
        self.base = None


class HistoryManager:
    """Manages per-layer undo/redo history"""

    def __init__(self, limit: int = 50):
        """
        Initialize history manager

        Args:
            limit: Maximum number of undo states per layer (default 50)
                Older states are dropped; the newest dropped one becomes the base state
        """
        self.limit = max(1, int(limit))
        self._histories = {}

    def _history(self, layer_id) -> LayerHistory:
        if layer_id not in self._histories:
            self._histories[layer_id] = LayerHistory(self.limit)
        return self._histories[layer_id]

    def _push_undo(self, history, image):
        if len(history.undo_stack) == self.limit:
            history.base = history.undo_stack[0]  # About to fall off the deque
        history.undo_stack.append(image)

    def record(self, layer_id, snapshot):
        """Save the state a layer is in after a completed gesture."""
        history = self._history(layer_id)
        self._push_undo(history, snapshot.copy())
        history.redo_stack.clear()  # New action = can't redo old futures!
        logger.debug("Recorded state for layer %s (%d undo steps)", layer_id, len(history.undo_stack))

    def undo(self, layer) -> bool:
        """
        Step the layer back one state.

        Args:
            layer: The Layer to restore

        Returns:
            bool: False if there was nothing to undo
        """
        history = self._history(layer.id)
        if not history.undo_stack:
            return False

        history.undo_stack.pop()
        history.redo_stack.append(layer.snapshot())

        previous = history.undo_stack[-1] if history.undo_stack else history.base
        if previous is None:
            layer.clear()
        else:
            layer.restore(previous)
        return True

    def redo(self, layer) -> bool:
        """
        Re-apply the most recently undone state.

        Returns:
            bool: False if there was nothing to redo
        """
        history = self._history(layer.id)
        if not history.redo_stack:
            return False

        state = history.redo_stack.pop()
        self._push_undo(history, state)
        layer.restore(state)
        return True

    def can_undo(self, layer_id) -> bool:
        return len(self._history(layer_id).undo_stack) > 0

    def can_redo(self, layer_id) -> bool:
        return len(self._history(layer_id).redo_stack) > 0

    def get_stats(self, layer_id) -> dict:
        """
        Get statistics about history usage for a layer

        Returns:
            dict: Undo/redo counts, the limit and whether the undo stack is full
        """
        history = self._history(layer_id)
        return {
            'undo_count': len(history.undo_stack),
            'redo_count': len(history.redo_stack),
            'limit': self.limit,
            'undo_full': len(history.undo_stack) >= self.limit
        }
