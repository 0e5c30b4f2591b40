from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from visgraph.graph.graph_store import GraphStore
from visgraph.history.actions import GraphAction


logger = logging.getLogger("visgraph.history")


@dataclass(frozen=True)
class UndoResult:
    """
    An action popped from the log and whether reverting it changed the store.

    ``changed`` is False when the vertex or edge was already gone, e.g.
    removed directly after it was recorded.
    """

    action: GraphAction
    changed: bool


class CommandLog:
    """
    Most-recent-first stack of recorded graph actions.

    The log belongs to whoever drives the store; the store itself keeps no
    history. With a positive ``limit`` the oldest actions are forgotten once
    the stack grows past it.
    """

    def __init__(self, limit: int = 0) -> None:
        self.limit = limit
        self._actions: Deque[GraphAction] = deque(maxlen=limit or None)

    def record(self, action: GraphAction) -> None:
        self._actions.append(action)

    def undo(self, store: GraphStore) -> Optional[UndoResult]:
        """
        Pop the latest action and revert it on ``store``.

        Returns None when there is nothing to undo.
        """
        if not self._actions:
            logger.info("nothing to undo")
            return None

        action = self._actions.pop()
        changed = action.revert(store)
        if changed:
            logger.info("undone: %s", action.describe())
        else:
            logger.info("undone: %s (already removed)", action.describe())
        return UndoResult(action=action, changed=changed)

    def peek(self) -> Optional[GraphAction]:
        return self._actions[-1] if self._actions else None

    def clear(self) -> None:
        self._actions.clear()

    def __len__(self) -> int:
        return len(self._actions)
