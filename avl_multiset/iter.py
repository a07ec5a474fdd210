from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from . import base


class LevelOrderIter(object):
    """Breadth-first walk over a subtree, left child before right child."""

    KEYS = 0
    ITEMS = 1
    NODES = 2

    def __init__(self, mode: int, root: Optional[base.TreeNode]):
        self._mode: int = mode
        self._queue: Deque[base.TreeNode] = deque()

        if root is not None:
            self._queue.append(root)

    def __iter__(self) -> LevelOrderIter:
        return self

    def __next__(self):
        if len(self._queue) == 0:
            raise StopIteration()

        cur_node = self._queue.popleft()

        if cur_node._left is not None:
            self._queue.append(cur_node._left)
        if cur_node._right is not None:
            self._queue.append(cur_node._right)

        if self._mode == LevelOrderIter.KEYS:
            return cur_node.key
        elif self._mode == LevelOrderIter.ITEMS:
            return (cur_node.key, cur_node.count)
        elif self._mode == LevelOrderIter.NODES:
            return cur_node
