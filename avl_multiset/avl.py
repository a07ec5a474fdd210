from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TypeVar

from .base import Tree, TreeNode

K = TypeVar("K")

logger = logging.getLogger(__name__)


class AVLTree(Tree):
    def __init__(self, key: Optional[Callable[[K], Any]] = None):
        super().__init__(AVLNode, key=key)


class AVLNode(TreeNode):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._balance = 0

    @property
    def balance(self) -> int:
        """Right subtree height minus left subtree height, as last computed."""
        return self._balance

    def _update_balance(self) -> int:
        left_height = self._left.height if self._left is not None else -1
        right_height = self._right.height if self._right is not None else -1
        self._balance = right_height - left_height
        return self._balance

    def _rotate_left(self) -> AVLNode[K]:
        if self._right is None:
            raise AssertionError(
                "left rotation at node {} requires a right child".format(self._key)
            )

        self._right._update_height()
        if self._right._update_balance() == -1:
            # Right-left case: the right child is heavy on the inside.
            logger.debug("double rotation (right-left) at node %r", self._key)
            self._right = self._right._rotate_right()

        pivot: AVLNode[K] = self._right
        logger.debug("rotating left at node %r (pivot %r)", self._key, pivot._key)

        self._right = pivot._left
        pivot._left = self

        self._update_height()
        self._update_balance()
        pivot._update_height()
        pivot._update_balance()
        return pivot

    def _rotate_right(self) -> AVLNode[K]:
        if self._left is None:
            raise AssertionError(
                "right rotation at node {} requires a left child".format(self._key)
            )

        self._left._update_height()
        if self._left._update_balance() == 1:
            # Left-right case
            logger.debug("double rotation (left-right) at node %r", self._key)
            self._left = self._left._rotate_left()

        pivot: AVLNode[K] = self._left
        logger.debug("rotating right at node %r (pivot %r)", self._key, pivot._key)

        self._left = pivot._right
        pivot._right = self

        self._update_height()
        self._update_balance()
        pivot._update_height()
        pivot._update_balance()
        return pivot

    def _repair(self) -> AVLNode[K]:
        self._update_height()
        balance = self._update_balance()

        if balance >= 2:
            node = self._rotate_left()
        elif balance <= -2:
            node = self._rotate_right()
        else:
            return self

        # already current after the rotation, recomputed as the final fix-up
        node._update_height()
        return node

    def _print_node(self) -> str:
        return "{}: {:2d}".format(super()._print_node(), self._balance)
