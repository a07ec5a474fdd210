from __future__ import annotations

import logging
from typing import Any, Callable, Generic, List, Optional, Tuple, Type, TypeVar

from .iter import LevelOrderIter

K = TypeVar("K")

logger = logging.getLogger(__name__)


class TreeNode(Generic[K]):
    def __init__(self, key: K, tree: Tree[K]):
        self._key: K = key
        self.count: int = 1
        self.height: int = 0

        self_cls = self.__class__

        self._left: Optional[self_cls[K]] = None
        self._right: Optional[self_cls[K]] = None
        self._tree: Tree[K] = tree

    @property
    def key(self) -> K:
        """The key stored in this node.

        Only changed in place when a two-child deletion copies the
        successor into this node.
        """
        return self._key

    @property
    def left(self) -> Optional[TreeNode[K]]:
        return self._left

    @property
    def right(self) -> Optional[TreeNode[K]]:
        return self._right

    def _copy_data(self, other: TreeNode[K]):
        self._key = other._key
        self.count = other.count

    def _update_height(self) -> int:
        left_height = self._left.height if self._left is not None else -1
        right_height = self._right.height if self._right is not None else -1
        self.height = max(left_height, right_height) + 1
        return self.height

    def _min_node(self) -> TreeNode[K]:
        node = self
        while node._left is not None:
            node = node._left
        return node

    def _max_node(self) -> TreeNode[K]:
        node = self
        while node._right is not None:
            node = node._right
        return node

    def _find_node(self, key: K) -> Optional[TreeNode[K]]:
        compare = self._tree._compare
        node = self

        while node is not None:
            c = compare(key, node._key)
            if c == 0:
                return node
            elif c < 0:
                node = node._left
            else:
                node = node._right

        return None

    def _insert_node(self, key: K) -> Tuple[bool, TreeNode[K]]:
        """Insert `key` into the subtree rooted at this node.

        Returns a tuple containing:
            - Whether a new node was created
            - The root of the (possibly restructured) subtree
        """
        c = self._tree._compare(key, self._key)

        if c == 0:
            self.count += 1
            created_new = False
        elif c < 0:
            if self._left is not None:
                created_new, self._left = self._left._insert_node(key)
            else:
                self._left = self.__class__(key, self._tree)
                created_new = True
        else:
            if self._right is not None:
                created_new, self._right = self._right._insert_node(key)
            else:
                self._right = self.__class__(key, self._tree)
                created_new = True

        return (created_new, self._repair())

    def _delete_node(
        self, key: K, unlink: bool = False
    ) -> Tuple[bool, Optional[TreeNode[K]]]:
        """Remove one occurrence of `key` from the subtree rooted at this node.

        If `unlink` is set, the matching node is removed outright whatever
        its count; this is used to drop a successor whose data has already
        been copied upward.

        Returns a tuple containing:
            - Whether a node was structurally removed
            - The new root of the subtree (None if it became empty)
        """
        c = self._tree._compare(key, self._key)

        if c < 0:
            if self._left is None:
                return (False, self)
            removed, self._left = self._left._delete_node(key, unlink)
        elif c > 0:
            if self._right is None:
                return (False, self)
            removed, self._right = self._right._delete_node(key, unlink)
        elif self.count > 1 and not unlink:
            self.count -= 1
            return (False, self)
        elif self._left is None or self._right is None:
            return (True, self._delete_single_child())
        else:
            successor = self._right._min_node()
            logger.debug(
                "replacing two-child node %r with successor %r",
                self._key,
                successor._key,
            )
            self._copy_data(successor)
            removed, self._right = self._right._delete_node(
                successor._key, unlink=True
            )

        return (removed, self._repair())

    def _print_recursive(self, level: int) -> str:
        ret = ""
        if self._left is not None:
            ret = self._left._print_recursive(level + 1)

        ret += ("    " * level) + self._print_node() + "\n"

        if self._right is not None:
            ret += self._right._print_recursive(level + 1)

        return ret

    # methods for subclasses to override:

    def _print_node(self) -> str:
        if self.count > 1:
            return "{} (x{})".format(self._key, self.count)
        return str(self._key)

    def _delete_single_child(self) -> Optional[TreeNode[K]]:
        if self._left is not None:
            replace_with = self._left
        else:
            replace_with = self._right

        logger.debug("unlinking node %r", self._key)

        # the promoted child is repaired once before it is handed back up
        self._left = None
        self._right = None
        if replace_with is not None:
            return replace_with._repair()
        return None

    def _repair(self) -> TreeNode[K]:
        self._update_height()
        return self


class Tree(Generic[K]):
    def __init__(
        self,
        node_class: Type[TreeNode] = TreeNode,
        key: Optional[Callable[[K], Any]] = None,
    ):
        self._node_cls = node_class
        self._sort_key = key
        self._root: Optional[TreeNode[K]] = None
        self._len: int = 0

    def _compare(self, a: K, b: K) -> int:
        if self._sort_key is not None:
            a = self._sort_key(a)
            b = self._sort_key(b)

        if a < b:
            return -1
        elif b < a:
            return 1
        return 0

    def get_node(self, key: K) -> Optional[TreeNode[K]]:
        """Directly retrieve the node holding `key`, or None if absent."""
        if self._root is None:
            return None
        return self._root._find_node(key)

    def insert(self, key: K):
        """Insert one occurrence of `key`.

        A key that is already present only has its count incremented.
        """
        if self._root is None:
            self._root = self._node_cls(key, self)
            self._len = 1
            return

        created_new, self._root = self._root._insert_node(key)
        if created_new:
            self._len += 1

    def delete(self, key: K):
        """Remove one occurrence of `key`. Does nothing if `key` is absent."""
        if self._root is None:
            return

        removed, self._root = self._root._delete_node(key)
        if removed:
            self._len -= 1

    def search(self, key: K) -> Optional[K]:
        node = self.get_node(key)
        if node is None:
            return None
        return node.key

    def count(self, key: K) -> int:
        """Number of occurrences of `key` currently stored."""
        node = self.get_node(key)
        if node is None:
            return 0
        return node.count

    def min(self) -> Optional[K]:
        if self._root is None:
            return None
        return self._root._min_node().key

    def max(self) -> Optional[K]:
        if self._root is None:
            return None
        return self._root._max_node().key

    def size(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def height(self) -> int:
        if self._root is None:
            return -1
        return self._root.height

    def breadth_first(self) -> List[K]:
        """Keys in level order, one entry per distinct key."""
        return list(LevelOrderIter(LevelOrderIter.KEYS, self._root))

    def print(self) -> str:
        if self._root is not None:
            return self._root._print_recursive(0)
        else:
            return "<empty tree>"

    def __contains__(self, key: K) -> bool:
        return self.get_node(key) is not None

    def __len__(self) -> int:
        return self._len
