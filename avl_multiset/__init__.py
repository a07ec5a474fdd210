from . import base
from . import avl

from .base import Tree, TreeNode
from .avl import AVLTree, AVLNode

__all__ = [
    "Tree",
    "TreeNode",
    "AVLTree",
    "AVLNode",
]
