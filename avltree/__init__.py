from .compare import Ordering, key_order, natural_order, reverse_order
from .errors import ConcurrentModificationError, InvariantViolation
from .export import to_networkx
from .iterator import InOrderIterator
from .tree import AVLTree
from .validate import check_invariants

__all__ = [
    "AVLTree",
    "ConcurrentModificationError",
    "InOrderIterator",
    "InvariantViolation",
    "Ordering",
    "check_invariants",
    "key_order",
    "natural_order",
    "reverse_order",
    "to_networkx",
]
