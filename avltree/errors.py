class InvariantViolation(AssertionError):
    """Raised when a tree walk finds a broken ordering, height or balance"""


class ConcurrentModificationError(RuntimeError):
    """Raised when a tree is structurally changed while an iterator is live"""
