"""Classic array, greedy, sliding-window and linked-list algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "check", "greedy", "linked_list", "sliding_window"]