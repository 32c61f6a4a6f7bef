from .stack_cache import StackCache

__all__ = ["StackCache"]
