from .stack_graph_builder import StackGraphBuilder

__all__ = ["StackGraphBuilder"]
