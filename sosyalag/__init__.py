"""Social network analysis on a red-black tree of users, with Graphviz output."""

__version__ = "0.1.0"
__all__ = ["rbtree", "network", "visualize", "cli"]