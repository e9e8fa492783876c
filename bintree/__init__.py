"""Binary trees and binary search trees of integers, with a small command line."""

__version__ = "0.1.0"
__all__ = ["node", "bst", "construct", "cli"]