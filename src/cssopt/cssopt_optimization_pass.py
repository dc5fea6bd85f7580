"""
cssopt optimization pass
"""

from typing import Optional

from cssopt.cssopt_ast import CSSNode
from cssopt.cssopt_optimization_context import CSSOptimizationContext


class CSSOptimizationPass:
    """Base class for CSS tree optimization passes."""

    def optimize(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        """
        Transform a tree, returning the optimized version.

        Args:
            node: Input tree
            context: Optimization settings

        Returns:
            Optimized tree, or None if the node optimizes away entirely
        """
        raise NotImplementedError
