"""
List and block level rewrites.

Node optimizations that only look at one node live in CSSNodeOptimizer.  The
rewrites here look at a whole list of siblings at once: a declaration block,
or the list of rules inside a stylesheet, @media or @supports block.
"""

import logging
from typing import Callable, List, Optional, TypeVar

from cssopt.cssopt_ast import CSSDeclaration, CSSDeclarationBase, CSSNode
from cssopt.cssopt_optimization_context import CSSOptimizationContext
from cssopt.cssopt_properties import OVERRIDE_PARENTS, properties_interact
from cssopt.cssopt_ruleset_merger import CSSRulesetMerger


T = TypeVar('T')


def _overrides(declaration: CSSDeclarationBase) -> bool:
    """True if a declaration takes effect in every browser and so overrides earlier ones."""
    return not (isinstance(declaration, CSSDeclaration) and declaration.slash_nine)


def _is_important(declaration: CSSDeclarationBase) -> bool:
    return isinstance(declaration, CSSDeclaration) and declaration.important


def unique_by_text(nodes: List[T]) -> List[T]:
    """Drop repeated nodes (by serialized text), keeping the first of each."""
    seen = set()
    result = []
    for node in nodes:
        text = str(node)
        if text in seen:
            continue

        seen.add(text)
        result.append(node)

    return result


class CSSListOptimizer:
    """
    Optimize lists of sibling nodes.

    The optimizer does not know how to optimize an individual node; it is
    handed a callback for that so the node optimizer and the list optimizer
    can recurse into each other.
    """

    def __init__(
        self,
        optimize_node: Callable[[CSSNode, CSSOptimizationContext], Optional[CSSNode]]
    ) -> None:
        self._optimize_node = optimize_node
        self._logger = logging.getLogger("CSSListOptimizer")
        self._merger = CSSRulesetMerger(self)

    def optimize_list(self, nodes: List[CSSNode], context: CSSOptimizationContext) -> List[CSSNode]:
        """Optimize each node in turn, dropping the ones that optimize away."""
        optimized = []
        for node in nodes:
            result = self._optimize_node(node, context)
            if result is not None:
                optimized.append(result)

        return optimized

    def optimize_declarations(self, nodes: List[CSSNode], context: CSSOptimizationContext) -> List[CSSNode]:
        """
        Optimize a declaration block.

        Besides optimizing each declaration this removes longhands that a later
        shorthand resets, orders the block by property name and removes exact
        duplicates.  Declarations whose properties interact (the same property,
        or a longhand and one of its shorthands) never change their relative
        order, so fallback values and shorthand/longhand pairs keep working.

        Args:
            nodes: Declarations of the block, in source order
            context: Optimization settings

        Returns:
            The optimized block
        """
        declarations = self.optimize_list(nodes, context)

        seen = set()
        kept: List[CSSNode] = []
        for declaration in reversed(declarations):
            assert isinstance(declaration, CSSDeclarationBase)
            ident = declaration.identifier()
            parents = OVERRIDE_PARENTS.get(ident, [])
            if not _is_important(declaration) and any(parent in seen for parent in parents):
                self._logger.debug("Removing overridden declaration: %s", declaration)
                continue

            kept.append(declaration)
            if _overrides(declaration):
                seen.add(ident)

        kept.reverse()

        ordered: List[CSSNode] = []
        for declaration in kept:
            assert isinstance(declaration, CSSDeclarationBase)
            position = len(ordered)
            while position > 0:
                previous = ordered[position - 1]
                assert isinstance(previous, CSSDeclarationBase)
                if previous.identifier() <= declaration.identifier():
                    break

                if properties_interact(previous.identifier(), declaration.identifier()):
                    break

                position -= 1

            ordered.insert(position, declaration)

        # A repeated declaration only matters in its last position.
        ordered.reverse()
        result = unique_by_text(ordered)
        result.reverse()
        return result

    def optimize_blocks(self, nodes: List[CSSNode], context: CSSOptimizationContext) -> List[CSSNode]:
        """
        Optimize a list of rules.

        Args:
            nodes: Rules in source order
            context: Optimization settings

        Returns:
            The optimized rules with mergeable rulesets combined
        """
        blocks = self.optimize_list(nodes, context)

        if context.aggressive:
            blocks.reverse()
            blocks = unique_by_text(blocks)
            blocks.reverse()
            blocks = self._merger.merge_same_bodies(blocks)
            blocks = self._merger.remove_overridden(blocks)

        return self._merger.combine_adjacent(blocks, context)

    def combine_list(
        self,
        nodes: List[T],
        key: Callable[[T], str],
        combine: Callable[[T, T], T]
    ) -> List[T]:
        """
        Fold together nodes that share a key.

        Each node is combined into the first node seen with the same key; the
        result keeps the position of that first node.

        Args:
            nodes: Nodes to combine
            key: Function giving the grouping key of a node
            combine: Function merging a later node into an earlier one

        Returns:
            One node per distinct key, in order of first appearance
        """
        positions: dict[str, int] = {}
        result: List[T] = []
        for node in nodes:
            node_key = key(node)
            if node_key in positions:
                index = positions[node_key]
                result[index] = combine(result[index], node)
                continue

            positions[node_key] = len(result)
            result.append(node)

        return result
