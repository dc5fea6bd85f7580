"""
Structural merging of rulesets.

All of the checks here are static and conservative: two rulesets are only
combined when no other rule could be caught between them in the cascade.
"""

import logging
from typing import TYPE_CHECKING, FrozenSet, List, Optional, Tuple

from cssopt.cssopt_ast import (
    CSSCombinatorSelector, CSSDeclaration, CSSDeclarationBase, CSSElementSelector,
    CSSIDSelector, CSSNode, CSSPseudoElementSelector, CSSRuleset, CSSSelectorList,
    CSSSimpleSelector
)
from cssopt.cssopt_optimization_context import CSSOptimizationContext
from cssopt.cssopt_properties import OVERRIDE_PARENTS, properties_interact

if TYPE_CHECKING:
    from cssopt.cssopt_list_optimizer import CSSListOptimizer


def selector_alternatives(selector: CSSNode) -> List[CSSNode]:
    """Return the comma-separated alternatives of a selector."""
    if isinstance(selector, CSSSelectorList):
        return list(selector.selectors)

    return [selector]


def _rightmost_compound(selector: CSSNode) -> List[CSSNode]:
    while isinstance(selector, CSSCombinatorSelector):
        selector = selector.descendant

    if isinstance(selector, CSSSimpleSelector):
        return selector.conditions

    return [selector]


def _subject(selector: CSSNode) -> Tuple[Optional[str], FrozenSet[str], FrozenSet[str]]:
    """
    Describe the element a selector styles.

    Returns:
        Tuple of (element name or None, IDs, pseudo-elements) taken from the
        rightmost compound selector
    """
    element = None
    ids = set()
    pseudo_elements = set()
    for condition in _rightmost_compound(selector):
        if isinstance(condition, CSSElementSelector) and condition.ident != '*':
            element = condition.ident.lower()

        elif isinstance(condition, CSSIDSelector):
            ids.add(condition.ident)

        elif isinstance(condition, CSSPseudoElementSelector):
            pseudo_elements.add(condition.ident.lower())

    return element, frozenset(ids), frozenset(pseudo_elements)


def never_match_same_element(first: CSSNode, second: CSSNode) -> bool:
    """
    True if two selectors can be shown never to style the same element.

    Only the rightmost compound selectors are compared: different element
    names, different IDs or different pseudo-elements rule out a shared match.
    """
    first_element, first_ids, first_pseudo = _subject(first)
    second_element, second_ids, second_pseudo = _subject(second)

    if first_element is not None and second_element is not None and first_element != second_element:
        return True

    if first_ids and second_ids and first_ids != second_ids:
        return True

    return first_pseudo != second_pseudo


def _declaration_ident(declaration: CSSNode) -> str:
    assert isinstance(declaration, CSSDeclarationBase)
    return declaration.identifier()


class CSSRulesetMerger:
    """Combine rulesets that share a body or a selector."""

    def __init__(self, list_optimizer: "CSSListOptimizer") -> None:
        self._lists = list_optimizer
        self._logger = logging.getLogger("CSSRulesetMerger")

    def merge_selectors(self, first: CSSNode, second: CSSNode) -> CSSNode:
        """
        Union the alternatives of two selectors.

        Returns:
            A sorted, duplicate-free selector list, or the only selector if the
            union has just one alternative
        """
        by_text = {}
        for alternative in selector_alternatives(first) + selector_alternatives(second):
            by_text.setdefault(alternative.to_css(), alternative)

        selectors = [by_text[text] for text in sorted(by_text)]
        if len(selectors) == 1:
            return selectors[0]

        return CSSSelectorList(selectors)

    def can_combine(self, blocks: List[CSSNode], first: int, second: int) -> bool:
        """
        Check whether two rulesets with the same body can be merged.

        Merging moves the selectors of the earlier ruleset down to the later
        one.  That is safe when every rule in between is a ruleset that either
        sets no related property or can never style the same element as
        either of the two rulesets.

        Args:
            blocks: Sibling rules
            first: Index of the earlier ruleset
            second: Index of the later ruleset

        Returns:
            True if the rulesets can be merged
        """
        earlier = blocks[first]
        later = blocks[second]
        if not isinstance(earlier, CSSRuleset) or not isinstance(later, CSSRuleset):
            return False

        if earlier.content_to_css() != later.content_to_css():
            return False

        idents = [_declaration_ident(declaration) for declaration in earlier.content]
        selectors = selector_alternatives(earlier.selector) + selector_alternatives(later.selector)

        for block in blocks[first + 1:second]:
            if not isinstance(block, CSSRuleset):
                return False

            interacts = any(
                properties_interact(_declaration_ident(declaration), ident)
                for declaration in block.content
                for ident in idents
            )
            if not interacts:
                continue

            if all(
                never_match_same_element(between, selector)
                for between in selector_alternatives(block.selector)
                for selector in selectors
            ):
                continue

            return False

        return True

    def merge_same_bodies(self, blocks: List[CSSNode]) -> List[CSSNode]:
        """
        Merge non-adjacent rulesets with identical bodies where it is safe.

        The earlier ruleset's selectors move to the later ruleset.  A single
        scan can miss merges that only become possible after another merge;
        re-running the optimizer picks those up.
        """
        blocks = list(blocks)
        index = 0
        while index < len(blocks):
            for later in range(index + 1, len(blocks)):
                if not self.can_combine(blocks, index, later):
                    continue

                earlier = blocks[index]
                target = blocks[later]
                assert isinstance(earlier, CSSRuleset) and isinstance(target, CSSRuleset)
                self._logger.debug("Merging ruleset %s into %s", earlier.selector, target.selector)
                blocks[later] = CSSRuleset(self.merge_selectors(earlier.selector, target.selector), target.content)
                del blocks[index]
                break

            else:
                index += 1

        return blocks

    def remove_overridden(self, blocks: List[CSSNode]) -> List[CSSNode]:
        """
        Remove declarations that a later ruleset with the same selector resets.

        A later rule with an identical selector always wins the cascade, so an
        earlier declaration of the same property (or of a longhand the later
        shorthand resets) is dead.  An `!important` declaration is only removed
        by a later `!important` one.
        """
        result: List[CSSNode] = []
        for index, block in enumerate(blocks):
            if not isinstance(block, CSSRuleset):
                result.append(block)
                continue

            selector = block.selector.to_css()
            later_rules = [
                later for later in blocks[index + 1:]
                if isinstance(later, CSSRuleset) and later.selector.to_css() == selector
            ]
            if not later_rules:
                result.append(block)
                continue

            content = [
                declaration for declaration in block.content
                if not self._is_overridden(declaration, later_rules)
            ]
            if len(content) != len(block.content):
                self._logger.debug("Removed %d overridden declarations from %s",
                                   len(block.content) - len(content), selector)

            if content:
                block.content = content
                result.append(block)

        return result

    def _is_overridden(self, declaration: CSSNode, later_rules: List[CSSRuleset]) -> bool:
        ident = _declaration_ident(declaration)
        important = isinstance(declaration, CSSDeclaration) and declaration.important
        resetting = {ident, *OVERRIDE_PARENTS.get(ident, [])}
        for rule in later_rules:
            for later in rule.content:
                if isinstance(later, CSSDeclaration) and later.slash_nine:
                    continue

                if _declaration_ident(later) not in resetting:
                    continue

                later_important = isinstance(later, CSSDeclaration) and later.important
                if important and not later_important:
                    continue

                return True

        return False

    def combine_adjacent(self, blocks: List[CSSNode], context: CSSOptimizationContext) -> List[CSSNode]:
        """
        Merge neighbouring rulesets.

        Neighbours with identical bodies get one ruleset with the union of the
        selectors.  Neighbours with identical selectors get one ruleset with
        the earlier body followed by the later body, re-optimized so the later
        declarations still win.

        Args:
            blocks: Sibling rules
            context: Optimization settings

        Returns:
            The combined rules
        """
        combined: List[CSSNode] = []
        for block in blocks:
            previous = combined[-1] if combined else None
            if not isinstance(block, CSSRuleset) or not isinstance(previous, CSSRuleset):
                combined.append(block)
                continue

            if previous.content_to_css() == block.content_to_css():
                self._logger.debug("Combining rulesets with equal bodies: %s, %s", previous.selector, block.selector)
                combined[-1] = CSSRuleset(self.merge_selectors(previous.selector, block.selector), block.content)
                continue

            if previous.selector.to_css() == block.selector.to_css():
                self._logger.debug("Combining rulesets with equal selectors: %s", block.selector)
                content = self._lists.optimize_declarations(previous.content + block.content, context)
                combined[-1] = CSSRuleset(previous.selector, content)
                continue

            combined.append(block)

        return combined
