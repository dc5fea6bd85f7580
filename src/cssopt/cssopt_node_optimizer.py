"""
cssopt node optimizer - the single-node rewrite rules.

Each node kind has one handler, found through a jump table built once in the
constructor.  Handlers optimize their children first (through this optimizer
or the list optimizer), then apply their own rewrites.  A handler returns the
node itself, a replacement node, or None to remove the node from its parent.

Handlers that need to tell their children something (the enclosing keyframes
prefix, function name or property name) pass down a derived context; the
caller's context is never changed.
"""

import logging
import re
from typing import Callable, ClassVar, Dict, List, Optional, Tuple, Type

from cssopt.cssopt_ast import (
    CSSAdjacentSelector, CSSAttributeSelector, CSSCharset, CSSClassSelector, CSSCounterStyle,
    CSSDeclaration, CSSDeclarationBase, CSSDescendantSelector, CSSDimension,
    CSSDirectDescendantSelector, CSSElementSelector, CSSExpression, CSSFontFace,
    CSSFontFeatureValues, CSSFontFeatureValuesBlock, CSSFunc, CSSHexColor, CSSIDSelector,
    CSSIEFilter, CSSIdentifier, CSSImport, CSSKeyframe, CSSKeyframeSelector, CSSKeyframes,
    CSSLinearFunction, CSSMathProduct, CSSMathSum, CSSMedia, CSSMediaExpression,
    CSSMediaQuery, CSSNamespace, CSSNode, CSSNotSelector, CSSNthSelector, CSSNumber,
    CSSNValue, CSSPage, CSSPageMargin, CSSPseudoClassSelector, CSSPseudoElementSelector,
    CSSPseudoSelectorFunction, CSSRuleset, CSSSelectorList, CSSSiblingSelector,
    CSSSimpleSelector, CSSString, CSSStylesheet, CSSSupports, CSSSupportsCondition,
    CSSSupportsConditionList, CSSURI, CSSViewport
)
from cssopt.cssopt_browser_support import supports_declaration, supports_keyframe_prefix
from cssopt.cssopt_colors import COLOR_TO_HEX, HEX_TO_COLOR, hsl_to_rgb, rgb_to_hex, rgb_to_hsl, shorten_hex
from cssopt.cssopt_list_optimizer import CSSListOptimizer, unique_by_text
from cssopt.cssopt_number import format_number
from cssopt.cssopt_optimization_context import CSSOptimizationContext
from cssopt.cssopt_optimization_pass import CSSOptimizationPass
from cssopt.cssopt_properties import (
    FONT_WEIGHT_KEYWORDS, FONT_WEIGHT_PROPERTIES, NON_COLOR_PROPERTIES, NONEABLE_PROPERTIES,
    QUAD_LIST_PROPERTIES
)
from cssopt.cssopt_units import ANGLE_UNITS, LENGTH_UNITS, shortest_equivalent


_VENDOR_PREFIX_RE = re.compile(r'^-[a-z]+-')
_STAR_HTML_HACK_RE = re.compile(r'^\* html($| .+)')

# Functions whose arguments must keep their units even when zero.
_UNIT_PRESERVING_FUNCTIONS = frozenset({
    'calc', '-webkit-calc', '-moz-calc', 'min', 'max', 'clamp', 'hsl', 'hsla'
})

# Units that may be dropped from a zero value.
_DROPPABLE_ZERO_UNITS = frozenset(LENGTH_UNITS) | frozenset(ANGLE_UNITS)

_COLOR_FUNCTIONS = {
    'rgb': 3,
    'rgba': 4,
    'hsl': 3,
    'hsla': 4,
}


def _vendor_prefix(ident: str) -> Optional[str]:
    match = _VENDOR_PREFIX_RE.match(ident)
    return match.group(0) if match else None


def _collapse_quad(terms: List[CSSNode]) -> List[CSSNode]:
    """
    Reduce top/right/bottom/left values to the fewest terms with the same meaning.

    Args:
        terms: Two to four box values

    Returns:
        The shortest equivalent list of terms
    """
    text = [term.to_css() for term in terms]
    if len(terms) == 2:
        expanded = [0, 1, 0, 1]

    elif len(terms) == 3:
        expanded = [0, 1, 2, 1]

    else:
        expanded = [0, 1, 2, 3]

    top, right, bottom, left = (text[index] for index in expanded)
    if top == right == bottom == left:
        keep = 1

    elif top == bottom and right == left:
        keep = 2

    elif right == left:
        keep = 3

    else:
        keep = 4

    return [terms[expanded[index]] for index in range(keep)]


class CSSNodeOptimizer(CSSOptimizationPass):
    """
    Optimize a CSS tree node by node.

    Implements CSSOptimizationPass: optimize(node, context) returns the
    optimized tree (or None if the whole tree optimizes away).  Lists of
    siblings are delegated to a CSSListOptimizer that calls back into this
    optimizer for each element.

    Usage::

        optimizer = CSSNodeOptimizer()
        stylesheet = optimizer.optimize(stylesheet, CSSOptimizationContext(aggressive=True))
    """

    _instance: ClassVar["CSSNodeOptimizer | None"] = None

    def __init__(self) -> None:
        """Build the node type jump table."""
        self._logger = logging.getLogger("CSSNodeOptimizer")
        self._lists = CSSListOptimizer(self.optimize_node)

        self._jump_table: Dict[
            Type[CSSNode], Callable[[CSSNode, CSSOptimizationContext], Optional[CSSNode]]
        ] = {
            CSSStylesheet: self._optimize_stylesheet,
            CSSCharset: self._optimize_unchanged,
            CSSImport: self._optimize_import,
            CSSNamespace: self._optimize_unchanged,
            CSSMedia: self._optimize_media,
            CSSMediaQuery: self._optimize_media_query,
            CSSMediaExpression: self._optimize_media_expression,
            CSSSupports: self._optimize_supports,
            CSSSupportsConditionList: self._optimize_supports_condition_list,
            CSSSupportsCondition: self._optimize_supports_condition,
            CSSPage: self._optimize_page,
            CSSPageMargin: self._optimize_declaration_block,
            CSSFontFace: self._optimize_declaration_block,
            CSSFontFeatureValues: self._optimize_font_feature_values,
            CSSFontFeatureValuesBlock: self._optimize_declaration_block,
            CSSKeyframes: self._optimize_keyframes,
            CSSKeyframe: self._optimize_keyframe,
            CSSKeyframeSelector: self._optimize_keyframe_selector,
            CSSViewport: self._optimize_viewport,
            CSSCounterStyle: self._optimize_declaration_block,
            CSSRuleset: self._optimize_ruleset,
            CSSSelectorList: self._optimize_selector_list,
            CSSSimpleSelector: self._optimize_simple_selector,
            CSSAdjacentSelector: self._optimize_combinator_selector,
            CSSDirectDescendantSelector: self._optimize_combinator_selector,
            CSSSiblingSelector: self._optimize_combinator_selector,
            CSSDescendantSelector: self._optimize_combinator_selector,
            CSSIDSelector: self._optimize_unchanged,
            CSSClassSelector: self._optimize_unchanged,
            CSSElementSelector: self._optimize_element_selector,
            CSSAttributeSelector: self._optimize_unchanged,
            CSSPseudoElementSelector: self._optimize_pseudo_selector,
            CSSPseudoClassSelector: self._optimize_pseudo_selector,
            CSSPseudoSelectorFunction: self._optimize_pseudo_selector_function,
            CSSNotSelector: self._optimize_not_selector,
            CSSNthSelector: self._optimize_nth_selector,
            CSSLinearFunction: self._optimize_unchanged,
            CSSNValue: self._optimize_unchanged,
            CSSDeclaration: self._optimize_declaration,
            CSSIEFilter: self._optimize_ie_filter,
            CSSExpression: self._optimize_expression,
            CSSDimension: self._optimize_dimension,
            CSSFunc: self._optimize_func,
            CSSMathSum: self._optimize_math,
            CSSMathProduct: self._optimize_math,
            CSSHexColor: self._optimize_hex_color,
            CSSNumber: self._optimize_unchanged,
            CSSString: self._optimize_unchanged,
            CSSURI: self._optimize_unchanged,
            CSSIdentifier: self._optimize_unchanged,
        }

    @classmethod
    def shared(cls) -> "CSSNodeOptimizer":
        """Return the optimizer instance shared by CSSNode.optimize()."""
        if cls._instance is None:
            cls._instance = cls()

        return cls._instance

    def optimize(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        return self.optimize_node(node, context)

    def optimize_node(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        """
        Optimize a single node and its children.

        Args:
            node: Node to optimize
            context: Optimization settings and scoped state

        Returns:
            The optimized node, or None if it should be removed

        Raises:
            TypeError: If node is not a known node type
        """
        handler = self._jump_table.get(type(node))
        if handler is None:
            raise TypeError(f"CSSNodeOptimizer: unhandled node type {type(node).__name__}")

        return handler(node, context)

    def _optimize_unchanged(self, node: CSSNode, _context: CSSOptimizationContext) -> Optional[CSSNode]:
        return node

    # ---------------------------------------------------------------------
    # Top level and grouping rules
    # ---------------------------------------------------------------------

    def _optimize_stylesheet(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSStylesheet)
        node.imports = [imp for imp in self._lists.optimize_list(node.imports, context) if isinstance(imp, CSSImport)]
        node.content = self._lists.optimize_blocks(node.content, context)
        return node

    def _optimize_import(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSImport)
        node.medium_list = self._optimize_medium_list(node.medium_list, context)
        return node

    def _optimize_medium_list(
        self,
        medium_list: List[CSSMediaQuery],
        context: CSSOptimizationContext
    ) -> List[CSSMediaQuery]:
        optimized = self._lists.optimize_list(medium_list, context)
        return unique_by_text([query for query in optimized if isinstance(query, CSSMediaQuery)])

    def _optimize_media(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSMedia)
        node.medium_list = self._optimize_medium_list(node.medium_list, context)
        node.content = self._lists.optimize_blocks(node.content, context)
        if not node.content:
            self._logger.debug("Removing empty @media block: %s", node)
            return None

        return node

    def _optimize_media_query(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSMediaQuery)
        expressions = self._lists.optimize_list(node.expressions, context)
        node.expressions = unique_by_text([e for e in expressions if isinstance(e, CSSMediaExpression)])
        return node

    def _optimize_media_expression(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSMediaExpression)
        node.descriptor = node.descriptor.lower()
        if node.value is not None:
            value = self.optimize_node(node.value, context)
            if value is not None:
                node.value = value

        return node

    # ---------------------------------------------------------------------
    # @supports
    # ---------------------------------------------------------------------

    def _optimize_supports(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSSupports)
        node.condition = self._optimize_supports_operand(node.condition, context)
        node.blocks = self._lists.optimize_blocks(node.blocks, context)
        if not node.blocks:
            self._logger.debug("Removing empty @supports block: %s", node)
            return None

        return node

    def _optimize_supports_operand(self, node: CSSNode, context: CSSOptimizationContext) -> CSSNode:
        """
        Optimize one operand of a supports condition.

        A declaration here is a feature test rather than a style, so it is
        never removed; only its name and value are canonicalized.
        """
        if isinstance(node, CSSDeclaration):
            if not node.ident.startswith('--'):
                node.ident = node.ident.lower()
                node.expr = self._optimize_value(node.expr, context.with_declaration_name(node.ident))

            return node

        optimized = self.optimize_node(node, context)
        return node if optimized is None else optimized

    def _optimize_supports_condition(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSSupportsCondition)
        inner = self._optimize_supports_operand(node.condition, context)

        if isinstance(inner, CSSSupportsCondition):
            if not node.negated:
                return inner

            if inner.negated:
                # not (not (x)) -> (x)
                return CSSSupportsCondition(inner.condition)

        node.condition = inner
        return node

    def _optimize_supports_condition_list(
        self,
        node: CSSNode,
        context: CSSOptimizationContext
    ) -> Optional[CSSNode]:
        assert isinstance(node, CSSSupportsConditionList)
        node.combinator = node.combinator.lower()
        conditions = [self._optimize_supports_operand(condition, context) for condition in node.conditions]
        conditions = unique_by_text(conditions)

        if len(conditions) == 1:
            return conditions[0]

        if all(isinstance(c, CSSSupportsCondition) and c.negated for c in conditions):
            # not (a) and not (b) -> not ((a) or (b))
            flipped = 'or' if node.combinator == 'and' else 'and'
            inner = [c.condition for c in conditions if isinstance(c, CSSSupportsCondition)]
            return CSSSupportsCondition(CSSSupportsConditionList(flipped, inner), negated=True)

        node.conditions = conditions
        return node

    # ---------------------------------------------------------------------
    # Blocks holding declarations
    # ---------------------------------------------------------------------

    def _optimize_declaration_block(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        """Shared handler for at-rules whose body is a plain declaration block."""
        assert isinstance(node, (CSSFontFace, CSSFontFeatureValuesBlock, CSSCounterStyle, CSSPageMargin))
        node.content = self._lists.optimize_declarations(node.content, context)
        if not node.content:
            self._logger.debug("Removing empty block: %s", node)
            return None

        return node

    def _optimize_page(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSPage)
        declarations = [item for item in node.content if isinstance(item, CSSDeclarationBase)]
        margins = [item for item in node.content if not isinstance(item, CSSDeclarationBase)]
        node.content = (
            self._lists.optimize_declarations(declarations, context)
            + self._lists.optimize_list(margins, context)
        )
        return node

    def _optimize_font_feature_values(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSFontFeatureValues)
        node.content = self._lists.optimize_list(node.content, context)
        if not node.content:
            self._logger.debug("Removing empty @font-feature-values block: %s", node.font_name)
            return None

        return node

    def _optimize_viewport(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSViewport)
        node.content = self._lists.optimize_declarations(node.content, context.with_vendor_prefix(node.vendor_prefix))
        if not node.content:
            self._logger.debug("Removing empty viewport block")
            return None

        return node

    def _optimize_keyframes(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSKeyframes)
        if node.vendor_prefix and not supports_keyframe_prefix(node.vendor_prefix, context):
            self._logger.debug("Removing unsupported @%skeyframes %s", node.vendor_prefix, node.name)
            return None

        inner_context = context.with_vendor_prefix(node.vendor_prefix)
        frames = [
            frame for frame in self._lists.optimize_list(node.content, inner_context)
            if isinstance(frame, CSSKeyframe)
        ]

        def combine_bodies(first: CSSKeyframe, second: CSSKeyframe) -> CSSKeyframe:
            first.content = self._lists.optimize_declarations(first.content + second.content, inner_context)
            return first

        def combine_stops(first: CSSKeyframe, second: CSSKeyframe) -> CSSKeyframe:
            first.stops = unique_by_text(first.stops + second.stops)
            return first

        frames = self._lists.combine_list(frames, CSSKeyframe.stops_to_css, combine_bodies)
        frames.sort(key=CSSKeyframe.stops_to_css)
        frames = self._lists.combine_list(frames, CSSKeyframe.content_to_css, combine_stops)

        node.content = frames
        if not node.content:
            self._logger.debug("Removing empty @keyframes %s", node.name)
            return None

        return node

    def _optimize_keyframe(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSKeyframe)
        stops = self._lists.optimize_list(node.stops, context)
        node.stops = unique_by_text([stop for stop in stops if isinstance(stop, CSSKeyframeSelector)])
        node.content = self._lists.optimize_declarations(node.content, context)
        if not node.content:
            return None

        return node

    def _optimize_keyframe_selector(self, node: CSSNode, _context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSKeyframeSelector)
        stop = node.stop.lower()
        if stop in ('from', '0%'):
            stop = '0'

        elif stop == '100%':
            stop = 'to'

        node.stop = stop
        return node

    # ---------------------------------------------------------------------
    # Rulesets and selectors
    # ---------------------------------------------------------------------

    def _optimize_ruleset(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSRuleset)
        selector = self.optimize_node(node.selector, context)
        if selector is None:
            self._logger.debug("Removing ruleset with no selectors left: %s", node.selector)
            return None

        node.selector = selector
        node.content = self._lists.optimize_declarations(node.content, context)
        if not node.content:
            self._logger.debug("Removing empty ruleset: %s", node.selector)
            return None

        return node

    def _is_legacy_hack(self, selector: CSSNode, context: CSSOptimizationContext) -> bool:
        return not context.preserve_legacy_hacks and bool(_STAR_HTML_HACK_RE.match(selector.to_css()))

    def _optimize_selector_list(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSSelectorList)
        selectors = self._lists.optimize_list(node.selectors, context)
        selectors.sort(key=lambda selector: selector.to_css())
        selectors = unique_by_text(selectors)

        if context.aggressive:
            for selector in selectors:
                if selector.to_css() == '*':
                    return selector

        if not selectors:
            return None

        if len(selectors) == 1:
            return selectors[0]

        node.selectors = selectors
        return node

    def _optimize_simple_selector(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSSimpleSelector)
        conditions = unique_by_text(self._lists.optimize_list(node.conditions, context))

        # `*.foo` and `.foo` match the same elements.
        if (
            context.aggressive
            and len(conditions) > 1
            and isinstance(conditions[0], CSSElementSelector)
            and conditions[0].ident == '*'
            and conditions[0].namespace is None
        ):
            conditions = conditions[1:]

        node.conditions = conditions
        return node

    def _optimize_combinator_selector(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, (
            CSSAdjacentSelector, CSSDirectDescendantSelector, CSSSiblingSelector, CSSDescendantSelector
        ))
        ancestor = self.optimize_node(node.ancestor, context)
        descendant = self.optimize_node(node.descendant, context)
        if ancestor is None or descendant is None:
            return None

        node.ancestor = ancestor
        node.descendant = descendant
        if self._is_legacy_hack(node, context):
            self._logger.debug("Removing `* html` hack selector: %s", node)
            return None

        return node

    def _optimize_element_selector(self, node: CSSNode, _context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSElementSelector)
        node.ident = node.ident.lower()
        return node

    def _optimize_pseudo_selector(self, node: CSSNode, _context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, (CSSPseudoClassSelector, CSSPseudoElementSelector))
        node.ident = node.ident.lower()
        return node

    def _optimize_pseudo_selector_function(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSPseudoSelectorFunction)
        node.func_name = node.func_name.lower()
        expr = self.optimize_node(node.expr, context)
        if expr is not None:
            node.expr = expr

        return node

    def _optimize_not_selector(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSNotSelector)

        # Dropping the argument of :not() would widen the match, so a selector
        # that optimizes away leaves the original in place.
        selector = self.optimize_node(node.selector, context)
        if selector is not None:
            node.selector = selector

        return node

    def _optimize_nth_selector(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSNthSelector)
        node.func_name = node.func_name.lower()
        linear_func = self.optimize_node(node.linear_func, context)
        if linear_func is not None:
            node.linear_func = linear_func

        if isinstance(node.linear_func, CSSIdentifier):
            node.linear_func.value = node.linear_func.value.lower()

        if node.linear_func.to_css() == '2n+1':
            node.linear_func = CSSIdentifier('odd')

        return node

    # ---------------------------------------------------------------------
    # Declarations
    # ---------------------------------------------------------------------

    def _optimize_declaration(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSDeclaration)

        # Custom properties are case-sensitive and their values are opaque.
        if node.ident.startswith('--'):
            return node

        ident = node.ident.lower()
        if not context.preserve_legacy_hacks:
            if ident.startswith('*'):
                self._logger.debug("Removing `*` hack declaration: %s", node)
                return None

            if node.slash_nine:
                self._logger.debug("Removing `\\9` hack declaration: %s", node)
                return None

        if not supports_declaration(ident, context):
            self._logger.debug("Removing unsupported declaration: %s", node)
            return None

        prefix = _vendor_prefix(ident)
        if context.vendor_prefix and prefix and prefix != context.vendor_prefix:
            self._logger.debug("Removing declaration with mismatched prefix %s: %s", context.vendor_prefix, node)
            return None

        node.ident = ident
        node.expr = self._optimize_value(node.expr, context.with_declaration_name(ident))
        return node

    def _optimize_value(self, value: CSSNode, context: CSSOptimizationContext) -> CSSNode:
        """Optimize a declaration value, treating a lone term as a one-term expression."""
        if not isinstance(value, CSSExpression):
            value = CSSExpression([(None, value)])

        optimized = self.optimize_node(value, context)
        return value if optimized is None else optimized

    def _optimize_ie_filter(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSIEFilter)
        ie_version = context.browser_version('ie')
        if ie_version is not None and ie_version > 9:
            self._logger.debug("Removing IE filter: %s", node)
            return None

        return node

    # ---------------------------------------------------------------------
    # Values
    # ---------------------------------------------------------------------

    def _optimize_expression(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSExpression)
        chain: List[Tuple[Optional[str], CSSNode]] = []
        for operator, term in node.chain:
            optimized = self.optimize_node(term, context)
            chain.append((operator, term if optimized is None else optimized))

        name = context.declaration_name
        if name is not None and context.enclosing_function is None:
            chain = self._optimize_property_value(name, chain)

        if name is not None and name not in NON_COLOR_PROPERTIES:
            chain = [(operator, self._color_name_to_hex(term, context)) for operator, term in chain]

        node.chain = chain
        return node

    def _optimize_property_value(
        self,
        name: str,
        chain: List[Tuple[Optional[str], CSSNode]]
    ) -> List[Tuple[Optional[str], CSSNode]]:
        """Apply the rewrites that depend on which property a top-level value belongs to."""
        if (
            name in QUAD_LIST_PROPERTIES
            and 2 <= len(chain) <= 4
            and all(operator is None for operator, _ in chain[1:])
        ):
            terms = _collapse_quad([term for _, term in chain])
            chain = [(None, term) for term in terms]

        if name in FONT_WEIGHT_PROPERTIES:
            chain = [
                (operator, self._font_weight_number(name, operator, term))
                for operator, term in chain
            ]

        if name in NONEABLE_PROPERTIES and len(chain) == 1:
            operator, term = chain[0]
            if isinstance(term, CSSIdentifier) and term.value.lower() == 'none':
                chain = [(operator, CSSNumber(0))]

        return chain

    def _font_weight_number(self, name: str, operator: Optional[str], term: CSSNode) -> CSSNode:
        # After a "/" the term is a line-height, where `normal` means something else.
        if operator == '/' or not isinstance(term, CSSIdentifier):
            return term

        keyword = term.value.lower()
        weight = FONT_WEIGHT_KEYWORDS.get(keyword)
        if weight is None:
            return term

        # In the font shorthand `normal` may also be the style or variant.
        if name == 'font' and keyword == 'normal':
            return term

        return CSSNumber(float(weight))

    def _color_name_to_hex(self, term: CSSNode, context: CSSOptimizationContext) -> CSSNode:
        if not isinstance(term, CSSIdentifier):
            return term

        # Inside other functions an identifier may name a counter, a variable, etc.
        function = context.enclosing_function
        if function is not None and not function.endswith('gradient'):
            return term

        color = COLOR_TO_HEX.get(term.value.lower())
        if color is None:
            return term

        return CSSHexColor(color)

    def _optimize_dimension(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSDimension)
        function = context.enclosing_function
        if (
            node.number.value == 0
            and node.unit.lower() in _DROPPABLE_ZERO_UNITS
            and function not in _UNIT_PRESERVING_FUNCTIONS
        ):
            return CSSNumber(0)

        value, unit = shortest_equivalent(node.number.value, node.unit, context.aggressive)
        if unit != node.unit:
            self._logger.debug("Converting %s to %s%s", node, format_number(value), unit)
            return CSSDimension(CSSNumber(value), unit)

        return node

    def _optimize_math(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, (CSSMathSum, CSSMathProduct))
        base = self.optimize_node(node.base, context)
        term = self.optimize_node(node.term, context)
        if base is not None:
            node.base = base

        if term is not None:
            node.term = term

        return node

    def _optimize_hex_color(self, node: CSSNode, _context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSHexColor)
        color = shorten_hex(node.color.lower())
        name = HEX_TO_COLOR.get(color)
        if name is not None:
            return CSSIdentifier(name)

        node.color = color
        return node

    def _optimize_func(self, node: CSSNode, context: CSSOptimizationContext) -> Optional[CSSNode]:
        assert isinstance(node, CSSFunc)
        node.name = node.name.lower()
        if node.content is not None:
            content = self.optimize_node(node.content, context.with_enclosing_function(node.name))
            if content is not None:
                node.content = content

        if node.name in _COLOR_FUNCTIONS:
            color = self._optimize_color_function(node)
            if color is not None:
                return color

        return node

    def _color_arguments(self, node: CSSFunc) -> Optional[List[Tuple[float, bool]]]:
        """
        Read the arguments of a colour function.

        Returns:
            List of (value, is_percentage) pairs, or None if the arguments are
            not all plain non-negative numbers and percentages
        """
        content = node.content
        if isinstance(content, CSSExpression):
            chain = content.chain

        elif content is not None:
            chain = [(None, content)]

        else:
            return None

        if len(chain) != _COLOR_FUNCTIONS[node.name]:
            return None

        arguments = []
        for index, (operator, term) in enumerate(chain):
            if index and operator != ',':
                return None

            if isinstance(term, CSSNumber):
                arguments.append((term.value, False))

            elif isinstance(term, CSSDimension) and term.unit == '%':
                arguments.append((term.number.value, True))

            else:
                return None

        if any(value < 0 for value, _ in arguments):
            return None

        return arguments

    def _optimize_color_function(self, node: CSSFunc) -> Optional[CSSNode]:
        """
        Rewrite an all-numeric colour function as the shortest equivalent colour.

        Returns:
            The replacement node, or None to keep the function as it is
        """
        arguments = self._color_arguments(node)
        if arguments is None:
            return None

        if node.name.startswith('rgb'):
            rgb = tuple(
                int(min(value * 255.0 / 100.0 if percent else value, 255.0) + 0.5)
                for value, percent in arguments[:3]
            )

        else:
            hue = arguments[0][0]
            saturation = min(arguments[1][0], 100.0)
            lightness = min(arguments[2][0], 100.0)
            rgb = hsl_to_rgb((hue, saturation, lightness))

        alpha = 1.0
        if len(arguments) == 4:
            value, percent = arguments[3]
            alpha = min(value / 100.0 if percent else value, 1.0)

        red, green, blue = rgb
        if alpha == 1.0:
            color = rgb_to_hex((red, green, blue))
            name = HEX_TO_COLOR.get(color)
            return CSSIdentifier(name) if name is not None else CSSHexColor(color)

        alpha_number = CSSNumber(alpha)
        best: CSSNode = CSSFunc('rgba', CSSExpression([
            (None, CSSNumber(red)),
            (',', CSSNumber(green)),
            (',', CSSNumber(blue)),
            (',', alpha_number),
        ]))

        hue, saturation, lightness = rgb_to_hsl((red, green, blue))
        if hsl_to_rgb((hue, saturation, lightness)) == (red, green, blue):
            hsla = CSSFunc('hsla', CSSExpression([
                (None, CSSNumber(hue)),
                (',', CSSDimension(CSSNumber(saturation), '%')),
                (',', CSSDimension(CSSNumber(lightness), '%')),
                (',', alpha_number),
            ]))
            if len(hsla.to_css()) < len(best.to_css()):
                best = hsla

        return best
