"""
cssopt AST node hierarchy.

The tree is produced by an external CSS parser and consumed by the optimizer
and the two serializers.  Every node can:

- to_css():  produce the exact, minimal text for the node
- pretty():  produce indented, human-readable text
- optimize(): return a smaller equivalent node, a different node kind, or None
  when the node should be removed from its parent

Nodes are plain mutable dataclasses owned by exactly one parent.  optimize()
may rewrite a node in place or build a replacement, so callers must always use
the returned value.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, List, Optional, Tuple

from cssopt.cssopt_number import format_number, parse_number

if TYPE_CHECKING:
    from cssopt.cssopt_optimization_context import CSSOptimizationContext


_IDENT_RE = re.compile(r'^-?[_a-zA-Z][_a-zA-Z0-9-]*$')
_URI_NEEDS_QUOTES_RE = re.compile(r'[\s\'"()\\]')


def _pad(indent: int, indent_width: int) -> str:
    return ' ' * (indent * indent_width)


class CSSNode(ABC):
    """Abstract base class for all cssopt AST nodes."""

    @abstractmethod
    def to_css(self) -> str:
        """Serialize the node to minimal CSS text."""

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        """
        Serialize the node to formatted CSS text.

        Args:
            indent: Nesting depth of the node
            indent_width: Number of spaces per nesting level

        Returns:
            Formatted text.  Block-level nodes return complete lines ending in a
            newline; inline nodes return a fragment.
        """
        return self.to_css()

    def optimize(self, context: "CSSOptimizationContext") -> Optional["CSSNode"]:
        """
        Optimize the node.

        Args:
            context: Optimization settings and scoped state

        Returns:
            The optimized node (possibly of a different kind), or None if the
            node should be removed
        """
        from cssopt.cssopt_node_optimizer import CSSNodeOptimizer
        return CSSNodeOptimizer.shared().optimize_node(self, context)

    def __str__(self) -> str:
        return self.to_css()


def _join_css(nodes: List[CSSNode], separator: str = '') -> str:
    return separator.join(node.to_css() for node in nodes)


def _pretty_declaration_lines(content: List[CSSNode], indent: int, indent_width: int) -> str:
    pad = _pad(indent, indent_width)
    return ''.join(f"{pad}{item.pretty(indent, indent_width)};\n" for item in content)


def _pretty_block(header: str, body: str, indent: int, indent_width: int) -> str:
    pad = _pad(indent, indent_width)
    return f"{pad}{header} {{\n{body}{pad}}}\n"


def _pretty_blocks(content: List[CSSNode], indent: int, indent_width: int) -> str:
    return ''.join(item.pretty(indent, indent_width) for item in content)


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

@dataclass
class CSSNumber(CSSNode):
    """A bare number; text, NaN and infinite values are read through parse_number()."""
    value: float

    def __post_init__(self) -> None:
        self.value = parse_number(self.value)

    def to_css(self) -> str:
        return format_number(self.value)

    def to_css_positive(self) -> str:
        """Serialize the absolute value (used after an explicit sign)."""
        return format_number(self.value, positive=True)

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return format_number(self.value, keep_leading_zero=True)


@dataclass
class CSSIdentifier(CSSNode):
    """A bare keyword such as `auto`, `none` or a colour name."""
    value: str

    def to_css(self) -> str:
        return self.value


@dataclass
class CSSString(CSSNode):
    """A quoted string; value holds the unescaped text."""
    value: str

    def to_css(self) -> str:
        single = "'" + self.value.replace("'", "\\'") + "'"
        double = '"' + self.value.replace('"', '\\"') + '"'
        return single if len(single) < len(double) else double


@dataclass
class CSSURI(CSSNode):
    """A `url(...)` value; uri holds the unquoted location."""
    uri: str

    def as_string(self) -> CSSString:
        return CSSString(self.uri)

    def to_css(self) -> str:
        if _URI_NEEDS_QUOTES_RE.search(self.uri):
            return f"url({self.as_string().to_css()})"

        return f"url({self.uri})"


@dataclass
class CSSHexColor(CSSNode):
    """A hex colour such as `#fa0`."""
    color: str

    def to_css(self) -> str:
        return self.color


@dataclass
class CSSDimension(CSSNode):
    """A number with a unit, such as `12px` or `50%`."""
    number: CSSNumber
    unit: str = ''

    def to_css(self) -> str:
        return self.number.to_css() + self.unit

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return self.number.pretty(indent, indent_width) + self.unit


@dataclass
class CSSExpression(CSSNode):
    """
    A value as an ordered chain of (operator, term) pairs.

    The operator of the first pair is ignored.  An operator of None means the
    terms are separated by whitespace; otherwise it is "," or "/".
    """
    chain: List[Tuple[Optional[str], CSSNode]] = field(default_factory=list)

    def terms(self) -> List[CSSNode]:
        return [term for _, term in self.chain]

    def to_css(self) -> str:
        output = []
        for index, (operator, term) in enumerate(self.chain):
            if index:
                output.append(operator or ' ')

            output.append(term.to_css())

        return ''.join(output)

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        output = []
        for index, (operator, term) in enumerate(self.chain):
            if index:
                if operator == ',':
                    output.append(', ')

                elif operator is None:
                    output.append(' ')

                else:
                    output.append(operator)

            output.append(term.pretty(indent, indent_width))

        return ''.join(output)


@dataclass
class CSSFunc(CSSNode):
    """A function call such as `rgba(0,0,0,.5)` or `calc(100% - 2px)`."""
    name: str
    content: Optional[CSSNode] = None

    def to_css(self) -> str:
        inner = self.content.to_css() if self.content is not None else ''
        return f"{self.name}({inner})"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        inner = self.content.pretty(indent, indent_width) if self.content is not None else ''
        return f"{self.name}({inner})"


@dataclass
class CSSMathSum(CSSNode):
    """An addition or subtraction inside calc()."""
    base: CSSNode
    operator: str
    term: CSSNode

    def to_css(self) -> str:
        term = self.term.to_css()
        if isinstance(self.term, CSSMathSum):
            term = f"({term})"

        # Whitespace around + and - is mandatory in calc().
        return f"{self.base.to_css()} {self.operator} {term}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        term = self.term.pretty(indent, indent_width)
        if isinstance(self.term, CSSMathSum):
            term = f"({term})"

        return f"{self.base.pretty(indent, indent_width)} {self.operator} {term}"


@dataclass
class CSSMathProduct(CSSNode):
    """A multiplication or division inside calc()."""
    base: CSSNode
    operator: str
    term: CSSNode

    def _operand(self, node: CSSNode, text: str) -> str:
        return f"({text})" if isinstance(node, CSSMathSum) else text

    def to_css(self) -> str:
        base = self._operand(self.base, self.base.to_css())
        term = self._operand(self.term, self.term.to_css())
        return f"{base}{self.operator}{term}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        base = self._operand(self.base, self.base.pretty(indent, indent_width))
        term = self._operand(self.term, self.term.pretty(indent, indent_width))
        return f"{base} {self.operator} {term}"


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

class CSSDeclarationBase(CSSNode):
    """Entries of a declaration block: anything with a property identifier."""

    @abstractmethod
    def identifier(self) -> str:
        """Return the property name this entry sets."""


@dataclass
class CSSDeclaration(CSSDeclarationBase):
    """A `property: value` pair."""
    ident: str
    expr: CSSNode
    important: bool = False
    slash_nine: bool = False

    def identifier(self) -> str:
        return self.ident

    def to_css(self) -> str:
        return (
            f"{self.ident}:{self.expr.to_css()}"
            + ('!important' if self.important else '')
            + ('\\9' if self.slash_nine else '')
        )

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return (
            f"{self.ident}: {self.expr.pretty(indent, indent_width)}"
            + (' !important' if self.important else '')
            + (' \\9' if self.slash_nine else '')
        )


@dataclass
class CSSIEFilter(CSSDeclarationBase):
    """A legacy `filter: progid:...` declaration kept as opaque text."""
    blob: str

    def identifier(self) -> str:
        return 'filter'

    def to_css(self) -> str:
        return self.blob


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------

@dataclass
class CSSIDSelector(CSSNode):
    ident: str

    def to_css(self) -> str:
        return '#' + self.ident


@dataclass
class CSSClassSelector(CSSNode):
    ident: str

    def to_css(self) -> str:
        return '.' + self.ident


@dataclass
class CSSElementSelector(CSSNode):
    """An element name (or `*`), optionally qualified by a namespace."""
    ident: str
    namespace: Optional[str] = None

    def to_css(self) -> str:
        if self.namespace is None:
            return self.ident

        return f"{self.namespace}|{self.ident}"


@dataclass
class CSSAttributeSelector(CSSNode):
    """An attribute test such as `[href]` or `[type="text"]`."""
    ident: str
    comparison: Optional[str] = None
    value: Optional[CSSNode] = None

    def to_css(self) -> str:
        if self.value is None or self.comparison is None:
            return f"[{self.ident}]"

        if isinstance(self.value, CSSString) and _IDENT_RE.match(self.value.value):
            value = self.value.value

        else:
            value = self.value.to_css()

        return f"[{self.ident}{self.comparison}{value}]"


@dataclass
class CSSPseudoElementSelector(CSSNode):
    ident: str

    def to_css(self) -> str:
        return '::' + self.ident


@dataclass
class CSSPseudoClassSelector(CSSNode):
    ident: str

    def to_css(self) -> str:
        return ':' + self.ident


@dataclass
class CSSPseudoSelectorFunction(CSSNode):
    """A functional pseudo-class such as `:lang(en)`."""
    func_name: str
    expr: CSSNode

    def to_css(self) -> str:
        return f":{self.func_name}({self.expr.to_css()})"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return f":{self.func_name}({self.expr.pretty(indent, indent_width)})"


@dataclass
class CSSNotSelector(CSSNode):
    selector: CSSNode

    def to_css(self) -> str:
        return f":not({self.selector.to_css()})"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return f":not({self.selector.pretty(indent, indent_width)})"


@dataclass
class CSSNValue(CSSNode):
    """The `An` part of an `An+B` expression."""
    coef: float

    def to_css(self) -> str:
        if self.coef == 1:
            return 'n'

        if self.coef == -1:
            return '-n'

        if self.coef == 0:
            return '0'

        return format_number(self.coef) + 'n'


@dataclass
class CSSLinearFunction(CSSNode):
    """An `An+B` expression; n_value is None for a bare offset."""
    n_value: Optional[CSSNValue]
    offset: CSSNumber

    def _format(self, padded: bool) -> str:
        if self.n_value is None:
            return self.offset.to_css()

        if self.offset.value == 0:
            return self.n_value.to_css()

        operator = '-' if self.offset.value < 0 else '+'
        if padded:
            operator = f" {operator} "

        return self.n_value.to_css() + operator + self.offset.to_css_positive()

    def to_css(self) -> str:
        return self._format(False)

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return self._format(True)


@dataclass
class CSSNthSelector(CSSNode):
    """`:nth-child(...)` and friends; linear_func is a CSSLinearFunction or `odd`/`even`."""
    func_name: str
    linear_func: CSSNode

    def to_css(self) -> str:
        return f":{self.func_name}({self.linear_func.to_css()})"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return f":{self.func_name}({self.linear_func.pretty(indent, indent_width)})"


@dataclass
class CSSSimpleSelector(CSSNode):
    """A compound selector: element, id, class, attribute and pseudo conditions."""
    conditions: List[CSSNode] = field(default_factory=list)

    def to_css(self) -> str:
        return _join_css(self.conditions)

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return ''.join(condition.pretty(indent, indent_width) for condition in self.conditions)


@dataclass
class CSSCombinatorSelector(CSSNode):
    """Two selectors joined by a combinator; ancestor is always the left-hand side."""
    COMBINATOR: ClassVar[str] = ' '

    ancestor: CSSNode
    descendant: CSSNode

    def to_css(self) -> str:
        return self.ancestor.to_css() + self.COMBINATOR + self.descendant.to_css()

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        combinator = ' ' if self.COMBINATOR == ' ' else f" {self.COMBINATOR} "
        return (
            self.ancestor.pretty(indent, indent_width)
            + combinator
            + self.descendant.pretty(indent, indent_width)
        )


@dataclass
class CSSAdjacentSelector(CSSCombinatorSelector):
    COMBINATOR: ClassVar[str] = '+'


@dataclass
class CSSDirectDescendantSelector(CSSCombinatorSelector):
    COMBINATOR: ClassVar[str] = '>'


@dataclass
class CSSSiblingSelector(CSSCombinatorSelector):
    COMBINATOR: ClassVar[str] = '~'


@dataclass
class CSSDescendantSelector(CSSCombinatorSelector):
    COMBINATOR: ClassVar[str] = ' '


@dataclass
class CSSSelectorList(CSSNode):
    """Comma-separated alternatives; always holds at least two selectors once optimized."""
    selectors: List[CSSNode] = field(default_factory=list)

    def to_css(self) -> str:
        return _join_css(self.selectors, ',')

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        separator = ', '
        if len(self.to_css()) >= 80:
            separator = ',\n' + _pad(indent, indent_width)

        return separator.join(selector.pretty(indent, indent_width) for selector in self.selectors)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

@dataclass
class CSSRuleset(CSSNode):
    """A style rule: a selector (or selector list) and a declaration block."""
    selector: CSSNode
    content: List[CSSNode] = field(default_factory=list)

    def content_to_css(self) -> str:
        return _join_css(self.content, ';')

    def to_css(self) -> str:
        return f"{self.selector.to_css()}{{{self.content_to_css()}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return _pretty_block(
            self.selector.pretty(indent, indent_width),
            _pretty_declaration_lines(self.content, indent + 1, indent_width),
            indent,
            indent_width
        )


@dataclass
class CSSMediaExpression(CSSNode):
    """A media feature test such as `(min-width:600px)`."""
    descriptor: str
    value: Optional[CSSNode] = None

    def to_css(self) -> str:
        if self.value is None:
            return f"({self.descriptor})"

        return f"({self.descriptor}:{self.value.to_css()})"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        if self.value is None:
            return f"({self.descriptor})"

        return f"({self.descriptor}: {self.value.pretty(indent, indent_width)})"


@dataclass
class CSSMediaQuery(CSSNode):
    """One media query: an optional `only`/`not` prefix, a media type and feature tests."""
    media_type: Optional[str] = None
    prefix: Optional[str] = None
    expressions: List[CSSMediaExpression] = field(default_factory=list)

    def _format(self, expressions: List[str]) -> str:
        output = []
        if self.media_type:
            if self.prefix:
                output.append(self.prefix)

            output.append(self.media_type)
            if expressions:
                output.append('and')

        if expressions:
            output.append(' and '.join(expressions))

        return ' '.join(output)

    def to_css(self) -> str:
        return self._format([expression.to_css() for expression in self.expressions])

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return self._format([expression.pretty(indent, indent_width) for expression in self.expressions])


@dataclass
class CSSMedia(CSSNode):
    medium_list: List[CSSMediaQuery] = field(default_factory=list)
    content: List[CSSNode] = field(default_factory=list)

    def to_css(self) -> str:
        return f"@media {_join_css(self.medium_list, ',')}{{{_join_css(self.content)}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        media = ', '.join(query.pretty(indent, indent_width) for query in self.medium_list)
        return _pretty_block(
            f"@media {media}",
            _pretty_blocks(self.content, indent + 1, indent_width),
            indent,
            indent_width
        )


def _supports_operand_css(node: CSSNode, combinator: Optional[str] = None) -> str:
    """Serialize a supports operand, parenthesizing where the grammar needs it."""
    text = node.to_css()
    if isinstance(node, CSSDeclaration):
        return f"({text})"

    if isinstance(node, CSSSupportsConditionList) and node.combinator != combinator:
        return f"({text})"

    # `not` cannot be mixed with `and`/`or` without parentheses.
    if isinstance(node, CSSSupportsCondition) and node.negated and combinator is not None:
        return f"({text})"

    return text


@dataclass
class CSSSupportsCondition(CSSNode):
    """A parenthesized @supports test, optionally negated."""
    condition: CSSNode
    negated: bool = False

    def to_css(self) -> str:
        prefix = 'not ' if self.negated else ''
        return f"{prefix}({self.condition.to_css()})"


@dataclass
class CSSSupportsConditionList(CSSNode):
    """@supports conditions joined by a single `and`/`or` combinator."""
    combinator: str
    conditions: List[CSSNode] = field(default_factory=list)

    def to_css(self) -> str:
        return f" {self.combinator} ".join(
            _supports_operand_css(condition, self.combinator) for condition in self.conditions
        )


@dataclass
class CSSSupports(CSSNode):
    condition: CSSNode
    blocks: List[CSSNode] = field(default_factory=list)

    def _condition_css(self) -> str:
        if isinstance(self.condition, CSSSupportsConditionList):
            return self.condition.to_css()

        return _supports_operand_css(self.condition)

    def to_css(self) -> str:
        return f"@supports {self._condition_css()}{{{_join_css(self.blocks)}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return _pretty_block(
            f"@supports {self._condition_css()}",
            _pretty_blocks(self.blocks, indent + 1, indent_width),
            indent,
            indent_width
        )


@dataclass
class CSSPageMargin(CSSNode):
    """A margin box inside @page, such as `@top-left{...}`."""
    margin: str
    content: List[CSSNode] = field(default_factory=list)

    def to_css(self) -> str:
        return f"@{self.margin}{{{_join_css(self.content, ';')}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return _pretty_block(
            f"@{self.margin}",
            _pretty_declaration_lines(self.content, indent + 1, indent_width),
            indent,
            indent_width
        )


@dataclass
class CSSPage(CSSNode):
    """An @page rule holding declarations and margin boxes."""
    name: Optional[str] = None
    content: List[CSSNode] = field(default_factory=list)

    def _header(self) -> str:
        return f"@page {self.name}" if self.name else '@page'

    def to_css(self) -> str:
        output = []
        for index, item in enumerate(self.content):
            output.append(item.to_css())
            if isinstance(item, CSSDeclarationBase) and index != len(self.content) - 1:
                output.append(';')

        return f"{self._header()}{{{''.join(output)}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        body = []
        for item in self.content:
            if isinstance(item, CSSDeclarationBase):
                body.append(_pretty_declaration_lines([item], indent + 1, indent_width))

            else:
                body.append(item.pretty(indent + 1, indent_width))

        return _pretty_block(self._header(), ''.join(body), indent, indent_width)


@dataclass
class CSSFontFace(CSSNode):
    content: List[CSSNode] = field(default_factory=list)

    def to_css(self) -> str:
        return f"@font-face{{{_join_css(self.content, ';')}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return _pretty_block(
            '@font-face',
            _pretty_declaration_lines(self.content, indent + 1, indent_width),
            indent,
            indent_width
        )


@dataclass
class CSSFontFeatureValuesBlock(CSSNode):
    """A feature block such as `@swash{fancy:1}` inside @font-feature-values."""
    block_name: str
    content: List[CSSNode] = field(default_factory=list)

    def to_css(self) -> str:
        return f"{self.block_name}{{{_join_css(self.content, ';')}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return _pretty_block(
            self.block_name,
            _pretty_declaration_lines(self.content, indent + 1, indent_width),
            indent,
            indent_width
        )


@dataclass
class CSSFontFeatureValues(CSSNode):
    font_name: str
    content: List[CSSNode] = field(default_factory=list)

    def to_css(self) -> str:
        return f"@font-feature-values {self.font_name}{{{_join_css(self.content)}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return _pretty_block(
            f"@font-feature-values {self.font_name}",
            _pretty_blocks(self.content, indent + 1, indent_width),
            indent,
            indent_width
        )


@dataclass
class CSSKeyframeSelector(CSSNode):
    """A keyframe stop: `from`, `to` or a percentage."""
    stop: str

    def to_css(self) -> str:
        return self.stop


@dataclass
class CSSKeyframe(CSSNode):
    stops: List[CSSKeyframeSelector] = field(default_factory=list)
    content: List[CSSNode] = field(default_factory=list)

    def stops_to_css(self) -> str:
        return _join_css(self.stops, ',')

    def content_to_css(self) -> str:
        return _join_css(self.content, ';')

    def to_css(self) -> str:
        return f"{self.stops_to_css()}{{{self.content_to_css()}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return _pretty_block(
            _join_css(self.stops, ', '),
            _pretty_declaration_lines(self.content, indent + 1, indent_width),
            indent,
            indent_width
        )


@dataclass
class CSSKeyframes(CSSNode):
    """An @keyframes block, optionally vendor-prefixed (e.g. `-webkit-`)."""
    name: str
    content: List[CSSKeyframe] = field(default_factory=list)
    vendor_prefix: Optional[str] = None

    def _header(self) -> str:
        return f"@{self.vendor_prefix or ''}keyframes {self.name}"

    def to_css(self) -> str:
        return f"{self._header()}{{{_join_css(self.content)}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return _pretty_block(
            self._header(),
            _pretty_blocks(self.content, indent + 1, indent_width),
            indent,
            indent_width
        )


@dataclass
class CSSViewport(CSSNode):
    content: List[CSSNode] = field(default_factory=list)
    vendor_prefix: Optional[str] = None

    def _header(self) -> str:
        return f"@{self.vendor_prefix or ''}viewport"

    def to_css(self) -> str:
        return f"{self._header()}{{{_join_css(self.content, ';')}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return _pretty_block(
            self._header(),
            _pretty_declaration_lines(self.content, indent + 1, indent_width),
            indent,
            indent_width
        )


@dataclass
class CSSCounterStyle(CSSNode):
    name: str
    content: List[CSSNode] = field(default_factory=list)

    def to_css(self) -> str:
        return f"@counter-style {self.name}{{{_join_css(self.content, ';')}}}"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return _pretty_block(
            f"@counter-style {self.name}",
            _pretty_declaration_lines(self.content, indent + 1, indent_width),
            indent,
            indent_width
        )


# ---------------------------------------------------------------------------
# Top level
# ---------------------------------------------------------------------------

@dataclass
class CSSCharset(CSSNode):
    charset: CSSString

    def to_css(self) -> str:
        # @charset only accepts double quotes.
        return f'@charset "{self.charset.value}";'

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return self.to_css() + '\n'


@dataclass
class CSSImport(CSSNode):
    uri: CSSNode
    medium_list: List[CSSMediaQuery] = field(default_factory=list)

    def to_css(self) -> str:
        uri = self.uri.as_string() if isinstance(self.uri, CSSURI) else self.uri
        if self.medium_list:
            return f"@import {uri.to_css()} {_join_css(self.medium_list, ',')};"

        return f"@import {uri.to_css()};"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return self.to_css() + '\n'


@dataclass
class CSSNamespace(CSSNode):
    uri: CSSNode
    name: Optional[str] = None

    def to_css(self) -> str:
        if self.name:
            return f"@namespace {self.name} {self.uri.to_css()};"

        return f"@namespace {self.uri.to_css()};"

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        return self.to_css() + '\n'


@dataclass
class CSSStylesheet(CSSNode):
    """Root of the tree."""
    charset: Optional[CSSCharset] = None
    imports: List[CSSImport] = field(default_factory=list)
    namespaces: List[CSSNamespace] = field(default_factory=list)
    content: List[CSSNode] = field(default_factory=list)

    def to_css(self) -> str:
        output = self.charset.to_css() if self.charset is not None else ''
        return output + _join_css(self.imports) + _join_css(self.namespaces) + _join_css(self.content)

    def pretty(self, indent: int = 0, indent_width: int = 2) -> str:
        output = self.charset.pretty(indent, indent_width) if self.charset is not None else ''
        return (
            output
            + _pretty_blocks(self.imports, indent, indent_width)
            + _pretty_blocks(self.namespaces, indent, indent_width)
            + _pretty_blocks(self.content, indent, indent_width)
        )
