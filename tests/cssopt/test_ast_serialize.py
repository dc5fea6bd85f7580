"""Tests for exact (minimal) serialization of every node kind."""

from cssopt.cssopt_ast import (
    CSSAttributeSelector, CSSCharset, CSSClassSelector, CSSCounterStyle, CSSDescendantSelector,
    CSSDimension, CSSDirectDescendantSelector, CSSElementSelector, CSSExpression, CSSFontFace,
    CSSFontFeatureValues, CSSFontFeatureValuesBlock, CSSFunc, CSSHexColor, CSSIDSelector,
    CSSIEFilter, CSSImport, CSSKeyframe, CSSKeyframeSelector, CSSKeyframes, CSSLinearFunction,
    CSSMathProduct, CSSMathSum, CSSMedia, CSSMediaExpression, CSSMediaQuery, CSSNamespace,
    CSSNotSelector, CSSNthSelector, CSSNumber, CSSNValue, CSSPage, CSSPageMargin,
    CSSPseudoClassSelector, CSSPseudoElementSelector, CSSPseudoSelectorFunction, CSSSelectorList,
    CSSSiblingSelector, CSSAdjacentSelector, CSSSimpleSelector, CSSString, CSSStylesheet,
    CSSSupports, CSSSupportsCondition, CSSSupportsConditionList, CSSURI, CSSViewport, CSSIdentifier
)


class TestValueSerialization:
    """Values print in their shortest form."""

    def test_number(self, helpers):
        """Numbers drop the leading zero."""
        assert CSSNumber(0.5).to_css() == '.5'
        assert str(CSSNumber(-2.0)) == '-2'

    def test_number_normalizes_input(self):
        """Numeric text is parsed; malformed, NaN and infinite values read as zero."""
        assert CSSNumber('1.5').value == 1.5
        assert CSSNumber('abc').to_css() == '0'
        assert CSSNumber(float('nan')).to_css() == '0'
        assert CSSNumber(float('inf')).to_css() == '0'

    def test_dimension(self, helpers):
        """Dimensions print the number followed by the unit."""
        assert helpers.dim(12, 'px').to_css() == '12px'
        assert helpers.dim(0.5, 'em').to_css() == '.5em'
        assert helpers.dim(0, '%').to_css() == '0%'

    def test_string_prefers_fewer_escapes(self):
        """Strings use whichever quote needs less escaping."""
        assert CSSString("it's").to_css() == '"it\'s"'
        assert CSSString('say "hi"').to_css() == '\'say "hi"\''
        assert CSSString('abc').to_css() == '"abc"'

    def test_uri(self):
        """URIs are only quoted when they must be."""
        assert CSSURI('a.png').to_css() == 'url(a.png)'
        assert CSSURI('a b.png').to_css() == 'url("a b.png")'
        assert CSSURI('a(1).png').to_css() == 'url("a(1).png")'

    def test_hex_color(self):
        """Hex colours print as stored."""
        assert CSSHexColor('#fa0').to_css() == '#fa0'

    def test_expression_operators(self, helpers):
        """Whitespace, comma and slash separators."""
        assert helpers.expr('1px', 'solid', 'red').to_css() == '1px solid red'
        assert helpers.comma_expr('a', 'b').to_css() == 'a,b'
        slash = CSSExpression([(None, helpers.dim(12, 'px')), ('/', CSSNumber(1.5))])
        assert slash.to_css() == '12px/1.5'

    def test_function(self, helpers):
        """Function arguments print without spaces."""
        func = CSSFunc('rgba', helpers.comma_expr(0, 0, 0, 0.5))
        assert func.to_css() == 'rgba(0,0,0,.5)'
        assert CSSFunc('foo').to_css() == 'foo()'

    def test_math(self, helpers):
        """Sums keep their mandatory spaces; sums inside products are parenthesized."""
        total = CSSMathSum(helpers.dim(100, '%'), '-', helpers.dim(2, 'px'))
        assert CSSFunc('calc', total).to_css() == 'calc(100% - 2px)'

        product = CSSMathProduct(CSSMathSum(helpers.dim(1, 'px'), '+', helpers.dim(2, 'em')), '*', CSSNumber(2))
        assert product.to_css() == '(1px + 2em)*2'

    def test_nested_sum_keeps_parentheses(self, helpers):
        """a - (b + c) is not a - b + c."""
        inner = CSSMathSum(helpers.dim(1, 'px'), '+', helpers.dim(2, 'em'))
        assert CSSMathSum(helpers.dim(100, '%'), '-', inner).to_css() == '100% - (1px + 2em)'


class TestDeclarationSerialization:
    """Declarations print as ident:value with optional flags."""

    def test_plain(self, helpers):
        """No space after the colon."""
        assert helpers.decl('color', 'red').to_css() == 'color:red'

    def test_important(self, helpers):
        """!important follows the value directly."""
        assert helpers.decl('color', 'red', important=True).to_css() == 'color:red!important'

    def test_slash_nine(self, helpers):
        """The IE \\9 hack is kept."""
        assert helpers.decl('color', 'red', slash_nine=True).to_css() == 'color:red\\9'

    def test_ie_filter(self):
        """IE filters are opaque text identified as `filter`."""
        ie_filter = CSSIEFilter('filter:progid:DXImageTransform.Microsoft.Alpha(Opacity=80)')
        assert ie_filter.identifier() == 'filter'
        assert ie_filter.to_css() == 'filter:progid:DXImageTransform.Microsoft.Alpha(Opacity=80)'


class TestSelectorSerialization:
    """Selectors print without optional whitespace."""

    def test_compound(self):
        """Conditions are concatenated."""
        selector = CSSSimpleSelector([
            CSSElementSelector('a'), CSSIDSelector('main'), CSSClassSelector('x'),
            CSSPseudoClassSelector('hover'), CSSPseudoElementSelector('before')
        ])
        assert selector.to_css() == 'a#main.x:hover::before'

    def test_namespaced_element(self):
        """Namespaces are joined with a bar."""
        assert CSSElementSelector('a', 'svg').to_css() == 'svg|a'
        assert CSSElementSelector('a', '').to_css() == '|a'

    def test_attribute(self):
        """Attribute values are unquoted when they are identifiers."""
        assert CSSAttributeSelector('href').to_css() == '[href]'
        assert CSSAttributeSelector('type', '=', CSSString('text')).to_css() == '[type=text]'
        assert CSSAttributeSelector('title', '~=', CSSString('a b')).to_css() == '[title~="a b"]'
        assert CSSAttributeSelector('lang', '|=', CSSIdentifier('en')).to_css() == '[lang|=en]'

    def test_combinators(self, helpers):
        """Each combinator prints its own symbol."""
        ul, li = helpers.element('ul'), helpers.element('li')
        assert CSSDirectDescendantSelector(ul, li).to_css() == 'ul>li'
        assert CSSDescendantSelector(ul, li).to_css() == 'ul li'
        assert CSSAdjacentSelector(ul, li).to_css() == 'ul+li'
        assert CSSSiblingSelector(ul, li).to_css() == 'ul~li'

    def test_selector_list(self, helpers):
        """Alternatives are comma separated."""
        assert CSSSelectorList([helpers.element('a'), helpers.element('b')]).to_css() == 'a,b'

    def test_nth(self):
        """An+B expressions print in their shortest form."""
        def nth(coef, offset):
            n_value = None if coef is None else CSSNValue(coef)
            return CSSNthSelector('nth-child', CSSLinearFunction(n_value, CSSNumber(offset))).to_css()

        assert nth(2, 1) == ':nth-child(2n+1)'
        assert nth(2, -1) == ':nth-child(2n-1)'
        assert nth(-1, 3) == ':nth-child(-n+3)'
        assert nth(1, 0) == ':nth-child(n)'
        assert nth(None, 5) == ':nth-child(5)'

    def test_not_and_pseudo_function(self, helpers):
        """Functional pseudo-classes wrap their argument."""
        assert CSSNotSelector(helpers.klass('x')).to_css() == ':not(.x)'
        assert CSSPseudoSelectorFunction('lang', CSSIdentifier('en')).to_css() == ':lang(en)'


class TestRuleSerialization:
    """Rules and at-rules print without optional whitespace."""

    def test_ruleset(self, helpers):
        """Declarations are separated, not terminated, by semicolons."""
        ruleset = helpers.ruleset('a', helpers.decl('color', 'red'), helpers.decl('margin', 0))
        assert ruleset.to_css() == 'a{color:red;margin:0}'

    def test_media(self, helpers):
        """Media queries join feature tests with `and`."""
        query = CSSMediaQuery('screen', 'only', [CSSMediaExpression('min-width', helpers.dim(600, 'px'))])
        media = CSSMedia([query, CSSMediaQuery('print')], [helpers.ruleset('a', helpers.decl('color', 'red'))])
        assert media.to_css() == '@media only screen and (min-width:600px),print{a{color:red}}'

    def test_media_query_without_type(self, helpers):
        """A query can consist of feature tests alone."""
        query = CSSMediaQuery(expressions=[
            CSSMediaExpression('min-width', helpers.dim(600, 'px')),
            CSSMediaExpression('color'),
        ])
        assert query.to_css() == '(min-width:600px) and (color)'

    def test_supports(self, helpers):
        """Supports conditions are parenthesized and joined by their combinator."""
        flex = CSSSupportsCondition(helpers.decl('display', 'flex'))
        grid = CSSSupportsCondition(helpers.decl('display', 'grid'), negated=True)
        supports = CSSSupports(
            CSSSupportsConditionList('or', [flex, grid]),
            [helpers.ruleset('a', helpers.decl('color', 'red'))]
        )
        assert supports.to_css() == '@supports (display:flex) or (not (display:grid)){a{color:red}}'

    def test_supports_nested_lists(self, helpers):
        """A list inside a list with another combinator is parenthesized."""
        inner = CSSSupportsConditionList('or', [helpers.decl('a', 1), helpers.decl('b', 2)])
        outer = CSSSupportsConditionList('and', [inner, helpers.decl('c', 3)])
        assert outer.to_css() == '((a:1) or (b:2)) and (c:3)'

    def test_keyframes(self, helpers):
        """Vendor prefixes go between the @ and the keyword."""
        frame = CSSKeyframe([CSSKeyframeSelector('from'), CSSKeyframeSelector('50%')], [helpers.decl('opacity', 0)])
        keyframes = CSSKeyframes('spin', [frame], '-webkit-')
        assert keyframes.to_css() == '@-webkit-keyframes spin{from,50%{opacity:0}}'
        assert CSSKeyframes('spin', [frame]).to_css() == '@keyframes spin{from,50%{opacity:0}}'

    def test_page(self, helpers):
        """Declarations and margin boxes share the @page body."""
        page = CSSPage(':first', [
            helpers.decl('margin', helpers.dim(1, 'in')),
            CSSPageMargin('top-left', [helpers.decl('content', CSSString('x'))]),
        ])
        assert page.to_css() == '@page :first{margin:1in;@top-left{content:"x"}}'

    def test_other_at_rules(self, helpers):
        """Font, viewport and counter-style blocks."""
        assert CSSFontFace([helpers.decl('font-family', 'x')]).to_css() == '@font-face{font-family:x}'
        assert CSSViewport([helpers.decl('width', 'device-width')], '-ms-').to_css() == (
            '@-ms-viewport{width:device-width}'
        )
        assert CSSCounterStyle('thumbs', [helpers.decl('system', 'cyclic')]).to_css() == (
            '@counter-style thumbs{system:cyclic}'
        )
        values = CSSFontFeatureValues('Font One', [CSSFontFeatureValuesBlock('@swash', [helpers.decl('fancy', 1)])])
        assert values.to_css() == '@font-feature-values Font One{@swash{fancy:1}}'

    def test_stylesheet(self, helpers):
        """Charset, imports and namespaces come before the rules."""
        sheet = CSSStylesheet(
            charset=CSSCharset(CSSString('UTF-8')),
            imports=[CSSImport(CSSURI('a.css'), [CSSMediaQuery('screen')])],
            namespaces=[CSSNamespace(CSSURI('http://www.w3.org/2000/svg'), 'svg')],
            content=[helpers.ruleset('a', helpers.decl('color', 'red'))],
        )
        assert sheet.to_css() == (
            '@charset "UTF-8";'
            '@import "a.css" screen;'
            '@namespace svg url(http://www.w3.org/2000/svg);'
            'a{color:red}'
        )
