"""Shared fixtures and utilities for cssopt tests."""

from typing import Any

import pytest

from cssopt.cssopt_ast import (
    CSSClassSelector, CSSDeclaration, CSSDimension, CSSElementSelector, CSSExpression,
    CSSIdentifier, CSSNode, CSSNumber, CSSRuleset, CSSSimpleSelector, CSSStylesheet
)
from cssopt.cssopt_optimization_context import CSSOptimizationContext


@pytest.fixture
def context():
    """Default optimization settings: no browser targets, not aggressive."""
    return CSSOptimizationContext()


@pytest.fixture
def aggressive_context():
    """Optimization settings with aggressive rewrites enabled."""
    return CSSOptimizationContext(aggressive=True)


class CSSTestHelpers:
    """Helper utilities for building trees by hand (there is no parser here)."""

    @staticmethod
    def term(value: Any) -> CSSNode:
        """Turn a Python value into a value node: str -> identifier, number -> number."""
        if isinstance(value, CSSNode):
            return value

        if isinstance(value, str):
            return CSSIdentifier(value)

        return CSSNumber(float(value))

    @staticmethod
    def dim(value: float, unit: str) -> CSSDimension:
        return CSSDimension(CSSNumber(float(value)), unit)

    @staticmethod
    def expr(*terms: Any) -> CSSExpression:
        """Build a whitespace-separated expression."""
        return CSSExpression([(None, CSSTestHelpers.term(term)) for term in terms])

    @staticmethod
    def comma_expr(*terms: Any) -> CSSExpression:
        """Build a comma-separated expression."""
        return CSSExpression([
            (None if index == 0 else ',', CSSTestHelpers.term(term))
            for index, term in enumerate(terms)
        ])

    @staticmethod
    def decl(ident: str, *terms: Any, important: bool = False, slash_nine: bool = False) -> CSSDeclaration:
        return CSSDeclaration(ident, CSSTestHelpers.expr(*terms), important=important, slash_nine=slash_nine)

    @staticmethod
    def element(name: str) -> CSSSimpleSelector:
        return CSSSimpleSelector([CSSElementSelector(name)])

    @staticmethod
    def klass(name: str) -> CSSSimpleSelector:
        return CSSSimpleSelector([CSSClassSelector(name)])

    @staticmethod
    def ruleset(selector: Any, *declarations: CSSNode) -> CSSRuleset:
        """Build a ruleset; a string selector names an element."""
        if isinstance(selector, str):
            selector = CSSTestHelpers.element(selector)

        return CSSRuleset(selector, list(declarations))

    @staticmethod
    def sheet(*blocks: CSSNode) -> CSSStylesheet:
        return CSSStylesheet(content=list(blocks))

    @staticmethod
    def optimize_value(ident: str, value: CSSNode, context: CSSOptimizationContext) -> str:
        """Optimize a value as if it were the value of a declaration and serialize it."""
        declaration = CSSDeclaration(ident, value).optimize(context)
        assert isinstance(declaration, CSSDeclaration)
        return declaration.expr.to_css()


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return CSSTestHelpers
