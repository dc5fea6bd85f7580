"""cssopt (CSS tree optimizer) package."""

# Main API
from cssopt.cssopt import CSSOpt

# Exceptions
from cssopt.cssopt_error import CSSOptError, CSSOptConfigError

# Optimization settings
from cssopt.cssopt_optimization_context import CSSOptimizationContext

# AST node types
from cssopt.cssopt_ast import (
    CSSNode, CSSStylesheet, CSSCharset, CSSImport, CSSNamespace,
    CSSMedia, CSSMediaQuery, CSSMediaExpression,
    CSSSupports, CSSSupportsConditionList, CSSSupportsCondition,
    CSSPage, CSSPageMargin, CSSFontFace, CSSFontFeatureValues, CSSFontFeatureValuesBlock,
    CSSKeyframes, CSSKeyframe, CSSKeyframeSelector, CSSViewport, CSSCounterStyle,
    CSSRuleset, CSSSelectorList, CSSSimpleSelector, CSSCombinatorSelector,
    CSSAdjacentSelector, CSSDirectDescendantSelector, CSSSiblingSelector, CSSDescendantSelector,
    CSSIDSelector, CSSClassSelector, CSSElementSelector, CSSAttributeSelector,
    CSSPseudoElementSelector, CSSPseudoClassSelector, CSSPseudoSelectorFunction,
    CSSNotSelector, CSSNthSelector, CSSLinearFunction, CSSNValue,
    CSSDeclarationBase, CSSDeclaration, CSSIEFilter, CSSExpression, CSSDimension,
    CSSFunc, CSSMathSum, CSSMathProduct, CSSHexColor, CSSNumber, CSSString, CSSURI,
    CSSIdentifier
)

# Lower-level components (for advanced usage)
from cssopt.cssopt_optimization_pass import CSSOptimizationPass
from cssopt.cssopt_node_optimizer import CSSNodeOptimizer
from cssopt.cssopt_list_optimizer import CSSListOptimizer
from cssopt.cssopt_ruleset_merger import CSSRulesetMerger
from cssopt.cssopt_browser_support import supports_declaration, supports_keyframe_prefix

__all__ = [
    # Main API
    "CSSOpt",

    # Exceptions
    "CSSOptError", "CSSOptConfigError",

    # Optimization settings
    "CSSOptimizationContext",

    # AST node types
    "CSSNode", "CSSStylesheet", "CSSCharset", "CSSImport", "CSSNamespace",
    "CSSMedia", "CSSMediaQuery", "CSSMediaExpression",
    "CSSSupports", "CSSSupportsConditionList", "CSSSupportsCondition",
    "CSSPage", "CSSPageMargin", "CSSFontFace", "CSSFontFeatureValues", "CSSFontFeatureValuesBlock",
    "CSSKeyframes", "CSSKeyframe", "CSSKeyframeSelector", "CSSViewport", "CSSCounterStyle",
    "CSSRuleset", "CSSSelectorList", "CSSSimpleSelector", "CSSCombinatorSelector",
    "CSSAdjacentSelector", "CSSDirectDescendantSelector", "CSSSiblingSelector", "CSSDescendantSelector",
    "CSSIDSelector", "CSSClassSelector", "CSSElementSelector", "CSSAttributeSelector",
    "CSSPseudoElementSelector", "CSSPseudoClassSelector", "CSSPseudoSelectorFunction",
    "CSSNotSelector", "CSSNthSelector", "CSSLinearFunction", "CSSNValue",
    "CSSDeclarationBase", "CSSDeclaration", "CSSIEFilter", "CSSExpression", "CSSDimension",
    "CSSFunc", "CSSMathSum", "CSSMathProduct", "CSSHexColor", "CSSNumber", "CSSString", "CSSURI",
    "CSSIdentifier",

    # Lower-level components
    "CSSOptimizationPass", "CSSNodeOptimizer", "CSSListOptimizer", "CSSRulesetMerger",
    "supports_declaration", "supports_keyframe_prefix",
]
