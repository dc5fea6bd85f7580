"""
Optimization context passed down the tree by the cssopt rewrite pass.

The context is immutable.  Nodes that need to scope a transient field for
their children (a keyframes block setting its vendor prefix, a function call
setting its name, a declaration setting its property name) build a new
context with one of the with_* methods and hand that to the recursive call.
"""

from dataclasses import dataclass, replace
from typing import List, Mapping

from cssopt.cssopt_browser_support import parse_browser_min


@dataclass(frozen=True)
class CSSOptimizationContext:
    """
    Settings and scoped state for one optimization run.

    Attributes:
        browser_min: Minimum version per browser that the output must support,
            or None to keep everything
        aggressive: Enable lossier rewrites (cm/mm units, duplicate block
            removal, ruleset merging, wildcard collapsing)
        preserve_legacy_hacks: Keep old-IE hacks (`*prop`, `\\9`, `* html`)
        vendor_prefix: Prefix of the enclosing keyframes/viewport block
        enclosing_function: Lower-cased name of the innermost function call
        declaration_name: Lower-cased name of the innermost declaration
    """
    browser_min: Mapping[str, int] | None = None
    aggressive: bool = False
    preserve_legacy_hacks: bool = False
    vendor_prefix: str | None = None
    enclosing_function: str | None = None
    declaration_name: str | None = None

    @classmethod
    def from_browser_targets(
        cls,
        targets: List[str],
        aggressive: bool = False,
        preserve_legacy_hacks: bool = False
    ) -> "CSSOptimizationContext":
        """
        Build a context from browser target strings such as "ie9" or "fx20".

        When the same browser is named more than once the oldest version wins.

        Raises:
            CSSOptConfigError: If a target string cannot be parsed
        """
        browser_min: dict[str, int] = {}
        for target in targets:
            browser, version = parse_browser_min(target)
            if browser in browser_min:
                version = min(version, browser_min[browser])

            browser_min[browser] = version

        return cls(
            browser_min=browser_min or None,
            aggressive=aggressive,
            preserve_legacy_hacks=preserve_legacy_hacks
        )

    def browser_version(self, browser: str) -> int | None:
        """Return the configured minimum version for a browser, if any."""
        if not self.browser_min:
            return None

        return self.browser_min.get(browser)

    def with_vendor_prefix(self, prefix: str | None) -> "CSSOptimizationContext":
        return replace(self, vendor_prefix=prefix)

    def with_enclosing_function(self, name: str | None) -> "CSSOptimizationContext":
        return replace(self, enclosing_function=name)

    def with_declaration_name(self, name: str | None) -> "CSSOptimizationContext":
        return replace(self, declaration_name=name)
