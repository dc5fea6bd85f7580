"""
cssopt - CSS tree optimizer.

CSSOpt is the main entry point.  It holds the optimization settings and runs
the node optimizer over a parsed stylesheet, optionally repeating the pass
until the output stops shrinking.
"""

import logging
from typing import List, Mapping

from cssopt.cssopt_ast import CSSStylesheet
from cssopt.cssopt_browser_support import BROWSER_ALIASES
from cssopt.cssopt_error import CSSOptConfigError
from cssopt.cssopt_node_optimizer import CSSNodeOptimizer
from cssopt.cssopt_optimization_context import CSSOptimizationContext


class CSSOpt:
    """
    Optimize parsed stylesheets for a set of target browsers.

    Usage::

        cssopt = CSSOpt(browser_min={'ie': 9, 'firefox': 20}, aggressive=True)
        css = cssopt.minify(stylesheet)
    """

    def __init__(
        self,
        browser_min: Mapping[str, int] | None = None,
        aggressive: bool = False,
        preserve_legacy_hacks: bool = False
    ) -> None:
        """
        Initialize the optimizer.

        Args:
            browser_min: Oldest version of each browser the output must work in.
                Browser names may be abbreviated ("fx", "chr", "op").
            aggressive: Enable lossier rewrites and cross-ruleset merging
            preserve_legacy_hacks: Keep old-IE hacks

        Raises:
            CSSOptConfigError: If a browser name or version is invalid
        """
        self._logger = logging.getLogger("CSSOpt")
        self._context = CSSOptimizationContext(
            browser_min=self._normalize_browser_min(browser_min),
            aggressive=aggressive,
            preserve_legacy_hacks=preserve_legacy_hacks
        )
        self._optimizer = CSSNodeOptimizer.shared()

    @classmethod
    def from_browser_targets(
        cls,
        targets: List[str],
        aggressive: bool = False,
        preserve_legacy_hacks: bool = False
    ) -> "CSSOpt":
        """
        Create an optimizer from browser target strings such as "ie9" or "fx20".

        Raises:
            CSSOptConfigError: If a target string cannot be parsed
        """
        context = CSSOptimizationContext.from_browser_targets(targets, aggressive, preserve_legacy_hacks)
        return cls(context.browser_min, aggressive, preserve_legacy_hacks)

    @staticmethod
    def _normalize_browser_min(browser_min: Mapping[str, int] | None) -> dict[str, int] | None:
        if not browser_min:
            return None

        normalized: dict[str, int] = {}
        for name, version in browser_min.items():
            browser = BROWSER_ALIASES.get(name.lower())
            if browser is None:
                raise CSSOptConfigError(f"Unknown browser: {name}", {"browser": name})

            if isinstance(version, bool) or not isinstance(version, int) or version < 0:
                raise CSSOptConfigError(
                    f"Invalid minimum version for {name}: {version!r}",
                    {"browser": name, "version": version}
                )

            if browser in normalized:
                version = min(version, normalized[browser])

            normalized[browser] = version

        return normalized

    @property
    def context(self) -> CSSOptimizationContext:
        """The optimization settings used by this optimizer."""
        return self._context

    def optimize(self, stylesheet: CSSStylesheet) -> CSSStylesheet:
        """
        Run one optimization pass.

        The stylesheet is rewritten in place; use the returned tree.

        Args:
            stylesheet: Parsed stylesheet

        Returns:
            The optimized stylesheet
        """
        before = len(stylesheet.to_css())
        result = self._optimizer.optimize(stylesheet, self._context)
        assert isinstance(result, CSSStylesheet)
        self._logger.debug("Optimization pass: %d -> %d characters", before, len(result.to_css()))
        return result

    def optimize_until_stable(self, stylesheet: CSSStylesheet, max_passes: int | None = None) -> CSSStylesheet:
        """
        Repeat optimization passes until the output no longer changes.

        Merging rulesets can expose further merges, so a second pass may still
        find work.  With N top-level blocks the output settles within
        N * (N - 1) / 2 extra passes, which is the default limit.

        Args:
            stylesheet: Parsed stylesheet
            max_passes: Maximum number of passes to run

        Returns:
            The optimized stylesheet
        """
        if max_passes is None:
            blocks = len(stylesheet.content)
            max_passes = 1 + blocks * (blocks - 1) // 2 + 1

        previous = stylesheet.to_css()
        for passes in range(1, max_passes + 1):
            stylesheet = self.optimize(stylesheet)
            current = stylesheet.to_css()
            if current == previous:
                self._logger.debug("Output stable after %d passes", passes)
                break

            previous = current

        return stylesheet

    def minify(self, stylesheet: CSSStylesheet) -> str:
        """Optimize a stylesheet and return its minimal text."""
        return self.optimize_until_stable(stylesheet).to_css()

    def pretty(self, stylesheet: CSSStylesheet, indent_width: int = 2) -> str:
        """
        Optimize a stylesheet and return it formatted for reading.

        Args:
            stylesheet: Parsed stylesheet
            indent_width: Spaces per nesting level

        Returns:
            Formatted CSS text
        """
        return self.optimize_until_stable(stylesheet).pretty(0, indent_width)
