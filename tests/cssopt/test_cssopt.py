"""Tests for the CSSOpt entry point."""

import logging

import pytest

from cssopt import CSSOpt, CSSOptConfigError
from cssopt.cssopt_ast import CSSFunc, CSSHexColor, CSSStylesheet


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _sample_sheet(helpers):
    """A stylesheet exercising most of the rewrites."""
    return helpers.sheet(
        helpers.ruleset('a', helpers.decl('margin', 0, 0, 0, 0), helpers.decl('color', 'white')),
        helpers.ruleset('b', helpers.decl('color', 'white'), helpers.decl('margin', 0)),
        helpers.ruleset('p', helpers.decl('margin-left', helpers.dim(1, 'px')), helpers.decl('margin', 0)),
        helpers.ruleset('div', helpers.decl('-moz-transform', 'none')),
        helpers.ruleset('i', helpers.decl('font-weight', 'bold')),
        helpers.ruleset('a', helpers.decl('padding', helpers.dim(96, 'px'))),
    )


class TestConstruction:
    """Settings and validation."""

    def test_defaults(self):
        """The default optimizer targets no browsers."""
        context = CSSOpt().context
        assert context.browser_min is None
        assert context.aggressive is False
        assert context.preserve_legacy_hacks is False

    def test_browser_aliases(self):
        """Browser names are normalized."""
        assert CSSOpt(browser_min={'fx': 20, 'IE': 9}).context.browser_min == {'firefox': 20, 'ie': 9}

    def test_unknown_browser(self):
        """Unknown browsers are rejected."""
        with pytest.raises(CSSOptConfigError) as exc_info:
            CSSOpt(browser_min={'netscape': 4})

        assert exc_info.value.error_details == {'browser': 'netscape'}

    def test_invalid_version(self):
        """Versions must be non-negative integers."""
        with pytest.raises(CSSOptConfigError):
            CSSOpt(browser_min={'ie': -1})

        with pytest.raises(CSSOptConfigError):
            CSSOpt(browser_min={'ie': '9'})  # type: ignore[dict-item]

    def test_from_browser_targets(self):
        """Targets can be given as strings."""
        cssopt = CSSOpt.from_browser_targets(['ie9', 'fx20'], aggressive=True)
        assert cssopt.context.browser_min == {'ie': 9, 'firefox': 20}
        assert cssopt.context.aggressive is True


class TestOptimize:
    """Running the optimizer over a stylesheet."""

    def test_optimize_returns_stylesheet(self, helpers):
        """optimize() returns the optimized root."""
        result = CSSOpt().optimize(helpers.sheet(helpers.ruleset('a', helpers.decl('margin', 0, 0, 0, 0))))
        assert isinstance(result, CSSStylesheet)
        assert result.to_css() == 'a{margin:0}'

    def test_minify(self, helpers):
        """minify() returns the optimized minimal text."""
        cssopt = CSSOpt(browser_min={'firefox': 20})
        assert cssopt.minify(_sample_sheet(helpers)) == (
            'a,b{color:#fff;margin:0}p{margin:0}i{font-weight:700}a{padding:1in}'
        )

    def test_pretty(self, helpers):
        """pretty() returns the optimized formatted text."""
        sheet = helpers.sheet(helpers.ruleset('a', helpers.decl('margin', 0, 0, 0, 0)))
        assert CSSOpt().pretty(sheet) == 'a {\n  margin: 0;\n}\n'

    def test_pretty_indent_width(self, helpers):
        """The indent width is passed through."""
        sheet = helpers.sheet(helpers.ruleset('a', helpers.decl('margin', 0)))
        assert CSSOpt().pretty(sheet, indent_width=4) == 'a {\n    margin: 0;\n}\n'

    def test_until_stable_is_fixed_point(self, helpers):
        """Another pass over a stable result changes nothing."""
        cssopt = CSSOpt(aggressive=True)
        sheet = cssopt.optimize_until_stable(_sample_sheet(helpers))
        text = sheet.to_css()
        assert cssopt.optimize(sheet).to_css() == text

    def test_max_passes(self, helpers):
        """max_passes limits the number of passes."""
        sheet = helpers.sheet(helpers.ruleset('a', helpers.decl('margin', 0, 0, 0, 0)))
        assert CSSOpt().optimize_until_stable(sheet, max_passes=1).to_css() == 'a{margin:0}'

    def test_logs_passes(self, helpers, caplog):
        """Each pass is logged at debug level."""
        caplog.set_level(logging.DEBUG, logger="CSSOpt")
        CSSOpt().optimize(helpers.sheet(helpers.ruleset('a', helpers.decl('margin', 0, 0, 0, 0))))
        assert any("Optimization pass" in record.getMessage() for record in caplog.records)


class TestDocumentedExamples:
    """End-to-end behaviour on small stylesheets."""

    def test_shorthand_collapse(self, helpers):
        """margin: 0 0 0 0 -> margin: 0; border-color: red green red green -> red green"""
        sheet = helpers.sheet(helpers.ruleset(
            'a',
            helpers.decl('margin', 0, 0, 0, 0),
            helpers.decl('border-color', 'red', 'green', 'red', 'green')
        ))
        assert CSSOpt().minify(sheet) == 'a{border-color:red green;margin:0}'

    def test_override_elimination(self, helpers):
        """margin-left: 1px; margin: 0 -> margin: 0"""
        sheet = helpers.sheet(helpers.ruleset(
            'a', helpers.decl('margin-left', helpers.dim(1, 'px')), helpers.decl('margin', 0)
        ))
        assert CSSOpt().minify(sheet) == 'a{margin:0}'

    def test_color_canonicalization(self, helpers):
        """rgb(255,255,255) takes its shortest spelling; hex is lower-cased and shortened."""
        sheet = helpers.sheet(
            helpers.ruleset('a', helpers.decl('color', CSSFunc('rgb', helpers.comma_expr(255, 255, 255)))),
            helpers.ruleset('b', helpers.decl('color', CSSHexColor('#FFAB00'))),
            helpers.ruleset('i', helpers.decl('color', CSSHexColor('#ff0000'))),
        )
        assert CSSOpt().minify(sheet) == 'a{color:#fff}b{color:#ffab00}i{color:red}'

    def test_unit_minimization(self, helpers):
        """2.54cm -> 1in only in aggressive mode."""
        def sheet():
            return helpers.sheet(helpers.ruleset('a', helpers.decl('width', helpers.dim(2.54, 'cm'))))

        assert CSSOpt().minify(sheet()) == 'a{width:2.54cm}'
        assert CSSOpt(aggressive=True).minify(sheet()) == 'a{width:1in}'

    def test_browser_gated_removal(self, helpers):
        """A rule holding only -moz-transform is removed for Firefox 20."""
        sheet = helpers.sheet(helpers.ruleset('a', helpers.decl('-moz-transform', 'none')))
        assert CSSOpt(browser_min={'firefox': 20}).minify(sheet) == ''

    def test_selector_merge(self, helpers):
        """Equal bodies union their selectors; equal selectors join their bodies."""
        same_body = helpers.sheet(
            helpers.ruleset('a', helpers.decl('color', 'red')),
            helpers.ruleset('b', helpers.decl('color', 'red')),
        )
        assert CSSOpt().minify(same_body) == 'a,b{color:red}'

        same_selector = helpers.sheet(
            helpers.ruleset('a', helpers.decl('color', 'red')),
            helpers.ruleset('a', helpers.decl('margin', 0)),
        )
        assert CSSOpt().minify(same_selector) == 'a{color:red;margin:0}'
