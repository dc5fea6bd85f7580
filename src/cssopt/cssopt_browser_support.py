"""
Browser support tables for cssopt.

These answer one question: given the oldest browser versions the output must
work in, is a declaration (or a prefixed @keyframes block) still needed?  Each
table entry records, per browser, the version at which that browser dropped
the need for the declaration.  If the configured minimum for any listed
browser is at or past that version, the declaration is dead weight.
"""

import re
from typing import TYPE_CHECKING, Dict, Mapping, Tuple

from cssopt.cssopt_error import CSSOptConfigError

if TYPE_CHECKING:
    from cssopt.cssopt_optimization_context import CSSOptimizationContext


BROWSER_ALIASES: Dict[str, str] = {
    'fx': 'firefox',
    'firefox': 'firefox',
    'chr': 'chrome',
    'chrome': 'chrome',
    'ie': 'ie',
    'op': 'opera',
    'opera': 'opera',
}

# Declarations that no browser ever implemented.
_NOBODY: Dict[str, int] = {'ie': 0, 'chrome': 0, 'firefox': 0, 'opera': 0}

DECLARATIONS_REMOVED: Dict[str, Dict[str, int]] = {
    '-moz-border-radius': {'firefox': 4},
    '-webkit-border-radius': {'chrome': 5},
    '-o-border-radius': {'opera': 12},

    '-moz-box-shadow': {'firefox': 4},
    '-webkit-box-shadow': {'chrome': 10},

    '-moz-box-sizing': {'firefox': 29},
    '-webkit-box-sizing': {'chrome': 9},

    '-moz-transition': {'firefox': 16},
    '-moz-transition-delay': {'firefox': 16},
    '-moz-transition-duration': {'firefox': 16},
    '-moz-transition-property': {'firefox': 16},
    '-moz-transition-timing-function': {'firefox': 16},
    '-webkit-transition': {'chrome': 26},
    '-webkit-transition-delay': {'chrome': 26},
    '-webkit-transition-duration': {'chrome': 26},
    '-webkit-transition-property': {'chrome': 26},
    '-webkit-transition-timing-function': {'chrome': 26},
    '-o-transition': {'opera': 12},

    '-moz-animation': {'firefox': 16},
    '-moz-animation-delay': {'firefox': 16},
    '-moz-animation-direction': {'firefox': 16},
    '-moz-animation-duration': {'firefox': 16},
    '-moz-animation-fill-mode': {'firefox': 16},
    '-moz-animation-iteration-count': {'firefox': 16},
    '-moz-animation-name': {'firefox': 16},
    '-moz-animation-play-state': {'firefox': 16},
    '-moz-animation-timing-function': {'firefox': 16},
    '-o-animation': {'opera': 13},
    '-o-animation-delay': {'opera': 13},
    '-o-animation-direction': {'opera': 13},
    '-o-animation-duration': {'opera': 13},
    '-o-animation-fill-mode': {'opera': 13},
    '-o-animation-iteration-count': {'opera': 13},
    '-o-animation-name': {'opera': 13},
    '-o-animation-play-state': {'opera': 13},
    '-o-animation-timing-function': {'opera': 13},

    '-moz-align-content': {'firefox': 28},
    '-moz-align-items': {'firefox': 20},
    '-moz-align-self': {'firefox': 20},
    '-moz-flex': {'firefox': 20},
    '-moz-flex-basis': {'firefox': 22},
    '-moz-flex-direction': {'firefox': 20},
    '-moz-flex-flow': {'firefox': 28},
    '-moz-flex-grow': {'firefox': 20},
    '-moz-flex-shrink': {'firefox': 20},
    '-moz-flex-wrap': {'firefox': 28},
    '-moz-justify-content': {'firefox': 20},
    '-webkit-flex': {'chrome': 29},
    '-ms-align-items': {'ie': 11},
    '-ms-align-content': {'ie': 11},
    '-ms-align-self': {'ie': 11},
    '-ms-flex': {'ie': 11},
    '-ms-flex-basis': {'ie': 11},
    '-ms-flex-direction': {'ie': 11},
    '-ms-flex-flow': {'ie': 11},
    '-ms-flex-grow': {'ie': 11},
    '-ms-flex-shrink': {'ie': 11},
    '-ms-flex-order': {'ie': 11},
    '-ms-flex-wrap': {'ie': 11},
    '-ms-justify-content': {'ie': 11},
    '-ms-order': {'ie': 11},

    '-moz-transform': {'firefox': 16},
    '-moz-transform-origin': {'firefox': 16},
    '-moz-transform-style': {'firefox': 16},
    '-moz-backface-visibility': {'firefox': 16},
    '-moz-perspective': {'firefox': 16},
    '-moz-perspective-origin': {'firefox': 16},

    '-ms-filter': {'ie': 10},
    'filter': {'ie': 10},

    # Invalid declarations that tools still generate
    '-ms-transform': {'ie': 0},
    '-ms-transform-origin': {'ie': 0},
    'box-align': _NOBODY,
    'box-flex': _NOBODY,
    'box-ordinal-group': _NOBODY,
    'box-orient': _NOBODY,
    'box-pack': _NOBODY,
}

KEYFRAMES_PREFIX_REMOVED: Dict[str, Dict[str, int]] = {
    '-webkit-': {'chrome': 40},
    '-moz-': {'firefox': 16},
    '-o-': {'opera': 13},
}

_BROWSER_TARGET_RE = re.compile(r'^([a-z]+)([0-9]+)$')


def parse_browser_min(target: str) -> Tuple[str, int]:
    """
    Parse a browser target string such as "ie9", "fx20" or "chrome30".

    Args:
        target: Browser alias immediately followed by a version number

    Returns:
        Tuple of (canonical browser name, version)

    Raises:
        CSSOptConfigError: If the string is malformed or names an unknown browser
    """
    match = _BROWSER_TARGET_RE.match(target.strip().lower())
    if match is None:
        raise CSSOptConfigError(
            f"Invalid browser target: {target!r}",
            {"target": target, "expected": "browser name followed by a version, e.g. 'ie9'"}
        )

    alias, version = match.groups()
    browser = BROWSER_ALIASES.get(alias)
    if browser is None:
        raise CSSOptConfigError(
            f"Unknown browser in target: {target!r}",
            {"target": target, "known_browsers": sorted(set(BROWSER_ALIASES.values()))}
        )

    return browser, int(version)


def _is_supported_by(removals: Mapping[str, int], browser_min: Mapping[str, int]) -> bool:
    """True unless a configured browser minimum has reached its removal version."""
    for browser, removed_in in removals.items():
        if browser in browser_min and browser_min[browser] >= removed_in:
            return False

    return True


def supports_declaration(ident: str, context: "CSSOptimizationContext") -> bool:
    """
    Determine whether a declaration is still needed for the configured browsers.

    Args:
        ident: Lower-cased declaration name
        context: Optimization context carrying the browser minimums

    Returns:
        False if every target browser can do without the declaration
    """
    if not context.browser_min:
        return True

    # `_foo: bar` only ever targeted IE6 and below
    ie_version = context.browser_min.get('ie')
    if ident.startswith('_') and ie_version and ie_version > 6:
        return False

    removals = DECLARATIONS_REMOVED.get(ident)
    if removals is None:
        return True

    return _is_supported_by(removals, context.browser_min)


def supports_keyframe_prefix(prefix: str | None, context: "CSSOptimizationContext") -> bool:
    """
    Determine whether a vendor-prefixed @keyframes block is still needed.

    Args:
        prefix: Vendor prefix such as "-webkit-", or None for the standard block
        context: Optimization context carrying the browser minimums

    Returns:
        False if the block can be dropped
    """
    # IE never shipped @-ms-keyframes
    if prefix == '-ms-':
        return False

    if not context.browser_min or prefix not in KEYFRAMES_PREFIX_REMOVED:
        return True

    return _is_supported_by(KEYFRAMES_PREFIX_REMOVED[prefix], context.browser_min)
