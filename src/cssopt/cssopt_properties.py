"""
Property tables driving the declaration-level rewrites.
"""

import re
from typing import Dict, FrozenSet, List


# Properties whose values follow the top/right/bottom/left box rule.
QUAD_LIST_PROPERTIES: FrozenSet[str] = frozenset({
    'border-color',
    '-webkit-border-radius',
    '-moz-border-radius',
    'border-radius',
    'border-style',
    'border-width',
    'margin',
    'padding',
})

# Properties where a lone `none` is equivalent to `0`.
NONEABLE_PROPERTIES: FrozenSet[str] = frozenset({
    'border',
    'border-top',
    'border-right',
    'border-bottom',
    'border-left',
    'outline',
    'background',
})

FONT_WEIGHT_PROPERTIES: FrozenSet[str] = frozenset({'font', 'font-weight'})

FONT_WEIGHT_KEYWORDS: Dict[str, str] = {
    'normal': '400',
    'bold': '700',
}

# Properties where a bare identifier names something other than a colour.
NON_COLOR_PROPERTIES: FrozenSet[str] = frozenset({
    'font',
    'font-family',
    'animation',
    'animation-name',
    '-webkit-animation',
    '-webkit-animation-name',
    '-moz-animation',
    '-moz-animation-name',
    '-o-animation',
    '-o-animation-name',
    'counter-increment',
    'counter-reset',
    'grid-area',
    'list-style-type',
    'transition-property',
    'will-change',
})


def _animation_overrides() -> Dict[str, List[str]]:
    overrides: Dict[str, List[str]] = {}
    for prefix in ('', '-moz-', '-o-', '-webkit-'):
        for longhand in (
            'delay', 'direction', 'duration', 'fill-mode', 'iteration-count',
            'name', 'play-state', 'timing-function'
        ):
            overrides[f'{prefix}animation-{longhand}'] = [f'{prefix}animation']

        for longhand in ('delay', 'duration', 'property', 'timing-function'):
            overrides[f'{prefix}transition-{longhand}'] = [f'{prefix}transition']

    return overrides


# Longhand -> the shorthands that reset it.  A longhand followed (later in the
# same block) by any of its shorthands has no effect.
OVERRIDE_PARENTS: Dict[str, List[str]] = {
    'background-clip': ['background'],
    'background-origin': ['background'],
    'border-color': ['border'],
    'border-style': ['border'],
    'border-width': ['border'],
    'border-bottom': ['border'],
    'border-bottom-color': ['border-bottom', 'border-color', 'border'],
    'border-bottom-style': ['border-bottom', 'border-style', 'border'],
    'border-bottom-width': ['border-bottom', 'border-width', 'border'],
    'border-left': ['border'],
    'border-left-color': ['border-left', 'border-color', 'border'],
    'border-left-style': ['border-left', 'border-style', 'border'],
    'border-left-width': ['border-left', 'border-width', 'border'],
    'border-right': ['border'],
    'border-right-color': ['border-right', 'border-color', 'border'],
    'border-right-style': ['border-right', 'border-style', 'border'],
    'border-right-width': ['border-right', 'border-width', 'border'],
    'border-top': ['border'],
    'border-top-color': ['border-top', 'border-color', 'border'],
    'border-top-style': ['border-top', 'border-style', 'border'],
    'border-top-width': ['border-top', 'border-width', 'border'],
    'font-family': ['font'],
    'font-size': ['font'],
    'font-style': ['font'],
    'font-variant': ['font'],
    'font-weight': ['font'],
    'margin-bottom': ['margin'],
    'margin-left': ['margin'],
    'margin-right': ['margin'],
    'margin-top': ['margin'],
    'padding-bottom': ['padding'],
    'padding-left': ['padding'],
    'padding-right': ['padding'],
    'padding-top': ['padding'],
    **_animation_overrides(),
}


# Shorthands that reset longhands not named after them.  Longhands sharing the
# shorthand's name as a hyphenated prefix (`background-color`) are found by name.
SHORTHAND_MEMBERS: Dict[str, FrozenSet[str]] = {
    'font': frozenset({'line-height'}),
    'border-radius': frozenset({
        'border-top-left-radius', 'border-top-right-radius',
        'border-bottom-right-radius', 'border-bottom-left-radius',
    }),
    'border-image': frozenset({'border-image-source', 'border-image-slice', 'border-image-width'}),
    'inset': frozenset({'top', 'right', 'bottom', 'left'}),
    'gap': frozenset({'row-gap', 'column-gap'}),
    'grid-gap': frozenset({'grid-row-gap', 'grid-column-gap'}),
    'columns': frozenset({'column-width', 'column-count'}),
    'flex-flow': frozenset({'flex-direction', 'flex-wrap'}),
    'place-content': frozenset({'align-content', 'justify-content'}),
    'place-items': frozenset({'align-items', 'justify-items'}),
    'place-self': frozenset({'align-self', 'justify-self'}),
}

_VENDOR_PREFIX_RE = re.compile(r'^-[a-z]+-')


def related_properties(ident: str) -> FrozenSet[str]:
    """Return the property itself plus every shorthand that can override it."""
    return frozenset([ident, *OVERRIDE_PARENTS.get(ident, [])])


def _same_family(shorthand: str, longhand: str) -> bool:
    return longhand.startswith(shorthand + '-') or longhand in SHORTHAND_MEMBERS.get(shorthand, ())


def properties_interact(first: str, second: str) -> bool:
    """
    True if setting one property can change the computed value of the other.

    Vendor prefixes are ignored, and any shorthand is taken to reset every
    property in its family.
    """
    if related_properties(first) & related_properties(second):
        return True

    first = _VENDOR_PREFIX_RE.sub('', first)
    second = _VENDOR_PREFIX_RE.sub('', second)
    return first == second or _same_family(first, second) or _same_family(second, first)
