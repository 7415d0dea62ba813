# This file contains the font parameters and glyph metrics used by the
# layout. The metric tables themselves are not part of this package: they are
# given to the layout in a FontParameterSet, together with the named font
# constants. `texParams` holds the standard TeX (Computer Modern) values of the
# constants, which are used when no others are given.
#
# All values are in ems.

import types

from .LayoutError import MissingFontParameterError

# The TeX font constants, as named in the TeXbook Appendix G. The sub/sup
# values are sigma 13-21, the big op spacings xi 9-13.
texParams = {
    "x_height": .442,
    "quad": 1,
    "num1": .676,
    "num2": .394,
    "num3": .444,
    "denom1": .686,
    "denom2": .345,
    "sup1": .413,
    "sup2": .363,
    "sup3": .289,
    "sub1": .15,
    "sub2": .247,
    "sup_drop": .386,
    "sub_drop": .05,
    "delim1": 2.39,
    "delim2": 1.0,
    "axis_height": .25,
    "rule_thickness": .06,
    "big_op_spacing1": .111,
    "big_op_spacing2": .167,
    "big_op_spacing3": .2,
    "big_op_spacing4": .6,
    "big_op_spacing5": .1,
    "scriptspace": .05,
}


# The constants and glyph metrics of a font. Constants are read as attributes
# (`params.x_height`); reading one that the set does not have raises
# MissingFontParameterError rather than giving a default.
#
# `metrics` maps a variant name ("normal", "italic", "bold", ...) to a dict of
# characters and their (height, depth, width).
class FontParameterSet:
    def __init__(self, params=None, metrics=None):
        self._params = dict(texParams if params is None else params)
        self._metrics = {
            variant: dict(table) for variant, table in (metrics or {}).items()
        }

    @property
    def params(self):
        return types.MappingProxyType(self._params)

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._params[name]
        except KeyError:
            raise MissingFontParameterError(name)

    def __contains__(self, name):
        return name in self._params

    # A new set with some of the constants replaced
    def withParams(self, **params):
        newParams = dict(self._params)
        newParams.update(params)
        return FontParameterSet(newParams, self._metrics)

    # Gets the metrics of a character in the given variant, falling back to
    # the normal variant.
    #
    # @return {tuple}  The (height, depth, width) of the character
    def getCharacterMetrics(self, char, variant="normal"):
        for name in (variant, "normal"):
            table = self._metrics.get(name)
            if table is not None and char in table:
                return tuple(table[char])
        raise MissingFontParameterError(char, variant)
