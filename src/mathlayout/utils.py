# This file contains a list of utility functions which are useful in other
# files.

import re

from .LayoutError import AttributeDomainError

# Converts camelCase to kebab-case
firstCapRe = re.compile('(.)([A-Z][a-z]+)')
allCapRe = re.compile('([a-z0-9])([A-Z])')
def hyphenate(name):
    s1 = firstCapRe.sub(r'\1-\2', name)
    return allCapRe.sub(r'\1-\2', s1).lower()

# Escapes text to prevent scripting attacks.
#
# @param {*} text Text value to escape.
# @return {string} An escaped string.
def escape(text):
    return (str(text)
        .replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        .replace("'", "&apos;").replace('"', "&quot;")
        )

# Formats a length in ems, rounded to three places so that output is stable.
def em(num):
    if abs(num) < .0006:
        return "0em"
    return "{0:.3f}".format(num).rstrip("0").rstrip(".") + "em"

# Formats a scale factor as a percentage
def percent(num):
    return "{0:.1f}".format(100 * num).rstrip("0").rstrip(".") + "%"


# Absolute units, in pixels
UNITS = {
    "px": 1,
    "in": 96,
    "cm": 96 / 2.54,
    "mm": 96 / 25.4,
    "pt": 96 / 72,
    "pc": 12,
}

# Units relative to the current font size
RELUNITS = {
    "em": 1,
    "ex": .431,
    "mu": 1 / 18,
}

# The MathML named spaces, in ems
MATHSPACE = {
    "veryverythinmathspace": 1 / 18,
    "verythinmathspace": 2 / 18,
    "thinmathspace": 3 / 18,
    "mediummathspace": 4 / 18,
    "thickmathspace": 5 / 18,
    "verythickmathspace": 6 / 18,
    "veryverythickmathspace": 7 / 18,
    "negativeveryverythinmathspace": -1 / 18,
    "negativeverythinmathspace": -2 / 18,
    "negativethinmathspace": -3 / 18,
    "negativemediummathspace": -4 / 18,
    "negativethickmathspace": -5 / 18,
    "negativeverythickmathspace": -6 / 18,
    "negativeveryverythickmathspace": -7 / 18,
}

lengthRe = re.compile(r'^\s*([-+]?(?:\.\d+|\d+(?:\.\d*)?))?(pt|em|ex|mu|px|pc|in|mm|cm|%)?\s*$')

# Converts a MathML length to ems.
#
# @param {?string|number} length  The length to convert. None or the empty
#                                 string means "not given", and `size` is
#                                 returned instead.
# @param {number} size            The default value, also the size that
#                                 percentages are relative to.
# @param {number} scale           The scaling of the current element,
#                                 used to convert absolute units.
# @param {number} emPx            The number of pixels in an em.
#
# Raises AttributeDomainError if the length can't be parsed.
def length2em(length, size=0, scale=1, emPx=16):
    if length is None:
        length = ""
    if isinstance(length, bool):
        raise AttributeDomainError("length", length)
    if isinstance(length, (int, float)):
        return float(length)
    length = length.strip()
    if length == "":
        return size
    if length in MATHSPACE:
        return MATHSPACE[length]
    match = lengthRe.match(length)
    if not match or (match.group(1) is None and match.group(2) is None):
        raise AttributeDomainError("length", length)
    m = float(match.group(1) or "1")
    unit = match.group(2)
    if unit in UNITS:
        return m * UNITS[unit] / emPx / scale
    if unit in RELUNITS:
        return m * RELUNITS[unit]
    if unit == "%":
        return m / 100 * size
    return m * size
