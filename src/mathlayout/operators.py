# The operator dictionary: for each operator text and form, the spacing class
# the operator gets and the attribute defaults it implies (largeop,
# movablelimits, stretchy, ...). Only the operators that matter for layout are
# listed; anything else is looked up as a relation.

from . import texClass as TEXCLASS

# Common property sets
LARGEOP = {"largeop": True, "movablelimits": True, "symmetric": True}
INTEGRAL = {"largeop": True, "symmetric": True}
LIMITS = {"movablelimits": True}
FENCE = {"fence": True, "stretchy": True, "symmetric": True}
ACCENT = {"accent": True}
WIDEACCENT = {"accent": True, "stretchy": True}

operatorTable = {
    "prefix": {
        "(": (TEXCLASS.OPEN, FENCE),
        "[": (TEXCLASS.OPEN, FENCE),
        "{": (TEXCLASS.OPEN, FENCE),
        "|": (TEXCLASS.OPEN, FENCE),
        "‖": (TEXCLASS.OPEN, FENCE),   # double vertical line
        "⟨": (TEXCLASS.OPEN, FENCE),   # left angle bracket
        "⌊": (TEXCLASS.OPEN, FENCE),   # left floor
        "⌈": (TEXCLASS.OPEN, FENCE),   # left ceiling
        "∑": (TEXCLASS.OP, LARGEOP),   # sum
        "∏": (TEXCLASS.OP, LARGEOP),   # product
        "∐": (TEXCLASS.OP, LARGEOP),   # coproduct
        "⋃": (TEXCLASS.OP, LARGEOP),   # n-ary union
        "⋂": (TEXCLASS.OP, LARGEOP),   # n-ary intersection
        "⨁": (TEXCLASS.OP, LARGEOP),   # n-ary circled plus
        "∫": (TEXCLASS.OP, INTEGRAL),  # integral
        "∬": (TEXCLASS.OP, INTEGRAL),  # double integral
        "∮": (TEXCLASS.OP, INTEGRAL),  # contour integral
        "lim": (TEXCLASS.OP, LIMITS),
        "liminf": (TEXCLASS.OP, LIMITS),
        "limsup": (TEXCLASS.OP, LIMITS),
        "max": (TEXCLASS.OP, LIMITS),
        "min": (TEXCLASS.OP, LIMITS),
        "sup": (TEXCLASS.OP, LIMITS),
        "inf": (TEXCLASS.OP, LIMITS),
        "det": (TEXCLASS.OP, LIMITS),
        "¬": (TEXCLASS.ORD, {}),       # not sign
        "∂": (TEXCLASS.ORD, {}),       # partial differential
        "∇": (TEXCLASS.ORD, {}),       # nabla
        "∀": (TEXCLASS.ORD, {}),       # for all
        "∃": (TEXCLASS.ORD, {}),       # there exists
    },
    "postfix": {
        ")": (TEXCLASS.CLOSE, FENCE),
        "]": (TEXCLASS.CLOSE, FENCE),
        "}": (TEXCLASS.CLOSE, FENCE),
        "|": (TEXCLASS.CLOSE, FENCE),
        "‖": (TEXCLASS.CLOSE, FENCE),
        "⟩": (TEXCLASS.CLOSE, FENCE),  # right angle bracket
        "⌋": (TEXCLASS.CLOSE, FENCE),  # right floor
        "⌉": (TEXCLASS.CLOSE, FENCE),  # right ceiling
        "!": (TEXCLASS.CLOSE, {}),
        "′": (TEXCLASS.ORD, {}),       # prime
        "″": (TEXCLASS.ORD, {}),       # double prime
        "^": (TEXCLASS.ORD, WIDEACCENT),
        "ˆ": (TEXCLASS.ORD, WIDEACCENT),  # modifier circumflex
        "~": (TEXCLASS.ORD, WIDEACCENT),
        "˜": (TEXCLASS.ORD, WIDEACCENT),  # small tilde
        "¯": (TEXCLASS.ORD, WIDEACCENT),  # macron
        "‾": (TEXCLASS.ORD, WIDEACCENT),  # overline
        "¨": (TEXCLASS.ORD, ACCENT),   # diaeresis
        "˙": (TEXCLASS.ORD, ACCENT),   # dot above
        "→": (TEXCLASS.ORD, WIDEACCENT),  # rightwards arrow (vector)
        "⏞": (TEXCLASS.ORD, WIDEACCENT),  # top curly bracket
        "⏟": (TEXCLASS.ORD, WIDEACCENT),  # bottom curly bracket
    },
    "infix": {
        "+": (TEXCLASS.BIN, {}),
        "-": (TEXCLASS.BIN, {}),
        "−": (TEXCLASS.BIN, {}),       # minus
        "±": (TEXCLASS.BIN, {}),       # plus-minus
        "∓": (TEXCLASS.BIN, {}),       # minus-plus
        "×": (TEXCLASS.BIN, {}),       # times
        "÷": (TEXCLASS.BIN, {}),       # division
        "*": (TEXCLASS.BIN, {}),
        "∗": (TEXCLASS.BIN, {}),       # asterisk operator
        "⋅": (TEXCLASS.BIN, {}),       # dot operator
        "∘": (TEXCLASS.BIN, {}),       # ring operator
        "∩": (TEXCLASS.BIN, {}),       # intersection
        "∪": (TEXCLASS.BIN, {}),       # union
        "⊕": (TEXCLASS.BIN, {}),       # circled plus
        "⊗": (TEXCLASS.BIN, {}),       # circled times
        "/": (TEXCLASS.ORD, {}),
        "=": (TEXCLASS.REL, {}),
        "<": (TEXCLASS.REL, {}),
        ">": (TEXCLASS.REL, {}),
        "≠": (TEXCLASS.REL, {}),       # not equal
        "≤": (TEXCLASS.REL, {}),       # less-than or equal
        "≥": (TEXCLASS.REL, {}),       # greater-than or equal
        "≈": (TEXCLASS.REL, {}),       # almost equal
        "≡": (TEXCLASS.REL, {}),       # identical
        "∼": (TEXCLASS.REL, {}),       # tilde operator
        "∝": (TEXCLASS.REL, {}),       # proportional
        "∈": (TEXCLASS.REL, {}),       # element of
        "∉": (TEXCLASS.REL, {}),       # not an element of
        "⊂": (TEXCLASS.REL, {}),       # subset
        "⊆": (TEXCLASS.REL, {}),       # subset or equal
        "⊃": (TEXCLASS.REL, {}),       # superset
        "⊇": (TEXCLASS.REL, {}),       # superset or equal
        "→": (TEXCLASS.REL, {}),       # rightwards arrow
        "←": (TEXCLASS.REL, {}),       # leftwards arrow
        "⇒": (TEXCLASS.REL, {}),       # rightwards double arrow
        "⇔": (TEXCLASS.REL, {}),       # left right double arrow
        "↦": (TEXCLASS.REL, {}),       # maps to
        ":": (TEXCLASS.REL, {}),
        "|": (TEXCLASS.ORD, {"fence": True, "stretchy": True}),
        ",": (TEXCLASS.PUNCT, {"separator": True}),
        ";": (TEXCLASS.PUNCT, {"separator": True}),
        "⁡": (TEXCLASS.ORD, {}),       # function application
        "⁢": (TEXCLASS.ORD, {}),       # invisible times
        "⁣": (TEXCLASS.ORD, {"separator": True}),  # invisible separator
    },
}

# The order in which the forms are tried when the operator is not listed in
# the form it is used in.
formOrder = {
    "prefix": ["prefix", "infix", "postfix"],
    "infix": ["infix", "postfix", "prefix"],
    "postfix": ["postfix", "infix", "prefix"],
}

DEFAULT = (TEXCLASS.REL, {})

# Looks up an operator in the dictionary, trying the other forms if it is not
# listed in the given one.
#
# @return {tuple}  The spacing class and a dict of attribute defaults
def lookup(text, form="infix"):
    for name in formOrder.get(form, formOrder["infix"]):
        entry = operatorTable[name].get(text)
        if entry is not None:
            return entry
    return DEFAULT
