# The TeX spacing classes, and the table of spaces TeX puts between atoms of
# the various classes (TeXbook pg. 170).
#
# The class names double as the CSS classes put on the output nodes.

ORD = "mord"
OP = "mop"
BIN = "mbin"
REL = "mrel"
OPEN = "mopen"
CLOSE = "mclose"
PUNCT = "mpunct"
INNER = "minner"
VCENTER = "mvcenter"
# Nodes with no visual class (spaces) are skipped when threading classes.
NONE = None

# Space between a left atom (row) and a right atom (column):
#   0 = none, 1 = thin, 2 = medium, 3 = thick.
# Negative values are spaces that are used even at script levels.
TEXSPACE = {
    ORD:   {ORD: 0, OP: -1, BIN: 2, REL: 3, OPEN: 0, CLOSE: 0, PUNCT: 0, INNER: 1},
    OP:    {ORD: -1, OP: -1, BIN: 0, REL: 3, OPEN: 0, CLOSE: 0, PUNCT: 0, INNER: 1},
    BIN:   {ORD: 2, OP: 2, BIN: 0, REL: 0, OPEN: 2, CLOSE: 0, PUNCT: 0, INNER: 2},
    REL:   {ORD: 3, OP: 3, BIN: 0, REL: 0, OPEN: 3, CLOSE: 0, PUNCT: 0, INNER: 3},
    OPEN:  {ORD: 0, OP: 0, BIN: 0, REL: 0, OPEN: 0, CLOSE: 0, PUNCT: 0, INNER: 0},
    CLOSE: {ORD: 0, OP: -1, BIN: 2, REL: 3, OPEN: 0, CLOSE: 0, PUNCT: 0, INNER: 1},
    PUNCT: {ORD: 1, OP: 1, BIN: 0, REL: 1, OPEN: 1, CLOSE: 1, PUNCT: 1, INNER: 1},
    INNER: {ORD: 1, OP: -1, BIN: 2, REL: 3, OPEN: 1, CLOSE: 0, PUNCT: 1, INNER: 1},
}

TEXSPACELENGTH = ["", "thinmathspace", "mediummathspace", "thickmathspace"]


# Gets the space to put before a node, given the class of the node before it
# (as recorded by the class assignment pass). Returns a named MathML space, or
# "" for none.
def texSpacing(node):
    prevClass = node.prevClass
    texClass = node.texClass
    if prevClass is NONE or texClass is NONE:
        return ""
    if prevClass == VCENTER:
        prevClass = ORD
    if texClass == VCENTER:
        texClass = ORD
    space = TEXSPACE[prevClass][texClass]
    if (node.prevLevel > 0 or node.getScriptlevel() > 0) and space >= 0:
        return ""
    return TEXSPACELENGTH[abs(space)]
