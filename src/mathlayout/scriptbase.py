# This file positions scripts and limits: the TeXbook Appendix G rules 18a-f
# for sub- and superscripts, and rules 13 and 13a for limits above and below
# a base. The entry point is `scriptLayout`, which takes an msub, msup,
# msubsup, munder, mover or munderover node and works out where its scripts
# go, and the box of the whole construct.
#
# The rules are written as plain functions of the boxes involved, so that
# they can be used (and tested) on their own. They read the font constants
# they need from a FontParameterSet, and fail with MissingFontParameterError
# if a constant is missing.

from . import utils
from .BBox import BBox
from .LayoutError import LayoutError, UnsupportedConstructError
from .mathMLTree import coreMO


# The layout of a script construct. `kind` is the construct that was actually
# laid out, which for under/over nodes with movable limits is the
# corresponding sub/sup construct.
#
#  - offset: the vertical position of the script of an msub/msup (positive
#            raises it)
#  - u, v, q: for msubsup, the raise of the superscript, the (negative) raise
#             of the subscript, and the gap between the two scripts
#  - overK, underK: for limits, the separation between the base and the
#                   limit above or below it
#  - overU, underV: for limits, the raise of the limits
#  - scriptspace: for scripts, the space added after them
#  - delta: for limits, the horizontal offsets that center the base and the
#           limits (in child order)
class ScriptLayout:
    def __init__(self, kind, bbox, offset=0, u=0, v=0, q=0,
                 overK=0, overU=0, underK=0, underV=0, delta=None, scriptspace=0):
        self.kind = kind
        self.bbox = bbox
        self.offset = offset
        self.u = u
        self.v = v
        self.q = q
        self.overK = overK
        self.overU = overU
        self.underK = underK
        self.underV = underV
        self.delta = delta or []
        self.scriptspace = scriptspace

    def isLimits(self):
        return self.kind in ("munder", "mover", "munderover")


# Gets the node that actually holds the base: a style or row with a single
# child is unwrapped.
def getBaseElem(base):
    children = base.nodeChildren()
    if base.type in ("mstyle", "mrow") and len(children) == 1:
        return children[0]
    return base

# TeXbook algorithms often reference "character boxes": a base that is a
# single character (in an identifier, number or operator that is not a large
# operator) at the size of the construct. Such bases don't get the drops of
# rule 18a.
#
# @param {MathNode} base     The base of the construct
# @param {function} getBBox  Gets the box of a node
def isCharBase(base, getBBox):
    base = getBaseElem(base)
    return (base.type in ("mo", "mi", "mn") and
            getBBox(base).rscale == 1 and
            len(base.getText()) == 1 and
            not base.attributes.get("largeop"))


# Rule 18a,b: how far a subscript drops below the baseline.
def getV(basebox, sbox, params, isChar=False, subscriptshift=None):
    return max(
        0 if isChar else basebox.d + params.sub_drop * sbox.rscale,
        utils.length2em(subscriptshift, params.sub1),
        sbox.h * sbox.rscale - (4 / 5) * params.x_height
    )

# Rule 18a,c,d: how far a superscript is raised. The minimum raise depends on
# the style: sup1 in display style, sup3 in cramped styles, sup2 otherwise.
def getU(basebox, sbox, params, isChar=False, superscriptshift=None,
         displaystyle=False, texprimestyle=False):
    if displaystyle:
        p = params.sup1
    elif texprimestyle:
        p = params.sup3
    else:
        p = params.sup2
    return max(
        0 if isChar else basebox.h - params.sup_drop * sbox.rscale,
        utils.length2em(superscriptshift, p),
        sbox.d * sbox.rscale + (1 / 4) * params.x_height
    )

# Rule 18e,f: both scripts at once. The subscript drops at least sub2, and the
# scripts are moved apart so there are at least four rule thicknesses between
# them, raising the superscript to 4/5 of the x-height where possible.
#
# @return {tuple}  (u, -v, q): the raise of the superscript, the raise of the
#                  subscript and the gap between them
def getUVQ(basebox, subbox, supbox, params, isChar=False, subscriptshift=None,
           superscriptshift=None, displaystyle=False, texprimestyle=False):
    t = 4 * params.rule_thickness
    drop = 0 if isChar else basebox.d + params.sub_drop * subbox.rscale
    u = getU(basebox, supbox, params, isChar, superscriptshift, displaystyle, texprimestyle)
    v = max(drop, utils.length2em(subscriptshift, params.sub2))

    q = (u - supbox.d * supbox.rscale) - (subbox.h * subbox.rscale - v)
    if q < t:
        v += t - q
        p = (4 / 5) * params.x_height - (u - supbox.d * supbox.rscale)
        if p > 0:
            u += p
            v -= p

    # Explicit shifts are minimums
    u = max(utils.length2em(superscriptshift, u), u)
    v = max(utils.length2em(subscriptshift, v), v)
    q = (u - supbox.d * supbox.rscale) - (subbox.h * subbox.rscale - v)
    return u, -v, q


# Rules 13, 13a for a limit above the base.
#
# @return {tuple}  The separation between the base and the overscript, and
#                  the raise of the overscript
def getOverKU(basebox, overbox, params):
    d = overbox.d * overbox.rscale
    k = max(params.big_op_spacing1, params.big_op_spacing3 - max(0, d))
    return k, basebox.h + k + d

# Rules 13, 13a for a limit below the base.
#
# @return {tuple}  The separation between the base and the underscript, and
#                  the (negative) raise of the underscript
def getUnderKV(basebox, underbox, params):
    h = underbox.h * underbox.rscale
    k = max(params.big_op_spacing2, params.big_op_spacing4 - h)
    return k, -(basebox.d + k + h)

# The horizontal offsets that center boxes in a vertical stack.
def getDeltaW(boxes):
    widths = [box.w * box.rscale for box in boxes]
    w = max(widths)
    return [(w - width) / 2 for width in widths]


# Limits move to script positions when not in display style, if the
# construct, its attributes or the operator at the core of its base ask for
# it.
def hasMovableLimits(node, base=None):
    if node.attributes.get("displaystyle"):
        return False
    if base is None:
        children = node.nodeChildren()
        if not children:
            return False
        base = children[0]
    return bool(node.getProperty("movablelimits") or
                node.attributes.get("movablelimits") or
                coreMO(base).attributes.get("movablelimits"))


# Gets the children of a construct, checking there are enough of them.
def getParts(node, count):
    children = node.nodeChildren()
    if len(children) < count:
        raise LayoutError(
            "expected {0} children, found {1}".format(count, len(children)), node)
    return children[:count]

# The box of a base with a single script, whose baseline is raised by `offset`
def makeScriptBox(basebox, scriptbox, offset, scriptspace):
    bbox = BBox.empty()
    bbox.append(basebox)
    bbox.combine(scriptbox, bbox.w, offset)
    bbox.w += scriptspace
    return bbox.clean()


# These are the layouts of the six constructs. Each takes the node, a
# function that gets the box of a node, the font parameters and the space
# to put after scripts, and returns a ScriptLayout.
constructTypes = {}

def layoutSub(node, getBBox, params, scriptspace):
    base, script = getParts(node, 2)
    basebox = getBBox(base)
    sbox = getBBox(script)
    v = getV(basebox, sbox, params, isCharBase(base, getBBox),
             node.attributes.get("subscriptshift"))
    return ScriptLayout("msub", makeScriptBox(basebox, sbox, -v, scriptspace), offset=-v, v=-v,
                        scriptspace=scriptspace)
constructTypes['msub'] = layoutSub

def layoutSup(node, getBBox, params, scriptspace):
    base, script = getParts(node, 2)
    basebox = getBBox(base)
    sbox = getBBox(script)
    u = getU(basebox, sbox, params, isCharBase(base, getBBox),
             node.attributes.get("superscriptshift"),
             node.attributes.get("displaystyle"),
             node.getProperty("texprimestyle", False))
    return ScriptLayout("msup", makeScriptBox(basebox, sbox, u, scriptspace), offset=u, u=u,
                        scriptspace=scriptspace)
constructTypes['msup'] = layoutSup

def layoutSubSup(node, getBBox, params, scriptspace):
    base, sub, sup = getParts(node, 3)
    basebox = getBBox(base)
    subbox = getBBox(sub)
    supbox = getBBox(sup)
    values = node.attributes.getList("subscriptshift", "superscriptshift", "displaystyle")
    u, v, q = getUVQ(basebox, subbox, supbox, params, isCharBase(base, getBBox),
                     values["subscriptshift"],
                     values["superscriptshift"],
                     values["displaystyle"],
                     node.getProperty("texprimestyle", False))

    bbox = BBox.empty()
    bbox.append(basebox)
    w = bbox.w
    bbox.combine(subbox, w, v)
    bbox.combine(supbox, w, u)
    bbox.w += scriptspace
    bbox.clean()
    return ScriptLayout("msubsup", bbox, offset=v, u=u, v=v, q=q, scriptspace=scriptspace)
constructTypes['msubsup'] = layoutSubSup

def layoutUnder(node, getBBox, params, scriptspace):
    base, under = getParts(node, 2)
    basebox = getBBox(base)
    underbox = getBBox(under)
    k, v = getUnderKV(basebox, underbox, params)
    delta = getDeltaW([basebox, underbox])

    bbox = BBox.empty()
    bbox.combine(basebox, delta[0], 0)
    bbox.combine(underbox, delta[1], v)
    bbox.d += params.big_op_spacing5
    bbox.clean()
    return ScriptLayout("munder", bbox, underK=k, underV=v, delta=delta)
constructTypes['munder'] = layoutUnder

def layoutOver(node, getBBox, params, scriptspace):
    base, over = getParts(node, 2)
    basebox = getBBox(base)
    overbox = getBBox(over)
    k, u = getOverKU(basebox, overbox, params)
    delta = getDeltaW([basebox, overbox])

    bbox = BBox.empty()
    bbox.combine(basebox, delta[0], 0)
    bbox.combine(overbox, delta[1], u)
    bbox.h += params.big_op_spacing5
    bbox.clean()
    return ScriptLayout("mover", bbox, overK=k, overU=u, delta=delta)
constructTypes['mover'] = layoutOver

def layoutUnderOver(node, getBBox, params, scriptspace):
    base, under, over = getParts(node, 3)
    basebox = getBBox(base)
    underbox = getBBox(under)
    overbox = getBBox(over)
    overK, u = getOverKU(basebox, overbox, params)
    underK, v = getUnderKV(basebox, underbox, params)
    delta = getDeltaW([basebox, underbox, overbox])

    bbox = BBox.empty()
    bbox.combine(basebox, delta[0], 0)
    bbox.combine(overbox, delta[2], u)
    bbox.combine(underbox, delta[1], v)
    bbox.h += params.big_op_spacing5
    bbox.d += params.big_op_spacing5
    bbox.clean()
    return ScriptLayout("munderover", bbox, overK=overK, overU=u,
                        underK=underK, underV=v, delta=delta)
constructTypes['munderover'] = layoutUnderOver

# The sub/sup construct an under/over construct turns into when its limits
# are moved to script positions
movableTypes = {
    "munder": "msub",
    "mover": "msup",
    "munderover": "msubsup",
}


# Lays out a script construct.
#
# @param {MathNode} node          The construct
# @param {function} getBBox       Gets the (cached) box of a node
# @param {FontParameterSet} params
# @param {?number} scriptspace    The space after scripts; the font's
#                                 scriptspace when None
# @return {ScriptLayout}
def scriptLayout(node, getBBox, params, scriptspace=None):
    if node.type not in constructTypes:
        raise UnsupportedConstructError(node)

    if scriptspace is None:
        scriptspace = params.scriptspace

    kind = node.type
    if kind in movableTypes and hasMovableLimits(node):
        kind = movableTypes[kind]
    return constructTypes[kind](node, getBBox, params, scriptspace)
