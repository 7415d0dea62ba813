# This file does the main work of building a tree of display nodes from a laid
# out markup tree. The entry point is the `emit` function, which takes a node
# and the BoxBuilder that holds the boxes computed for the tree. Then the
# various groupTypes functions are called, to produce a final tree of
# `mjx-*` nodes whose inline styles carry the computed offsets.

from . import domTree
from .domTree import DisplayNode
from .log import logger
from .utils import em, percent


# Makes the display node for a markup node, with its class, its spacing and
# its size relative to its parent.
def makeNode(node, builder, children, kind=None):
    bbox = builder.getBBox(node)
    classes = [node.texClass] if node.texClass else []
    style = {}
    if bbox.L:
        style["marginLeft"] = em(bbox.L)
    if abs(bbox.rscale - 1) > 1e-6:
        style["fontSize"] = percent(bbox.rscale)
    return DisplayNode(kind or "mjx-" + node.type, children, classes, style)

# Sets the left padding of each of the given nodes that needs to be moved to
# be centered in a stack.
def setDeltaW(nodes, delta):
    for displayNode, dx in zip(nodes, delta):
        if dx:
            displayNode.style["paddingLeft"] = em(dx)


# Functions for emitting the different types of nodes. Each takes a node and
# the builder, and returns a display node.
groupTypes = {}

def groupToken(node, builder):
    displayNode = makeNode(node, builder, [domTree.TextNode(node.getText())])
    variant = node.attributes.get("mathvariant")
    if variant and variant != "normal":
        displayNode.setAttribute("variant", variant)
    if node.type == "mo" and node.attributes.get("largeop"):
        displayNode.classes.append("largeop")
    return displayNode
for type in ("mi", "mn", "mo", "mtext"):
    groupTypes[type] = groupToken

def groupSpace(node, builder):
    bbox = builder.getBBox(node)
    displayNode = makeNode(node, builder, [])
    if bbox.w:
        displayNode.style["width"] = em(bbox.w)
    if bbox.h or bbox.d:
        displayNode.style["height"] = em(bbox.h + bbox.d)
        displayNode.style["verticalAlign"] = em(-bbox.d)
    return displayNode
groupTypes['mspace'] = groupSpace

def groupRow(node, builder):
    return makeNode(node, builder, [emit(child, builder) for child in node.nodeChildren()])
for type in ("math", "mrow", "mstyle"):
    groupTypes[type] = groupRow

# The style of the element holding the scripts: its vertical position, and
# the space after it that the box includes.
def scriptStyle(offset, layout):
    style = {"verticalAlign": em(offset)}
    if layout.scriptspace:
        style["paddingRight"] = em(layout.scriptspace)
    return style

# A base with a single script: the script is raised (or lowered) with
# vertical-align.
def emitScript(node, builder, layout):
    base, script = node.nodeChildren()[:2]
    scriptNode = DisplayNode("mjx-script", [emit(script, builder)],
                             style=scriptStyle(layout.offset, layout))
    return makeNode(node, builder, [emit(base, builder), scriptNode])

# A base with both scripts: the scripts are stacked, with a spacer between
# them, and the stack is lowered to the position of the subscript.
def emitSubSup(node, builder, layout):
    base, sub, sup = node.nodeChildren()[:3]
    spacer = DisplayNode("mjx-spacer", style={"marginTop": em(layout.q)})
    stack = DisplayNode("mjx-script", [emit(sup, builder), spacer, emit(sub, builder)],
                        style=scriptStyle(layout.v, layout))
    return makeNode(node, builder, [emit(base, builder), stack])

# Limits: the base and the limits are rows of a table, centered, and
# separated by padding.
def emitLimits(node, builder, layout):
    children = node.nodeChildren()
    base = DisplayNode("mjx-base", [emit(children[0], builder)])
    nodes = [base]
    rows = [DisplayNode("mjx-row", [base])]

    if layout.kind in ("munder", "munderover"):
        under = DisplayNode("mjx-under", [emit(children[1], builder)],
                            style={"paddingTop": em(layout.underK)})
        nodes.append(under)
        rows.append(DisplayNode("mjx-row", [under]))
    if layout.kind in ("mover", "munderover"):
        over = DisplayNode("mjx-over", [emit(children[2 if layout.kind == "munderover" else 1], builder)],
                           style={"paddingBottom": em(layout.overK)})
        nodes.append(over)
        rows.insert(0, DisplayNode("mjx-row", [over]))

    setDeltaW(nodes, layout.delta)
    return makeNode(node, builder, rows)

scriptEmitters = {
    "msub": emitScript,
    "msup": emitScript,
    "msubsup": emitSubSup,
    "munder": emitLimits,
    "mover": emitLimits,
    "munderover": emitLimits,
}

def groupScript(node, builder):
    layout = builder.getLayout(node)
    return scriptEmitters[layout.kind](node, builder, layout)
for type in scriptEmitters:
    groupTypes[type] = groupScript

def groupTable(node, builder):
    rows = [emit(row, builder) for row in node.nodeChildren()]
    return makeNode(node, builder, [DisplayNode("mjx-itable", rows)])
groupTypes['mtable'] = groupTable

def groupTableRow(node, builder):
    return makeNode(node, builder, [emit(cell, builder) for cell in node.nodeChildren()])
groupTypes['mtr'] = groupTableRow

# Every table cell ends with a strut, which gives the cell a minimum height
# and depth however little is in it.
def makeStrut():
    return DisplayNode("mjx-tstrut", style={"width": "0", "height": "1em", "verticalAlign": em(-.25)})

def groupCell(node, builder):
    children = [emit(child, builder) for child in node.nodeChildren()]
    children.append(makeStrut())
    return makeNode(node, builder, children)
groupTypes['mtd'] = groupCell

# Node types we know nothing about are passed on as plain containers
def groupOpaque(node, builder):
    logger.debug("Emitting <%s> as an opaque container", node.type)
    return groupRow(node, builder)


# Emits the display node for a node (and its children, first).
#
# @param {MathNode} node        A resolved and classified node
# @param {BoxBuilder} builder   The builder holding the boxes of the tree
# @return {DisplayNode}
def emit(node, builder):
    return groupTypes.get(node.type, groupOpaque)(node, builder)


# Makes the node shown in place of math that could not be laid out.
def makeErrorNode(error, errorColor):
    return DisplayNode("mjx-merror", [domTree.TextNode(str(error))],
                       style={"color": errorColor},
                       attributes={"title": getattr(error, "rawMessage", str(error))})
