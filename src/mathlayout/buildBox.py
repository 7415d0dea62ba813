# This file computes the bounding boxes of a resolved and classified tree. The
# main class is `BoxBuilder`, which computes the box of a node from the boxes
# of its children, and keeps every box it computes for the rest of the pass
# (so each node's box is computed once). Script constructs are handed to the
# positioning rules in `scriptbase`, and their layouts are kept as well for
# the emission of the output.

from . import scriptbase
from . import utils
from .BBox import BBox
from .Settings import Settings
from .log import logger
from .mathMLTree import rowTypes
from .texClass import texSpacing

# The padding around table cells, in ems. The outer cells have none on their
# outer sides.
CELLPADDING = {"vertical": .25, "horizontal": .5}

# The box of the strut at the end of each table cell
def makeStrutBox():
    return BBox(0, .75, .25)


# Gets the size of a node relative to the surrounding text, from its script
# level: each level multiplies by scriptsizemultiplier, down to no smaller
# than scriptminsize. Levels past 2 are the same size as level 2.
def getScale(node):
    if node is None:
        return 1
    level = node.getScriptlevel()
    if level == 0:
        return 1
    attributes = node.attributes
    multiplier = attributes.get("scriptsizemultiplier")
    minsize = utils.length2em(attributes.get("scriptminsize"))
    return max(multiplier ** min(level, 2), minsize)

# The variant of the font to take a token's glyphs from. Large operators use
# the variant for their size ("normal-largeop" in display style,
# "normal-smallop" otherwise), which falls back to the plain variant.
def getVariant(node):
    variant = node.attributes.get("mathvariant") or "normal"
    if node.type == "mo" and node.attributes.get("largeop"):
        if node.attributes.get("displaystyle"):
            return variant + "-largeop"
        return variant + "-smallop"
    return variant


class BoxBuilder:
    def __init__(self, fontParams, settings=None):
        if settings is None:
            settings = Settings()
        self.fontParams = fontParams
        self.settings = settings
        self.boxes = {}
        self.layouts = {}

    # Gets the box of a node, computing it if needed.
    def getBBox(self, node):
        key = id(node)
        if key not in self.boxes:
            computeType = boxTypes.get(node.type)
            if computeType is None:
                logger.debug("No box rule for <%s>, treating it as a row", node.type)
                computeType = computeRow
            bbox = computeType(self, node)
            bbox.rscale = getScale(node) / getScale(node.parent)
            # Inter-atom space only goes between the items of a row
            if node.parent is not None and node.parent.type in rowTypes:
                bbox.L = utils.length2em(texSpacing(node))
            self.boxes[key] = bbox
        return self.boxes[key]

    # Gets the script layout of a script construct (computing its box if
    # needed).
    def getLayout(self, node):
        self.getBBox(node)
        return self.layouts.get(id(node))


# Functions for computing the box of each node type. Each takes the builder
# and the node, and returns a new box (in the node's own size).
boxTypes = {}

def computeToken(builder, node):
    text = node.getText()
    if not text:
        return BBox.zero()
    variant = getVariant(node)
    bbox = BBox.empty()
    for char in text:
        h, d, w = builder.fontParams.getCharacterMetrics(char, variant)
        bbox.append(BBox.text(w, h, d))
    return bbox.clean()
for type in ("mi", "mn", "mo", "mtext"):
    boxTypes[type] = computeToken

def computeSpace(builder, node):
    attributes = node.attributes
    return BBox(
        utils.length2em(attributes.get("width")),
        utils.length2em(attributes.get("height")),
        utils.length2em(attributes.get("depth")))
boxTypes['mspace'] = computeSpace

def computeRow(builder, node):
    bbox = BBox.empty()
    for child in node.nodeChildren():
        bbox.append(builder.getBBox(child))
    return bbox.clean()
for type in ("math", "mrow", "mstyle"):
    boxTypes[type] = computeRow

def computeScript(builder, node):
    layout = scriptbase.scriptLayout(
        node, builder.getBBox, builder.fontParams, builder.settings.scriptspace)
    builder.layouts[id(node)] = layout
    return layout.bbox.copy()
for type in scriptbase.constructTypes:
    boxTypes[type] = computeScript

def computeCell(builder, node):
    bbox = BBox.empty()
    for child in node.nodeChildren():
        bbox.append(builder.getBBox(child))
    bbox.append(makeStrutBox())
    return bbox.clean()
boxTypes['mtd'] = computeCell

# The padding (left, right) of each of `count` cells in a row
def getCellPadding(count, size):
    return [(0 if i == 0 else size, 0 if i == count - 1 else size) for i in range(count)]

def computeTableRow(builder, node):
    cells = node.nodeChildren()
    bbox = BBox.empty()
    for cell, (left, right) in zip(cells, getCellPadding(len(cells), CELLPADDING["horizontal"])):
        cellbox = builder.getBBox(cell).copy()
        cellbox.L = left / cellbox.rscale
        cellbox.R = right / cellbox.rscale
        bbox.append(cellbox)
    return bbox.clean()
boxTypes['mtr'] = computeTableRow

# Tables are laid out as a grid of cells, with each column as wide as its
# widest cell and each row as high and deep as its highest and deepest cells.
# The table is centered on the math axis.
def computeTable(builder, node):
    rows = node.nodeChildren()
    if not rows:
        return BBox.zero()

    widths = []
    height = 0
    for i, (top, bottom) in enumerate(getCellPadding(len(rows), CELLPADDING["vertical"])):
        row = rows[i]
        builder.getBBox(row)
        rowH = rowD = 0
        for j, cell in enumerate(row.nodeChildren()):
            cellbox = builder.getBBox(cell)
            if j == len(widths):
                widths.append(0)
            widths[j] = max(widths[j], cellbox.w * cellbox.rscale)
            rowH = max(rowH, cellbox.h * cellbox.rscale)
            rowD = max(rowD, cellbox.d * cellbox.rscale)
        height += top + rowH + rowD + bottom

    width = sum(widths) + 2 * CELLPADDING["horizontal"] * max(len(widths) - 1, 0)
    axis = builder.fontParams.axis_height
    return BBox(width, height / 2 + axis, height / 2 - axis).clean()
boxTypes['mtable'] = computeTable
