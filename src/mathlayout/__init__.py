# This is the main entry point for mathlayout. Here, we expose functions for
# laying out markup trees either to display node trees or to markup strings.
#
# We also expose the LayoutError classes, to check if errors raised are
# problems with the input, or bugs.

from .LayoutError import (
    AttributeDomainError,
    LayoutError,
    MissingFontParameterError,
    UnsupportedConstructError,
)
from .Settings import Settings
from .buildTree import buildBox, buildTree
from .fontMetrics import FontParameterSet, texParams
from .mathMLTree import MathNode, TextNode, fromJSON, toMathML

__all__ = [
    "render", "renderToString", "_generateBoxes",
    "Settings", "FontParameterSet", "texParams",
    "MathNode", "TextNode", "fromJSON", "toMathML",
    "LayoutError", "AttributeDomainError", "MissingFontParameterError",
    "UnsupportedConstructError",
]


def _getTree(tree):
    if isinstance(tree, dict):
        return fromJSON(tree)
    return tree

def render(tree, fontParams, settings=None):
    '''
    Lay out a markup tree (a MathNode, or nested dicts as loaded from JSON),
    and return the display node tree for it.
    '''
    return buildTree(_getTree(tree), fontParams, settings or Settings())

def renderToString(tree, fontParams, settings=None):
    '''
    Lay out a markup tree, and return the markup for that.
    '''
    return render(tree, fontParams, settings).toMarkup()

def _generateBoxes(tree, fontParams, settings=None):
    '''
    Lay out a markup tree and return the bounding box of the whole of it.
    '''
    return buildBox(_getTree(tree), fontParams, settings or Settings())
