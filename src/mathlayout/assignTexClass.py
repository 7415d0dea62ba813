# This file does the spacing class pass. The entry point is `assignTexClass`,
# which gives every node of the tree a TeX class (ord, op, bin, rel, ...) and
# records on each node the class and script level of the node before it, so
# that the inter-atom spacing can be worked out later (see
# `texClass.texSpacing`).
#
# Siblings are processed strictly from left to right, since the class of a
# node may depend on (and may change) the class of the node before it. Each
# handler takes the node and the node before it, and returns the node that
# the next sibling should see as its predecessor.

import re

from . import operators
from . import texClass as TEXCLASS
from .inheritAttributes import getForm
from .mathMLTree import isEmbellished

# Multi-letter identifiers that look like this are set as operators (like
# "sin" or "log"), for spacing purposes.
operatorName = re.compile(r'^[a-z][a-z0-9]*$', re.IGNORECASE)


# Records the class and level of the node before this one.
def getPrevClass(node, prev):
    if prev is not None:
        node.prevClass = prev.texClass
        node.prevLevel = prev.getScriptlevel()
    else:
        node.prevClass = TEXCLASS.NONE
        node.prevLevel = 0

# Copies the class information from the node that determines it.
def updateTeXclass(node, core):
    node.texClass = core.texClass
    node.prevClass = core.prevClass
    node.prevLevel = core.prevLevel


# This is a map of node types to the function used to classify that type.
classTypes = {}

def classToken(node, prev):
    getPrevClass(node, prev)
    node.texClass = TEXCLASS.ORD
    return node
classTypes['mn'] = classToken
classTypes['mtext'] = classToken

def classMi(node, prev):
    getPrevClass(node, prev)
    node.texClass = TEXCLASS.ORD
    name = node.getText()
    if len(name) > 1 and operatorName.match(name):
        node.texClass = TEXCLASS.OP
        node.setProperty("autoOP", True)
    return node
classTypes['mi'] = classMi

def classMo(node, prev):
    texClass = node.getProperty("texClass")
    if texClass is None:
        texClass = operators.lookup(node.getText(), getForm(node))[0]
    node.texClass = texClass

    # Fences that would be relations are opening or closing delimiters
    attributes = node.attributes
    if attributes.get("fence") and node.texClass == TEXCLASS.REL:
        form = attributes.get("form")
        if form == "prefix":
            node.texClass = TEXCLASS.OPEN
        elif form == "postfix":
            node.texClass = TEXCLASS.CLOSE

    return adjustTeXclass(node, prev)
classTypes['mo'] = classMo

# See TeXbook pg. 442-446, Rules 5 and 6. A bin turns into an ord when there
# is nothing for it to operate on.
def adjustTeXclass(node, prev):
    texClass = node.texClass
    if texClass is TEXCLASS.NONE:
        return prev

    if prev is not None:
        if prev.getProperty("autoOP") and texClass in (TEXCLASS.BIN, TEXCLASS.REL):
            prev.texClass = TEXCLASS.ORD
        prevClass = node.prevClass = prev.texClass or TEXCLASS.ORD
        node.prevLevel = prev.getScriptlevel()
    else:
        prevClass = node.prevClass = TEXCLASS.NONE
        node.prevLevel = 0

    if texClass == TEXCLASS.BIN and prevClass in (TEXCLASS.NONE, TEXCLASS.BIN, TEXCLASS.OP,
                                                  TEXCLASS.REL, TEXCLASS.OPEN, TEXCLASS.PUNCT):
        node.texClass = TEXCLASS.ORD
    elif prevClass == TEXCLASS.BIN and texClass in (TEXCLASS.REL, TEXCLASS.CLOSE, TEXCLASS.PUNCT):
        prev.texClass = node.prevClass = TEXCLASS.ORD
    return node

def classSpace(node, prev):
    node.texClass = TEXCLASS.NONE
    node.prevClass = TEXCLASS.NONE
    node.prevLevel = 0
    return prev
classTypes['mspace'] = classSpace

# Rows are transparent: their children continue the sequence of atoms around
# them, and the row takes the class of its first child.
def classRow(node, prev):
    children = node.nodeChildren()
    for child in children:
        prev = assignTexClass(child, prev)
    # A bin at the end of a list has nothing to its right (rule 5)
    if prev is not None and prev.texClass == TEXCLASS.BIN:
        prev.texClass = TEXCLASS.ORD
    if children:
        updateTeXclass(node, children[0])
    else:
        getPrevClass(node, None)
        node.texClass = TEXCLASS.ORD
    return prev
classTypes['mrow'] = classRow
classTypes['mstyle'] = classRow

# The root and table cells start a new list of atoms.
def classList(node, prev):
    classRow(node, None)
    getPrevClass(node, prev)
    return node
classTypes['math'] = classList
classTypes['mtd'] = classList

# Script constructs are ords, unless the base is an identifier or an
# (embellished) operator, in which case they take the class of the base. The
# scripts themselves start new lists.
def classScript(node, prev):
    getPrevClass(node, prev)
    node.texClass = TEXCLASS.ORD
    children = node.nodeChildren()
    if children:
        base = children[0]
        if isEmbellished(node) or base.type == "mi":
            prev = assignTexClass(base, prev)
            updateTeXclass(node, base)
        else:
            assignTexClass(base, None)
            prev = node
    else:
        prev = node
    for child in children[1:]:
        assignTexClass(child, None)
    return prev
for type in ("msub", "msup", "msubsup", "munder", "mover", "munderover"):
    classTypes[type] = classScript

def classTable(node, prev):
    getPrevClass(node, prev)
    node.texClass = TEXCLASS.ORD
    for row in node.nodeChildren():
        assignTexClass(row, None)
    return node
classTypes['mtable'] = classTable

def classTableRow(node, prev):
    getPrevClass(node, prev)
    node.texClass = TEXCLASS.ORD
    for cell in node.nodeChildren():
        assignTexClass(cell, None)
    return node
classTypes['mtr'] = classTableRow


# Assigns a class to the node and its descendants.
#
# @param {MathNode} node   The node to classify
# @param {?MathNode} prev  The node before it (None at the start of a list)
# @return {?MathNode}      The node the next sibling should use as its `prev`
def assignTexClass(node, prev=None):
    return classTypes.get(node.type, classRow)(node, prev)
