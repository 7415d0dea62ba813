# This file does the attribute resolution pass. The entry point is
# `resolveAttributes`, which walks the tree from the root down, filling in
# each node's inherited attributes from the context given by its ancestors.
#
# The pass only ever writes the inherited layer of a node's attributes (which
# it clears first) and drops explicit values that are not valid, so running
# it twice with the same options gives the same result.

import re

from . import utils
from .LayoutError import AttributeDomainError
from .Options import Options
from .log import logger
from .mathMLTree import alwaysInherit, coreMO, getDefaults, rowTypes


# A single character (plus any combining marks) that is a letter
singleCharacter = re.compile(r"^[^\W\d_][\u0300-\u036F\u1AB0-\u1ABE\u1DC0-\u1DFF\u20D0-\u20EF]*$")

scriptlevelRe = re.compile(r'^\s*[-+]?\d+\s*$')

booleanAttributes = {
    "displaystyle", "largeop", "movablelimits", "accent", "accentunder",
    "stretchy", "fence", "separator", "symmetric",
}
lengthAttributes = {
    "subscriptshift", "superscriptshift", "width", "height", "depth",
    "scriptminsize",
}
enumAttributes = {
    "form": ("prefix", "infix", "postfix"),
    "display": ("block", "inline"),
    "mathvariant": (
        "normal", "bold", "italic", "bold-italic", "double-struck",
        "bold-fraktur", "script", "bold-script", "fraktur", "sans-serif",
        "bold-sans-serif", "sans-serif-italic", "sans-serif-bold-italic",
        "monospace",
    ),
}


# Checks an attribute value against the domain of the attribute, and returns
# it in the form the layout uses (booleans for "true"/"false", numbers for
# numbers). Attributes with no declared domain are passed through.
#
# Raises AttributeDomainError for values outside of the domain.
def checkAttribute(name, value, node=None):
    if name in booleanAttributes:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        raise AttributeDomainError(name, value, node)

    if name in lengthAttributes:
        try:
            utils.length2em(value)
        except AttributeDomainError:
            raise AttributeDomainError(name, value, node)
        return value

    if name == "scriptsizemultiplier":
        if not isinstance(value, bool):
            try:
                number = float(value)
            except (TypeError, ValueError):
                number = 0
            if number > 0:
                return number
        raise AttributeDomainError(name, value, node)

    if name in ("rowspan", "columnspan"):
        if not isinstance(value, bool):
            try:
                number = int(value)
            except (TypeError, ValueError):
                number = 0
            if number >= 1:
                return number
        raise AttributeDomainError(name, value, node)

    if name == "scriptlevel":
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str) and scriptlevelRe.match(value):
            value = value.strip()
            # Relative levels stay strings, they are applied to the context
            return value if value[0] in "+-" else int(value)
        raise AttributeDomainError(name, value, node)

    if name in enumAttributes:
        if value not in enumAttributes[name]:
            raise AttributeDomainError(name, value, node)
        return value

    return value


# Validates the explicit attributes of a node. Invalid values are dropped (so
# the inherited or default value is used instead) and logged.
def checkAttributes(node):
    attributes = node.attributes
    for name, value in attributes.getAllAttributes().items():
        try:
            attributes.set(name, checkAttribute(name, value, node))
        except AttributeDomainError as error:
            logger.warning("%s; using the default instead", error)
            attributes.unset(name)
            node.setProperty("attributeErrors", node.getProperty("attributeErrors", []) + [name])


# Applies an (already checked) scriptlevel attribute to the current level.
# "+n" and "-n" are relative to it, plain numbers are absolute.
def applyScriptlevel(value, level):
    if isinstance(value, str):
        level = level + int(value)
    else:
        level = value
    return max(level, 0)


# Gets the form of an operator: explicit, or from its position in the
# enclosing row (first is prefix, last is postfix, anything else is infix).
def getForm(node):
    form = node.attributes.getExplicit("form")
    if form is not None:
        return form

    parent = node.parent
    if parent is None or parent.type not in rowTypes:
        return "infix"

    siblings = [child for child in parent.nodeChildren() if child.type != "mspace"]
    position = [i for i, child in enumerate(siblings) if child is node][0]
    if len(siblings) > 1:
        if position == 0:
            return "prefix"
        if position == len(siblings) - 1:
            return "postfix"
    return "infix"


# Whether the script at the given position of an under/over construct is an
# accent: either the construct says so, or the script is an operator that is
# an accent according to the operator dictionary.
def isAccent(node, script, name):
    value = node.attributes.getExplicit(name)
    if value is None:
        core = coreMO(script)
        value = core.type == "mo" and core.attributes.get("accent")
    return bool(value)


# Functions for computing the options a child is resolved with, keyed by the
# type of the parent. Each takes the parent, the index of the child and the
# parent's options.
childContextTypes = {}

def defaultChildContext(node, index, options):
    return options

def styleChildContext(node, index, options):
    # \displaystyle and scriptlevel changes are passed as context, everything
    # else the node sets explicitly is inherited by its descendants.
    explicit = {
        name: value for name, value in node.attributes.getAllAttributes().items()
        if name not in ("displaystyle", "scriptlevel", "display")
    }
    return options.extend(
        displaystyle = node.attributes.get("displaystyle"),
        scriptlevel = node.getScriptlevel()
        ).withAttributes(explicit)
childContextTypes['math'] = styleChildContext
childContextTypes['mstyle'] = styleChildContext

def scriptChildContext(node, index, options):
    if index == 0:
        return options
    # Subscripts are cramped. In msub and msubsup the subscript comes first.
    return options.forScript(prime=(index == 1 and node.type != "msup"))
childContextTypes['msub'] = scriptChildContext
childContextTypes['msup'] = scriptChildContext
childContextTypes['msubsup'] = scriptChildContext

def limitChildContext(node, index, options):
    if index == 0:
        return options
    under = index == 1 and node.type != "mover"
    script = node.nodeChildren()[index]
    if isAccent(node, script, "accentunder" if under else "accent"):
        # Accents stay at the level of the base
        return options.extend(displaystyle=False, texprimestyle=options.texprimestyle or under)
    return options.forScript(prime=under)
childContextTypes['munder'] = limitChildContext
childContextTypes['mover'] = limitChildContext
childContextTypes['munderover'] = limitChildContext

def tableChildContext(node, index, options):
    # Table cells are never in displaystyle unless an mstyle inside says so
    return options.extend(displaystyle=False)
childContextTypes['mtable'] = tableChildContext


# Resolves the attributes of a node and (recursively) of its children.
#
# @param {MathNode} node     The node to resolve
# @param {?Options} options  The inherited context; the defaults are textstyle
#                            at scriptlevel 0.
def resolveAttributes(node, options=None):
    if options is None:
        options = Options()

    attributes = node.attributes
    attributes.clearInherited()
    node.properties.pop("texprimestyle", None)

    checkAttributes(node)
    if node.type == "mo":
        attributes.defaults = getDefaults("mo", node.getText(), getForm(node))

    # Attributes set by ancestors are only picked up by node types that know
    # about them.
    for name, value in options.inherited.items():
        if name in attributes.defaults or name in alwaysInherit:
            attributes.setInherited(name, value)

    display = options.displaystyle
    if node.type == "math" and attributes.isSet("display"):
        display = attributes.getExplicit("display") == "block"
    if not attributes.isSet("displaystyle"):
        attributes.setInherited("displaystyle", display)

    level = options.scriptlevel
    if attributes.isSet("scriptlevel"):
        level = applyScriptlevel(attributes.getExplicit("scriptlevel"), level)
    attributes.setInherited("scriptlevel", level)

    if options.texprimestyle:
        node.setProperty("texprimestyle", True)

    # Single letter identifiers are italic unless told otherwise
    if (node.type == "mi" and singleCharacter.match(node.getText())
            and not attributes.isSet("mathvariant") and "mathvariant" not in options.inherited):
        attributes.setInherited("mathvariant", "italic")

    childContext = childContextTypes.get(node.type, defaultChildContext)
    for index, child in enumerate(node.nodeChildren()):
        resolveAttributes(child, childContext(node, index, options))
