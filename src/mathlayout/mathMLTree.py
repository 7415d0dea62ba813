# These objects store the markup tree that the layout is computed from. The
# tree is built outside of this package (by a TeX or MathML parser) out of
# MathNodes and TextNodes, and then handed to `buildTree`.
#
# A MathNode's `type` is the MathML element name ("mi", "msub", ...). Its
# attributes are kept in an AttributeList, which knows where each value came
# from: set explicitly on the node, inherited from the context during
# attribute resolution, or a default for the node's type.

import math

from . import operators
from . import utils


# Defaults shared by every node type
globalDefaults = {
    "displaystyle": False,
    "scriptlevel": 0,
    "scriptsizemultiplier": 1 / math.sqrt(2),
    "scriptminsize": "8px",
}

tokenDefaults = {
    "mathvariant": "normal",
}

scriptDefaults = {
    "subscriptshift": "",
    "superscriptshift": "",
}

limitDefaults = {
    "accent": False,
    "accentunder": False,
}

moDefaults = dict(tokenDefaults, **{
    "form": "infix",
    "fence": False,
    "separator": False,
    "stretchy": False,
    "symmetric": False,
    "largeop": False,
    "movablelimits": False,
    "accent": False,
})

styleDefaults = {
    "displaystyle": False,
    "scriptlevel": 0,
    "scriptsizemultiplier": 1 / math.sqrt(2),
    "scriptminsize": "8px",
    "mathvariant": "normal",
    "movablelimits": False,
    "largeop": False,
    "accent": False,
    "subscriptshift": "",
    "superscriptshift": "",
}

# The defaults table, keyed by node type
kindDefaults = {
    "math": dict(styleDefaults, display="inline"),
    "mstyle": styleDefaults,
    "mi": tokenDefaults,
    "mn": tokenDefaults,
    "mtext": tokenDefaults,
    "mo": moDefaults,
    "mspace": {"width": "0em", "height": "0ex", "depth": "0ex"},
    "mrow": {},
    "msub": {"subscriptshift": ""},
    "msup": {"superscriptshift": ""},
    "msubsup": scriptDefaults,
    "munder": {"accentunder": False},
    "mover": {"accent": False},
    "munderover": limitDefaults,
    "mtable": {},
    "mtr": {},
    "mtd": {"rowspan": 1, "columnspan": 1},
}

# Attributes that every node takes from its context, whether or not its type
# has a default for them.
alwaysInherit = {"scriptsizemultiplier", "scriptminsize"}

tokenTypes = ("mi", "mn", "mo", "mtext")
scriptTypes = ("msub", "msup", "msubsup", "munder", "mover", "munderover")
rowTypes = ("math", "mrow", "mstyle", "mtd")


# Gets the defaults for a node of the given type. For operators, these are
# completed from the operator dictionary entry for the operator's text.
def getDefaults(type, text="", form="infix"):
    defaults = kindDefaults.get(type, {})
    if type == "mo":
        defaults = dict(defaults)
        defaults.update(operators.lookup(text, form)[1])
    return defaults


# The attributes of a node, with their provenance.
class AttributeList:
    def __init__(self, attributes=None, defaults=None):
        self.attributes = dict(attributes or {})
        self.inherited = {}
        self.defaults = defaults if defaults is not None else {}

    def set(self, name, value):
        self.attributes[name] = value

    def unset(self, name):
        self.attributes.pop(name, None)

    def setInherited(self, name, value):
        self.inherited[name] = value

    def clearInherited(self):
        self.inherited.clear()

    # Looks the attribute up in the explicit attributes, then the inherited
    # ones, then the defaults for the node type and finally the global
    # defaults.
    def get(self, name):
        if name in self.attributes:
            return self.attributes[name]
        if name in self.inherited:
            return self.inherited[name]
        return self.getDefault(name)

    def getExplicit(self, name):
        return self.attributes.get(name)

    def getInherited(self, name):
        return self.inherited.get(name)

    def getDefault(self, name):
        if name in self.defaults:
            return self.defaults[name]
        return globalDefaults.get(name)

    def isSet(self, name):
        return name in self.attributes

    def getList(self, *names):
        return {name: self.get(name) for name in names}

    # Where the value returned by `get` comes from.
    def provenance(self, name):
        if name in self.attributes:
            return "explicit"
        if name in self.inherited:
            return "inherited"
        if name in self.defaults or name in globalDefaults:
            return "default"
        return None

    def getAllAttributes(self):
        return dict(self.attributes)


# This node represents a general purpose MathML node of any type. The
# constructor requires the type of node to create (for example, `"mo"` or
# `"mspace"`, corresponding to `<mo>` and `<mspace>` tags).
class MathNode:
    def __init__(self, type, children=None, attributes=None):
        self.type = type
        self.parent = None
        self.children = []
        self.attributes = AttributeList(attributes)
        self.properties = {}
        # Filled in by the class assignment pass
        self.texClass = None
        self.prevClass = None
        self.prevLevel = 0

        for child in children or []:
            self.appendChild(child)
        self.attributes.defaults = getDefaults(type, self.getText())

    def appendChild(self, child):
        child.parent = self
        self.children.append(child)

    # Sets an explicit attribute on the node.
    def setAttribute(self, name, value):
        self.attributes.set(name, value)

    def getProperty(self, name, default=None):
        return self.properties.get(name, default)

    def setProperty(self, name, value):
        self.properties[name] = value

    def isToken(self):
        return self.type in tokenTypes

    # The text of a token node (the concatenation of its text children).
    def getText(self):
        return "".join(child.text for child in self.children if isinstance(child, TextNode))

    # The child nodes that are MathNodes (i.e. without the text of tokens)
    def nodeChildren(self):
        return [child for child in self.children if isinstance(child, MathNode)]

    # The effective script level, as set by attribute resolution.
    def getScriptlevel(self):
        level = self.attributes.getInherited("scriptlevel")
        return 0 if level is None else level

    # Converts the math node into a string, similar to innerHTML.
    def toMarkup(self, indent=0):
        markup = "  " * indent + "<" + self.type
        for name, value in self.attributes.attributes.items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            markup += ' {0}="{1}"'.format(name, utils.escape(value))
        if self.texClass:
            markup += ' data-texclass="{0}"'.format(self.texClass)
        markup += ">"

        if self.isToken():
            markup += utils.escape(self.getText())
        else:
            children = self.nodeChildren()
            for child in children:
                markup += "\n" + child.toMarkup(indent + 1)
            if children:
                markup += "\n" + "  " * indent

        markup += "</" + self.type + ">"
        return markup


# This node represents a piece of text.
class TextNode:
    def __init__(self, text):
        self.text = text
        self.parent = None

    def toMarkup(self, indent=0):
        return utils.escape(self.text)


# Serializes a tree to indented MathML, with the classes assigned by the
# class pass as data-texclass attributes.
def toMathML(node):
    return node.toMarkup()


# Builds a tree from nested dicts, as loaded from JSON:
#
#   {"type": "msub", "attributes": {...}, "children": [...]}
#   {"type": "mi", "text": "x"}
#
# "kind" is accepted in place of "type".
def fromJSON(data):
    type = data.get("type", data.get("kind"))
    if type is None:
        raise ValueError("node without a type: {0!r}".format(data))
    children = []
    if "text" in data:
        children.append(TextNode(data["text"]))
    for child in data.get("children", []):
        children.append(fromJSON(child))
    node = MathNode(type, children, data.get("attributes"))
    for name, value in data.get("properties", {}).items():
        node.setProperty(name, value)
    return node


# The embellished operator at the core of a node: the operator itself, the
# core of the base of a script construct, or the core of the single non-space
# child of a row. If there is none, the node itself.
def coreMO(node):
    if node.type == "mo":
        return node
    children = node.nodeChildren()
    if node.type in scriptTypes and children:
        return coreMO(children[0])
    if node.type in ("mrow", "mstyle"):
        nonSpace = [child for child in children if child.type != "mspace"]
        if len(nonSpace) == 1:
            return coreMO(nonSpace[0])
    return node

def isEmbellished(node):
    return coreMO(node).type == "mo"
