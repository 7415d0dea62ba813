# These objects store the output of the layout: a tree of display nodes,
# each a custom element (like `mjx-msub`) with classes, inline styles and
# attributes, holding other display nodes or text. The tree can be turned into
# markup with `toMarkup`, and `stylesheet` gives the static CSS that goes with
# it.
#
# Style properties are kept with camelCase names (like `verticalAlign`), and
# are hyphenated when the markup is made.

from . import utils


# This node represents a custom element, like `<mjx-script>`.
class DisplayNode:
    def __init__(self, kind, children=None, classes=None, style=None, attributes=None):
        self.kind = kind
        self.children = list(children or [])
        self.classes = list(classes or [])
        self.style = dict(style or {})
        self.attributes = dict(attributes or {})

    def setAttribute(self, name, value):
        self.attributes[name] = value

    def appendChild(self, child):
        self.children.append(child)
        return child

    # Converts the node into a string of markup.
    def toMarkup(self):
        markup = "<" + self.kind

        # Add the class
        classes = [cls for cls in self.classes if cls]
        if classes:
            markup += ' class="{0}"'.format(utils.escape(" ".join(classes)))

        # Add the styles, after hyphenation
        styles = "".join(
            "{0}:{1};".format(utils.hyphenate(name), value)
            for name, value in self.style.items())
        if styles:
            markup += ' style="{0}"'.format(utils.escape(styles))

        # Add the attributes
        for name, value in self.attributes.items():
            markup += ' {0}="{1}"'.format(name, utils.escape(value))

        markup += ">"

        # Add the markup of the children, also as markup
        for child in self.children:
            markup += child.toMarkup()

        markup += "</" + self.kind + ">"
        return markup

    def __repr__(self):
        return "DisplayNode({0!r}, {1} children)".format(self.kind, len(self.children))


# This node represents a piece of text.
class TextNode:
    def __init__(self, text):
        self.text = text

    def toMarkup(self):
        return utils.escape(self.text)

    def __repr__(self):
        return "TextNode({0!r})".format(self.text)


# The static CSS that lays out the display nodes. Offsets computed by the
# layout are put on the nodes themselves as inline styles.
STYLES = {
    "mjx-container": {
        "display": "inline-block",
        "line-height": "0",
        "text-align": "left",
    },
    "mjx-container[display=\"true\"]": {
        "display": "block",
        "text-align": "center",
        "margin": "1em 0",
    },
    "mjx-math": {
        "display": "inline-block",
        "line-height": "normal",
        "white-space": "nowrap",
    },
    "mjx-script": {
        "display": "inline-block",
    },
    "mjx-script > *": {
        "display": "block",
    },
    "mjx-spacer": {
        "display": "block",
    },
    "mjx-munder, mjx-mover, mjx-munderover": {
        "display": "inline-table",
    },
    "mjx-row": {
        "display": "table-row",
        "text-align": "center",
    },
    "mjx-row > *": {
        "display": "table-cell",
    },
    "mjx-mtable": {
        "display": "inline-block",
        "vertical-align": ".25em",
    },
    "mjx-itable": {
        "display": "inline-table",
    },
    "mjx-mtr": {
        "display": "table-row",
    },
    "mjx-mtd": {
        "display": "table-cell",
        "text-align": "center",
        "padding": ".25em .5em",
    },
    "mjx-mtd:first-child": {
        "padding-left": "0",
    },
    "mjx-mtd:last-child": {
        "padding-right": "0",
    },
    "mjx-mtable > mjx-itable > *:first-child > mjx-mtd": {
        "padding-top": "0",
    },
    "mjx-mtable > mjx-itable > *:last-child > mjx-mtd": {
        "padding-bottom": "0",
    },
    "mjx-tstrut": {
        "display": "inline-block",
        "height": "1em",
        "vertical-align": "-.25em",
    },
    "mjx-merror": {
        "display": "inline-block",
        "border": "1px solid",
        "padding": "0 .1em",
    },
}

# Renders the static CSS rules
def stylesheet(styles=None):
    if styles is None:
        styles = STYLES
    rules = []
    for selector, properties in styles.items():
        body = "; ".join("{0}: {1}".format(name, value) for name, value in properties.items())
        rules.append("{0} {{{1}}}".format(selector, body))
    return "\n".join(rules)
