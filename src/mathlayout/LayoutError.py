# This is the error class hierarchy for errors raised while laying out a
# markup tree. A LayoutError carries the node that was being processed (if
# any), so the message can say where things went wrong.
#
# Only AttributeDomainError is recovered from: attribute resolution catches
# it, logs it and falls back to the default value. The others abort the pass.

class LayoutError(Exception):
    def __init__(self, message, node=None):
        self.rawMessage = message
        self.node = node

        error = "Layout error: " + message
        if node is not None:
            error += " (in <{0}>)".format(node.type)

        super().__init__(error)


# An attribute value outside of the domain declared for that attribute
# (e.g. a non-numeric value where a length is required).
class AttributeDomainError(LayoutError):
    def __init__(self, name, value, node=None):
        self.name = name
        self.value = value
        super().__init__(
            "invalid value {0!r} for attribute '{1}'".format(value, name), node)


# A font constant or glyph metric that the layout needs is not in the
# FontParameterSet that was supplied.
class MissingFontParameterError(LayoutError):
    def __init__(self, name, variant=None, node=None):
        self.name = name
        self.variant = variant
        if variant is None:
            message = "missing font parameter '{0}'".format(name)
        else:
            message = "no metrics for character {0!r} in variant '{1}'".format(name, variant)
        super().__init__(message, node)


# A node reached the script positioning engine that is not one of the
# sub/sup/under/over constructs.
class UnsupportedConstructError(LayoutError):
    def __init__(self, node):
        super().__init__("unsupported script construct '{0}'".format(node.type), node)
