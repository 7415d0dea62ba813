# This file runs the passes of a layout over a markup tree, in order:
# attribute resolution, class assignment, box computation and emission.

from .LayoutError import LayoutError
from .Options import Options
from .Settings import Settings
from .assignTexClass import assignTexClass
from .buildBox import BoxBuilder
from .buildCHTML import emit, makeErrorNode
from .domTree import DisplayNode
from .inheritAttributes import resolveAttributes
from .log import logger


# Runs the passes that come before emission, and returns the BoxBuilder
# holding the boxes of the tree.
def layoutTree(tree, fontParams, settings=None):
    if settings is None:
        settings = Settings()

    # Setup the default options
    options = Options(displaystyle=settings.displayMode)

    logger.debug("Resolving attributes of <%s>", tree.type)
    resolveAttributes(tree, options)
    logger.debug("Assigning classes")
    assignTexClass(tree)

    builder = BoxBuilder(fontParams, settings)
    bbox = builder.getBBox(tree)
    logger.debug("Laid out <%s>: %r", tree.type, bbox)
    return builder


def makeContainer(children, settings):
    container = DisplayNode("mjx-container", children, ["mathlayout"])
    if settings.displayMode:
        container.setAttribute("display", "true")
    return container


def buildTree(tree, fontParams, settings=None):
    if settings is None:
        settings = Settings()

    try:
        builder = layoutTree(tree, fontParams, settings)
        node = emit(tree, builder)
    except LayoutError as error:
        if settings.throwOnError:
            raise
        logger.warning("%s", error)
        return makeContainer([makeErrorNode(error, settings.errorColor)], settings)

    return makeContainer([node], settings)


# The box of the whole tree, for callers that only want the measurements.
def buildBox(tree, fontParams, settings=None):
    builder = layoutTree(tree, fontParams, settings)
    return builder.getBBox(tree).copy()
