# This file contains information about the options that are carried down the
# tree during attribute resolution. Data is held in an `Options` object, and
# when recursing, a new `Options` object can be created with `.extend` and
# the other `.for*`/`.with*` functions.

# This is the main options class. It contains the inherited context of the
# current level: whether we are in displaystyle, the scriptlevel, whether the
# style is "prime" (cramped, as in subscripts), and the attributes that
# ancestor mstyle/math nodes have set for their descendants.
class Options:
    def __init__(self, displaystyle=False, scriptlevel=0, texprimestyle=False, inherited=None):
        self.displaystyle = displaystyle
        self.scriptlevel = scriptlevel
        self.texprimestyle = texprimestyle
        self.inherited = inherited or {}

    # Returns a new options object with the same properties as "this".
    # Properties given as arguments replace the copied ones. Note that False
    # and 0 are real values here, so only None means "keep".
    def extend(self, displaystyle=None, scriptlevel=None, texprimestyle=None, inherited=None):
        return Options(
            displaystyle = self.displaystyle if displaystyle is None else displaystyle,
            scriptlevel = self.scriptlevel if scriptlevel is None else scriptlevel,
            texprimestyle = self.texprimestyle if texprimestyle is None else texprimestyle,
            inherited = self.inherited if inherited is None else inherited
            )

    # Options for a script (or a limit that is not an accent): never
    # displaystyle, one level deeper, and cramped if the script is below the
    # base.
    def forScript(self, prime=False, increment=1):
        return self.extend(
            displaystyle = False,
            scriptlevel = self.scriptlevel + increment,
            texprimestyle = self.texprimestyle or prime
            )

    # Adds the given attributes to the ones inherited by descendants.
    def withAttributes(self, attributes):
        inherited = dict(self.inherited)
        inherited.update(attributes)
        return self.extend(inherited=inherited)
