# The bounding boxes of laid out nodes. A box has a width, a height above the
# baseline and a depth below it, all in ems of the node's own font size, and
# an `rscale`: the size of the node relative to its parent, which the parent
# multiplies the box by when it places it. `L` and `R` are extra space to the
# left and right of the box (inter-atom spacing).
#
# Composite boxes are built only through `append`, `combine` and `clean`.

# A very large dimension, used for the extents of an empty box so that the
# first box appended or combined always wins
BIGDIMEN = 1000000


class BBox:
    def __init__(self, w=0, h=-BIGDIMEN, d=-BIGDIMEN, rscale=1, L=0, R=0):
        self.w = w
        self.h = h
        self.d = d
        self.rscale = rscale
        self.L = L
        self.R = R

    # A box with nothing in it yet
    @staticmethod
    def empty():
        return BBox()

    # A box with no extent at all
    @staticmethod
    def zero():
        return BBox(0, 0, 0)

    # The box of a glyph (or string) with the given metrics
    @staticmethod
    def text(w, h, d):
        return BBox(w, h, d)

    def copy(self):
        return BBox(self.w, self.h, self.d, self.rscale, self.L, self.R)

    # Puts `other` to the right of this box, on the same baseline.
    def append(self, other):
        scale = other.rscale
        self.w += scale * (other.w + other.L + other.R)
        self.h = max(self.h, scale * other.h)
        self.d = max(self.d, scale * other.d)
        return self

    # Places `other` with its left edge at `x` and its baseline raised by `y`
    # (a negative `y` lowers it).
    def combine(self, other, x=0, y=0):
        scale = other.rscale
        self.w = max(self.w, x + scale * (other.w + other.L + other.R))
        self.h = max(self.h, y + scale * other.h)
        self.d = max(self.d, scale * other.d - y)
        return self

    def clean(self):
        if self.h < 0:
            self.h = 0
        if self.d < 0:
            self.d = 0
        return self

    def __eq__(self, other):
        if not isinstance(other, BBox):
            return NotImplemented
        return ((self.w, self.h, self.d, self.rscale, self.L, self.R) ==
                (other.w, other.h, other.d, other.rscale, other.L, other.R))

    def __repr__(self):
        return "BBox(w={0!r}, h={1!r}, d={2!r}, rscale={3!r})".format(
            self.w, self.h, self.d, self.rscale)


# The same operations, leaving their arguments alone.
def append(box, other):
    return box.copy().append(other)

def combine(box, other, x=0, y=0):
    return box.copy().combine(other, x, y)

def clean(box):
    return box.copy().clean()
