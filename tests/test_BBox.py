import pytest

from mathlayout import BBox as bboxes
from mathlayout.BBox import BBox


def test_append_is_width_additive_and_extent_max():
    a = BBox(1.5, .7, .2)
    b = BBox(.5, .4, .3)
    box = bboxes.append(a, b)
    assert box.w == pytest.approx(a.w + b.w)
    assert box.h == max(a.h, b.h)
    assert box.d == max(a.d, b.d)


def test_append_scales_the_appended_box():
    box = BBox(1, .5, .1)
    box.append(BBox(1, 1, .4, rscale=.5, L=.2))
    assert box.w == pytest.approx(1.6)
    assert box.h == .5
    assert box.d == pytest.approx(.2)


def test_append_to_empty_box_copies_extents():
    box = BBox.empty().append(BBox(.5, .3, .1))
    assert (box.w, box.h, box.d) == (.5, .3, .1)


def test_combine_raises_and_lowers():
    base = BBox(1, .5, .1)
    raised = bboxes.combine(base, BBox(.5, .3, .1), 1, .4)
    assert raised.w == pytest.approx(1.5)
    assert raised.h == pytest.approx(.7)
    assert raised.d == pytest.approx(.1)

    lowered = bboxes.combine(base, BBox(.5, .3, .2), 0, -.4)
    assert lowered.w == 1
    assert lowered.h == .5
    assert lowered.d == pytest.approx(.6)


def test_combine_keeps_the_larger_width():
    box = bboxes.combine(BBox(2, .5, 0), BBox(.5, .1, 0), .5, 0)
    assert box.w == 2


def test_clean_clamps_height_and_depth_only():
    box = BBox(-.3, -.2, -1).clean()
    assert box.h == 0
    assert box.d == 0
    assert box.w == -.3
    assert BBox.empty().clean().h == 0


def test_pure_operations_leave_arguments_alone():
    a = BBox(1, .5, .1)
    b = BBox(1, .9, .4)
    bboxes.append(a, b)
    bboxes.combine(a, b, 1, 1)
    bboxes.clean(BBox(0, -1, -1))
    assert a == BBox(1, .5, .1)
    assert b == BBox(1, .9, .4)


def test_copy_is_independent():
    a = BBox(1, .5, .1, rscale=.7, L=.1)
    b = a.copy()
    b.w = 3
    assert a.w == 1
    assert b.rscale == .7 and b.L == .1
