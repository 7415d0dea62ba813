import logging

import pytest

from mathlayout import AttributeDomainError
from mathlayout.inheritAttributes import checkAttribute, getForm, resolveAttributes
from mathlayout.mathMLTree import fromJSON
from mathlayout.Options import Options


def mi(text, **attributes):
    return {"type": "mi", "text": text, "attributes": attributes}

def mn(text):
    return {"type": "mn", "text": text}

def mo(text, **attributes):
    return {"type": "mo", "text": text, "attributes": attributes}

def resolved(data, options=None):
    node = fromJSON(data)
    resolveAttributes(node, options)
    return node


def test_single_letter_identifiers_are_italic():
    node = resolved({"type": "mrow", "children": [mi("x"), mi("sin"), mi("α"), mn("2")]})
    x, sin, alpha, two = node.children
    assert x.attributes.get("mathvariant") == "italic"
    assert x.attributes.provenance("mathvariant") == "inherited"
    assert alpha.attributes.get("mathvariant") == "italic"
    assert sin.attributes.get("mathvariant") == "normal"
    assert sin.attributes.provenance("mathvariant") == "default"
    assert two.attributes.get("mathvariant") == "normal"


def test_explicit_mathvariant_wins():
    node = resolved(mi("x", mathvariant="bold"))
    assert node.attributes.get("mathvariant") == "bold"
    assert node.attributes.provenance("mathvariant") == "explicit"


def test_style_mathvariant_is_inherited_instead_of_italic():
    node = resolved({"type": "mstyle", "attributes": {"mathvariant": "bold"}, "children": [mi("x")]})
    x = node.children[0]
    assert x.attributes.get("mathvariant") == "bold"
    assert x.attributes.provenance("mathvariant") == "inherited"


def test_scripts_are_one_level_down_and_not_display():
    node = resolved(
        {"type": "msub", "children": [mi("x"), mi("i")]},
        Options(displaystyle=True))
    base, sub = node.children
    assert node.attributes.get("displaystyle") is True
    assert base.getScriptlevel() == 0
    assert base.attributes.get("displaystyle") is True
    assert sub.getScriptlevel() == 1
    assert sub.attributes.get("displaystyle") is False
    assert sub.getProperty("texprimestyle") is True
    assert base.getProperty("texprimestyle") is None


def test_superscripts_are_not_cramped():
    node = resolved({"type": "msubsup", "children": [mi("x"), mi("i"), mi("n")]})
    base, sub, sup = node.children
    assert sub.getProperty("texprimestyle") is True
    assert sup.getProperty("texprimestyle") is None
    assert sup.getScriptlevel() == 1


def test_accents_keep_the_level():
    node = resolved({"type": "mover", "children": [mi("x"), mo("¯")]})
    assert node.children[1].getScriptlevel() == 0

    node = resolved({"type": "mover", "children": [mi("x"), mi("y")]})
    assert node.children[1].getScriptlevel() == 1

    node = resolved({"type": "mover", "attributes": {"accent": "true"}, "children": [mi("x"), mi("y")]})
    assert node.children[1].getScriptlevel() == 0


def test_explicit_scriptlevel():
    node = resolved({"type": "mstyle", "attributes": {"scriptlevel": "+2"}, "children": [mi("x")]})
    assert node.getScriptlevel() == 2
    assert node.children[0].getScriptlevel() == 2
    assert node.attributes.getExplicit("scriptlevel") == "+2"

    node = resolved({"type": "mstyle", "attributes": {"scriptlevel": "-1"}, "children": [mi("x")]})
    assert node.children[0].getScriptlevel() == 0

    node = resolved({"type": "mstyle", "attributes": {"scriptlevel": "1"},
                     "children": [{"type": "msup", "children": [mi("x"), mn("2")]}]})
    assert node.children[0].children[1].getScriptlevel() == 2


def test_display_block_math_is_displaystyle():
    node = resolved({"type": "math", "attributes": {"display": "block"}, "children": [mi("x")]})
    assert node.children[0].attributes.get("displaystyle") is True

    node = resolved({"type": "math", "children": [mi("x")]})
    assert node.children[0].attributes.get("displaystyle") is False


def test_tables_reset_displaystyle():
    node = resolved(
        {"type": "mtable", "children": [{"type": "mtr", "children": [{"type": "mtd", "children": [mi("x")]}]}]},
        Options(displaystyle=True))
    cell = node.children[0].children[0]
    assert cell.attributes.get("displaystyle") is False
    assert cell.children[0].attributes.get("displaystyle") is False


def test_resolution_is_idempotent():
    node = fromJSON({"type": "mstyle", "attributes": {"mathvariant": "bold", "scriptlevel": "+1"}, "children": [
        {"type": "msub", "children": [mi("x"), mi("i")]},
        mo("+"),
    ]})
    resolveAttributes(node)
    first = [(n.type, dict(n.attributes.inherited), dict(n.properties)) for n in walk(node)]
    resolveAttributes(node)
    second = [(n.type, dict(n.attributes.inherited), dict(n.properties)) for n in walk(node)]
    assert first == second
    assert node.getScriptlevel() == 1


def walk(node):
    yield node
    for child in node.nodeChildren():
        yield from walk(child)


def test_invalid_values_fall_back_to_defaults():
    node = resolved({"type": "mrow", "children": [
        {"type": "mspace", "attributes": {"width": "wide"}},
        {"type": "mstyle", "attributes": {"displaystyle": "maybe"}, "children": [mi("x")]},
    ]}, Options(displaystyle=True))
    space, style = node.children
    assert space.attributes.get("width") == "0em"
    assert space.getProperty("attributeErrors") == ["width"]
    assert not style.attributes.isSet("displaystyle")
    assert style.attributes.get("displaystyle") is True


def test_check_attribute():
    assert checkAttribute("displaystyle", "true") is True
    assert checkAttribute("largeop", " False ") is False
    assert checkAttribute("scriptlevel", "3") == 3
    assert checkAttribute("scriptlevel", "-1") == "-1"
    assert checkAttribute("scriptsizemultiplier", "0.5") == .5
    assert checkAttribute("width", "2em") == "2em"
    assert checkAttribute("unknown", "anything") == "anything"
    for name, value in [("displaystyle", "yes"), ("scriptlevel", "one"), ("width", "2 em"),
                        ("scriptsizemultiplier", "-1"), ("form", "sideways"), ("rowspan", "0")]:
        with pytest.raises(AttributeDomainError):
            checkAttribute(name, value)


def test_operator_forms_and_defaults():
    node = resolved({"type": "mrow", "children": [mo("("), mi("x"), mo("+"), mi("y"), mo(")")]})
    left, x, plus, y, right = node.children
    assert getForm(left) == "prefix"
    assert getForm(plus) == "infix"
    assert getForm(right) == "postfix"
    assert left.attributes.get("fence") is True
    assert plus.attributes.get("fence") is False

    node = resolved(mo("∑"))
    assert node.attributes.get("largeop") is True
    assert node.attributes.get("movablelimits") is True


def test_invalid_values_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="mathlayout"):
        resolved({"type": "mspace", "attributes": {"width": "wide"}})
    assert "invalid value 'wide' for attribute 'width' (in <mspace>)" in caplog.text


def test_get_list_reads_every_layer():
    node = resolved({"type": "msub", "attributes": {"subscriptshift": "1em"}, "children": [mi("x"), mi("i")]},
                    Options(displaystyle=True))
    assert node.attributes.getList("subscriptshift", "displaystyle", "scriptlevel", "mathvariant") == {
        "subscriptshift": "1em",
        "displaystyle": True,
        "scriptlevel": 0,
        "mathvariant": None,
    }
