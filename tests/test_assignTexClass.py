from mathlayout import texClass as TEXCLASS
from mathlayout.assignTexClass import assignTexClass
from mathlayout.inheritAttributes import resolveAttributes
from mathlayout.mathMLTree import fromJSON


def mi(text):
    return {"type": "mi", "text": text}

def mn(text):
    return {"type": "mn", "text": text}

def mo(text, **attributes):
    return {"type": "mo", "text": text, "attributes": attributes}

def row(*children):
    return {"type": "mrow", "children": list(children)}

def classified(data):
    node = fromJSON(data)
    resolveAttributes(node)
    assignTexClass(node)
    return node


def classes(node):
    return [child.texClass for child in node.nodeChildren()]


def test_multi_letter_identifiers_become_operators():
    node = classified(row(mi("sin"), mi("x")))
    sin, x = node.children
    assert sin.texClass == TEXCLASS.OP
    assert sin.getProperty("autoOP") is True
    assert x.texClass == TEXCLASS.ORD
    assert x.getProperty("autoOP") is None


def test_only_operator_names_are_reclassified():
    node = classified(row(mi("x"), mi("x2"), mi("2x"), mi("αβ")))
    assert classes(node) == [TEXCLASS.ORD, TEXCLASS.OP, TEXCLASS.ORD, TEXCLASS.ORD]


def test_binary_operators_need_two_operands():
    assert classes(classified(row(mi("a"), mo("+"), mi("b")))) == [
        TEXCLASS.ORD, TEXCLASS.BIN, TEXCLASS.ORD]
    # At the start of a list
    assert classes(classified(row(mo("+"), mi("b")))) == [TEXCLASS.ORD, TEXCLASS.ORD]
    # At the end of a list
    assert classes(classified(row(mi("a"), mo("+")))) == [TEXCLASS.ORD, TEXCLASS.ORD]
    # After a relation
    assert classes(classified(row(mi("a"), mo("="), mo("-"), mi("b")))) == [
        TEXCLASS.ORD, TEXCLASS.REL, TEXCLASS.ORD, TEXCLASS.ORD]
    # Before a relation
    assert classes(classified(row(mi("a"), mo("+"), mo("="), mi("b")))) == [
        TEXCLASS.ORD, TEXCLASS.ORD, TEXCLASS.REL, TEXCLASS.ORD]


def test_auto_operator_before_relation_is_ordinary():
    node = classified(row(mi("max"), mo("="), mn("1")))
    assert classes(node) == [TEXCLASS.ORD, TEXCLASS.REL, TEXCLASS.ORD]
    assert node.children[1].prevClass == TEXCLASS.ORD


def test_fences():
    node = classified(row(mo("("), mi("x"), mo(")")))
    assert classes(node) == [TEXCLASS.OPEN, TEXCLASS.ORD, TEXCLASS.CLOSE]
    assert node.texClass == TEXCLASS.OPEN

    # A relation used as a fence
    node = classified(row(mo("≡", fence="true", form="prefix"), mi("x")))
    assert node.children[0].texClass == TEXCLASS.OPEN


def test_spaces_are_skipped():
    node = classified(row(mi("a"), {"type": "mspace", "attributes": {"width": "1em"}}, mo("+"), mi("b")))
    a, space, plus, b = node.children
    assert space.texClass is TEXCLASS.NONE
    assert plus.texClass == TEXCLASS.BIN
    assert plus.prevClass == TEXCLASS.ORD


def test_scripts_take_the_class_of_their_base():
    node = classified(row(
        {"type": "msub", "children": [mi("sin"), mn("2")]},
        {"type": "msup", "children": [mn("2"), mi("x")]},
        {"type": "msubsup", "children": [mo("∑"), mi("i"), mi("n")]},
    ))
    assert classes(node) == [TEXCLASS.OP, TEXCLASS.ORD, TEXCLASS.OP]
    # Scripts start their own lists
    sup = node.children[1].children[1]
    assert sup.prevClass is TEXCLASS.NONE


def test_tables_are_ordinary():
    node = classified(row(
        mo("+"),
        {"type": "mtable", "children": [{"type": "mtr", "children": [
            {"type": "mtd", "children": [mo("+"), mi("x")]},
            {"type": "mtd", "children": [mi("y")]},
        ]}]},
    ))
    plus, table = node.children
    assert table.texClass == TEXCLASS.ORD
    first = table.children[0].children[0]
    assert first.children[0].texClass == TEXCLASS.ORD
    assert first.children[0].prevClass is TEXCLASS.NONE


def test_spacing_between_atoms():
    node = classified(row(mi("a"), mo("="), mi("b"), mo("+"), mi("c"), mo(","), mi("d")))
    spaces = [TEXCLASS.texSpacing(child) for child in node.children]
    assert spaces == ["", "thickmathspace", "thickmathspace", "mediummathspace",
                      "mediummathspace", "", "thinmathspace"]


def test_no_spacing_in_scripts():
    node = classified({"type": "msup", "children": [mi("x"), row(mi("a"), mo("="), mi("b"))]})
    script = node.children[1]
    assert [TEXCLASS.texSpacing(child) for child in script.children] == ["", "", ""]

    # Except for the thin space around operators
    node = classified({"type": "msup", "children": [mi("x"), row(mi("a"), mi("sin"))]})
    script = node.children[1]
    assert TEXCLASS.texSpacing(script.children[1]) == "thinmathspace"


def test_reclassification_is_repeatable():
    node = fromJSON(row(mi("sin"), mo("="), mi("x"), mo("+")))
    resolveAttributes(node)
    assignTexClass(node)
    first = classes(node)
    assignTexClass(node)
    assert classes(node) == first
