from common import display_equation

from paraxref.common import REDIRECT_ATTR
from paraxref.equations import EquationAnchorResolver


def test_primary_tag_becomes_anchor(fragment):
    el = fragment(f"<div>{display_equation('(4.13)')}</div>")

    anchors = EquationAnchorResolver().resolve(el)

    assert el.find("mjx-container")["id"] == "eq-4.13"
    assert [(a.primary_tag, a.anchor_id, a.alias_tags) for a in anchors] == [("4.13", "eq-4.13", ())]


def test_extra_tags_get_redirect_markers(fragment):
    el = fragment(f"<div>{display_equation('(4.13)', '(4.13a)')}</div>")

    anchors = EquationAnchorResolver().resolve(el)

    marker = el.find(id="eq-4.13a")
    assert marker.name == "span"
    assert marker[REDIRECT_ATTR] == "eq-4.13"
    assert marker.find_next_sibling() is el.find("mjx-container")
    assert anchors[0].alias_tags == ("4.13a",)


def test_existing_identifier_is_kept(fragment):
    el = fragment(f"<div>{display_equation('(1)', '(2)', equation_id='energy')}</div>")

    anchors = EquationAnchorResolver().resolve(el)

    assert el.find("mjx-container")["id"] == "energy"
    assert el.find(id="eq-2")[REDIRECT_ATTR] == "energy"
    assert anchors[0].anchor_id == "energy"


def test_resolving_twice_adds_nothing(fragment):
    el = fragment(f"<div>{display_equation('(3)', '(3b)')}</div>")
    resolver = EquationAnchorResolver()

    resolver.resolve(el)
    once = str(el)
    resolver.resolve(el)

    assert str(el) == once
    assert len(el.find_all(id="eq-3b")) == 1


def test_alias_already_anchored_elsewhere_in_document(fragment):
    el = fragment(
        f'<div><div id="other">{display_equation("(5)")}</div>'
        f'<div id="here">{display_equation("(6)", "(5)")}</div></div>'
    )
    resolver = EquationAnchorResolver()

    resolver.resolve(el.find(id="other"))
    resolver.resolve(el.find(id="here"))

    assert len(el.find_all(id="eq-5")) == 1
    assert el.find(id="eq-5").name == "mjx-container"
    assert el.find(id="here").find("mjx-container")["id"] == "eq-6"


def test_untagged_and_inline_equations_are_ignored(fragment):
    el = fragment(
        "<div>"
        f"{display_equation()}"
        f"{display_equation('x + 1')}"
        '<mjx-container class="MathJax"><mjx-labels><mjx-mtext>(9)</mjx-mtext></mjx-labels></mjx-container>'
        "</div>"
    )

    assert EquationAnchorResolver().resolve(el) == []
    assert el.find(id=True) is None


def test_extra_tag_known_elsewhere_in_document(fragment):
    first = fragment(f"<div>{display_equation('(1)', '(1a)')}</div>")
    second = fragment(f"<div>{display_equation('(2)', '(1a)')}</div>")
    resolver = EquationAnchorResolver()

    known = {anchor.primary_tag: anchor for anchor in resolver.resolve(first)}
    known["1a"] = known["1"]
    resolver.resolve(second, known)

    assert first.find(id="eq-1a")[REDIRECT_ATTR] == "eq-1"
    assert second.find(id="eq-1a") is None
    assert second.find("mjx-container")["id"] == "eq-2"


def test_known_anchor_of_same_equation_keeps_marker(fragment):
    """A re-rendered copy of an equation gets its redirect marker back."""
    resolver = EquationAnchorResolver()
    first = fragment(f"<div>{display_equation('(1)', '(1a)')}</div>")
    anchor = resolver.resolve(first)[0]

    rerendered = fragment(f"<div>{display_equation('(1)', '(1a)')}</div>")
    resolver.resolve(rerendered, {"1": anchor, "1a": anchor})

    assert rerendered.find(id="eq-1a")[REDIRECT_ATTR] == "eq-1"
