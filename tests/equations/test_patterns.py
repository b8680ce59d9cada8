import pytest

from paraxref.equations.patterns import match_reference, match_tag, recognized_tags


@pytest.mark.parametrize(
    "text, expected",
    [
        ("(4.13)", "4.13"),
        ("(4-13)", "4-13"),
        ("(HW3.8)", "HW3.8"),
        ("(L2.5)", "L2.5"),
        ("(4.13a)", "4.13a"),
        ("(*7)", "7"),
        ("(12)", "12"),
        ("(ABC1)", None),
        ("4.13", None),
        ("(4..13)", None),
    ],
)
def test_tag_grammar(text, expected):
    assert match_tag(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("(4.13)", "4.13"),
        ("Eq. 4.13", "4.13"),
        ("eq 4-13", "4-13"),
        ("Equation HW3.8", "HW3.8"),
        ("EQUATION 2", "2"),
        ("(Eq. 4.13a)", "4.13a"),
        ("(eq 5)", "5"),
        ("x + (4.13)", None),
        ("Equations 4", None),
    ],
)
def test_reference_grammar(text, expected):
    assert match_reference(text) == expected


def test_recognized_tags_keep_label_order():
    assert recognized_tags(["(2)", "not a tag", "(2a)"]) == ["2", "2a"]
