from services.parsing import split_quantity


def test_split_quantity_forms():
    assert split_quantity("2 cups flour") == ("2", "cups flour")
    assert split_quantity("1.5 kg potatoes") == ("1.5", "kg potatoes")
    assert split_quantity(".5 tsp vanilla") == (".5", "tsp vanilla")
    assert split_quantity("3/4 cup milk") == ("3/4", "cup milk")
    assert split_quantity("1 1/2 cups sugar") == ("1 1/2", "cups sugar")


def test_split_quantity_prefers_mixed_number():
    # Not "1" followed by "1/2 cups sugar"
    assert split_quantity("1  1/2 cups sugar") == ("1  1/2", "cups sugar")


def test_split_quantity_ignores_leading_whitespace():
    assert split_quantity("   2 eggs") == ("2", "eggs")


def test_split_quantity_keeps_remainder_spacing():
    assert split_quantity("2 cups   sifted  flour ") == ("2", "cups   sifted  flour ")


def test_split_quantity_bare_number():
    assert split_quantity("2") == ("2", "")
    assert split_quantity("10x zucchini") == ("10", "x zucchini")


def test_split_quantity_no_quantity():
    assert split_quantity("a pinch of salt") is None
    assert split_quantity("salt to taste") is None
    assert split_quantity("") is None
    assert split_quantity(None) is None


def test_split_quantity_requires_number_boundary():
    assert split_quantity("2/ cups flour") is None
    assert split_quantity("1.5.2 version") is None
