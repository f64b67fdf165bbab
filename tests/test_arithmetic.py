import pytest

from drillbook.katas.arithmetic import Rectangle, is_even, sale_price, square


def test_is_true_when_even():
    assert is_even(2) is True


def test_is_false_when_odd():
    assert is_even(1) is False


def test_is_even_negative_odd():
    assert is_even(-3) is False


@pytest.mark.parametrize(("price", "expected"), [(51, 48), (50, 40)])
def test_sale_price(price, expected):
    assert sale_price(price) == expected


def test_square():
    assert square(3) == 9


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError):
        Rectangle(10, -10)