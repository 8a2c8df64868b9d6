import pytest

from snowcalc.triangles import main, n_order_triangle, prefix_sum, triangle


def test_first_triangle():
    assert triangle(1) == 1


@pytest.mark.parametrize("base", range(1, 30))
def test_triangle_grows_by_base(base):
    assert triangle(base) - triangle(base - 1) == base


def test_zero_triangle():
    assert triangle(0) == 0


def test_prefix_sum():
    assert prefix_sum([1, 2, 3], 2) == 6


def test_prefix_sum_at_start():
    assert prefix_sum([5, 9], 0) == 5


def test_prefix_sum_out_of_range():
    with pytest.raises(IndexError):
        prefix_sum([1, 2], 2)


@pytest.mark.parametrize("base", [1, 4, 7, 10])
def test_order_one_is_triangle(base):
    assert n_order_triangle(base, 1) == triangle(base)


@pytest.mark.parametrize("base", [2, 5, 7])
@pytest.mark.parametrize("order", [1, 2, 3])
def test_next_order_is_running_total(base, order):
    higher = n_order_triangle(base, order + 1)
    lower = [n_order_triangle(b, order) for b in range(1, base + 1)]
    assert higher == prefix_sum(lower, base - 1)


@pytest.mark.parametrize("order", [1, 2, 5])
def test_base_one_is_always_one(order):
    assert n_order_triangle(1, order) == 1


def test_zero_base_raises():
    with pytest.raises(ValueError):
        n_order_triangle(0, 3)


def test_main_default_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == f"4 & 7 = {n_order_triangle(7, 4)}"