import math

import pytest

from scalar_aad import exp, grad, grads, grads_list, leaf, relu, value


def test_value_passthrough():
    assert value(leaf(2.0)) == 2.0
    assert value(3.5) == 3.5


def test_grad_single_input():
    assert grad(lambda x: x * x + x, 3.0) == 7.0
    assert grad(lambda x: exp(2 * x), 0.0) == pytest.approx(2.0)
    assert grad(relu, -1.0) == 0.0


def test_grad_of_constant_function_is_zero():
    assert grad(lambda x: 5.0, 1.0) == 0.0


def test_grads_dict_form_keeps_key_order():
    def f(v):
        return v["a"] * v["b"] + v["c"] ** 2

    out = grads(f, {"c": 3.0, "a": 2.0, "b": 5.0})
    assert list(out) == ["c", "a", "b"]
    assert out == {"c": 6.0, "a": 5.0, "b": 2.0}


def test_grads_list_form():
    assert grads_list(lambda xs: xs[0] * xs[0] + 3 * xs[1], [2.0, 4.0]) == [4.0, 3.0]


def test_repeated_calls_do_not_accumulate():
    f = lambda x: exp(x)
    assert grad(f, 1.0) == pytest.approx(math.e)
    assert grad(f, 1.0) == pytest.approx(math.e)
