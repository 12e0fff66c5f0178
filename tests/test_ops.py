import math

import numpy as np
import pytest

from scalar_aad import (Op, add, backward, div, exp, leaf, mul, neg, pow, relu,
                        sub, use_config)


def test_builder_sets_value_op_and_operand_order():
    x, y = leaf(2.0), leaf(3.0)
    z = add(y, x)
    assert z.value == 5.0
    assert z.op == Op("add")
    assert z.operands[0] is y and z.operands[1] is x
    assert z.gradient == 0.0


def test_builders_do_not_touch_operands():
    x = leaf(2.0)
    x.gradient = 7.0
    mul(x, x)
    exp(x)
    assert x.value == 2.0
    assert x.gradient == 7.0


def test_unary_builders():
    x = leaf(2.0)
    p = pow(x, 3.0)
    assert p.value == 8.0
    assert p.op.exponent == 3.0
    assert p.operands == (x,)
    assert exp(x).value == pytest.approx(math.exp(2.0))
    assert relu(x).value == 2.0
    assert relu(leaf(-2.0)).value == 0.0


def test_plain_numbers_become_constant_leaves():
    x = leaf(2.0)
    z = mul(x, 4)
    assert z.value == 8.0
    const = z.operands[1]
    assert const.is_leaf and const.value == 4.0


def test_pow_exponent_must_be_a_number():
    x = leaf(2.0)
    with pytest.raises(TypeError):
        pow(x, leaf(2.0))
    with pytest.raises(TypeError):
        pow(x, "2")


def test_neg_is_mul_by_constant():
    x = leaf(3.0)
    n = neg(x)
    assert n.value == -3.0
    assert n.op.tag == "mul"
    assert n.operands[0] is x
    assert n.operands[1].value == -1.0


def test_sub_is_add_of_negation():
    x, y = leaf(5.0), leaf(2.0)
    z = sub(x, y)
    assert z.value == 3.0
    assert z.op.tag == "add"
    assert z.operands[0] is x
    assert z.operands[1].op.tag == "mul"
    backward(z)
    assert x.gradient == 1.0
    assert y.gradient == -1.0


def test_div_is_mul_by_reciprocal():
    x, y = leaf(3.0), leaf(4.0)
    z = div(x, y)
    assert z.value == 0.75
    assert z.op.tag == "mul"
    assert z.operands[1].op == Op("pow", -1.0)
    backward(z)
    assert x.gradient == pytest.approx(0.25)
    assert y.gradient == pytest.approx(-3.0 / 16.0)


def test_operator_overloading():
    x, y = leaf(2.0), leaf(3.0)
    assert (x + y).value == 5.0
    assert (1 + x).value == 3.0
    assert (x - y).value == -1.0
    assert (10 - x).value == 8.0
    assert (x * y).value == 6.0
    assert (3 * x).value == 6.0
    assert (x / y).value == pytest.approx(2.0 / 3.0)
    assert (1 / x).value == 0.5
    assert (-x).value == -2.0
    assert (x ** 2).value == 4.0
    assert x.exp().value == pytest.approx(math.exp(2.0))
    assert (-x).relu().value == 0.0


def test_floating_point_edge_cases_propagate():
    zero = leaf(0.0)
    assert pow(zero, -1.0).value == np.inf
    assert exp(leaf(1000.0)).value == np.inf
    assert np.isnan(pow(leaf(-8.0), 1.0 / 3.0).value)
    assert div(leaf(1.0), zero).value == np.inf


def test_floating_point_events_in_backward():
    x = leaf(0.0)
    y = pow(x, 0.5)
    backward(y)
    # 0.5 * 0 ** -0.5 is inf
    assert x.gradient == np.inf


def test_fp_errors_raise_mode():
    with use_config(fp_errors="raise"):
        with pytest.raises(FloatingPointError):
            pow(leaf(0.0), -1.0)
        with pytest.raises(FloatingPointError):
            exp(leaf(1000.0))
    # default restored
    assert pow(leaf(0.0), -1.0).value == np.inf


def test_fp_errors_warn_mode():
    with use_config(fp_errors="warn"):
        with pytest.warns(RuntimeWarning):
            exp(leaf(1000.0))
