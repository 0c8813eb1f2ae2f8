"""Object model and environment chain tests."""

import pytest

from ember.environment import Environment
from ember.object import (
    Integer, String, Boolean, Null, Array, Function, Builtin, EvaluationError, ReturnValue,
    TRUE, FALSE, NULL
)
from ember.evaluator.utils import is_truthy, is_error, native_bool_to_boolean, wrap_int64
from ember.ember_ast import Identifier, BlockStatement


@pytest.mark.parametrize("obj, type_tag, display", [
    (Integer(-7), "INTEGER", "-7"),
    (String("hi"), "STRING", "hi"),
    (TRUE, "BOOLEAN", "true"),
    (FALSE, "BOOLEAN", "false"),
    (NULL, "NULL", "null"),
    (Array([Integer(1), String("a")]), "ARRAY", "[1, a]"),
    (Array([]), "ARRAY", "[]"),
    (EvaluationError("boom"), "ERROR", "ERROR: boom"),
    (ReturnValue(Integer(3)), "RETURN_VALUE", "3"),
])
def test_type_tags_and_display(obj, type_tag, display):
    assert obj.type() == type_tag
    assert obj.inspect() == display


def test_function_and_builtin_display():
    fn = Function([Identifier("x"), Identifier("y")], BlockStatement(), Environment())
    assert fn.type() == "FUNCTION"
    assert fn.inspect() == "fn(x, y) { ... }"

    builtin = Builtin(lambda evaluator, *args: NULL, "noop")
    assert builtin.type() == "BUILTIN"
    assert builtin.inspect() == "<builtin function: noop>"


@pytest.mark.parametrize("obj, expected", [
    (TRUE, True),
    (FALSE, False),
    (NULL, False),
    (Boolean(False), False),
    (Null(), False),
    (Integer(0), True),
    (String(""), True),
    (Array([]), True),
])
def test_truthiness(obj, expected):
    assert is_truthy(obj) is expected


def test_boolean_singletons():
    assert native_bool_to_boolean(True) is TRUE
    assert native_bool_to_boolean(False) is FALSE
    assert native_bool_to_boolean(1 == 1) is native_bool_to_boolean(2 == 2)


def test_is_error():
    assert is_error(EvaluationError("x"))
    assert not is_error(Integer(1))
    assert not is_error([Integer(1)])
    assert not is_error(None)


@pytest.mark.parametrize("value, expected", [
    (0, 0),
    (2**63 - 1, 2**63 - 1),
    (2**63, -(2**63)),
    (-(2**63) - 1, 2**63 - 1),
    (2**64 + 5, 5),
])
def test_wrap_int64(value, expected):
    assert wrap_int64(value) == expected


def test_define_and_resolve_local():
    env = Environment()
    value = Integer(5)
    assert env.set("x", value) is value
    assert env.resolve("x") is value
    assert "x" in env
    assert len(env) == 1


def test_resolve_walks_outer_chain():
    outer = Environment()
    outer.set("a", Integer(1))
    inner = Environment.new_enclosed(outer)
    inner.set("b", Integer(2))

    assert inner.resolve("a").value == 1
    assert inner.resolve("b").value == 2
    assert "a" in inner
    assert "b" not in outer
    assert inner.outer is outer
    assert inner.depth() == 1


def test_define_shadows_without_touching_outer():
    outer = Environment()
    outer.set("x", Integer(1))
    inner = Environment.new_enclosed(outer)
    inner.set("x", Integer(2))

    assert inner.resolve("x").value == 2
    assert outer.resolve("x").value == 1


def test_resolve_missing_name_is_error_value():
    env = Environment.new_enclosed(Environment())
    result = env.resolve("nowhere")
    assert isinstance(result, EvaluationError)
    assert result.message == "identifier not found: nowhere"


def test_get_returns_default_for_missing_name():
    env = Environment()
    assert env.get("missing") is None
    assert env.get("missing", NULL) is NULL
    with pytest.raises(KeyError):
        env["missing"]


def test_outer_mutation_visible_through_shared_reference():
    outer = Environment()
    inner = Environment.new_enclosed(outer)
    outer.set("late", Integer(9))
    assert inner.resolve("late").value == 9
