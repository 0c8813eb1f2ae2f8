# src/ember/evaluator/builtins.py
"""The builtin function table.

Every builtin is called as ``fn(evaluator, *args)``. The evaluator argument is
the one applying the builtin; only the higher-order builtins (``map``,
``reduce``) use it, to apply user functions. Each builtin checks its argument
count and types before doing any work and reports problems as error values.
"""
from types import MappingProxyType

from ..object import (
    Integer, Array, Builtin,
    INTEGER_OBJ, STRING_OBJ, ARRAY_OBJ, FUNCTION_OBJ
)
from .utils import is_error, new_error, NULL


def _wrong_arg_count(args, want):
    return new_error(f"wrong number of arguments. got={len(args)}, want={want}")


def _len(evaluator, *args):
    if len(args) != 1:
        return _wrong_arg_count(args, 1)

    arg = args[0]
    if arg.type() == STRING_OBJ:
        return Integer(len(arg.value))
    elif arg.type() == ARRAY_OBJ:
        return Integer(len(arg.elements))
    return new_error(f"argument to `len` not supported, got {arg.type()}")


def _first(evaluator, *args):
    if len(args) != 1:
        return _wrong_arg_count(args, 1)
    if args[0].type() != ARRAY_OBJ:
        return new_error(f"argument to `first` must be ARRAY, got {args[0].type()}")

    elements = args[0].elements
    if elements:
        return elements[0]
    return NULL


def _last(evaluator, *args):
    if len(args) != 1:
        return _wrong_arg_count(args, 1)
    if args[0].type() != ARRAY_OBJ:
        return new_error(f"argument to `last` must be ARRAY, got {args[0].type()}")

    elements = args[0].elements
    if elements:
        return elements[-1]
    return NULL


def _rest(evaluator, *args):
    if len(args) != 1:
        return _wrong_arg_count(args, 1)
    if args[0].type() != ARRAY_OBJ:
        return new_error(f"argument to `rest` must be ARRAY, got {args[0].type()}")

    elements = args[0].elements
    if elements:
        return Array(elements[1:])
    return NULL


def _push(evaluator, *args):
    if len(args) != 2:
        return _wrong_arg_count(args, 2)
    if args[0].type() != ARRAY_OBJ:
        return new_error(f"argument to `push` must be ARRAY, got {args[0].type()}")

    # New container; the elements themselves are shared
    return Array(args[0].elements + [args[1]])


def _map(evaluator, *args):
    if len(args) != 2:
        return _wrong_arg_count(args, 2)
    if args[0].type() != ARRAY_OBJ:
        return new_error(f"first argument to `map` must be ARRAY, got {args[0].type()}")
    if args[1].type() != FUNCTION_OBJ:
        return new_error(f"second argument to `map` must be FUNCTION, got {args[1].type()}")

    arr, fn = args
    new_elements = []
    for el in arr.elements:
        evaluated = evaluator.apply_function(fn, [el])
        if is_error(evaluated):
            return evaluated
        new_elements.append(evaluated)

    return Array(new_elements)


def _reduce(evaluator, *args):
    if len(args) != 3:
        return _wrong_arg_count(args, 3)
    if args[0].type() != ARRAY_OBJ:
        return new_error(f"first argument to `reduce` must be ARRAY, got {args[0].type()}")
    if args[1].type() != INTEGER_OBJ:
        return new_error(f"second argument to `reduce` must be INTEGER, got {args[1].type()}")
    if args[2].type() != FUNCTION_OBJ:
        return new_error(f"third argument to `reduce` must be FUNCTION, got {args[2].type()}")

    arr, initial, fn = args
    acc = initial.value
    for el in arr.elements:
        evaluated = evaluator.apply_function(fn, [Integer(acc), el])
        if is_error(evaluated):
            return evaluated
        if evaluated.type() != INTEGER_OBJ:
            return new_error(
                f"type mismatch: reduce accumulator must be INTEGER, got {evaluated.type()}"
            )
        acc = evaluated.value

    return Integer(acc)


def _puts(evaluator, *args):
    for arg in args:
        print(arg.inspect())
    return NULL


BUILTINS = MappingProxyType({
    name: Builtin(fn, name)
    for name, fn in (
        ("len", _len),
        ("first", _first),
        ("last", _last),
        ("rest", _rest),
        ("push", _push),
        ("map", _map),
        ("reduce", _reduce),
        ("puts", _puts),
    )
})
