# src/ember/evaluator/functions.py
from ..config import config as ember_config
from ..environment import Environment
from ..object import Function, Builtin, ReturnValue
from .builtins import BUILTINS
from .utils import is_interrupt, new_error, debug_log, EVAL_SUMMARY

class FunctionEvaluatorMixin:
    """Handles function literals, calls and application of user and builtin functions."""

    def __init__(self, builtins=None):
        # Read-only table shared by every evaluator unless a caller supplies one
        self.builtins = BUILTINS if builtins is None else builtins
        self.call_depth = 0

    def eval_function_literal(self, node, env):
        return Function(node.parameters, node.body, env)

    def eval_call_expression(self, node, env):
        debug_log("CallExpression node", f"Calling {node.function}")

        fn = self.eval_node(node.function, env)
        if is_interrupt(fn):
            return fn
        if not isinstance(fn, (Function, Builtin)):
            return new_error(f"not a function: {fn.type()}")

        args = self.eval_expressions(node.arguments, env)
        if is_interrupt(args):
            return args

        debug_log("  Arguments evaluated", f"count: {len(args)}")
        return self.apply_function(fn, args)

    def apply_function(self, fn, args):
        debug_log("apply_function", f"Calling {fn.inspect()}")

        if isinstance(fn, Function):
            if len(args) != len(fn.parameters):
                return new_error(
                    f"wrong number of arguments: want={len(fn.parameters)}, got={len(args)}"
                )
            if self.call_depth >= ember_config.max_depth:
                debug_log("  Call depth limit reached", self.call_depth)
                return new_error("maximum recursion depth exceeded")
            EVAL_SUMMARY['function_calls'] += 1

            new_env = self.extend_function_env(fn, args)
            self.call_depth += 1
            try:
                res = self.eval_node(fn.body, new_env)
            finally:
                self.call_depth -= 1
            return self.unwrap_return_value(res)

        elif isinstance(fn, Builtin):
            debug_log("  Calling builtin function", fn.name)
            EVAL_SUMMARY['builtin_calls'] += 1
            return fn.fn(self, *args)

        return new_error(f"not a function: {fn.type()}")

    def extend_function_env(self, fn, args):
        env = Environment.new_enclosed(fn.env)
        for param, arg in zip(fn.parameters, args):
            env.set(param.value, arg)
        return env

    def unwrap_return_value(self, obj):
        if isinstance(obj, ReturnValue):
            return obj.value
        return obj
