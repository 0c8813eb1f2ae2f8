# src/ember/evaluator/expressions.py
from ..object import Integer, String, Array, INTEGER_OBJ, STRING_OBJ, ARRAY_OBJ
from .utils import (
    is_error, is_interrupt, new_error, debug_log, NULL, TRUE, FALSE, is_truthy,
    native_bool_to_boolean, wrap_int64
)

class ExpressionEvaluatorMixin:
    """Handles evaluation of expressions: Literals, Math, Logic, Identifiers."""

    def eval_identifier(self, node, env):
        debug_log("eval_identifier", f"Looking up: {node.value}")

        # User bindings shadow builtins
        val = env.resolve(node.value)
        if not is_error(val):
            return val

        builtin = self.builtins.get(node.value)
        if builtin is not None:
            debug_log("  Found builtin", node.value)
            return builtin

        return val

    def eval_expressions(self, expressions, env):
        """Evaluate left-to-right; returns a list, or the first error or pending return."""
        result = []
        for expression in expressions:
            evaluated = self.eval_node(expression, env)
            if is_interrupt(evaluated):
                return evaluated
            result.append(evaluated)
        return result

    def eval_array_literal(self, node, env):
        elements = self.eval_expressions(node.elements, env)
        if is_interrupt(elements):
            return elements
        return Array(elements)

    # === PREFIX ===

    def eval_prefix_expression(self, node, env):
        right = self.eval_node(node.right, env)
        if is_interrupt(right):
            return right

        operator = node.operator
        if operator == "!":
            return FALSE if is_truthy(right) else TRUE
        elif operator == "-":
            if right.type() != INTEGER_OBJ:
                return new_error(f"unknown operator: -{right.type()}")
            return Integer(wrap_int64(-right.value))
        return new_error(f"unknown operator: {operator}{right.type()}")

    # === INFIX ===

    def eval_infix_expression(self, node, env):
        debug_log("eval_infix_expression", f"{node.left} {node.operator} {node.right}")

        left = self.eval_node(node.left, env)
        if is_interrupt(left):
            return left

        right = self.eval_node(node.right, env)
        if is_interrupt(right):
            return right

        return self.eval_infix(node.operator, left, right)

    def eval_infix(self, operator, left, right):
        if left.type() == INTEGER_OBJ and right.type() == INTEGER_OBJ:
            return self.eval_integer_infix(operator, left, right)
        elif left.type() == STRING_OBJ and right.type() == STRING_OBJ:
            return self.eval_string_infix(operator, left, right)
        # Remaining pairs compare by identity; Boolean/Null are singletons
        elif operator == "==":
            return native_bool_to_boolean(left is right)
        elif operator == "!=":
            return native_bool_to_boolean(left is not right)
        elif left.type() != right.type():
            return new_error(f"type mismatch: {left.type()} {operator} {right.type()}")
        return new_error(f"unknown operator: {left.type()} {operator} {right.type()}")

    def eval_integer_infix(self, operator, left, right):
        left_val = left.value
        right_val = right.value

        if operator == "+":
            return Integer(wrap_int64(left_val + right_val))
        elif operator == "-":
            return Integer(wrap_int64(left_val - right_val))
        elif operator == "*":
            return Integer(wrap_int64(left_val * right_val))
        elif operator == "/":
            if right_val == 0:
                return new_error("division by zero")
            # Truncate toward zero
            quotient = abs(left_val) // abs(right_val)
            if (left_val < 0) != (right_val < 0):
                quotient = -quotient
            return Integer(wrap_int64(quotient))
        elif operator == "<":
            return native_bool_to_boolean(left_val < right_val)
        elif operator == ">":
            return native_bool_to_boolean(left_val > right_val)
        elif operator == "<=":
            return native_bool_to_boolean(left_val <= right_val)
        elif operator == ">=":
            return native_bool_to_boolean(left_val >= right_val)
        elif operator == "==":
            return native_bool_to_boolean(left_val == right_val)
        elif operator == "!=":
            return native_bool_to_boolean(left_val != right_val)

        return new_error(f"unknown operator: {left.type()} {operator} {right.type()}")

    def eval_string_infix(self, operator, left, right):
        if operator == "+":
            return String(left.value + right.value)
        elif operator == "==":
            return native_bool_to_boolean(left.value == right.value)
        elif operator == "!=":
            return native_bool_to_boolean(left.value != right.value)
        return new_error(f"unknown operator: {left.type()} {operator} {right.type()}")

    # === CONDITIONALS & INDEXING ===

    def eval_if_expression(self, node, env):
        condition = self.eval_node(node.condition, env)
        if is_interrupt(condition):
            return condition

        if is_truthy(condition):
            return self.eval_node(node.consequence, env)
        elif node.alternative is not None:
            return self.eval_node(node.alternative, env)
        return NULL

    def eval_index_expression(self, node, env):
        left = self.eval_node(node.left, env)
        if is_interrupt(left):
            return left

        index = self.eval_node(node.index, env)
        if is_interrupt(index):
            return index

        if left.type() != ARRAY_OBJ:
            return new_error(f"index operator not supported: {left.type()}")
        if index.type() != INTEGER_OBJ:
            return new_error(f"index operator not supported: {left.type()}[{index.type()}]")

        idx = index.value
        if idx < 0 or idx >= len(left.elements):
            return NULL
        return left.elements[idx]
