# src/ember/evaluator/core.py
import logging
import sys

from .. import ember_ast
from ..config import config as ember_config
from ..object import Integer, String
from .utils import new_error, debug_log, NULL, TRUE, FALSE, EVAL_SUMMARY
from .expressions import ExpressionEvaluatorMixin
from .statements import StatementEvaluatorMixin
from .functions import FunctionEvaluatorMixin

logger = logging.getLogger(__name__)

# Python frames one nested Ember call may use; sizes the host recursion limit
FRAMES_PER_CALL = 50

class Evaluator(ExpressionEvaluatorMixin, StatementEvaluatorMixin, FunctionEvaluatorMixin):
    def __init__(self, builtins=None):
        # FunctionEvaluatorMixin holds the builtin table
        FunctionEvaluatorMixin.__init__(self, builtins)

    def eval_node(self, node, env):
        if node is None:
            debug_log("eval_node", "Node is None, returning NULL")
            return NULL

        node_type = type(node)

        # === STATEMENTS ===
        if node_type == ember_ast.Program:
            return self.eval_program(node.statements, env)

        elif node_type == ember_ast.ExpressionStatement:
            return self.eval_node(node.expression, env)

        elif node_type == ember_ast.BlockStatement:
            return self.eval_block_statement(node, env)

        elif node_type == ember_ast.LetStatement:
            return self.eval_let_statement(node, env)

        elif node_type == ember_ast.ReturnStatement:
            return self.eval_return_statement(node, env)

        # === EXPRESSIONS ===
        elif node_type == ember_ast.Identifier:
            return self.eval_identifier(node, env)

        elif node_type == ember_ast.IntegerLiteral:
            return Integer(node.value)

        elif node_type == ember_ast.StringLiteral:
            return String(node.value)

        elif node_type == ember_ast.Boolean:
            return TRUE if node.value else FALSE

        elif node_type == ember_ast.NullLiteral:
            return NULL

        elif node_type == ember_ast.ArrayLiteral:
            return self.eval_array_literal(node, env)

        elif node_type == ember_ast.PrefixExpression:
            return self.eval_prefix_expression(node, env)

        elif node_type == ember_ast.InfixExpression:
            return self.eval_infix_expression(node, env)

        elif node_type == ember_ast.IfExpression:
            return self.eval_if_expression(node, env)

        elif node_type == ember_ast.IndexExpression:
            return self.eval_index_expression(node, env)

        elif node_type == ember_ast.FunctionLiteral:
            return self.eval_function_literal(node, env)

        elif node_type == ember_ast.CallExpression:
            return self.eval_call_expression(node, env)

        debug_log("  Unknown node type", node_type.__name__)
        return new_error(f"unknown node type: {node_type.__name__}")

# Global Entry Point
def evaluate(program, env, debug_mode=False, evaluator=None):
    """Evaluate a parsed program in `env` and return the resulting object.

    Runtime failures come back as error objects. Nested user-function calls
    are capped at `config.max_depth`; a Python RecursionError (e.g. from a
    deeply nested expression) is turned into the same error value.
    """
    previous_level = ember_config.debug_level
    if debug_mode:
        ember_config.debug_level = "debug"

    evaluator = evaluator or Evaluator()
    previous_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous_limit, ember_config.max_depth * FRAMES_PER_CALL))
    try:
        return evaluator.eval_node(program, env)
    except RecursionError:
        logger.warning("Evaluation exceeded max depth (%d)", ember_config.max_depth)
        EVAL_SUMMARY['errors'] += 1
        return new_error("maximum recursion depth exceeded")
    finally:
        sys.setrecursionlimit(previous_limit)
        ember_config.debug_level = previous_level
