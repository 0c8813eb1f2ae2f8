# src/ember/evaluator/utils.py
import logging

from ..config import config as ember_config
from ..object import EvaluationError, ReturnValue, TRUE, FALSE, NULL, NULL_OBJ, BOOLEAN_OBJ

logger = logging.getLogger("ember.evaluator")

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

EVAL_SUMMARY = {
    'evaluated_statements': 0,
    'function_calls': 0,
    'builtin_calls': 0,
    'errors': 0,
}

def debug_log(message, data=None, level='debug'):
    """Conditional debug logging that respects the user's persistent config."""
    if not ember_config.should_log(level):
        return
    if data is not None:
        logger.debug("%s: %s", message, data)
    else:
        logger.debug("%s", message)

def reset_summary():
    for key in EVAL_SUMMARY:
        EVAL_SUMMARY[key] = 0

def is_error(obj):
    return isinstance(obj, EvaluationError)

def is_interrupt(obj):
    """Errors and pending `return` values both stop evaluation of sibling nodes."""
    return isinstance(obj, (EvaluationError, ReturnValue))

def new_error(message):
    return EvaluationError(message)

def is_truthy(obj):
    if obj is NULL or obj is FALSE:
        return False
    if obj is TRUE:
        return True
    # Non-singleton Null/Boolean instances built outside the evaluator
    obj_type = obj.type()
    if obj_type == NULL_OBJ:
        return False
    if obj_type == BOOLEAN_OBJ:
        return bool(obj.value)
    return True

def native_bool_to_boolean(value):
    return TRUE if value else FALSE

def wrap_int64(value):
    """Wrap an arbitrary Python int to 64-bit two's complement."""
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return ((value - INT64_MIN) % (1 << 64)) + INT64_MIN
