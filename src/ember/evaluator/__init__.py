# src/ember/evaluator/__init__.py
from .core import Evaluator, evaluate
from .builtins import BUILTINS
from .utils import EVAL_SUMMARY

__all__ = ['Evaluator', 'evaluate', 'BUILTINS', 'EVAL_SUMMARY']
