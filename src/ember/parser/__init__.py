# src/ember/parser/__init__.py
"""
Parser module for the Ember language.
"""
from .parser import Parser

__all__ = ["Parser"]
