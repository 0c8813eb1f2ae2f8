"""Ember: a small tree-walking interpreter for a dynamically-typed expression language."""

__version__ = "0.1.0"
