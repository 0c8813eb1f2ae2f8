"""
Pytest configuration for Ember tests.
"""
import sys
import os

import pytest

# Make `import ember...` work from a source checkout
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)


@pytest.fixture
def run():
    """Parse and evaluate a snippet in a fresh global environment."""
    from ember.environment import Environment
    from ember.evaluator import evaluate
    from ember.lexer import Lexer
    from ember.parser import Parser

    def _run(source, env=None):
        parser = Parser(Lexer(source))
        program = parser.parse_program()
        assert parser.errors == [], f"parse errors: {parser.errors}"
        return evaluate(program, env if env is not None else Environment())

    return _run
