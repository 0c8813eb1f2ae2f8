"""Evaluator stress regression for long programs.

Goal: ensure the full pipeline remains stable on ~10k statement files and on
moderately deep recursion. This catches O(n^2) behavior in the parser or the
environment chain.

We intentionally keep the program simple (one variable) to avoid huge memory
usage from thousands of distinct bindings.
"""

from ember.lexer import Lexer
from ember.parser import Parser
from ember.evaluator.core import evaluate
from ember.environment import Environment


def _make_increment_program(line_count: int = 10_000) -> str:
    assert line_count >= 2
    lines = ["let x = 0;"]
    lines.extend(["let x = x + 1;"] * (line_count - 1))
    return "\n".join(lines) + "\n"


def _parse(code):
    parser = Parser(Lexer(code))
    program = parser.parse_program()
    assert parser.errors == []
    return program


def test_long_program_10k_statements():
    program = _parse(_make_increment_program(10_000))
    assert len(program.statements) == 10_000

    env = Environment()
    evaluate(program, env)
    assert env.get("x").value == 9_999


def test_recursive_sum_500_deep():
    program = _parse("""
let sum = fn(n) { if (n == 0) { 0 } else { n + sum(n - 1) } };
sum(500)
""")
    assert evaluate(program, Environment()).value == 125_250


def test_large_array_pipeline():
    program = _parse("""
let build = fn(n, acc) { if (n == 0) { acc } else { build(n - 1, push(acc, n)) } };
let xs = build(300, []);
reduce(map(xs, fn(x) { x * 2 }), 0, fn(acc, x) { acc + x })
""")
    assert evaluate(program, Environment()).value == 300 * 301
