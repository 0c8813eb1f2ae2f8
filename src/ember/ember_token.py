# src/ember/ember_token.py

ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers + literals
IDENT = "IDENT"
INT = "INT"
STRING = "STRING"

# Operators
ASSIGN = "="
PLUS = "+"
MINUS = "-"
BANG = "!"
STAR = "*"
SLASH = "/"

LT = "<"
GT = ">"
LTE = "<="
GTE = ">="
EQ = "=="
NOT_EQ = "!="

# Delimiters
COMMA = ","
SEMICOLON = ";"
LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"
LBRACKET = "["
RBRACKET = "]"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
NULL = "NULL"
IF = "IF"
ELSE = "ELSE"
RETURN = "RETURN"

KEYWORDS = {
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "null": NULL,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
}


def lookup_ident(ident):
    return KEYWORDS.get(ident, IDENT)


class Token:
    def __init__(self, type, literal, line=0, column=0):
        self.type = type
        self.literal = literal
        self.line = line
        self.column = column

    def __repr__(self):
        return f"Token({self.type}, '{self.literal}', line={self.line}, column={self.column})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.literal == other.literal
