# src/ember/lexer.py
from .ember_token import *

_SINGLE_CHAR_TOKENS = {
    '+': PLUS,
    '-': MINUS,
    '*': STAR,
    '/': SLASH,
    ',': COMMA,
    ';': SEMICOLON,
    '(': LPAREN,
    ')': RPAREN,
    '{': LBRACE,
    '}': RBRACE,
    '[': LBRACKET,
    ']': RBRACKET,
}

# Two-character operators keyed by their first character: (single, double)
_TWO_CHAR_TOKENS = {
    '=': (ASSIGN, EQ),
    '!': (BANG, NOT_EQ),
    '<': (LT, LTE),
    '>': (GT, GTE),
}

_ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '"': '"',
    '\\': '\\',
}


class Lexer:
    def __init__(self, source_code, filename="<stdin>"):
        self.input = source_code
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch = ""
        # Line/column of self.ch
        self.line = 1
        self.column = 0
        self.read_char()

    def read_char(self):
        if self.ch == '\n':
            self.line += 1
            self.column = 0

        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        self.column += 1
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def next_token(self):
        self.skip_whitespace()

        # Single line comments, both # and // styles
        while self.ch == '#' or (self.ch == '/' and self.peek_char() == '/'):
            self.skip_comment()
            self.skip_whitespace()

        line, column = self.line, self.column

        if self.ch == "":
            return Token(EOF, "", line, column)

        if self.ch in _TWO_CHAR_TOKENS:
            single, double = _TWO_CHAR_TOKENS[self.ch]
            if self.peek_char() == '=':
                ch = self.ch
                self.read_char()
                tok = Token(double, ch + self.ch, line, column)
            else:
                tok = Token(single, self.ch, line, column)
        elif self.ch in _SINGLE_CHAR_TOKENS:
            tok = Token(_SINGLE_CHAR_TOKENS[self.ch], self.ch, line, column)
        elif self.ch == '"':
            literal, terminated = self.read_string()
            if not terminated:
                return Token(ILLEGAL, '"' + literal, line, column)
            tok = Token(STRING, literal, line, column)
        elif self.is_letter(self.ch):
            # read_identifier leaves self.ch on the first char after the word
            literal = self.read_identifier()
            return Token(lookup_ident(literal), literal, line, column)
        elif self.is_digit(self.ch):
            return Token(INT, self.read_number(), line, column)
        else:
            tok = Token(ILLEGAL, self.ch, line, column)

        self.read_char()
        return tok

    def skip_comment(self):
        while self.ch != '\n' and self.ch != "":
            self.read_char()

    def read_string(self):
        """Read a double-quoted string; self.ch ends on the closing quote.

        Returns (value, terminated).
        """
        result = []
        while True:
            self.read_char()
            if self.ch == "":
                return ''.join(result), False
            if self.ch == '"':
                return ''.join(result), True
            if self.ch == '\\':
                self.read_char()
                if self.ch == "":
                    return ''.join(result), False
                result.append(_ESCAPES.get(self.ch, '\\' + self.ch))
                continue
            result.append(self.ch)

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch) or self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def is_letter(self, char):
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'

    def is_digit(self, char):
        return '0' <= char <= '9'

    def skip_whitespace(self):
        while self.ch in (' ', '\t', '\n', '\r'):
            self.read_char()

    def tokens(self):
        """Drain the lexer, returning every token up to and including EOF."""
        result = []
        while True:
            tok = self.next_token()
            result.append(tok)
            if tok.type == EOF:
                return result
