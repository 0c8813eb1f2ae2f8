# src/ember/object.py

INTEGER_OBJ = "INTEGER"
STRING_OBJ = "STRING"
BOOLEAN_OBJ = "BOOLEAN"
NULL_OBJ = "NULL"
ARRAY_OBJ = "ARRAY"
FUNCTION_OBJ = "FUNCTION"
BUILTIN_OBJ = "BUILTIN"
ERROR_OBJ = "ERROR"
RETURN_VALUE_OBJ = "RETURN_VALUE"

class Object:
    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")

    def type(self):
        raise NotImplementedError("Subclasses must implement this method")

    def __repr__(self):
        return f"<{self.type()} {self.inspect()}>"

class Integer(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return str(self.value)
    def type(self): return INTEGER_OBJ

class String(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value
    def type(self): return STRING_OBJ
    def __str__(self): return self.value

class Boolean(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return "true" if self.value else "false"
    def type(self): return BOOLEAN_OBJ

class Null(Object):
    def inspect(self): return "null"
    def type(self): return NULL_OBJ

class Array(Object):
    def __init__(self, elements): self.elements = elements
    def inspect(self):
        elements_str = ", ".join([el.inspect() for el in self.elements])
        return f"[{elements_str}]"
    def type(self): return ARRAY_OBJ

class ReturnValue(Object):
    """Carries a `return` result up through enclosing blocks to the call site."""
    def __init__(self, value): self.value = value
    def inspect(self): return self.value.inspect()
    def type(self): return RETURN_VALUE_OBJ

class Function(Object):
    def __init__(self, parameters, body, env):
        # env is the defining Environment itself; it is never copied
        self.parameters, self.body, self.env = parameters, body, env
    def inspect(self):
        params = ", ".join([p.value for p in self.parameters])
        return f"fn({params}) {{ ... }}"
    def type(self): return FUNCTION_OBJ

class Builtin(Object):
    def __init__(self, fn, name=""):
        self.fn = fn  # Native Python callable: fn(evaluator, *args)
        self.name = name

    def inspect(self):
        return f"<builtin function: {self.name}>"

    def type(self):
        return BUILTIN_OBJ

class EvaluationError(Object):
    """A runtime failure carried as an ordinary value."""
    def __init__(self, message): self.message = message
    def inspect(self): return f"ERROR: {self.message}"
    def type(self): return ERROR_OBJ
    def __str__(self): return self.message

# Process-wide singletons
TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()
