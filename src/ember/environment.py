# src/ember/environment.py
from .object import EvaluationError

class Environment:
    def __init__(self, outer=None):
        self.store = {}
        self.outer = outer

    @classmethod
    def new_enclosed(cls, outer):
        """Create an empty frame whose parent is `outer` (one per function call)."""
        return cls(outer=outer)

    # ---- Mapping protocol helpers -------------------------------------------------

    def __contains__(self, name):
        if name in self.store:
            return True
        if self.outer is not None:
            return name in self.outer
        return False

    def __getitem__(self, name):
        if name not in self:
            raise KeyError(name)
        return self.get(name)

    def __setitem__(self, name, value):
        self.set(name, value)

    def __iter__(self):
        return iter(self.store)

    def __len__(self):
        return len(self.store)

    def keys(self):
        return self.store.keys()

    def items(self):
        return self.store.items()

    # ---- Core environment operations ---------------------------------------------

    def get(self, name, default=None):
        """Get a value from this frame or the nearest enclosing one."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return default

    def resolve(self, name):
        """Like get(), but an unbound name is an error value."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return EvaluationError(f"identifier not found: {name}")

    def set(self, name, value):
        """Bind a name in the local frame, replacing any existing binding."""
        self.store[name] = value
        return value

    def depth(self):
        """Number of enclosing frames above this one."""
        count = 0
        env = self.outer
        while env is not None:
            count += 1
            env = env.outer
        return count

    def __repr__(self):
        return f"Environment(names={sorted(self.store)}, depth={self.depth()})"
