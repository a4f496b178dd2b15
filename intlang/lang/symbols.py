"""Symbol table for intlang: write-once integer variables. Lives for exactly one Session."""

from dataclasses import dataclass

from intlang.lang.error import DuplicateDeclaration, UndefinedVariable, UseBeforeInit


@dataclass
class Entry:
    name: str
    value: int
    defined: bool = True


class SymbolTable:
    """Maps variable names to Entries. Entries are inserted once and never updated or removed."""

    def __init__(self):
        self.entries = {}

    def lookup(self, name, line=None):
        """Returns the value bound to name. line is only used for error messages."""
        entry = self.entries.get(name)
        if entry is None:
            raise UndefinedVariable(f"Undefined variable '{name}'", line)
        if not entry.defined:
            raise UseBeforeInit(f"Variable '{name}' used before initialization", line)
        return entry.value

    def declare(self, name, value, line=None):
        """Binds name to value. Names cannot be redeclared."""
        if name in self.entries:
            raise DuplicateDeclaration(f"Variable '{name}' already declared", line)
        self.entries[name] = Entry(name, value)

    def __contains__(self, name):
        return name in self.entries

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return f"SymbolTable({', '.join(f'{e.name}={e.value}' for e in self.entries.values())})"
