"""Variable lists, function signatures and the registry of declared functions."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from sclp.operands import LabelOperand, TacContext
from sclp.types import DataType

__all__ = [
    "CompileError",
    "VarList",
    "FuncSignature",
    "FunctionRegistry",
]


class CompileError(Exception):
    """A semantic error found in the program being compiled."""


VarEntry = Tuple[DataType, str]


@dataclass
class VarList:
    """An ordered list of (type, name) pairs for parameters or locals."""

    entries: List[VarEntry] = field(default_factory=list)

    def add_name(self, name):
        """Add a name whose type is not known yet; it starts as an integer."""
        self.entries.append((DataType.INTEGER, name))

    def add_name_and_type(self, name, dt):
        """Add a name with its type."""
        self.entries.append((DataType(dt), name))

    def set_type_to_all(self, dt):
        """Give every entry the same type."""
        dt = DataType(dt)
        self.entries = [(dt, name) for _, name in self.entries]

    def append_another(self, other):
        """Add the entries of another list at the end."""
        self.entries.extend(other.entries)

    @property
    def names(self):
        return [name for _, name in self.entries]

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)


@dataclass(eq=False)
class FuncSignature:
    """The name, return type and parameters of a function.

    Two signatures are equal when name, return type and parameter types
    in order agree; parameter names do not matter.
    """

    dt: DataType
    func_name: str
    param_list: VarList = field(default_factory=VarList)
    local_var_list: VarList = field(default_factory=VarList)
    params: Dict[str, DataType] = field(default_factory=dict, init=False)
    param_types_in_order: List[DataType] = field(default_factory=list, init=False)

    def __post_init__(self):
        for var_type, name in self.param_list.entries:
            if name in self.params:
                raise CompileError("Variable is declared twice in the same scope")
            self.params[name] = var_type
            self.param_types_in_order.append(var_type)

    def __eq__(self, other):
        if not isinstance(other, FuncSignature):
            return NotImplemented
        return (
            self.func_name == other.func_name
            and self.dt == other.dt
            and self.param_types_in_order == other.param_types_in_order
        )

    __hash__ = None


@dataclass
class _Registered:
    signature: FuncSignature
    is_decl: bool


def _mangled(name):
    return name if name == "main" else name + "_"


@dataclass
class FunctionRegistry:
    """All function declarations and definitions of a program."""

    context: TacContext = field(default_factory=TacContext)
    global_symtab: Dict[str, DataType] = field(default_factory=dict)
    return_labels: Dict[str, LabelOperand] = field(default_factory=dict)
    functions: List[_Registered] = field(default_factory=list)
    name_to_signature: Dict[str, FuncSignature] = field(default_factory=dict)

    def make_signature(self, dt, name, params=None):
        """Build a signature; a function returning a value gets a return label."""
        dt = DataType(dt)
        signature = FuncSignature(dt, name, params if params is not None else VarList())
        if dt is not DataType.VOID and name not in self.return_labels:
            self.return_labels[name] = self.context.new_label()
        return signature

    def push_function(self, signature, is_decl):
        """Record a declaration or definition, checking it against earlier ones."""
        if signature.func_name in self.global_symtab:
            raise CompileError("Procedure name coincides with a global variable.")
        for entry in self.functions:
            if entry.signature.func_name != signature.func_name:
                continue
            if entry.is_decl == is_decl:
                raise CompileError("Function defined/declared earlier.")
            if not entry.is_decl and is_decl:
                raise CompileError("Function defined before declaration.")
            if not entry.signature == signature:
                raise CompileError("Functions can't be overloaded")
        self.functions.append(_Registered(signature, bool(is_decl)))
        self.name_to_signature[_mangled(signature.func_name)] = signature

    def _lookup(self, name):
        try:
            return self.name_to_signature[name]
        except KeyError:
            raise KeyError(f"unknown function {name!r}") from None

    def local_var_list(self, name):
        """Return the (type, name) pairs of a function's locals."""
        return list(self._lookup(name).local_var_list.entries)

    def formal_var_list(self, name):
        """Return the (type, name) pairs of a function's parameters."""
        return list(self._lookup(name).param_list.entries)

    def is_void(self, name):
        """Tell whether a function returns nothing."""
        return self._lookup(name).dt is DataType.VOID

    def return_type(self, name):
        """Return a function's return type."""
        return self._lookup(name).dt