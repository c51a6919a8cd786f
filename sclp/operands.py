"""Operands of three-address code and the counters that number them."""

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Optional

from sclp.types import DataType, TacOperandKind

__all__ = [
    "TacContext",
    "TacOperand",
    "VariableOperand",
    "TemporaryOperand",
    "SavedTemporaryOperand",
    "LabelOperand",
    "IntConstOperand",
    "DoubleConstOperand",
    "StringConstOperand",
]


class TacOperand:
    """Base class of three-address code operands.

    Operands compare by identity, so a temporary can key a register map.
    """

    kind: ClassVar[TacOperandKind]
    dt: Optional[DataType] = None

    def operand_string(self):
        raise NotImplementedError


@dataclass(eq=False)
class VariableOperand(TacOperand):
    """A named program variable."""

    name: str
    dt: DataType
    kind: ClassVar[TacOperandKind] = TacOperandKind.VARIABLE

    def operand_string(self):
        return self.name + "_"

    def __str__(self):
        return self.name


@dataclass(eq=False)
class TemporaryOperand(TacOperand):
    """A short-lived temporary, later held in a register."""

    number: int
    dt: DataType
    kind: ClassVar[TacOperandKind] = TacOperandKind.TEMPORARY

    def operand_string(self):
        return f"temp{self.number}"

    def __str__(self):
        return self.operand_string()


@dataclass(eq=False)
class SavedTemporaryOperand(TacOperand):
    """A temporary that lives in the stack frame across statements."""

    number: int
    dt: DataType
    kind: ClassVar[TacOperandKind] = TacOperandKind.SAVED_TEMPORARY

    def operand_string(self):
        return f"stemp{self.number}"

    def __str__(self):
        return self.operand_string()


@dataclass(eq=False)
class LabelOperand(TacOperand):
    """A numbered jump target."""

    number: int
    dt: Optional[DataType] = field(default=None, init=False)
    kind: ClassVar[TacOperandKind] = TacOperandKind.LABEL

    @property
    def label_number(self):
        return self.number

    def operand_string(self):
        return f"Label{self.number}"

    def __str__(self):
        return self.operand_string()


@dataclass(eq=False)
class IntConstOperand(TacOperand):
    """An integer constant."""

    num: int
    dt: DataType = field(default=DataType.INTEGER, init=False)
    kind: ClassVar[TacOperandKind] = TacOperandKind.INT_CONST

    def operand_string(self):
        return str(self.num)

    def __str__(self):
        return str(self.num)


@dataclass(eq=False)
class DoubleConstOperand(TacOperand):
    """A floating point constant, written with two decimals."""

    num: float
    dt: DataType = field(default=DataType.FLOAT, init=False)
    kind: ClassVar[TacOperandKind] = TacOperandKind.DOUBLE_CONST

    def operand_string(self):
        return f"{self.num:.2f}"

    def __str__(self):
        return f"{self.num:g}"


@dataclass(eq=False)
class StringConstOperand(TacOperand):
    """A string literal, kept as written in the source."""

    s: str
    dt: DataType = field(default=DataType.STRING, init=False)
    kind: ClassVar[TacOperandKind] = TacOperandKind.STRING_CONST

    def operand_string(self):
        return self.s

    def __str__(self):
        return self.s


@dataclass
class TacContext:
    """Numbering state for temporaries, saved temporaries and labels.

    Temporary and saved-temporary counters restart with each function;
    label numbers are unique across the whole program.
    """

    temp_count: int = 0
    saved_temp_count: int = 0
    label_count: int = 0
    function: str = ""
    function_stemps: Dict[str, Dict[int, DataType]] = field(default_factory=dict)

    def reset_function(self, function, saved_start=0):
        """Start numbering temporaries for a new function."""
        self.function = function
        self.temp_count = 0
        self.saved_temp_count = saved_start

    def new_temporary(self, dt):
        """Return a fresh temporary of the given type."""
        operand = TemporaryOperand(self.temp_count, dt)
        self.temp_count += 1
        return operand

    def new_saved_temporary(self, dt, number=None):
        """Return a saved temporary, numbered afresh unless a number is given.

        Its type is recorded for the current function.
        """
        if number is None:
            number = self.saved_temp_count
            self.saved_temp_count += 1
        self.function_stemps.setdefault(self.function, {})[number] = dt
        return SavedTemporaryOperand(number, dt)

    def new_label(self):
        """Return a fresh label."""
        operand = LabelOperand(self.label_count)
        self.label_count += 1
        return operand