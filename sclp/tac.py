"""Three-address code statements, their textual form and code sequences."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from sclp.operands import TacOperand
from sclp.types import DataType, LogOpType, OpType, RelOpType

__all__ = [
    "relop_symbol",
    "op_symbol",
    "logop_symbol",
    "TacStatement",
    "AssignStatement",
    "IfGotoStatement",
    "GotoStatement",
    "LabelStatement",
    "PrintStatement",
    "ReadStatement",
    "CallStatement",
    "ReturnStatement",
    "Code",
]

_RELOP_SYMBOLS = {
    RelOpType.NOT_EQUAL: "!=",
    RelOpType.EQUAL: "==",
    RelOpType.GREATER_THAN: ">",
    RelOpType.GREATER_THAN_EQUAL: ">=",
    RelOpType.LESS_THAN: "<",
    RelOpType.LESS_THAN_EQUAL: "<=",
}

_OP_SYMBOLS = {
    OpType.PLUS: "+",
    OpType.MINUS: "-",
    OpType.MULT: "*",
    OpType.DIV: "/",
    OpType.UMINUS: "-",
}

_LOGOP_SYMBOLS = {
    LogOpType.AND: "&&",
    LogOpType.OR: "||",
    LogOpType.NOT: "!",
}


def relop_symbol(op):
    """Return the symbol of a relational operator, or "" if it has none."""
    return _RELOP_SYMBOLS.get(op, "")


def op_symbol(op):
    """Return the symbol of an arithmetic operator, or "" if it has none."""
    return _OP_SYMBOLS.get(op, "")


def logop_symbol(op):
    """Return the symbol of a logical operator, or "" if it has none."""
    return _LOGOP_SYMBOLS.get(op, "")


class TacStatement:
    """Base class of three-address code statements."""

    def render(self):
        return ""

    def __str__(self):
        return self.render()


Operator = Union[OpType, RelOpType, LogOpType]


@dataclass(eq=False)
class AssignStatement(TacStatement):
    """An assignment of an operator applied to one or two operands.

    A copy without a left-hand side stands for a bare expression.
    """

    lhs: Optional[TacOperand]
    op: Operator
    opd1: TacOperand
    opd2: Optional[TacOperand] = None

    @classmethod
    def arithmetic(cls, lhs, op, opd1, opd2=None):
        """Build ``lhs = opd1 op opd2``, or ``lhs = -opd1`` for unary minus."""
        op = OpType(op)
        if opd2 is None and op not in (OpType.UMINUS, OpType.COPY):
            raise ValueError(f"operator {op.name} needs two operands")
        return cls(lhs, op, opd1, opd2)

    @classmethod
    def relational(cls, lhs, relop, opd1, opd2):
        """Build ``lhs = opd1 relop opd2``."""
        if opd2 is None:
            raise ValueError("a relational operator needs two operands")
        return cls(lhs, RelOpType(relop), opd1, opd2)

    @classmethod
    def logical(cls, lhs, logop, opd1, opd2=None):
        """Build ``lhs = opd1 logop opd2``, or ``lhs = !opd1`` for negation."""
        logop = LogOpType(logop)
        if opd2 is None and logop is not LogOpType.NOT:
            raise ValueError(f"operator {logop.name} needs two operands")
        return cls(lhs, logop, opd1, opd2)

    @classmethod
    def copy(cls, lhs, opd1):
        """Build ``lhs = opd1``; with no ``lhs`` the operand stands alone."""
        return cls(lhs, OpType.COPY, opd1, None)

    @property
    def is_copy(self):
        return isinstance(self.op, OpType) and self.op is OpType.COPY

    def _symbol(self):
        if isinstance(self.op, RelOpType):
            return relop_symbol(self.op)
        if isinstance(self.op, LogOpType):
            return logop_symbol(self.op)
        return op_symbol(self.op)

    def render(self):
        first = self.opd1.operand_string()
        if self.is_copy:
            if self.lhs is None:
                return f"\t{first}\n"
            return f"\t{self.lhs.operand_string()} = {first}\n"
        target = self.lhs.operand_string()
        symbol = self._symbol()
        if self.opd2 is None:
            return f"\t{target} = {symbol}{first}\n"
        return f"\t{target} = {first} {symbol} {self.opd2.operand_string()}\n"


@dataclass(eq=False)
class IfGotoStatement(TacStatement):
    """A jump to a label taken when an operand holds a true value."""

    temp: TacOperand
    label: TacOperand

    def render(self):
        return (
            f"\tif({self.temp.operand_string()}) goto "
            f"{self.label.operand_string()}\n"
        )


@dataclass(eq=False)
class GotoStatement(TacStatement):
    """An unconditional jump to a label."""

    label: TacOperand

    def render(self):
        return f"\tgoto{self.label.operand_string()}\n"


@dataclass(eq=False)
class LabelStatement(TacStatement):
    """A label definition."""

    label: TacOperand

    def render(self):
        return f"{self.label.operand_string()}:\n"


@dataclass(eq=False)
class PrintStatement(TacStatement):
    """Output of a value of the given type."""

    var: TacOperand
    var_dt: DataType

    def render(self):
        return f"\twrite {self.var.operand_string()}\n"


@dataclass(eq=False)
class ReadStatement(TacStatement):
    """Input of a value of the given type into a variable."""

    var: TacOperand
    var_dt: DataType

    def render(self):
        return f"\tread {self.var.operand_string()}\n"


@dataclass(eq=False)
class CallStatement(TacStatement):
    """A function call, optionally storing its result."""

    func_name: str
    actual_args: Sequence[TacOperand] = ()
    res: Optional[TacOperand] = None

    def render(self):
        target = "" if self.res is None else f"{self.res.operand_string()} = "
        suffix = "" if self.func_name == "main" else "_"
        args = ", ".join(arg.operand_string() for arg in self.actual_args)
        return f"\t{target}{self.func_name}{suffix}({args})\n"


@dataclass(eq=False)
class ReturnStatement(TacStatement):
    """A return of the value held in a saved temporary."""

    return_temp: TacOperand

    def render(self):
        return f"\treturn {self.return_temp.operand_string()}\n"


@dataclass
class Code:
    """An ordered sequence of three-address code statements."""

    statements: List[TacStatement] = field(default_factory=list)

    def append_statement(self, statement):
        """Add one statement at the end."""
        self.statements.append(statement)

    def append_list(self, other):
        """Add the statements of another sequence, skipping empty entries."""
        if other is None:
            return
        self.statements.extend(s for s in other.statements if s is not None)

    def render(self):
        """Return the text of all statements in order."""
        return "".join(s.render() for s in self.statements if s is not None)

    def __iter__(self):
        return iter(self.statements)

    def __len__(self):
        return len(self.statements)