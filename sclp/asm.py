"""Assembly operands and statements with their textual rendering."""

from sclp.types import AsmInstruction, Instruction, Reg

__all__ = [
    "reg_to_string",
    "ins_to_string",
    "AsmOperand",
    "DoubleConstOperand",
    "IntConstOperand",
    "LabelOperand",
    "MemOperand",
    "RegisterOperand",
    "StringConstOperand",
    "AsmStatement",
    "ComputeStatement",
    "CallStatement",
    "GotoStatement",
    "IfGotoStatement",
    "JumpRegStatement",
    "LabelStatement",
    "MoveStatement",
    "SyscallStatement",
    "ReturnStatement",
]


def reg_to_string(reg):
    """Return the assembly name of a register, or "" for an invalid one."""
    try:
        reg = Reg(reg)
    except ValueError:
        return ""
    if reg is Reg.INVALID:
        return ""
    return "$" + reg.name.lower()


_A = AsmInstruction

_MNEMONICS = {
    _A.PUSH: "push",
    _A.POP: "pop",
    _A.ILOAD: "iLoad",
    _A.ILOAD_D: "iLoad.d",
    _A.LOAD: "load",
    _A.LOAD_D: "load.d",
    _A.LOAD_ADDR: "load_addr",
    _A.STORE: "store",
    _A.STORE_D: "store.d",
    _A.AND: "and",
    _A.OR: "or",
    _A.NOT: "not",
    _A.MOVE: "move",
    _A.MOVE_D: "mov.d",
    _A.MOVF: "movf",
    _A.MOVT: "movt",
    _A.BEQ: "beq",
    _A.BNE: "bne",
    _A.BGTZ: "bgtz",
    _A.BGEZ: "bgez",
    _A.BLTZ: "bltz",
    _A.BLEZ: "blez",
    _A.BCLT: "bclt",
    _A.BCLF: "bclf",
    _A.GOTO: "goto",
    _A.CALL: "call",
    _A.RETURN: "return",
    _A.LABEL: "label",
    _A.ADD: "add",
    _A.SUB: "sub",
    _A.MUL: "mul",
    _A.DIV: "div",
    _A.ADD_I: "addi",
    _A.UMINUS: "neg",
    _A.ADD_D: "add.d",
    _A.SUB_D: "sub.d",
    _A.MUL_D: "mul.d",
    _A.DIV_D: "div.d",
    _A.UMINUS_D: "neg.d",
    _A.SLT: "slt",
    _A.SLE: "sle",
    _A.SGT: "sgt",
    _A.SGE: "sge",
    _A.SEQ: "seq",
    _A.SNE: "sne",
    _A.SEQ_D: "seq.d",
    _A.SLT_D: "slt.d",
    _A.SLE_D: "sle.d",
    _A.SGT_D: "sgt.d",
    _A.SGE_D: "sge.d",
    _A.SNE_D: "sne.d",
    _A.WRITE: "write",
    _A.READ: "read",
    _A.NOP: "nop",
    _A.LI: "li",
    _A.LI_D: "li.d",
    _A.LW: "lw",
    _A.L_D: "l.d",
    _A.LA: "la",
    _A.LW_W: "lw.w",
    _A.SW: "sw",
    _A.S_D: "s.d",
    _A.XORI: "xori",
    _A.MOV_D: "mov.d",
    _A.J: "j",
    _A.JAL: "jal",
    _A.NEG: "neg",
    _A.NEG_D: "neg.d",
    _A.C_EQ_D: "c.eq.d",
    _A.C_LT_D: "c.lt.d",
    _A.C_LE_D: "c.le.d",
    _A.SYSCALL: "syscall",
    _A.JR: "jr",
}


def ins_to_string(ins):
    """Return the mnemonic of an instruction followed by a single space."""
    return _MNEMONICS.get(ins, "") + " "


class AsmOperand:
    """Base class of assembly operands."""

    def operand_string(self):
        return ""

    def __repr__(self):
        return f"{type(self).__name__}({self.operand_string()!r})"


class DoubleConstOperand(AsmOperand):
    """A floating point immediate, rendered with two decimals."""

    def __init__(self, value):
        self.value = float(value)

    def operand_string(self):
        return f"{self.value:.2f}"


class IntConstOperand(AsmOperand):
    """An integer immediate."""

    def __init__(self, value):
        self.value = int(value)

    def operand_string(self):
        return str(self.value)


class LabelOperand(AsmOperand):
    """A numbered code label."""

    def __init__(self, label_number):
        self.label_number = label_number

    def operand_string(self):
        return f"Label{self.label_number}"


class MemOperand(AsmOperand):
    """A memory location: a named global or an offset from a base register."""

    def __init__(self, offset=0, base_reg=Reg.FP, var_name=""):
        self.offset = offset
        self.base_reg = base_reg
        self.var_name = var_name

    def operand_string(self):
        if self.var_name:
            return self.var_name + "_"
        return f"{self.offset}({reg_to_string(self.base_reg)})"


class RegisterOperand(AsmOperand):
    """A machine register."""

    def __init__(self, reg_num):
        self.reg_num = reg_num

    def operand_string(self):
        return reg_to_string(self.reg_num)


class StringConstOperand(AsmOperand):
    """A reference to a numbered string constant in the data section."""

    def __init__(self, string_number):
        self.string_number = string_number

    def operand_string(self):
        return f"_str_{self.string_number}"


class AsmStatement:
    """Base class of assembly statements."""

    def __init__(self, asm_ins=None, first=None, second=None, res=None):
        self.asm_ins = asm_ins
        self.first = first
        self.second = second
        self.res = res

    def render(self):
        return ""

    def __str__(self):
        return self.render()


_R = Instruction

_COMPUTE_FROM_RTL = {
    _R.ADD_D: _A.ADD_D,
    _R.ADD: _A.ADD,
    _R.SUB_D: _A.SUB_D,
    _R.SUB: _A.SUB,
    _R.MUL_D: _A.MUL_D,
    _R.MUL: _A.MUL,
    _R.DIV_D: _A.DIV_D,
    _R.DIV: _A.DIV,
    _R.UMINUS_D: _A.UMINUS_D,
    _R.UMINUS: _A.UMINUS,
    _R.SNE: _A.SNE,
    _R.SEQ_D: _A.C_EQ_D,
    _R.SEQ: _A.SEQ,
    _R.MOVE: _A.MOVE,
    _R.MOVT: _A.MOVT,
    _R.MOVF: _A.MOVF,
    _R.SGT: _A.SGT,
    _R.SLE_D: _A.C_LE_D,
    _R.SGE: _A.SGE,
    _R.SLT_D: _A.C_LT_D,
    _R.SLT: _A.SLT,
    _R.SLE: _A.SLE,
    _R.AND: _A.AND,
    _R.OR: _A.OR,
    _R.NOT: _A.XORI,
}

_MOVE_FROM_RTL = {
    _R.LOAD_D: _A.L_D,
    _R.LOAD: _A.LW,
    _R.STORE_D: _A.S_D,
    _R.STORE: _A.SW,
    _R.ILOAD: _A.LI,
    _R.ILOAD_D: _A.LI_D,
    _R.LOAD_ADDR: _A.LA,
    _R.MOVE_D: _A.MOVE_D,
    _R.MOVE: _A.MOVE,
}


class ComputeStatement(AsmStatement):
    """An arithmetic, comparison or logical instruction."""

    def __init__(self, first, second, res, asm_ins):
        super().__init__(asm_ins, first, second, res)

    @classmethod
    def from_rtl(cls, first, second, res, rtl_ins):
        """Build the statement that implements an RTL compute instruction."""
        try:
            asm_ins = _COMPUTE_FROM_RTL[rtl_ins]
        except KeyError:
            raise ValueError(f"no compute instruction for {rtl_ins!r}") from None
        if rtl_ins == Instruction.NOT:
            second = IntConstOperand(1)
        return cls(first, second, res, asm_ins)

    def render(self):
        parts = ["\t", ins_to_string(self.asm_ins)]
        if self.res is not None:
            parts.append(self.res.operand_string() + ", ")
        parts.append(self.first.operand_string())
        if self.second is not None:
            parts.append(", " + self.second.operand_string())
        parts.append("\n")
        return "".join(parts)


class CallStatement(AsmStatement):
    """A jump-and-link to a function."""

    def __init__(self, func_name):
        super().__init__(AsmInstruction.JAL)
        self.func_name = func_name

    def render(self):
        suffix = "" if self.func_name == "main" else "_"
        return f"\t{ins_to_string(self.asm_ins)} {self.func_name}{suffix}\n"


class GotoStatement(AsmStatement):
    """An unconditional jump to a label."""

    def __init__(self, label):
        super().__init__(AsmInstruction.J)
        self.label = label

    def render(self):
        return f"\tj {self.label.operand_string()}\n"


class IfGotoStatement(AsmStatement):
    """A branch taken when a register holds a positive value."""

    def __init__(self, reg, label):
        super().__init__(AsmInstruction.BGTZ)
        self.reg = reg
        self.label = label

    def render(self):
        return f"\tbgtz{self.reg.operand_string()}, {self.label.operand_string()}\n"


class JumpRegStatement(AsmStatement):
    """A jump to the address held in a register."""

    def __init__(self, reg):
        super().__init__(AsmInstruction.JR)
        self.reg = reg

    def render(self):
        return f"\tjr{self.reg.operand_string()}\n"


class LabelStatement(AsmStatement):
    """A label definition, given as an operand or as a ready string."""

    def __init__(self, label):
        super().__init__(AsmInstruction.LABEL)
        if isinstance(label, AsmOperand):
            self.label = label
            self.label_str = label.operand_string()
        else:
            self.label = None
            self.label_str = str(label)

    def render(self):
        return f"\n {self.label_str}:\n"


class MoveStatement(AsmStatement):
    """A load, store, immediate load or register move."""

    def __init__(self, first, res, asm_ins):
        if asm_ins in (AsmInstruction.S_D, AsmInstruction.SW):
            first, res = res, first
        super().__init__(asm_ins, first, None, res)

    @classmethod
    def from_rtl(cls, first, res, rtl_ins):
        """Build the statement that implements an RTL move instruction."""
        try:
            asm_ins = _MOVE_FROM_RTL[rtl_ins]
        except KeyError:
            raise ValueError(f"no move instruction for {rtl_ins!r}") from None
        return cls(first, res, asm_ins)

    def render(self):
        return (
            f"\t{ins_to_string(self.asm_ins)}{self.res.operand_string()}, "
            f"{self.first.operand_string()}\n"
        )


class SyscallStatement(AsmStatement):
    """A system call."""

    def __init__(self):
        super().__init__(AsmInstruction.SYSCALL)

    def render(self):
        return "\tsyscall\n"


class ReturnStatement(AsmStatement):
    """A jump to the epilogue of the current function."""

    def __init__(self, curr_func):
        super().__init__(AsmInstruction.J)
        self.curr_func = curr_func

    def render(self):
        return f"\tj epilogue_{self.curr_func}\n"