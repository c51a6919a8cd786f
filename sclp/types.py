"""Enumerations shared by the intermediate and target code layers."""

from enum import IntEnum

__all__ = [
    "OpType",
    "LogOpType",
    "RelOpType",
    "DataType",
    "Reg",
    "Instruction",
    "AsmInstruction",
    "TacOperandKind",
    "convert_reltype_to_string",
    "convert_datatype_to_string",
    "convert_optype_to_string",
    "convert_logtype_to_string",
]


class OpType(IntEnum):
    """Arithmetic operators."""

    PLUS = 0
    MINUS = 1
    MULT = 2
    DIV = 3
    UMINUS = 4
    COPY = 5


class LogOpType(IntEnum):
    """Logical operators."""

    AND = 0
    OR = 1
    NOT = 2


class RelOpType(IntEnum):
    """Relational operators."""

    NOT_EQUAL = 0
    EQUAL = 1
    GREATER_THAN = 2
    GREATER_THAN_EQUAL = 3
    LESS_THAN = 4
    LESS_THAN_EQUAL = 5


class DataType(IntEnum):
    """Source language data types."""

    INTEGER = 0
    FLOAT = 1
    BOOL = 2
    STRING = 3
    VOID = 4


class Reg(IntEnum):
    """Machine registers."""

    V0 = 0
    T0 = 1
    T1 = 2
    T2 = 3
    T3 = 4
    T4 = 5
    T5 = 6
    T6 = 7
    T7 = 8
    T8 = 9
    T9 = 10
    S0 = 11
    S1 = 12
    S2 = 13
    S3 = 14
    S4 = 15
    S5 = 16
    S6 = 17
    S7 = 18
    A0 = 19
    ZERO = 20
    F2 = 21
    F4 = 22
    F6 = 23
    F8 = 24
    F10 = 25
    F12 = 26
    F14 = 27
    F16 = 28
    F18 = 29
    F20 = 30
    F22 = 31
    F24 = 32
    F26 = 33
    F28 = 34
    F30 = 35
    F0 = 36
    V1 = 37
    INVALID = 38
    GP = 39
    SP = 40
    FP = 41
    RA = 42


class Instruction(IntEnum):
    """Register transfer level instructions."""

    READ = 0
    WRITE = 1
    ILOAD = 2
    GOTO = 3
    STORE = 4
    ADD = 5
    SUB = 6
    MUL = 7
    DIV = 8
    ADD_D = 9
    SUB_D = 10
    MUL_D = 11
    DIV_D = 12
    SGT = 13
    SGE = 14
    SLT = 15
    SLE = 16
    SEQ = 17
    SNE = 18
    SGT_D = 19
    SGE_D = 20
    SLT_D = 21
    SLE_D = 22
    SEQ_D = 23
    SNE_D = 24
    BGTZ = 25
    LOAD = 26
    LOAD_D = 27
    STORE_D = 28
    ILOAD_D = 29
    LOAD_ADDR = 30
    UMINUS = 31
    UMINUS_D = 32
    MOVE = 33
    MOVE_D = 34
    MOVF = 35
    MOVT = 36
    BEQ = 37
    BNE = 38
    BLEZ = 39
    BCLT = 40
    BCLF = 41
    ADD_I = 42
    AND = 43
    OR = 44
    NOT = 45
    PUSH = 46
    POP = 47
    CALL = 48


class AsmInstruction(IntEnum):
    """Target assembly instructions."""

    PUSH = 0
    POP = 1
    ILOAD = 2
    ILOAD_D = 3
    LOAD = 4
    LOAD_D = 5
    LOAD_ADDR = 6
    STORE = 7
    STORE_D = 8
    AND = 9
    OR = 10
    NOT = 11
    MOVE = 12
    MOVE_D = 13
    MOVF = 14
    MOVT = 15
    BEQ = 16
    BNE = 17
    BGTZ = 18
    BGEZ = 19
    BLTZ = 20
    BLEZ = 21
    BCLT = 22
    BCLF = 23
    GOTO = 24
    CALL = 25
    RETURN = 26
    LABEL = 27
    ADD = 28
    SUB = 29
    MUL = 30
    DIV = 31
    ADD_I = 32
    UMINUS = 33
    ADD_D = 34
    SUB_D = 35
    MUL_D = 36
    DIV_D = 37
    UMINUS_D = 38
    SLT = 39
    SLE = 40
    SGT = 41
    SGE = 42
    SEQ = 43
    SNE = 44
    SEQ_D = 45
    SLT_D = 46
    SLE_D = 47
    SGT_D = 48
    SGE_D = 49
    SNE_D = 50
    WRITE = 51
    READ = 52
    NOP = 53
    LI = 54
    LI_D = 55
    LW = 56
    L_D = 57
    LA = 58
    LW_W = 59
    SW = 60
    S_D = 61
    XORI = 62
    MOV_D = 63
    J = 64
    JAL = 65
    NEG = 66
    NEG_D = 67
    C_EQ_D = 68
    C_LT_D = 69
    C_LE_D = 70
    SYSCALL = 71
    JR = 72


class TacOperandKind(IntEnum):
    """Kinds of three-address code operands."""

    VARIABLE = 0
    TEMPORARY = 1
    SAVED_TEMPORARY = 2
    LABEL = 3
    INT_CONST = 4
    DOUBLE_CONST = 5
    STRING_CONST = 6


_RELOP_NAMES = {
    RelOpType.NOT_EQUAL: "NE",
    RelOpType.EQUAL: "EQ",
    RelOpType.GREATER_THAN: "GT",
    RelOpType.GREATER_THAN_EQUAL: "GE",
    RelOpType.LESS_THAN: "LT",
    RelOpType.LESS_THAN_EQUAL: "LE",
}

_DATATYPE_NAMES = {
    DataType.INTEGER: "int",
    DataType.FLOAT: "float",
    DataType.BOOL: "bool",
    DataType.STRING: "string",
    DataType.VOID: "void",
}

_OP_NAMES = {
    OpType.PLUS: "Plus",
    OpType.MINUS: "Minus",
    OpType.MULT: "Mult",
    OpType.DIV: "Div",
}

_LOGOP_NAMES = {
    LogOpType.AND: "AND",
    LogOpType.OR: "OR",
}


def convert_reltype_to_string(op):
    """Return the short name of a relational operator, or "" if it has none."""
    return _RELOP_NAMES.get(op, "")


def convert_datatype_to_string(dt):
    """Return the source-language name of a data type, or "" if it has none."""
    return _DATATYPE_NAMES.get(dt, "")


def convert_optype_to_string(op):
    """Return the name of a binary arithmetic operator, or "" if it has none."""
    return _OP_NAMES.get(op, "")


def convert_logtype_to_string(op):
    """Return the name of a binary logical operator, or "" if it has none."""
    return _LOGOP_NAMES.get(op, "")