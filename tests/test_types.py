import pytest

from sclp.types import (
    AsmInstruction,
    DataType,
    Instruction,
    LogOpType,
    OpType,
    Reg,
    RelOpType,
    TacOperandKind,
    convert_datatype_to_string,
    convert_logtype_to_string,
    convert_optype_to_string,
    convert_reltype_to_string,
)


@pytest.mark.parametrize(
    "op, expected",
    [
        (RelOpType.NOT_EQUAL, "NE"),
        (RelOpType.EQUAL, "EQ"),
        (RelOpType.GREATER_THAN, "GT"),
        (RelOpType.GREATER_THAN_EQUAL, "GE"),
        (RelOpType.LESS_THAN, "LT"),
        (RelOpType.LESS_THAN_EQUAL, "LE"),
    ],
)
def test_reltype_names(op, expected):
    assert convert_reltype_to_string(op) == expected


@pytest.mark.parametrize(
    "dt, expected",
    [
        (DataType.INTEGER, "int"),
        (DataType.FLOAT, "float"),
        (DataType.BOOL, "bool"),
        (DataType.STRING, "string"),
        (DataType.VOID, "void"),
    ],
)
def test_datatype_names(dt, expected):
    assert convert_datatype_to_string(dt) == expected


@pytest.mark.parametrize(
    "op, expected",
    [
        (OpType.PLUS, "Plus"),
        (OpType.MINUS, "Minus"),
        (OpType.MULT, "Mult"),
        (OpType.DIV, "Div"),
    ],
)
def test_optype_names(op, expected):
    assert convert_optype_to_string(op) == expected


def test_optype_without_name_is_empty():
    assert convert_optype_to_string(OpType.UMINUS) == ""
    assert convert_optype_to_string(OpType.COPY) == ""


def test_logtype_names():
    assert convert_logtype_to_string(LogOpType.AND) == "AND"
    assert convert_logtype_to_string(LogOpType.OR) == "OR"
    assert convert_logtype_to_string(LogOpType.NOT) == ""


def test_plain_ints_are_accepted():
    assert convert_reltype_to_string(1) == "EQ"
    assert convert_datatype_to_string(4) == "void"
    assert convert_optype_to_string(0) == "Plus"
    assert convert_logtype_to_string(1) == "OR"


def test_out_of_range_values_give_empty_string():
    assert convert_reltype_to_string(99) == ""
    assert convert_datatype_to_string(-1) == ""


@pytest.mark.parametrize(
    "enum",
    [OpType, LogOpType, RelOpType, DataType, Reg,
     Instruction, AsmInstruction, TacOperandKind],
)
def test_enums_are_contiguous_from_zero(enum):
    assert [enum(value) for value in range(len(enum))] == list(enum)
    with pytest.raises(ValueError):
        enum(len(enum))


def test_conversions_agree_on_values_and_members():
    for dt in DataType:
        assert convert_datatype_to_string(dt.value) == convert_datatype_to_string(dt)
    for op in RelOpType:
        assert convert_reltype_to_string(op.value) == convert_reltype_to_string(op)
    assert convert_datatype_to_string(len(DataType)) == ""
    assert convert_reltype_to_string(len(RelOpType)) == ""


def test_register_order():
    assert Reg(0) is Reg.V0
    assert Reg(Reg.V1.value + 1) is Reg.INVALID
    assert Reg(len(Reg) - 1) is Reg.RA