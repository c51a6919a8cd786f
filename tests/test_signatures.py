import pytest

from sclp.signatures import CompileError, FuncSignature, FunctionRegistry, VarList
from sclp.types import DataType


def _params(*pairs):
    params = VarList()
    for name, dt in pairs:
        params.add_name_and_type(name, dt)
    return params


def test_add_name_defaults_to_integer():
    vl = VarList()
    vl.add_name("x")
    assert vl.entries == [(DataType.INTEGER, "x")]


def test_set_type_to_all_keeps_names_and_order():
    vl = VarList()
    vl.add_name("a")
    vl.add_name_and_type("b", DataType.BOOL)
    vl.set_type_to_all(DataType.FLOAT)
    assert vl.entries == [(DataType.FLOAT, "a"), (DataType.FLOAT, "b")]


def test_append_another_concatenates():
    first = _params(("a", DataType.INTEGER))
    second = _params(("b", DataType.FLOAT), ("c", DataType.STRING))
    first.append_another(second)
    assert first.names == ["a", "b", "c"]
    assert len(second) == 2


def test_signature_duplicate_parameter_raises():
    params = _params(("a", DataType.INTEGER), ("a", DataType.FLOAT))
    with pytest.raises(CompileError, match="declared twice"):
        FuncSignature(DataType.INTEGER, "f", params)


def test_signature_equality_ignores_parameter_names():
    a = FuncSignature(DataType.INTEGER, "f", _params(("x", DataType.FLOAT)))
    b = FuncSignature(DataType.INTEGER, "f", _params(("y", DataType.FLOAT)))
    c = FuncSignature(DataType.INTEGER, "f", _params(("y", DataType.INTEGER)))
    assert a == b
    assert not a == c


def test_signature_params_map():
    sig = FuncSignature(DataType.VOID, "g", _params(("x", DataType.FLOAT), ("y", DataType.BOOL)))
    assert sig.params == {"x": DataType.FLOAT, "y": DataType.BOOL}
    assert sig.param_types_in_order == [DataType.FLOAT, DataType.BOOL]


def test_return_label_only_for_non_void_and_reused():
    reg = FunctionRegistry()
    reg.make_signature(DataType.VOID, "p")
    assert "p" not in reg.return_labels
    reg.make_signature(DataType.INTEGER, "f")
    label = reg.return_labels["f"]
    reg.make_signature(DataType.INTEGER, "f")
    assert reg.return_labels["f"] is label
    reg.make_signature(DataType.FLOAT, "g")
    assert reg.return_labels["g"].number == label.number + 1


def test_push_and_lookup_uses_mangled_names():
    reg = FunctionRegistry()
    sig = reg.make_signature(DataType.FLOAT, "f", _params(("x", DataType.INTEGER)))
    sig.local_var_list.add_name_and_type("y", DataType.BOOL)
    reg.push_function(sig, False)
    assert reg.return_type("f_") is DataType.FLOAT
    assert not reg.is_void("f_")
    assert reg.formal_var_list("f_") == [(DataType.INTEGER, "x")]
    assert reg.local_var_list("f_") == [(DataType.BOOL, "y")]
    with pytest.raises(KeyError):
        reg.return_type("f")


def test_main_is_not_mangled():
    reg = FunctionRegistry()
    reg.push_function(reg.make_signature(DataType.VOID, "main"), False)
    assert reg.is_void("main")


def test_declaration_then_definition_is_accepted():
    reg = FunctionRegistry()
    reg.push_function(reg.make_signature(DataType.INTEGER, "f"), True)
    reg.push_function(reg.make_signature(DataType.INTEGER, "f"), False)
    assert len(reg.functions) == 2


def test_global_name_clash():
    reg = FunctionRegistry(global_symtab={"f": DataType.INTEGER})
    with pytest.raises(CompileError, match="coincides with a global variable"):
        reg.push_function(reg.make_signature(DataType.VOID, "f"), False)


@pytest.mark.parametrize("is_decl", [True, False])
def test_repeated_declaration_or_definition(is_decl):
    reg = FunctionRegistry()
    reg.push_function(reg.make_signature(DataType.VOID, "f"), is_decl)
    with pytest.raises(CompileError, match="defined/declared earlier"):
        reg.push_function(reg.make_signature(DataType.VOID, "f"), is_decl)


def test_definition_before_declaration():
    reg = FunctionRegistry()
    reg.push_function(reg.make_signature(DataType.VOID, "f"), False)
    with pytest.raises(CompileError, match="defined before declaration"):
        reg.push_function(reg.make_signature(DataType.VOID, "f"), True)


def test_overloading_rejected():
    reg = FunctionRegistry()
    reg.push_function(reg.make_signature(DataType.INTEGER, "f", _params(("a", DataType.INTEGER))), True)
    with pytest.raises(CompileError, match="can't be overloaded"):
        reg.push_function(reg.make_signature(DataType.INTEGER, "f", _params(("a", DataType.FLOAT))), False)