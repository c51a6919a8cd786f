# sclp

Building blocks for the back end of a small compiler: the enumerations the
stages share, three-address code (TAC) operands and statements, function
signatures with their declaration checks, and MIPS (SPIM) assembly operands
and statements. Every statement renders itself as text.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `sclp.types`

Integer enumerations: `OpType`, `LogOpType`, `RelOpType`, `DataType`, `Reg`,
`Instruction` (register transfer level instructions), `AsmInstruction` and
`TacOperandKind`. The helpers `convert_reltype_to_string`,
`convert_datatype_to_string`, `convert_optype_to_string` and
`convert_logtype_to_string` return short names such as `"GE"`, `"float"`,
`"Mult"` or `"OR"`, and `""` for a value that has no name.

### `sclp.asm`

- `reg_to_string(reg)` gives a register's assembly name (`Reg.T0` → `"$t0"`),
  `""` for `Reg.INVALID`.
- `ins_to_string(ins)` gives an instruction's mnemonic followed by one space
  (`AsmInstruction.C_EQ_D` → `"c.eq.d "`).
- Operands: `RegisterOperand`, `MemOperand` (a named global, rendered
  `name_`, or an `offset(base)` location with `$fp` as the default base),
  `IntConstOperand`, `DoubleConstOperand` (two decimals), `LabelOperand`
  (`LabelN`) and `StringConstOperand` (`_str_N`). Each has
  `operand_string()`.
- Statements: `ComputeStatement`, `MoveStatement`, `CallStatement`,
  `GotoStatement`, `IfGotoStatement`, `JumpRegStatement`, `LabelStatement`,
  `SyscallStatement` and `ReturnStatement`. Each has `render()`, which
  returns its line of SPIM text.
- `ComputeStatement.from_rtl` and `MoveStatement.from_rtl` choose the
  assembly instruction for an `Instruction` and raise `ValueError` for one
  they do not handle. A logical NOT becomes `xori` with the immediate `1`;
  stores (`sw`, `s.d`) swap their two operands.

```python
from sclp.asm import ComputeStatement, MoveStatement, MemOperand, RegisterOperand
from sclp.types import Instruction, Reg

add = ComputeStatement.from_rtl(
    RegisterOperand(Reg.T0), RegisterOperand(Reg.T1), RegisterOperand(Reg.T2),
    Instruction.ADD,
)
print(add.render(), end="")    # 	add $t2, $t0, $t1

load = MoveStatement.from_rtl(MemOperand(var_name="x"), RegisterOperand(Reg.T0), Instruction.LOAD)
print(load.render(), end="")   # 	lw $t0, x_
```

### `sclp.operands`

TAC operands: `VariableOperand` (rendered `name_`), `TemporaryOperand`
(`tempN`), `SavedTemporaryOperand` (`stempN`), `LabelOperand` (`LabelN`),
`IntConstOperand`, `DoubleConstOperand` (two decimals) and
`StringConstOperand`. Operands compare by identity.

`TacContext` numbers them: `new_temporary`, `new_saved_temporary` (which also
records the saved temporary's type for the current function in
`function_stemps`) and `new_label`. `reset_function(function, saved_start)`
restarts the temporary counters for a new function; label numbers keep
counting across the whole program.

### `sclp.tac`

TAC statements: `AssignStatement` (built with `arithmetic`, `relational`,
`logical` or `copy`), `IfGotoStatement`, `GotoStatement`, `LabelStatement`,
`PrintStatement`, `ReadStatement`, `CallStatement` and `ReturnStatement`,
each with `render()`. `relop_symbol`, `op_symbol` and `logop_symbol` give the
operator symbols. `Code` holds a statement list, with `append_statement`,
`append_list` and `render`.

```python
from sclp.operands import IntConstOperand, TacContext, VariableOperand
from sclp.tac import AssignStatement, Code
from sclp.types import DataType, OpType

ctx = TacContext()
ctx.reset_function("f")
temp = ctx.new_temporary(DataType.INTEGER)
x = VariableOperand("x", DataType.INTEGER)

code = Code()
code.append_statement(AssignStatement.arithmetic(temp, OpType.PLUS, x, IntConstOperand(1)))
code.append_statement(AssignStatement.copy(x, temp))
print(code.render(), end="")
# 	temp0 = x_ + 1
# 	x_ = temp0
```

### `sclp.signatures`

`VarList` holds ordered `(DataType, name)` pairs. `FuncSignature` holds a
function's name, return type, parameters and locals; two signatures are equal
when name, return type and parameter types agree. `FunctionRegistry` builds
signatures (`make_signature`, which gives every non-void function a return
label from its `TacContext`) and records declarations and definitions with
`push_function`, raising `CompileError` when a name clashes with a global, a
function is declared or defined twice, defined before it is declared, or
redeclared with a different signature. Lookups (`local_var_list`,
`formal_var_list`, `is_void`, `return_type`) take the emitted name: the
function name with a trailing `_`, except for `main`.

```python
from sclp.signatures import CompileError, FunctionRegistry, VarList
from sclp.types import DataType

registry = FunctionRegistry()
params = VarList()
params.add_name_and_type("a", DataType.INTEGER)

registry.push_function(registry.make_signature(DataType.INTEGER, "f", params), True)
registry.return_type("f_")     # DataType.INTEGER

try:
    registry.push_function(registry.make_signature(DataType.INTEGER, "f", params), True)
except CompileError as err:
    print(err)                 # Function defined/declared earlier.
```

## What the package does not do

It is a set of data structures and renderers, not a compiler you can run.
There is no command, no lexer or parser and no abstract syntax tree, so
nothing here reads source programs. TAC statements are not lowered to
register transfer level code or to assembly, there is no register
allocator, and no complete `.spim` file is produced: function prologues and
epilogues, the data section and string tables are left to the caller, who
assembles output by rendering the statements themselves.