"""Three-address code, function signatures and MIPS assembly statements for a small compiler."""

__version__ = "0.1.0"
__all__ = ["asm", "operands", "signatures", "tac", "types"]