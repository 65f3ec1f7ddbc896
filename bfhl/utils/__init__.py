"""
Shared utilities for the BFHL service.

Modules:
- config: Environment-backed Settings
- validation: Operand validation for each operation
"""
