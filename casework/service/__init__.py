"""Pure business rules with no I/O."""
