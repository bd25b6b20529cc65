"""Schemas shared between the task board server and its frontend codegen."""
