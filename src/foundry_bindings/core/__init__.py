"""Core output handling."""

from foundry_bindings.core.tfvars import load_tfvars, write_tfvars

__all__ = ["load_tfvars", "write_tfvars"]
