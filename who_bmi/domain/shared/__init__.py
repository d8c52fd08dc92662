"""Shared kernel: value objects and domain exceptions."""
