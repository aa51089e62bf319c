"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""


class RegistryError(AdapterError):
    """The host application registered resource types inconsistently."""
