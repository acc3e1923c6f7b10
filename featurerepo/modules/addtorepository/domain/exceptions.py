"""Exceptions raised by the addtorepository module."""


class DescriptorResolutionError(RuntimeError):
    """Raised when a features descriptor or bundle location cannot be resolved."""
