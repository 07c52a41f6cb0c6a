"""Error types raised by the kernel."""


class KernelError(ValueError):
    """Base class for kernel errors."""


class DivisionByZero(KernelError, ZeroDivisionError):
    """Raised when a rational would get a zero denominator."""


class CorruptData(KernelError):
    """Raised for malformed serialized input. Nothing is partially applied."""
