"""
Exceptions raised by the registry, module composition and bootstrap.

All of these signal a broken binding configuration. They are raised at the
point of resolution or startup and are not meant to be recovered from.
"""


class RegistryException(Exception):
    """Base class for dependency injection errors."""
    pass


class MissingBindingException(RegistryException):
    """Raised when resolving an identifier that has no binding."""
    pass


class CyclicDependencyException(RegistryException):
    """Raised when a binding's factory transitively depends on itself."""
    pass


class BindingResolutionException(RegistryException):
    """Raised when a factory fails while constructing its instance."""
    pass


class DuplicateBindingException(RegistryException):
    """Raised when one module declares the same identifier twice."""
    pass


class AlreadyStartedException(RegistryException):
    """Raised when bootstrap is invoked a second time."""
    pass


class NotStartedException(RegistryException):
    """Raised when the active registry is requested before bootstrap."""
    pass
