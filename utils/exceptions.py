"""
Custom exceptions for the Adaptive Pay models.
"""

class AdaptivePayError(Exception):
    """Base exception for Adaptive Pay errors."""
    pass

class UnknownAttributeError(AdaptivePayError, AttributeError):
    """
    Raised when an options key has no writable attribute on the model.

    Args:
        key (str): The offending option name.
        model (str): Name of the model class being built.
    """
    def __init__(self, key: str, model: str = None):
        self.key = key
        self.model = model
        super().__init__(f"{model or 'Model'} has no writable attribute '{key}'", name=key)
