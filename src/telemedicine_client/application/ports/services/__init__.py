from .error_handler import ProviderErrorHandler

__all__ = ["ProviderErrorHandler"]
