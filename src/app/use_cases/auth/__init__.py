from .authenticate import Authenticate

__all__ = ["Authenticate"]
