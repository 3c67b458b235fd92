from ._base import TensorMixinUnary

__all__ = [
    TensorMixinUnary.__name__,
]
