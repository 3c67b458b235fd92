from .memory import TensorMixinMemory
from .reduction import TensorMixinReduction
from .unary import TensorMixinUnary

__all__ = [
    TensorMixinMemory.__name__,
    TensorMixinReduction.__name__,
    TensorMixinUnary.__name__,
]
