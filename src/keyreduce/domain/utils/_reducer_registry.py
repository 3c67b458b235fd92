"""
Abstract interface for reducer registries.

This module defines the abstract base class for registry-backed reducer
dispatchers. The concrete registry, together with the built-in reducers,
lives in the infrastructure layer. This module exists in the domain layer to
define the contract without binding to any specific tensor backend.
"""

from typing import Any, Callable, Dict, Optional, TypeVar
from abc import ABC

from .._reduction import Reducer
from .._tensor import ITensor


T = TypeVar("T", bound=Callable[[Any, Any], Any])


class _ReducerRegistry(ABC):
    """
    Abstract base class for reducer registries.

    Design notes
    ------------
    - Reducers are identified by string names.
    - Registration wraps a binary combining function into a `Reducer`.
    - Instances act as dispatchers: constructing one resolves a reducer by
      name, and calling it reduces a tensor with that reducer.
    """

    REDUCERS: Dict[str, Reducer] = {}

    def __init__(self, reducer_name: str) -> None:
        """
        Construct a reducer dispatcher.

        Parameters
        ----------
        reducer_name:
            The string key identifying a registered reducer.
        """
        ...

    @classmethod
    def register_reducer(
        cls,
        name: str,
        *,
        identity: Optional[Any] = None,
        finalize: Optional[Callable[[Any, int], Any]] = None,
        promotes_to_float: bool = False,
        overwrite: bool = False,
    ) -> Callable[[T], T]:
        """
        Register a combining function under a given name.

        Returns
        -------
        Callable
            A decorator that registers the combining function.
        """
        ...

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """
        Return the names of all registered reducers.

        Returns
        -------
        tuple[str, ...]
            A sorted tuple of registered reducer names.
        """
        ...

    @classmethod
    def get(cls, name: str) -> Reducer:
        """
        Get a registered reducer by name.
        """
        ...

    def __call__(self, tensor: ITensor, **options) -> ITensor:
        """
        Reduce a tensor with the resolved reducer.

        Parameters
        ----------
        tensor:
            The tensor to reduce.
        **options:
            Reduction options (`axes`, `keep_dimensions`) forwarded to
            the engine.

        Returns
        -------
        ITensor
            The reduced tensor.
        """
        ...
