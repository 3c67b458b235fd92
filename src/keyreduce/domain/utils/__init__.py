from ._shape import (
    index_from_location,
    location_from_index,
    size_of_shape,
    squeeze_shape,
    strides_of_shape,
)

__all__ = [
    index_from_location.__name__,
    location_from_index.__name__,
    size_of_shape.__name__,
    squeeze_shape.__name__,
    strides_of_shape.__name__,
]
