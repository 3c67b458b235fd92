"""
CPU kernels for KeyReduce.

- ``reduce_cpu``   : generic axis-wise reduction engine
- ``squeeze_cpu``  : removal of all size-1 axes
- ``unary_cpu``    : elementwise abs/exp/log/sqrt/pow
- ``_validation``  : reduction parameter checks
"""
