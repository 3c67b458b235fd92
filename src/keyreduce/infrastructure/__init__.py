"""
Infrastructure layer of KeyReduce: the NumPy-backed `Tensor`, CPU kernels and
the reduction library.
"""
