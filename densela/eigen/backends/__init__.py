"""Eigen solver backends."""

from densela.eigen.backends.jacobi import JacobiBackend

__all__ = ["JacobiBackend"]
