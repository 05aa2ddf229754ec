import logging

from regrad.op import Op
from regrad.value import Value, add, multiply, negate, subtract, relu
from regrad.engine import backward, topological_order, zero_grad
from regrad.sgd import SGD
from regrad.linear import Linear

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Op', 'Value', 'add', 'multiply', 'negate', 'subtract', 'relu',
    'backward', 'topological_order', 'zero_grad', 'SGD', 'Linear',
]
