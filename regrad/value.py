import numbers

from regrad import engine
from regrad.op import Op


class Value():
    """A scalar node in the computation graph.

    Operands are shared, never copied, so a node can feed any number of
    downstream expressions. The forward value is fixed at construction.
    """

    def __init__(self, data, op=Op.LEAF, children=(), label=None):
        self._data = float(data)
        self._grad = 0.0
        self._op = op
        self._prev = tuple(children)
        self.label = label

    @classmethod
    def from_number(cls, number):
        return cls(number)

    def data(self):
        return self._data

    def gradient(self):
        return self._grad

    @property
    def op(self):
        return self._op

    def operands(self):
        return self._prev

    def backward(self):
        """Seed this node with 1.0 and propagate to every ancestor.

        Gradients accumulate: a second call without zero_grad() adds this
        pass's contributions on top, doubling every ancestor's gradient.
        """
        engine.backward(self)

    def zero_grad(self):
        self._grad = 0.0

    def update(self, factor):
        return Value(self._data + factor * self._grad, label=self.label)

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return multiply(other, self)

    def __neg__(self):
        return negate(self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return subtract(other, self)

    def relu(self):
        return relu(self)

    def __repr__(self):
        if self.label is not None:
            return f"Value(label={self.label!r}, data={self._data}, grad={self._grad})"
        return f"Value(data={self._data}, grad={self._grad})"


def _is_operand(x):
    # bool is a Real too
    return isinstance(x, (Value, numbers.Real)) and not isinstance(x, bool)


def _to_value(x):
    if isinstance(x, Value):
        return x
    if not _is_operand(x):
        raise TypeError(f"unsupported operand type for Value: {type(x).__name__}")
    return Value(x)


def add(a, b):
    a, b = _to_value(a), _to_value(b)
    return Value(a._data + b._data, op=Op.ADD, children=(a, b))


def multiply(a, b):
    a, b = _to_value(a), _to_value(b)
    return Value(a._data * b._data, op=Op.MUL, children=(a, b))


def negate(a):
    a = _to_value(a)
    return Value(-a._data, op=Op.NEG, children=(a,))


def subtract(a, b):
    a, b = _to_value(a), _to_value(b)
    return Value(a._data - b._data, op=Op.SUB, children=(a, b))


def relu(a):
    a = _to_value(a)
    return Value(a._data if a._data > 0 else 0.0, op=Op.RELU, children=(a,))
