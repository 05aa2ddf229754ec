import logging

from regrad.op import Op

logger = logging.getLogger(__name__)


def topological_order(root):
    """Every node reachable from root, each exactly once, operands before consumers."""
    topo = []
    visited = set()
    stack = [(root, False)]  # (node, operands already pushed)

    while stack:
        node, expanded = stack.pop()
        if expanded:
            topo.append(node)
            continue
        if node in visited:
            continue
        visited.add(node)

        # post-order, left operand first
        stack.append((node, True))
        for child in reversed(node._prev):
            if child not in visited:
                stack.append((child, False))

    return topo


def _leaf_rule(node, grad):
    return ()


def _add_rule(node, grad):
    return grad, grad


def _mul_rule(node, grad):
    a, b = node._prev
    return grad * b._data, grad * a._data


def _neg_rule(node, grad):
    return (-grad,)


def _sub_rule(node, grad):
    return grad, -grad


def _relu_rule(node, grad):
    (a,) = node._prev
    return (grad if a._data > 0 else 0.0,)


_RULES = {
    Op.LEAF: _leaf_rule,
    Op.ADD: _add_rule,
    Op.MUL: _mul_rule,
    Op.NEG: _neg_rule,
    Op.SUB: _sub_rule,
    Op.RELU: _relu_rule,
}


def local_gradients(node, grad):
    """Chain-rule contribution of grad, arriving at node, to each of its operands, in operand order."""
    return _RULES[node._op](node, grad)


def backward(root):
    """Reverse-mode pass rooted at root.

    root is treated as the output: its gradient is set to 1.0 and any
    consumers it has further downstream are ignored. Each pass propagates
    only its own gradients, which are then added to what the ancestors
    already hold, so calling backward twice without zero_grad() doubles
    every ancestor's gradient.

    Returns the nodes in propagation order (root first).
    """
    order = list(reversed(topological_order(root)))
    logger.debug("backward from %r over %d nodes", root, len(order))

    grads = {root: 1.0}
    for node in order:
        grad = grads.get(node, 0.0)
        for operand, contribution in zip(node._prev, local_gradients(node, grad)):
            grads[operand] = grads.get(operand, 0.0) + contribution

    for node in order[1:]:
        node._grad += grads.get(node, 0.0)
    root._grad = 1.0

    return order


def zero_grad(root):
    """Reset the gradient of root and every ancestor to 0.0."""
    nodes = topological_order(root)
    for node in nodes:
        node._grad = 0.0
    logger.debug("zeroed %d gradients", len(nodes))
