import numpy as np
import pytest

from regrad import SGD, Linear, Value


def squared_loss(layer, xs, ys):
    total = Value(0.0)
    for x, y in zip(xs, ys):
        (pred,) = layer([x])
        diff = pred - y
        total = total + diff * diff
    return total


def test_sgd_step_uses_gradients():
    a = Value(1.0)
    b = Value(2.0)
    (a * b).backward()
    optimizer = SGD([a, b], lr=0.5)
    new_a, new_b = optimizer.step()
    assert new_a.data() == pytest.approx(1.0 - 0.5 * 2.0)
    assert new_b.data() == pytest.approx(2.0 - 0.5 * 1.0)
    assert optimizer.params == [new_a, new_b]
    assert a.data() == 1.0


def test_sgd_zero_grad():
    a = Value(3.0)
    (a * a).backward()
    optimizer = SGD([a])
    optimizer.zero_grad()
    assert a.gradient() == 0.0


def test_linear_shapes():
    layer = Linear(3, 2, rng=np.random.default_rng(0))
    out = layer([1.0, -1.0, 0.5])
    assert len(out) == 2
    assert all(o.data() >= 0.0 for o in out)
    assert len(layer.parameters()) == 3 * 2 + 2


def test_linear_rejects_wrong_width():
    layer = Linear(3, 2)
    with pytest.raises(ValueError):
        layer([1.0])


def test_linear_load_round_trips_parameters():
    layer = Linear(2, 3, rng=np.random.default_rng(1))
    params = layer.parameters()
    layer.load(params)
    assert layer.parameters() == params


def test_linear_fit_reduces_loss():
    xs = [1.0, 3.0]
    ys = [3.0, 7.0]
    layer = Linear(1, 1, activation=False, rng=np.random.default_rng(1337))
    optimizer = SGD(layer.parameters(), lr=0.05)

    first_loss = None
    for epoch in range(1000):
        loss = squared_loss(layer, xs, ys)
        if first_loss is None:
            first_loss = loss.data()
        optimizer.zero_grad()
        loss.backward()
        layer.load(optimizer.step())

    final_loss = squared_loss(layer, xs, ys).data()
    assert final_loss < first_loss
    assert final_loss < 1e-3
    w = layer.weight[0][0]
    assert w.data() == pytest.approx(2.0, abs=0.05)
    assert layer.bias[0].data() == pytest.approx(1.0, abs=0.1)


def test_linear_load_rejects_wrong_count():
    layer = Linear(2, 3, rng=np.random.default_rng(1))
    with pytest.raises(ValueError):
        layer.load(layer.parameters()[:-1])
