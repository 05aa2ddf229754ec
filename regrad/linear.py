import numpy as np

from regrad.value import Value


class Linear():
    """Fully connected layer over scalar Values: y_j = sum_i w_ij * x_i + b_j."""

    def __init__(self, ninput_features, noutput_features, activation=True, rng=None):
        rng = rng if rng is not None else np.random.default_rng()
        n = ninput_features + noutput_features
        init = (rng.random((ninput_features, noutput_features)) - 0.5) * np.sqrt(12 / n)
        self.ninput_features = ninput_features
        self.noutput_features = noutput_features
        self.activation = activation
        self.weight = [[Value(w) for w in row] for row in init]
        self.bias = [Value(0.0) for _ in range(noutput_features)]

    def __call__(self, xs):
        if len(xs) != self.ninput_features:
            raise ValueError(f"expected {self.ninput_features} inputs, got {len(xs)}")
        out = []
        for j in range(self.noutput_features):
            acc = self.bias[j]
            for i, x in enumerate(xs):
                acc = acc + self.weight[i][j] * x
            out.append(acc.relu() if self.activation else acc)
        return out

    def parameters(self):
        return [w for row in self.weight for w in row] + list(self.bias)

    def load(self, params):
        """Rebind weights and biases, in parameters() order, e.g. after SGD.step()."""
        params = list(params)
        nweights = self.ninput_features * self.noutput_features
        if len(params) != nweights + self.noutput_features:
            raise ValueError("parameter count doesn't match layer shape")
        self.weight = [params[i * self.noutput_features:(i + 1) * self.noutput_features]
                       for i in range(self.ninput_features)]
        self.bias = params[nweights:]
