import logging

logger = logging.getLogger(__name__)

DEFAULT_LR = 0.01


class SGD():
    def __init__(self, params, lr=DEFAULT_LR):
        self.params = list(params)
        self.lr = lr

    def zero_grad(self):
        for p in self.params:
            p.zero_grad()

    def step(self):
        self.params = [p.update(-self.lr) for p in self.params]
        logger.debug("sgd step lr=%s over %d params", self.lr, len(self.params))
        return self.params
