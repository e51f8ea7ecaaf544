import numpy as np

from fft import Vec2


class SignalGenerator:
    def __init__(self, seed=None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def random_point(self):
        r = self.rng.uniform(0.0, 2.0 * np.pi)
        return Vec2(float(np.cos(r)), float(np.sin(r)))

    def generate(self, size=16):
        """Return `size` random points on the unit circle."""
        return [self.random_point() for _ in range(size)]

    def reset(self):
        self.rng = np.random.default_rng(self.seed)
