import math
import numbers
from collections import namedtuple

import numpy as np


Vec2 = namedtuple('Vec2', ['real', 'imag'])


class FFTLengthError(ValueError):
    pass


class EmptySequenceError(FFTLengthError):
    pass


class InvalidLengthError(FFTLengthError):
    pass


def multiply(a, b):
    return Vec2(a.real * b.real - a.imag * b.imag,
                a.real * b.imag + b.real * a.imag)


def add(a, b):
    return Vec2(a.real + b.real, a.imag + b.imag)


def negate(a):
    return Vec2(-a.real, -a.imag)


def scale(a, c):
    return Vec2(a.real * c, a.imag * c)


def to_vec2(value):
    if isinstance(value, Vec2):
        return value
    if isinstance(value, (complex, np.complexfloating)):
        return Vec2(float(value.real), float(value.imag))
    if isinstance(value, (numbers.Real, np.integer, np.floating)):
        return Vec2(float(value), 0.0)
    if isinstance(value, (str, bytes)):
        raise TypeError(f"Cannot convert {type(value).__name__} to a complex value: {value!r}")
    real, imag = value
    return Vec2(float(real), float(imag))


def as_sequence(values):
    return [to_vec2(v) for v in values]


def to_numpy(sequence):
    return np.array([complex(v.real, v.imag) for v in sequence], dtype=np.complex128)


def from_numpy(array):
    return [Vec2(float(v.real), float(v.imag)) for v in np.asarray(array, dtype=np.complex128)]


class CustomFFT:
    """Recursive radix-2 decimation-in-time FFT over sequences of Vec2.

    The forward transform uses a positive angular step (2*pi/n) and is not
    scaled. The inverse uses -2*pi/n and divides the result by n once.
    """

    @staticmethod
    def check_length(N):
        if N == 0:
            raise EmptySequenceError("FFT input is empty")
        if N & (N - 1) != 0:
            raise InvalidLengthError(f"FFT size must be power of 2. Given: {N}")

    @staticmethod
    def _butterfly(P, sign):
        N = len(P)
        if N == 1:
            return list(P)

        Y_even = CustomFFT._butterfly(P[0::2], sign)
        Y_odd = CustomFFT._butterfly(P[1::2], sign)

        theta = sign * 2.0 * math.pi / N
        half = N // 2
        Y = [None] * N
        for j in range(half):
            omega = Vec2(math.cos(theta * j), math.sin(theta * j))
            t = multiply(omega, Y_odd[j])
            Y[j] = add(Y_even[j], t)
            Y[j + half] = add(Y_even[j], negate(t))
        return Y

    @staticmethod
    def fft(x):
        P = as_sequence(x)
        CustomFFT.check_length(len(P))
        return CustomFFT._butterfly(P, 1.0)

    @staticmethod
    def unnormalized_inverse_fft(X):
        P = as_sequence(X)
        CustomFFT.check_length(len(P))
        return CustomFFT._butterfly(P, -1.0)

    @staticmethod
    def inverse_fft(X):
        Y = CustomFFT.unnormalized_inverse_fft(X)
        N = len(Y)
        return [Vec2(v.real / N, v.imag / N) for v in Y]
