import numpy as np
import pytest

from fft import InvalidLengthError, Vec2, to_numpy
from fft_demo import FFTDemo, format_sequence, format_value, main
from signal_generator import SignalGenerator


def test_generator_unit_magnitude():
    seq = SignalGenerator(seed=1).generate(64)
    assert len(seq) == 64
    np.testing.assert_allclose(np.abs(to_numpy(seq)), 1.0, atol=1e-12)


def test_generator_default_size():
    assert len(SignalGenerator(seed=0).generate()) == 16


def test_generator_seeded_is_reproducible():
    a = SignalGenerator(seed=42).generate(16)
    b = SignalGenerator(seed=42).generate(16)
    assert a == b


def test_generator_reset():
    gen = SignalGenerator(seed=5)
    first = gen.generate(4)
    assert gen.generate(4) != first
    gen.reset()
    assert gen.generate(4) == first


def test_format_sequence():
    assert format_value(Vec2(1.0, 0.0)) == "(1, 0)"
    assert format_sequence([Vec2(1.0, 0.0), Vec2(0.5, -0.25)]) == "(1, 0), (0.5, -0.25)"
    assert format_sequence([]) == ""


def test_demo_run_prints_stages(capsys):
    original, transformed, recovered = FFTDemo(size=8, seed=3).run()
    out = capsys.readouterr().out

    lines = out.splitlines()
    assert lines[0] == "Input:"
    assert lines[1] == format_sequence(original)
    assert lines[3] == "FFT:"
    assert lines[4] == format_sequence(transformed)
    assert lines[6] == "IFFT:"
    assert lines[7] == format_sequence(recovered)
    assert lines[1].count("(") == 8

    np.testing.assert_allclose(to_numpy(recovered), to_numpy(original), atol=1e-9)


def test_demo_invalid_size_prints_nothing(capsys):
    with pytest.raises(InvalidLengthError):
        FFTDemo(size=12).run()
    assert capsys.readouterr().out == ""


def test_main_returns_zero(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.count("(") == 3 * 16
