import sys

from fft import CustomFFT
from signal_generator import SignalGenerator


def format_value(v):
    return f"({v.real:g}, {v.imag:g})"


def format_sequence(sequence):
    return ", ".join(format_value(v) for v in sequence)


class FFTDemo:
    def __init__(self, size=16, seed=None):
        self.SIZE = size
        self.SEED = seed

        self.generator = SignalGenerator(self.SEED)

    def print_stage(self, label, sequence):
        print(f"{label}:")
        print(format_sequence(sequence))
        print()

    def run(self):
        # reject a bad size before anything reaches the console
        CustomFFT.check_length(self.SIZE)

        original = self.generator.generate(self.SIZE)
        self.print_stage("Input", original)

        transformed = CustomFFT.fft(original)
        self.print_stage("FFT", transformed)

        recovered = CustomFFT.inverse_fft(transformed)
        self.print_stage("IFFT", recovered)

        return original, transformed, recovered


def main():
    demo = FFTDemo()
    demo.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
