"""Example: put a qubit in superposition with a Hadamard gate and measure it."""
from tiny_qubit import Complex, NumpyRandomSource, Qubit, hadamard, sample_counts, show_counts

print("=" * 50)
print("tiny-qubit: Hadamard + Measurement Example")
print("=" * 50)

source = NumpyRandomSource(seed=2024)

qubit = Qubit(Complex(1.0, 0.0), Complex(0.0, 0.0))
print(f"\nInitial Qubit State: {qubit}")

qubit = hadamard().apply(qubit)
print(f"After Hadamard Gate: {qubit}")

measurement = qubit.measure(source)
print(f"Measurement Result: |{measurement.outcome}⟩")
print(f"Collapsed State: {measurement.qubit}")

print()
print(show_counts(sample_counts(qubit, 1000, source)))
print("\nExpected: ~50% |0⟩ and ~50% |1⟩")
