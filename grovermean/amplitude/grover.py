from __future__ import annotations

import math

import numpy as np

from .errors import check_size, check_state


def reflect_about_mean(state: np.ndarray) -> np.ndarray:
    """
    Inversion about the mean, in place: x_i <- 2*mean - x_i.

    The mean is reduced from the whole vector first and only then applied to
    every entry; the transform never sees a partially updated vector.
    """
    n = check_state(state)
    mean = float(np.sum(state)) / n
    np.subtract(2.0 * mean, state, out=state)
    return state


def diffusion_operator(n_qubits: int):
    """
    Reflection about the uniform superposition, I - 2|s><s|.

    Built as H^n (I - 2|0><0|) H^n, where the reflection about |0...0> is a
    multi-controlled pi phase sandwiched between X gates. This equals
    `reflect_about_mean` up to a global phase of -1.
    """
    try:
        from qiskit import QuantumCircuit
    except Exception as e:  # pragma: no cover
        raise RuntimeError("diffusion_operator requires `qiskit` to be installed.") from e

    if n_qubits <= 0:
        raise ValueError("n_qubits must be > 0.")

    qubits = list(range(n_qubits))
    zero_reflection = QuantumCircuit(n_qubits, name="ZeroReflection")
    zero_reflection.x(qubits)
    if n_qubits == 1:
        zero_reflection.z(0)
    else:
        zero_reflection.mcp(math.pi, qubits[:-1], qubits[-1])
    zero_reflection.x(qubits)

    qc = QuantumCircuit(n_qubits, name="Diffusion")
    qc.h(qubits)
    qc.compose(zero_reflection, qubits=qubits, inplace=True)
    qc.h(qubits)
    return qc


def optimal_iterations(n: int) -> int:
    """
    Cycle at which a single marked entry out of `n` first peaks in magnitude.

    The first diffusion leaves the uniform vector unchanged, so the peak comes
    one cycle after the usual Grover iteration count.
    """
    n = check_size(n)
    theta = math.asin(math.sqrt(1.0 / n))
    return int(round((math.pi / (4 * theta)) - 0.5)) + 1
