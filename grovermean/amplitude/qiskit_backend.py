from __future__ import annotations

from typing import List

import numpy as np

from .errors import InvalidSize, check_index, check_iteration_count, check_size
from .grover import diffusion_operator
from .oracle import phase_oracle_diagonal
from .state import uniform_state


def n_qubits_for(n: int) -> int:
    n = check_size(n)
    n_qubits = n.bit_length() - 1
    if n_qubits == 0 or 2**n_qubits != n:
        raise InvalidSize(f"statevector backend needs a power-of-two size >= 2, got {n}.")
    return n_qubits


def _oracle_circuit(n_qubits: int, marked_index: int):
    try:
        from qiskit import QuantumCircuit
        from qiskit.circuit.library import DiagonalGate
    except Exception as e:  # pragma: no cover
        raise RuntimeError("_oracle_circuit requires `qiskit` to be installed.") from e

    diag = phase_oracle_diagonal(2**n_qubits, marked_index)
    qc = QuantumCircuit(n_qubits, name="Oracle")
    qc.append(DiagonalGate(diag.tolist()), list(range(n_qubits)))
    return qc


def statevector_trajectory(n: int, iteration_count: int, marked_index: int) -> List[float]:
    """
    Same trajectory as `amplify`, computed by evolving a qiskit Statevector through
    the diffusion circuit and a diagonal phase oracle.

    The circuit diffusion is I - 2|s><s|, so after k cycles the simulated state
    carries a global sign of (-1)^k relative to the classical vector; it is
    removed before recording.
    """
    try:
        from qiskit.quantum_info import Statevector
    except Exception as e:  # pragma: no cover
        raise RuntimeError("statevector backend requires `qiskit` to be installed.") from e

    n_qubits = n_qubits_for(n)
    marked_index = check_index(marked_index, n)
    iteration_count = check_iteration_count(iteration_count)

    diffusion = diffusion_operator(n_qubits)
    oracle = _oracle_circuit(n_qubits, marked_index)

    sv = Statevector(uniform_state(n).astype(complex))
    trajectory: List[float] = []
    sign = 1.0
    for _ in range(iteration_count):
        sv = sv.evolve(diffusion).evolve(oracle)
        sign = -sign
        trajectory.append(sign * float(np.real(sv.data[marked_index])))
    return trajectory
