"""
Classical simulations of amplitude amplification.

The `grovermean.amplitude` subpackage holds the real-valued "inversion about
the mean" iteration; qiskit and matplotlib are only needed for the optional
cross-check and plotting helpers.
"""
