"""
LCZ App - Oscilloscope Impedance Meter

Derives the complex impedance of an unknown capacitor or inductor from a
reference resistor, a test frequency, the zero-crossing delay and two
voltage amplitudes, and reports the result in engineering notation.
"""

__version__ = "0.1.0"
__author__ = "LCZ Team"
