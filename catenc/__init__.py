"""
catenc — categorical-to-numeric encoders for tabular data preparation.

Turns string category labels into ordinal, one-hot, frequency,
rolling-frequency and James–Stein target codes. Ordinal and one-hot
encoders can decode their codes back into the original labels.
"""

__version__ = "0.1.0"
