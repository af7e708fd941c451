# glamdm
# Interactive FIGlet banner with a two-color gradient, hue cycling and four render modes.

__version__ = "0.1.0"
