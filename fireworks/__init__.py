"""New Year fireworks greeting: countdown, unlock and a pygame particle show."""

__version__ = "0.1.0"
