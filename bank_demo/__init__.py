"""Object-oriented bank account demo: account variants, a registry and a scripted driver."""

__version__ = "0.1.0"
