"""Race-condition simulations, lock-guarded accounts and deadlock-free transfers between bank accounts."""

__version__ = "0.1.0"