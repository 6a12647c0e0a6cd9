"""Trip emissions estimator: emissions model, advisory tips and history service."""

__version__ = "1.0.0"
