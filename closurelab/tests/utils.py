"""
Utility functions shared across ClosureLab tests.
"""
from closurelab.registry import Registry, RunResult


def run_bodies(*bodies) -> RunResult:
    """
    Register each (name, body) pair in order and run them.
    """
    registry = Registry("<test>")
    for name, body in bodies:
        registry.register(name, body)
    return registry.run_all()


def texts(lines) -> list[str]:
    """
    Return only the text of each log line.
    """
    return [line.text for line in lines]
