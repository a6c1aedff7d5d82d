"""
Custom exceptions for pathbench.
"""


class PathbenchError(Exception):
    """Base exception for pathbench"""
    pass


class NoPathFound(PathbenchError):
    """No path exists from the start vertex to the end vertex"""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"No viable path from initial vertex {start} to destination vertex {end} has been found."
        )


class MalformedInput(PathbenchError):
    """Graph input could not be opened or parsed"""
    pass


class InvalidParameters(PathbenchError, ValueError):
    """Experiment parameters are out of range"""
    pass


class GenerationExhausted(PathbenchError):
    """Candidate pool ran out before every vertex reached its out-degree"""
    pass
