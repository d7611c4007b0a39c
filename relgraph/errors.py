"""Typed failures raised by the graph store, the analytics and the edge loader.

None of these are fatal: callers (the CLI included) catch them and report the
offending entity or condition.
"""

from __future__ import annotations


class GraphError(Exception):
    pass


class MalformedInputError(GraphError, ValueError):
    """An input line did not yield exactly two non-empty entity names."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.path = path
        self.line_number = line_number
        self.line = line
        location = ""
        if path is not None and line_number is not None:
            location = f"{path}:{line_number}: "
        elif line_number is not None:
            location = f"line {line_number}: "
        super().__init__(f"{location}{message}")


class UnknownEntityError(GraphError, KeyError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        # KeyError would repr() the argument
        return f"Unknown entity: {self.name!r}"


class UnreachableError(GraphError):
    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No directed path exists from {source!r} to {target!r}")


class EmptyGraphError(GraphError):
    def __init__(self, message: str = "Graph has no entities") -> None:
        super().__init__(message)
