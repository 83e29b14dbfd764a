"""
Exceptions raised by the snake3 engine.
"""


class SnakeGameError(Exception):
    """Base class for every error raised by the engine and its front-end."""


class InvalidStartPositionError(SnakeGameError, ValueError):
    """The snake was asked to start outside of the board."""

    def __init__(self, position, columns: int, rows: int):
        self.position = tuple(position)
        self.columns = columns
        self.rows = rows
        super().__init__(
            f"You can't create a snake outside of columns or rows range: "
            f"{self.position} is not within (0..{columns}, 0..{rows})."
        )


class InvalidStateTransitionError(SnakeGameError, ValueError):
    """A driver asked for a lifecycle transition the state machine forbids."""

    def __init__(self, current, requested, reason: str):
        self.current = current
        self.requested = requested
        self.reason = reason
        super().__init__(
            f"Can't move game from {current.name} to {requested.name}: {reason}"
        )


class TerminalTooSmallError(SnakeGameError):
    """The terminal cannot fit the board plus the status lines."""

    def __init__(self, columns: int, rows: int, min_columns: int, min_rows: int):
        self.columns = columns
        self.rows = rows
        self.min_columns = min_columns
        self.min_rows = min_rows
        super().__init__(
            f"You should have a minimum {min_columns}x{min_rows} terminal size "
            f"in terms of columns and rows but you have {columns} columns and {rows} rows"
        )
