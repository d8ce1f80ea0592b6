"""Closed sets of actions and resources a command can name."""

from enum import StrEnum


class Action(StrEnum):
    """Operation kind: the first positional word of a command."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    GET = "get"
    ROTATE = "rotate"
    SEARCH = "search"


class Resource(StrEnum):
    """Subject of an operation: the second positional word of a command."""

    NUMBERS = "numbers"
    CAMERA = "camera"
    STARS = "stars"
    MOON = "moon"
