"""Calculator: one handler per meaningful action/resource pair.

Arithmetic on ``numbers`` plus a few toy operations on the other
resources. Unregistered pairs (e.g. ``get moon``) log a miss and print
nothing else.

Run:
    python -m climan run app add numbers 1 2 3   (from this directory)
    python app.py add numbers 1 2 3
"""

import sys

from climan import Action, CommandArgs, Dispatcher, Resource

dispatcher = Dispatcher()


def _ints(values: tuple[str, ...]) -> list[int]:
    """Integer-parse every value, dropping the ones that don't parse."""
    numbers = []
    for value in values:
        try:
            numbers.append(int(value))
        except ValueError:
            continue
    return numbers


def _floats(values: tuple[str, ...]) -> list[float]:
    numbers = []
    for value in values:
        try:
            numbers.append(float(value))
        except ValueError:
            continue
    return numbers


@dispatcher.operation(Action.ADD, Resource.NUMBERS)
def add_numbers(args: CommandArgs) -> int:
    result = sum(_ints(args.values))
    print(f"Add Numbers Result: {result}")
    return result


@dispatcher.operation(Action.SUBTRACT, Resource.NUMBERS)
def subtract_numbers(args: CommandArgs) -> int:
    numbers = _ints(args.values)
    result = numbers[0] - sum(numbers[1:]) if numbers else 0
    print(f"Subtract Numbers Result: {result}")
    return result


@dispatcher.operation(Action.MULTIPLY, Resource.NUMBERS)
def multiply_numbers(args: CommandArgs) -> int:
    result = 1
    for number in _ints(args.values):
        result *= number
    print(f"Multiply Numbers Result: {result}")
    return result


@dispatcher.operation(Action.DIVIDE, Resource.NUMBERS)
def divide_numbers(args: CommandArgs) -> float | None:
    numbers = _floats(args.values)
    if not numbers:
        result = 0.0
    else:
        result = numbers[0]
        for divisor in numbers[1:]:
            if divisor == 0:
                print("Cannot divide by zero")
                return None
            result /= divisor
    print(f"Divide Numbers Result: {result}")
    return result


@dispatcher.operation(Action.GET, Resource.CAMERA)
def get_camera(args: CommandArgs) -> str:
    info = args.data if args.data is not None else "No data"
    print(f"Getting camera info: {info}")
    return info


@dispatcher.operation(Action.ROTATE, Resource.STARS)
def rotate_stars(args: CommandArgs) -> None:
    print(f"Rotating stars with values: {list(args.values)}")


@dispatcher.operation(Action.SEARCH, Resource.MOON)
def search_moon(args: CommandArgs) -> None:
    print(f"Searching moon with values: {list(args.values)}")


if __name__ == "__main__":
    from climan.cli import parse_command

    dispatcher.execute(parse_command(sys.argv[1:] or ["add", "numbers", "1", "2", "3"]))
