"""Interactive menus for exercising the data structures from a terminal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional, TextIO

from dsalab.array_list import DEFAULT_CAPACITY, BoundedArray
from dsalab.array_queue import ArrayQueue
from dsalab.errors import (
    DataStructureError,
    InvalidPositionError,
    OverflowFullError,
    UnderflowError,
)
from dsalab.linked_list import LinkedList
from dsalab.linked_queue import LinkedQueue
from dsalab.linked_stack import LinkedStack
from dsalab.stack_queue import StackQueue

__all__ = ["main"]


class _BadInput(Exception):
    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _Console:
    """Reads whitespace-separated integers and writes lines."""

    def __init__(self, stream: Iterable[str], out: TextIO) -> None:
        self._tokens = _tokens(stream)
        self._out = out

    def say(self, text: str = "") -> None:
        print(text, file=self._out)

    def read_int(self) -> int:
        token = next(self._tokens, None)
        if token is None:
            raise EOFError
        try:
            return int(token)
        except ValueError:
            raise _BadInput(token) from None

    def ask_int(self, prompt: str) -> int:
        self._out.write(prompt)
        self._out.flush()
        return self.read_int()


_Handler = Callable[[Any, _Console], None]


@dataclass(frozen=True)
class _Menu:
    title: str
    options: tuple[tuple[str, _Handler], ...]
    choice_prompt: str = "Enter choice: "
    invalid: str = "Invalid choice."
    farewell: str = "Exiting..."
    banner: Optional[_Handler] = None


def _run_menu(menu: _Menu, target: Any, console: _Console) -> None:
    exit_choice = len(menu.options) + 1
    while True:
        console.say()
        console.say(menu.title)
        if menu.banner is not None:
            menu.banner(target, console)
        for number, (label, _) in enumerate(menu.options, start=1):
            console.say(f"{number}. {label}")
        console.say(f"{exit_choice}. Exit")
        try:
            choice = console.ask_int(menu.choice_prompt)
        except _BadInput:
            console.say(menu.invalid)
            continue
        if choice == exit_choice:
            console.say(menu.farewell)
            return
        if not 1 <= choice <= len(menu.options):
            console.say(menu.invalid)
            continue
        _, handler = menu.options[choice - 1]
        try:
            handler(target, console)
        except _BadInput as exc:
            console.say(f"Invalid input: {exc.token}")


# Array operations


def _array_traverse(array: BoundedArray, console: _Console) -> None:
    if not array:
        console.say("Array is empty.")
        return
    console.say("Current Array Elements: " + " ".join(str(v) for v in array))


def _array_insert(array: BoundedArray, console: _Console) -> None:
    value = console.ask_int("Enter value to insert: ")
    position = console.ask_int(f"Enter position (1 to {len(array) + 1}): ")
    try:
        array.insert(value, position)
    except OverflowFullError as exc:
        console.say(f"Error: {exc}")
        return
    except InvalidPositionError:
        console.say("Error: Invalid position!")
        return
    console.say("Element inserted successfully!")


def _array_delete(array: BoundedArray, console: _Console) -> None:
    position = console.ask_int(f"Enter position to delete (1 to {len(array)}): ")
    try:
        array.delete(position)
    except UnderflowError as exc:
        console.say(f"Error: {exc}")
        return
    except InvalidPositionError:
        console.say("Error: Invalid position!")
        return
    console.say("Element deleted successfully!")


_ARRAY_MENU = _Menu(
    title="--- ARRAY OPERATIONS MENU ---",
    options=(
        ("Traverse (Display)", _array_traverse),
        ("Insert Element", _array_insert),
        ("Delete Element", _array_delete),
    ),
    choice_prompt="Enter your choice: ",
    invalid="Invalid choice! Try again.",
    farewell="Exiting program...",
)


def _array_session(console: _Console) -> int:
    count = console.ask_int(
        f"Enter initial number of elements (max {DEFAULT_CAPACITY}): "
    )
    console._out.write(f"Enter {count} elements: ")
    values = [console.read_int() for _ in range(max(count, 0))]
    try:
        array = BoundedArray(values)
    except DataStructureError as exc:
        console.say()
        console.say(f"Error: {exc}")
        return 1
    _run_menu(_ARRAY_MENU, array, console)
    return 0


# Linked stack


def _stack_push(stack: LinkedStack, console: _Console) -> None:
    value = console.ask_int("Enter value: ")
    stack.push(value)
    console.say(f"{value} pushed to stack.")


def _stack_pop(stack: LinkedStack, console: _Console) -> None:
    try:
        value = stack.pop()
    except UnderflowError as exc:
        console.say(f"Error: {exc}")
        return
    console.say(f"{value} popped from stack.")


def _stack_peek(stack: LinkedStack, console: _Console) -> None:
    if not stack:
        console.say("Stack is Empty.")
        return
    console.say(f"Top element is: {stack.peek()}")


def _stack_display(stack: LinkedStack, console: _Console) -> None:
    if not stack:
        console.say("Stack is Empty.")
        return
    console.say(f"Stack: {stack}")


_STACK_MENU = _Menu(
    title="--- DYNAMIC STACK MENU ---",
    options=(
        ("Push", _stack_push),
        ("Pop", _stack_pop),
        ("Peek", _stack_peek),
        ("Display", _stack_display),
    ),
)


# Array queue


def _aqueue_enqueue(queue: ArrayQueue, console: _Console) -> None:
    value = console.ask_int("Enter value to enqueue: ")
    try:
        queue.enqueue(value)
    except OverflowFullError as exc:
        console.say(f"Error: {exc}")
        return
    console.say(f"{value} enqueued into queue.")


def _aqueue_dequeue(queue: ArrayQueue, console: _Console) -> None:
    try:
        value = queue.dequeue()
    except UnderflowError as exc:
        console.say(f"Error: {exc}")
        return
    console.say(f"{value} dequeued from queue.")


def _aqueue_peek(queue: ArrayQueue, console: _Console) -> None:
    if not queue:
        console.say("Queue is Empty.")
        return
    console.say(f"Front element is: {queue.peek()}")


def _aqueue_display(queue: ArrayQueue, console: _Console) -> None:
    if not queue:
        console.say("Queue is Empty.")
        return
    console.say("Queue elements: " + " ".join(str(v) for v in queue))


_ARRAY_QUEUE_MENU = _Menu(
    title="--- QUEUE OPERATIONS ---",
    options=(
        ("Enqueue (Insert)", _aqueue_enqueue),
        ("Dequeue (Delete)", _aqueue_dequeue),
        ("Peek (Front)", _aqueue_peek),
        ("Display", _aqueue_display),
    ),
    invalid="Invalid choice!",
)


# Linked queue


def _lqueue_enqueue(queue: LinkedQueue, console: _Console) -> None:
    value = console.ask_int("Enter value: ")
    queue.enqueue(value)
    console.say(f"{value} enqueued to queue.")


def _lqueue_dequeue(queue: LinkedQueue, console: _Console) -> None:
    try:
        value = queue.dequeue()
    except UnderflowError as exc:
        console.say(f"Error: {exc}")
        return
    console.say(f"{value} dequeued from queue.")


def _lqueue_peek(queue: LinkedQueue, console: _Console) -> None:
    if not queue:
        console.say("Queue is Empty.")
        return
    console.say(f"Front element is: {queue.peek()}")


def _lqueue_display(queue: LinkedQueue, console: _Console) -> None:
    if not queue:
        console.say("Queue is Empty.")
        return
    console.say(f"Queue: {queue}")


_LINKED_QUEUE_MENU = _Menu(
    title="--- LINKED LIST QUEUE MENU ---",
    options=(
        ("Enqueue", _lqueue_enqueue),
        ("Dequeue", _lqueue_dequeue),
        ("Peek", _lqueue_peek),
        ("Display", _lqueue_display),
    ),
)


# Queue made of two stacks


def _squeue_enqueue(queue: StackQueue, console: _Console) -> None:
    value = console.ask_int("Enter value: ")
    queue.enqueue(value)
    console.say(f"{value} enqueued.")


def _squeue_dequeue(queue: StackQueue, console: _Console) -> None:
    try:
        value = queue.dequeue()
    except UnderflowError as exc:
        console.say(f"Error: {exc}")
        return
    console.say(f"{value} dequeued.")


def _squeue_peek(queue: StackQueue, console: _Console) -> None:
    if queue.is_empty():
        console.say("Queue is Empty.")
        return
    console.say(f"Front element: {queue.peek()}")


_STACK_QUEUE_MENU = _Menu(
    title="--- QUEUE VIA STACKS MENU ---",
    options=(
        ("Enqueue", _squeue_enqueue),
        ("Dequeue", _squeue_dequeue),
        ("Peek", _squeue_peek),
    ),
)


# Linked list deletion


def _list_display(items: LinkedList, console: _Console) -> None:
    if not items:
        console.say("List is Empty.")
        return
    console.say(f"Current List: {items}")


def _list_delete_value(items: LinkedList, console: _Console) -> None:
    value = console.ask_int("Enter value to delete: ")
    try:
        items.delete_by_value(value)
    except UnderflowError:
        console.say("List is empty. Nothing to delete.")
        return
    except ValueError:
        console.say(f"Value {value} not found in the list.")
        return
    console.say(f"Deleted value {value}.")


def _list_delete_position(items: LinkedList, console: _Console) -> None:
    position = console.ask_int("Enter position to delete (1-based): ")
    try:
        items.delete_by_position(position)
    except UnderflowError:
        console.say("List is empty.")
        return
    except InvalidPositionError:
        console.say("Invalid position." if position < 1 else "Position out of bounds.")
        return
    console.say(f"Deleted node at position {position}.")


def _list_append(items: LinkedList, console: _Console) -> None:
    value = console.ask_int("Enter value to add: ")
    was_empty = not items
    items.insert_at_end(value)
    if was_empty:
        console.say(f"Inserted {value} as the first element.")
    else:
        console.say(f"Inserted {value} at the end.")


_LIST_MENU = _Menu(
    title="--- DELETION MENU ---",
    options=(
        ("Delete by Value", _list_delete_value),
        ("Delete by Position", _list_delete_position),
        ("Add Element (Append)", _list_append),
    ),
    choice_prompt="Choice: ",
    banner=_list_display,
)


def _menu_session(menu: _Menu, factory: Callable[[], Any]) -> Callable[[_Console], int]:
    def session(console: _Console) -> int:
        _run_menu(menu, factory(), console)
        return 0

    return session


_SESSIONS: dict[str, Callable[[_Console], int]] = {
    "array": _array_session,
    "stack": _menu_session(_STACK_MENU, LinkedStack),
    "queue": _menu_session(_ARRAY_QUEUE_MENU, ArrayQueue),
    "linked-queue": _menu_session(_LINKED_QUEUE_MENU, LinkedQueue),
    "stack-queue": _menu_session(_STACK_QUEUE_MENU, StackQueue),
    "list": _menu_session(_LIST_MENU, LinkedList),
}


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive menu for the chosen structure; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="dsalab",
        description="Exercise a data structure through an interactive menu.",
    )
    parser.add_argument("structure", choices=sorted(_SESSIONS))
    args = parser.parse_args(argv)
    console = _Console(sys.stdin, sys.stdout)
    try:
        return _SESSIONS[args.structure](console)
    except EOFError:
        console.say()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())