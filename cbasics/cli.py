"""Command-line entry point with small console output demonstrations."""

from __future__ import annotations

import argparse


def greeting(name: str) -> str:
    """Return a personal welcome message for ``name``."""
    return f"Hello, {name}! Welcome to programming. "


def escape_sequence_demo() -> str:
    """Return text showing newline, tab, backslash and bell escape sequences."""
    return (
        "This is a string with a newline:\n"
        "This is a string with a tab:\t\t"
        "This is a string with a backslash:\\\n"
        "This is a string with a bell sound:\a"
    )


def formatting_demo() -> str:
    """Return lines showing format specifiers for several kinds of value."""
    x = 10
    ch = "A"
    f = 3.14
    d = 2.71828
    text = "Hello, World!"
    lines = [
        f"Integer value x: {x:d}",
        f"Character value ch: {ch}",
        f"Floating-point value f: {f:f}",
        f"Scientific notation of double value d: {d:e}",
        f"String value str: {text}",
        f"Memory address of integer value x: {id(x):#x}",
        "Literal percentage sign: %",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run one of the demonstrations; with no command, print a greeting to the world."""
    parser = argparse.ArgumentParser(prog="cbasics")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("hello", help="print Hello World")
    greet = commands.add_parser("greet", help="greet someone by name")
    greet.add_argument("name", nargs="?")
    commands.add_parser("escapes", help="show escape sequences")
    commands.add_parser("formatting", help="show value formatting")
    args = parser.parse_args(argv)

    if args.command == "greet":
        name = args.name
        if name is None:
            words = input("Enter your name: ").split()
            if not words:
                parser.error("a name is required")
            name = words[0]
        print(greeting(name))
    elif args.command == "escapes":
        print(escape_sequence_demo(), end="")
    elif args.command == "formatting":
        print(formatting_demo(), end="")
    else:
        print("Hello World")
    return 0