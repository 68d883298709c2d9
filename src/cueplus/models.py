import argparse


class CommandParserArgs(argparse.Namespace):
    cuefile: str  # pyright: ignore[reportUninitializedInstanceVariable]
    output: str | None  # pyright: ignore[reportUninitializedInstanceVariable]
    list: bool  # pyright: ignore[reportUninitializedInstanceVariable]
    encoding: str  # pyright: ignore[reportUninitializedInstanceVariable]
    quiet: bool  # pyright: ignore[reportUninitializedInstanceVariable]
    verbose: bool  # pyright: ignore[reportUninitializedInstanceVariable]
    debug: bool  # pyright: ignore[reportUninitializedInstanceVariable]
