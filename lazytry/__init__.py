"""lazytry: jump between dated scratch directories from the terminal."""

__version__ = "0.1.0"


def main() -> None:
    from .cli import main as _main

    _main()


__all__ = ["main", "__version__"]
