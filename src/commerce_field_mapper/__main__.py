"""Module entry point for `python -m commerce_field_mapper`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
