"""Allow running spec-options as ``python -m spec_options``."""

from spec_options.cli import main

if __name__ == "__main__":
    main()
