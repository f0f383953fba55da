"""Allow `python -m debugfmt`."""

from debugfmt.cli.main import main

if __name__ == "__main__":
    main()
