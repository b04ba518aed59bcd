"""Module entry point: python -m trackheat ..."""

from trackheat.main import main


if __name__ == "__main__":
    main()
