"""Run the utctime JSON-lines worker: ``python -m utctime``."""

from utctime.worker import main

if __name__ == "__main__":
    main()
