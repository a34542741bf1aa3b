# src/rlcsim/__main__.py
from .cli import run

if __name__ == "__main__":
    run()
