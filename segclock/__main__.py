"""
Entry point for running segclock as a Python module: `python -m segclock`

The console script defined in pyproject.toml calls `segclock.main:main`
directly; both paths end up in the same function.
"""

from .main import main

if __name__ == "__main__":
    main()
