"""Entry point for the benchmark.

Usage:
    python -m stepquad --step 1e-4 --cases "x^2" "Sin(x)"
"""

import sys

from stepquad.cli import main

if __name__ == "__main__":
    sys.exit(main())
