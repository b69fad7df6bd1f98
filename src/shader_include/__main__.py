"""Entry point for running the shader include resolver as a module.

Usage:
    python -m shader_include KEYWORD ROOT [-o OUTPUT]
"""

import sys

from shader_include.cli import main

if __name__ == "__main__":
    sys.exit(main())
