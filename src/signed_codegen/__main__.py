"""Entry point for `python -m signed_codegen`."""

import sys

from signed_codegen.cli import main

sys.exit(main())
