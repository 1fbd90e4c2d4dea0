"""Allow ``python -m foxxy``."""

from .main import main

main()
