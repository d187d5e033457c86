"""Allow ``python -m datebucket``."""

from datebucket.cli.main import main

main()
