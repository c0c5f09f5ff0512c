"""Allow ``python -m nestbox``."""

from nestbox.cli import main

main(prog_name="box")
