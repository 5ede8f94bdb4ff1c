"""Allow ``python -m anki_connect``."""

from anki_connect.cli import main

main()
