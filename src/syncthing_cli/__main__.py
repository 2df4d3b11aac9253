"""Allow running as ``python -m syncthing_cli``."""

from syncthing_cli.client.cli import main

main()
