"""Run the sprite sheet toolkit CLI: python -m spritesheet_toolkit."""

from spritesheet_toolkit.cli import main

raise SystemExit(main())
