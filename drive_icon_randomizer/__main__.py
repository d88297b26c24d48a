import sys

from drive_icon_randomizer.cli import main

sys.exit(main())
