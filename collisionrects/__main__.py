import sys

from collisionrects.cli import main

sys.exit(main())
