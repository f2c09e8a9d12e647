import sys
from checkerboard.cli import main

sys.exit(main())
