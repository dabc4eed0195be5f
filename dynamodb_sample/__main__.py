import sys

from .sample import main

sys.exit(main())
