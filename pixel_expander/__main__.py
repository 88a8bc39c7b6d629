import sys

from .cli.expand import main

sys.exit(main())
