import sys

from purlkit.cli import main

sys.exit(main())
