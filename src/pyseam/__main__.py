import sys

from pyseam.driver import main

sys.exit(main())
