import sys

from badbehavior.app import main

sys.exit(main())
