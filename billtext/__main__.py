import sys

from billtext.main import main

sys.exit(main())
