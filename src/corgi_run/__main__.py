import sys

from corgi_run.game import main

sys.exit(main())
