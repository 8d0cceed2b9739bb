import sys

from curtois.main import main

sys.exit(main())
