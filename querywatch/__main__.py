import sys

from querywatch.main import main

sys.exit(main())
