import sys

from intlang.main import main


sys.exit(main())
