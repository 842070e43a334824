import sys

from address_book.core.cli import main

sys.exit(main())
