import sys

from roofline.main import main

sys.exit(main())
