# mazesolver/__main__.py
from mazesolver.app.cli import main

raise SystemExit(main())
