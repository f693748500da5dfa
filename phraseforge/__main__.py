# phraseforge/__main__.py
from phraseforge.cli import main

raise SystemExit(main())
