from geonav.cli import main

raise SystemExit(main())
