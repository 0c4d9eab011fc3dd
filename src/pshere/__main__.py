from pshere.cli import main

raise SystemExit(main())
