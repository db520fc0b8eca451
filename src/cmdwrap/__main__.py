from cmdwrap.cli import main

raise SystemExit(main())
