from dodge.app import main

raise SystemExit(main())
