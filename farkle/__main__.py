from farkle.ui.app import main

raise SystemExit(main())
