from normviz.main import main

raise SystemExit(main())
