from pptx2markdown.cli import main

raise SystemExit(main())
