from news_reels.cli import main

raise SystemExit(main())
