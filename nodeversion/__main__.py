from __future__ import annotations

from nodeversion.main import main

raise SystemExit(main())
