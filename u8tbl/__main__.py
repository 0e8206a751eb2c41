#!/usr/bin/env python3
# u8tbl/__main__.py
from __future__ import annotations

from u8tbl.interface import main

raise SystemExit(main())
