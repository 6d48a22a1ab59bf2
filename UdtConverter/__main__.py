# __main__.py
# Copyright (c) 2025 Alex Prochot
#
# Allows `python -m UdtConverter`.
import sys

from .main import main

sys.exit(main())
