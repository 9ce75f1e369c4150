# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
import sys

from .cli import main

sys.exit(main())
