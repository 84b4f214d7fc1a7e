"""Global pytest configuration for DASHUP."""

from __future__ import annotations

import os

from hypothesis import settings

# Keep small for CI, can be larger locally: HYPOTHESIS_PROFILE=thorough pytest
settings.register_profile("ci", max_examples=50)
settings.register_profile("thorough", max_examples=1000)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "ci"))
