"""
pathtracker - Learning progress tracking with achievements and recommendations.

Subpackages:
- schemas: pydantic models for units, trackers, achievements and dashboard config
- tracking: statistics, recommendation, achievement and suggestion engines
- viewer: text and HTML dashboard rendering
- utils: config and logging setup
"""

__version__ = "0.1.0"
