"""Configuration helpers for the Course Notes MCP Server.

`load_config` reads environment variables into a frozen `AppConfig`;
`load_course_mappings` turns it into the immutable course table.
"""

from .courses import load_course_mappings
from .env import AppConfig, CourseMapping, load_config

__all__ = ["AppConfig", "CourseMapping", "load_config", "load_course_mappings"]
