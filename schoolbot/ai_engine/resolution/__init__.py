from .main import SchoolBot, build_school_bot
from .normalizer import normalize

__all__ = ["SchoolBot", "build_school_bot", "normalize"]
