"""bodytrend: trend lines, plateaus and goal projections for body measurements."""

from loguru import logger

__version__ = "0.1.0"

# Silent when used as a library; the CLI enables it with --verbose
logger.disable("bodytrend")
