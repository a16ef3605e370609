"""daytrip - day-plan generation and route execution for curated travel content."""

from loguru import logger

# Library logs stay silent until the host opts in via setup_logger
logger.disable("daytrip")
