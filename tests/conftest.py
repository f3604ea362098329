from loguru import logger

# Diagnostics stay out of captured output unless a test configures a sink.
logger.remove()
