import sys
import logging
from loguru import logger


# ===========================
# Log Contexts Configuration
# ===========================
DEFAULT_CONTEXT = "ADDON"

CONTEXTS = {
    "ADDON": {"color": "green", "icon": "🚀"},
    "API": {"color": "cyan", "icon": "🔗"},
    "STREAM": {"color": "yellow", "icon": "🎬"},
    "SEARCH": {"color": "blue", "icon": "🔎"},
    "PROVIDER": {"color": "magenta", "icon": "📺"},
    "METADATA": {"color": "white", "icon": "🎭"},
    "MATCHER": {"color": "white", "icon": "🧩"},
    "AUTH": {"color": "yellow", "icon": "🔑"},
}

LEVEL_ICONS = {
    "DEBUG": "🔍",
    "INFO": "ℹ️ ",
    "ERROR": "❌",
}

EXTERNAL_LOGGERS = ("uvicorn.error", "fastapi")


# ===========================
# Log Formatter
# ===========================
def format_log(record):
    context = record["extra"].setdefault("context", DEFAULT_CONTEXT)
    context_data = CONTEXTS.get(context, CONTEXTS[DEFAULT_CONTEXT])
    color = context_data["color"]
    level_icon = LEVEL_ICONS.get(record["level"].name, "")

    return (
        "<white>{time:YYYY-MM-DD}</white> "
        "<magenta>{time:HH:mm:ss}</magenta> | "
        f"<level>{level_icon} {{level: <8}}</level> | "
        f"<{color}>{context_data['icon']} {{extra[context]: <10}}</{color}> | "
        "<level>{message}</level>\n"
    )


# ===========================
# Logger Setup Function
# ===========================
def setup_logger(level: str = "INFO"):
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format=format_log,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    # Request logging goes through LoguruMiddleware
    logging.getLogger("uvicorn.access").disabled = True
    for name in EXTERNAL_LOGGERS:
        logging.getLogger(name).setLevel(logging.CRITICAL)


# ===========================
# Logger Factory
# ===========================
def get_logger(context: str):
    return logger.bind(context=context)


# ===========================
# Logger Instances
# ===========================
addon_logger = get_logger("ADDON")
api_logger = get_logger("API")
stream_logger = get_logger("STREAM")
search_logger = get_logger("SEARCH")
provider_logger = get_logger("PROVIDER")
metadata_logger = get_logger("METADATA")
matcher_logger = get_logger("MATCHER")
auth_logger = get_logger("AUTH")
