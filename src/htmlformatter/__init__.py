from loguru import logger

from htmlformatter.formatter_config import FormatterConfig
from htmlformatter.html_formatter import HtmlFormatter, format

# silent unless the caller turns it on with logger.enable("htmlformatter")
logger.disable("htmlformatter")

__all__ = ["FormatterConfig", "HtmlFormatter", "format"]
