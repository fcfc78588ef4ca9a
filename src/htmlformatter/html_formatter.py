# re-indent an HTML string
from typing import Union
from loguru import logger

from htmlformatter.formatter_config import FormatterConfig, DEFAULT_INDENT, \
    DEFAULT_TAGS_WITHOUT_INDENTATION, DEFAULT_TAGS_WITHOUT_NEWLINE
from htmlformatter.transform.html_tokenizer import tokenize
from htmlformatter.transform.html_classifier import parse_dom
from htmlformatter.transform.html_reindenter import HtmlReindenter

class HtmlFormatter():

    def __init__(self, config: FormatterConfig = None, trace: bool = False):
        self.config = config if config is not None else FormatterConfig()
        self.trace = trace

    def format(self, content: Union[bytes, str]) -> str:
        " re-indent the tags and remove unneeded whitespace "

        if content is None or len(content) == 0: return ""
        if isinstance(content, bytes):
            content = content.decode("utf-8", errors="replace")

        if self.trace: logger.info(f"format ===>\n{content}<===\n")

        elements = tokenize(content)
        dom = parse_dom(elements)

        reindenter = HtmlReindenter(self.config, trace=self.trace)
        result = reindenter.reindent(dom)

        logger.debug(f"formatted {len(dom)} tokens, {len(content)} -> {len(result)} chars")
        return result


def format(html: Union[bytes, str],
           indent_with: str = DEFAULT_INDENT,
           tags_without_indentation: str = DEFAULT_TAGS_WITHOUT_INDENTATION,
           tags_without_newline: str = DEFAULT_TAGS_WITHOUT_NEWLINE) -> str:
    """ Formats HTML by re-indenting the tags and removing unnecessary whitespace.

    html: the document (bytes are decoded as utf-8)
    indent_with: string used for one level of indentation
    tags_without_indentation: comma-separated tags whose children are not indented
    tags_without_newline: comma-separated tags whose text and closing tag stay inline

    never fails, malformed input just gets less useful indentation.
    """
    config = FormatterConfig.from_strings(indent_with, tags_without_indentation, tags_without_newline)
    formatter = HtmlFormatter(config)
    return formatter.format(html)
