# rebuild indentation for a classified token list
import re
from typing import List
from loguru import logger

from htmlformatter.formatter_config import FormatterConfig
from htmlformatter.transform.html_classifier import Token, \
    COMMENT, CLOSING_TAG, STANDALONE_TAG, OPENING_TAG, TEXT

# only runs that start with a space (tabs are already spaces by now)
WHITESPACE_RUN = re.compile(r" [ \t]*")

def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RUN.sub(" ", text)

class HtmlReindenter():
    """ walks the tokens once, tracking depth, and emits the indented text

    each tag, comment and block of text goes on its own line except:
      - a closing tag right after its opening tag (<div></div>)
      - closing tags of no-newline tags
      - text right after a no-newline opening tag (<a href="#">link</a>)

    depth is allowed to go negative for unbalanced input; it is indented as zero.
    """

    def __init__(self, config: FormatterConfig, trace: bool = False):
        self.config = config
        self.trace = trace

    def _find_previous(self, dom: List[Token], index: int) -> Token:
        " the nearest token before index that isn't whitespace-only text "
        i = index - 1
        while i >= 0:
            if not dom[i].is_blank(): return dom[i]
            i -= 1
        return None

    def _is_inline_closing(self, elem: Token) -> bool:
        if elem is None: return False
        return elem.kind == CLOSING_TAG and elem.tag_name in self.config.no_newline_tags

    def reindent(self, dom: List[Token]) -> str:
        config = self.config

        depth = 0
        previous: Token = None
        logged = False
        output = []

        for index, elem in enumerate(dom):
            # formatting whitespace from the source, the new indentation replaces it
            if elem.is_blank(): continue

            if self.trace: logger.info(f"  {index}: {elem.kind} {elem.tag_name!r} depth={depth}")

            if elem.kind == OPENING_TAG:
                output.append("\n" + config.indent(depth) + elem.content.strip())
                if elem.tag_name not in config.no_indent_tags:
                    depth += 1
                previous = elem
            elif elem.kind == STANDALONE_TAG:
                output.append("\n" + config.indent(depth) + elem.content.strip())
            elif elem.kind == CLOSING_TAG:
                depth -= 1
                if depth < 0 and not logged:
                    logger.debug(f"unbalanced closing tag {elem.content.strip()} at token {index}")
                    logged = True

                lf = "\n" + config.indent(depth)
                if elem.tag_name in config.no_newline_tags:
                    lf = ""
                before = self._find_previous(dom, index)
                if before is not None and before.kind == OPENING_TAG:
                    lf = ""
                output.append(lf + elem.content.strip())
            elif elem.kind == TEXT:
                text = collapse_whitespace(elem.content)
                if previous is not None and previous.tag_name in config.no_newline_tags:
                    after = dom[index + 1] if index + 1 < len(dom) else None
                    if not self._is_inline_closing(after):
                        text = text.rstrip()
                    output.append(text)
                    previous = None
                else:
                    output.append("\n" + config.indent(depth) + text.strip())
            elif elem.kind == COMMENT:
                output.append("\n" + config.indent(depth) + elem.content.strip())

        return "".join(output).strip()
