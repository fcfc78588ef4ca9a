# classify HTML tokens by kind
import re
from typing import List, Tuple

COMMENT = "comment"
CLOSING_TAG = "closing"
STANDALONE_TAG = "standalone"
OPENING_TAG = "opening"
TEXT = "text"

TAG_NAME_PATTERN = re.compile(r"^</?(\w+)[ >]")

# checked in order, first match wins ("<!--" also starts with "<")
RULES = [
    (lambda s: s.startswith("<!"), COMMENT),
    (lambda s: s.startswith("</"), CLOSING_TAG),
    (lambda s: s.endswith("/>"), STANDALONE_TAG),
    (lambda s: s.startswith("<"), OPENING_TAG),
]

class Token:
    " a piece of the document with its kind and tag name "

    __slots__ = ("content", "kind", "tag_name")

    def __init__(self, content: str, kind: str, tag_name: str):
        self.content = content
        self.kind = kind
        self.tag_name = tag_name

    def is_blank(self) -> bool:
        " whitespace-only text "
        return self.kind == TEXT and self.content.strip() == ""

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.tag_name!r}, {self.content!r})"


def extract_tag_name(content: str) -> str:
    """ get the tag name out of a tag token

    returns "" when there isn't a word followed by a space or '>' (e.g. <br/>).
    only meaningful for opening and closing tags.
    """
    m = TAG_NAME_PATTERN.match(content)
    if m is None: return ""
    return m.group(1)

def classify(content: str) -> Tuple[str, str]:
    " get the (kind, tag_name) of a token "
    s = content.strip()
    for test, kind in RULES:
        if test(s):
            return kind, extract_tag_name(content)
    return TEXT, extract_tag_name(content)

def parse_dom(elements: List[str]) -> List[Token]:
    " classify a list of raw tokens "
    dom = []
    for element in elements:
        kind, tag_name = classify(element)
        dom.append(Token(element, kind, tag_name))
    return dom
