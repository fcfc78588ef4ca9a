# split an HTML string into tag and text tokens
import re
from typing import List

# lazy so adjacent tags are separate tokens; never spans lines after normalize
TAG_PATTERN = re.compile(r"(<.+?>)")

def normalize_whitespace(html: str) -> str:
    " drop line feeds and turn tabs into spaces "
    return html.replace("\n", "").replace("\r", "").replace("\t", " ")

def tokenize(html: str) -> List[str]:
    """ split html into an ordered list of tags and the text between them

    the tags are kept as tokens (captured split), empty pieces are dropped,
    so "".join(tokenize(x)) == normalize_whitespace(x).

    a '>' inside an attribute value ends the tag early.
    """
    html = normalize_whitespace(html)
    return [x for x in TAG_PATTERN.split(html) if x != ""]
