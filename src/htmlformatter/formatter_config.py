import configparser
from typing import Set

from htmlformatter.shared.util import parse_tag_list, unquote_value

DEFAULT_INDENT = "    "
DEFAULT_TAGS_WITHOUT_INDENTATION = "html,link,img,meta"
DEFAULT_TAGS_WITHOUT_NEWLINE = "a,b,i,span,h1,h2,h3,title"

class FormatterConfig():
    """ settings for one format call

    indent_with: repeated once per depth level
    no_indent_tags: tags whose children stay at the tag's own level
    no_newline_tags: tags whose text and closing tag stay on the tag's line
    """

    __slots__ = ("indent_with", "no_indent_tags", "no_newline_tags")

    def __init__(self, indent_with: str = DEFAULT_INDENT,
                 no_indent_tags: Set[str] = None,
                 no_newline_tags: Set[str] = None):

        self.indent_with = indent_with
        if no_indent_tags is None:
            no_indent_tags = parse_tag_list(DEFAULT_TAGS_WITHOUT_INDENTATION)
        if no_newline_tags is None:
            no_newline_tags = parse_tag_list(DEFAULT_TAGS_WITHOUT_NEWLINE)
        self.no_indent_tags = set(no_indent_tags)
        self.no_newline_tags = set(no_newline_tags)

    @classmethod
    def from_strings(cls, indent_with: str = DEFAULT_INDENT,
                     tags_without_indentation: str = DEFAULT_TAGS_WITHOUT_INDENTATION,
                     tags_without_newline: str = DEFAULT_TAGS_WITHOUT_NEWLINE) -> "FormatterConfig":
        " build from comma-separated tag lists "
        return cls(indent_with,
            parse_tag_list(tags_without_indentation),
            parse_tag_list(tags_without_newline))

    @classmethod
    def from_config(cls, config: configparser.ConfigParser) -> "FormatterConfig":
        " build from the [FORMAT] section of an ini file, defaults for anything missing "
        if not config.has_section("FORMAT"):
            return cls()
        section = config["FORMAT"]

        indent_with = section.get("indent_with")
        indent_with = DEFAULT_INDENT if indent_with is None else unquote_value(indent_with)

        return cls.from_strings(indent_with,
            section.get("tags_without_indentation", DEFAULT_TAGS_WITHOUT_INDENTATION),
            section.get("tags_without_newline", DEFAULT_TAGS_WITHOUT_NEWLINE))

    def indent(self, depth: int) -> str:
        " indentation for a depth, nothing for negative depths "
        if depth <= 0: return ""
        return self.indent_with * depth

    def __repr__(self) -> str:
        return (f"FormatterConfig(indent_with={self.indent_with!r}, "
            f"no_indent_tags={sorted(self.no_indent_tags)}, "
            f"no_newline_tags={sorted(self.no_newline_tags)})")
