import os
import configparser
from typing import Set

def parse_tag_list(tags: str) -> Set[str]:
    " split a comma-separated tag list, ignoring empty entries "
    if tags is None: return set()
    result = set()
    for x in tags.split(","):
        x = x.strip()
        if x != "": result.add(x)
    return result

def unquote_value(v: str) -> str:
    """ undo ini file escaping for whitespace values

    configparser strips values, so indentation has to be written
    quoted ("  ") or with \\t for tabs.
    """
    if len(v) >= 2 and v[0] == v[-1] and v[0] in "\"'":
        v = v[1:-1]
    return v.replace("\\t", "\t")

# -----

def read_config_file(ini_dir: str = None) -> configparser.ConfigParser:
    " read the formatter ini file (local override first) "

    if ini_dir is None: ini_dir = os.getcwd()
    ini_dir = os.path.abspath(ini_dir)

    config = configparser.ConfigParser()
    for fn in ["htmlformatter.local.ini", "htmlformatter.ini"]:
        p = os.path.join(ini_dir, fn)
        if os.path.exists(p):
            config.read(p)
            return config

    raise FileNotFoundError(f"Missing htmlformatter.ini file in {ini_dir}")
