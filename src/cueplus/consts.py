import importlib.metadata

VERSION = importlib.metadata.version("cueplus")
DEFAULT_ENCODING = "utf-8"
# Written regardless of platform
LINE_TERMINATOR = "\r\n"
