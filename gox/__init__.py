"""Everyday helpers for bytes, lists, maps, JSON, HTML elements, time, files, zip archives, URLs and IP addresses."""

__version__ = "0.1.0"

__all__ = [
    "bytex",
    "cryptox",
    "extractx",
    "filex",
    "filepathx",
    "fmtx",
    "htmlx",
    "inx",
    "ipx",
    "isx",
    "jsonparser",
    "jsonx",
    "keyx",
    "mapx",
    "nullx",
    "pathx",
    "randx",
    "setx",
    "slicex",
    "spreedsheetx",
    "timex",
    "urlx",
    "zipx",
]