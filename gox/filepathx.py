"""Directory listing, directory name generation and file type detection."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from .filex import exists
from .inx import string_in


class _Search(Enum):
    DIRS = "dirs"
    FILES = "files"


@dataclass
class WalkOption:
    """Options for listing a directory.

    When ``filter_func`` is set, a path it accepts is always kept; ``exclude``
    and ``only`` are compared with the base name of each path.
    """

    filter_func: Callable[[str], bool] | None = None
    exclude: list[str] = field(default_factory=list)
    only: list[str] = field(default_factory=list)
    case_sensitive: bool = False
    recursive: bool = False


def _walk(top: str, relative: str, recursive: bool) -> Iterator[tuple[str, bool]]:
    try:
        with os.scandir(top) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        child = os.path.join(relative, entry.name) if relative else entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        yield child, is_dir
        if recursive and is_dir:
            yield from _walk(entry.path, child, recursive)


def _read(root: str, recursive: bool, search: _Search) -> list[str]:
    want_dirs = search is _Search.DIRS
    paths = [
        os.path.normpath(os.path.join(root, relative))
        for relative, is_dir in _walk(root, "", recursive)
        if is_dir == want_dirs
    ]
    if root.startswith(".."):
        prefix = ".."
    elif root.startswith("."):
        prefix = "."
    else:
        return paths
    prefix += os.sep
    return [prefix + path for path in paths]


def _filter_path(path: str, opt: WalkOption) -> bool:
    if opt.filter_func is None and not opt.only and not opt.exclude:
        return True
    if opt.filter_func is not None and opt.filter_func(path):
        return True

    ok = False
    name = os.path.basename(path)
    if opt.exclude:
        if opt.case_sensitive:
            ok = name not in opt.exclude
        else:
            ok = not string_in(name, *opt.exclude)
    if opt.only:
        if opt.case_sensitive:
            if name in opt.only:
                ok = True
        else:
            ok = string_in(name, *opt.only)
    return ok


def dirs(root: str, opt: WalkOption | None = None) -> list[str]:
    """Return the directories below ``root`` that pass the options."""
    opt = opt or WalkOption()
    return [
        path
        for path in _read(root, opt.recursive, _Search.DIRS)
        if _filter_path(path, opt) and not string_in(path, root)
    ]


def files(root: str, opt: WalkOption | None = None) -> list[str]:
    """Return the files below ``root`` that pass the options."""
    opt = opt or WalkOption()
    return [path for path in _read(root, opt.recursive, _Search.FILES) if _filter_path(path, opt)]


def _is_name_char(c: str) -> bool:
    return "A" <= c <= "Z" or "a" <= c <= "z" or "0" <= c <= "9"


def generate_dir_names(s: str, n: int, level: int, case_sensitive: bool) -> list[str]:
    """Split the ASCII letters and digits of ``s`` into at most ``level`` names of ``n`` characters."""
    cleaned = "".join(c for c in s if _is_name_char(c))
    if not cleaned:
        return []
    if not case_sensitive:
        cleaned = cleaned.lower()
    if n <= 0:
        return [cleaned]
    level = max(level, 1)
    return [cleaned[start : start + n] for start in range(0, len(cleaned), n)][:level]


# Content sniffing, following the WHATWG MIME sniffing rules.

_SNIFF_LENGTH = 512
_WHITESPACE = b"\t\n\x0c\r "
_BINARY_BYTES = frozenset(list(range(0x00, 0x09)) + [0x0B] + list(range(0x0E, 0x1B)) + list(range(0x1C, 0x20)))


@dataclass(frozen=True)
class _ExactSig:
    pattern: bytes
    content_type: str

    def match(self, data: bytes, first_non_ws: int) -> str:
        return self.content_type if data.startswith(self.pattern) else ""


@dataclass(frozen=True)
class _MaskedSig:
    mask: bytes
    pattern: bytes
    content_type: str
    skip_ws: bool = False

    def match(self, data: bytes, first_non_ws: int) -> str:
        if self.skip_ws:
            data = data[first_non_ws:]
        if len(self.mask) != len(self.pattern) or len(data) < len(self.pattern):
            return ""
        if all(d & m == p for d, m, p in zip(data, self.mask, self.pattern)):
            return self.content_type
        return ""


@dataclass(frozen=True)
class _HtmlSig:
    tag: bytes

    def match(self, data: bytes, first_non_ws: int) -> str:
        data = data[first_non_ws:]
        if len(data) < len(self.tag) + 1:
            return ""
        for expected, actual in zip(self.tag, data):
            if 0x41 <= expected <= 0x5A:
                actual &= 0xDF
            if expected != actual:
                return ""
        if data[len(self.tag)] not in (0x20, 0x3E):
            return ""
        return "text/html; charset=utf-8"


class _Mp4Sig:
    def match(self, data: bytes, first_non_ws: int) -> str:
        if len(data) < 12:
            return ""
        box_size = int.from_bytes(data[:4], "big")
        if len(data) < box_size or box_size % 4 != 0:
            return ""
        if data[4:8] != b"ftyp":
            return ""
        if any(data[start : start + 3] == b"mp4" for start in range(8, box_size, 4) if start != 12):
            return "video/mp4"
        return ""


class _TextSig:
    def match(self, data: bytes, first_non_ws: int) -> str:
        if any(b in _BINARY_BYTES for b in data[first_non_ws:]):
            return ""
        return "text/plain; charset=utf-8"


_HTML_TAGS = (
    b"<!DOCTYPE HTML", b"<HTML", b"<HEAD", b"<SCRIPT", b"<IFRAME", b"<H1", b"<DIV", b"<FONT",
    b"<TABLE", b"<A", b"<STYLE", b"<TITLE", b"<B", b"<BODY", b"<BR", b"<P", b"<!--",
)

_RIFF_MASK = b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff"

_SIGNATURES = (
    *(_HtmlSig(tag) for tag in _HTML_TAGS),
    _MaskedSig(b"\xff\xff\xff\xff\xff", b"<?xml", "text/xml; charset=utf-8", skip_ws=True),
    _ExactSig(b"%PDF-", "application/pdf"),
    _ExactSig(b"%!PS-Adobe-", "application/postscript"),
    _MaskedSig(b"\xff\xff\x00\x00", b"\xfe\xff\x00\x00", "text/plain; charset=utf-16be"),
    _MaskedSig(b"\xff\xff\x00\x00", b"\xff\xfe\x00\x00", "text/plain; charset=utf-16le"),
    _ExactSig(b"\xef\xbb\xbf", "text/plain; charset=utf-8"),
    _ExactSig(b"\x00\x00\x01\x00", "image/x-icon"),
    _ExactSig(b"\x00\x00\x02\x00", "image/x-icon"),
    _ExactSig(b"BM", "image/bmp"),
    _ExactSig(b"GIF87a", "image/gif"),
    _ExactSig(b"GIF89a", "image/gif"),
    _MaskedSig(_RIFF_MASK + b"\xff\xff", b"RIFF\x00\x00\x00\x00WEBPVP", "image/webp"),
    _ExactSig(b"\x89PNG\x0d\x0a\x1a\x0a", "image/png"),
    _ExactSig(b"\xff\xd8\xff", "image/jpeg"),
    _MaskedSig(_RIFF_MASK, b"FORM\x00\x00\x00\x00AIFF", "audio/aiff"),
    _MaskedSig(b"\xff\xff\xff", b"ID3", "audio/mpeg"),
    _MaskedSig(b"\xff\xff\xff\xff\xff", b"OggS\x00", "application/ogg"),
    _MaskedSig(b"\xff" * 8, b"MThd\x00\x00\x00\x06", "audio/midi"),
    _MaskedSig(_RIFF_MASK, b"RIFF\x00\x00\x00\x00AVI ", "video/avi"),
    _MaskedSig(_RIFF_MASK, b"RIFF\x00\x00\x00\x00WAVE", "audio/wave"),
    _Mp4Sig(),
    _ExactSig(b"\x1a\x45\xdf\xa3", "video/webm"),
    _MaskedSig(b"\x00" * 34 + b"\xff\xff", b"\x00" * 34 + b"LP", "application/vnd.ms-fontobject"),
    _ExactSig(b"\x00\x01\x00\x00", "font/ttf"),
    _ExactSig(b"OTTO", "font/otf"),
    _ExactSig(b"ttcf", "font/collection"),
    _ExactSig(b"wOFF", "font/woff"),
    _ExactSig(b"wOF2", "font/woff2"),
    _ExactSig(b"\x1f\x8b\x08", "application/x-gzip"),
    _ExactSig(b"PK\x03\x04", "application/zip"),
    _ExactSig(b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
    _ExactSig(b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
    _ExactSig(b"\x00\x61\x73\x6d", "application/wasm"),
    _TextSig(),
)


def _detect_content_type(data: bytes) -> str:
    data = bytes(data[:_SNIFF_LENGTH])
    first_non_ws = len(data) - len(data.lstrip(_WHITESPACE))
    for signature in _SIGNATURES:
        content_type = signature.match(data, first_non_ws)
        if content_type:
            return content_type
    return "application/octet-stream"


_BUILTIN_TYPES = {
    ".avif": "image/avif",
    ".css": "text/css; charset=utf-8",
    ".gif": "image/gif",
    ".htm": "text/html; charset=utf-8",
    ".html": "text/html; charset=utf-8",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".js": "text/javascript; charset=utf-8",
    ".json": "application/json",
    ".mjs": "text/javascript; charset=utf-8",
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".svg": "image/svg+xml",
    ".wasm": "application/wasm",
    ".webp": "image/webp",
    ".xml": "text/xml; charset=utf-8",
}

_COMMON_TYPES = {
    ".aac": ("audio/aac",),
    ".abw": ("application/x-abiword",),
    ".arc": ("application/x-freearc",),
    ".avi": ("video/x-msvideo",),
    ".azw": ("application/vnd.amazon.ebook",),
    ".bmp": ("image/bmp",),
    ".bz": ("application/x-bzip",),
    ".bz2": ("application/x-bzip2",),
    ".csh": ("application/x-csh",),
    ".css": ("text/css",),
    ".csv": ("text/csv",),
    ".doc": ("application/msword",),
    ".docx": ("application/vnd.openxmlformats-officedocument.wordprocessingml.document",),
    ".eot": ("application/vnd.ms-fontobject",),
    ".epub": ("application/epub+zip",),
    ".gif": ("image/gif",),
    ".htm": ("text/html",),
    ".html": ("text/html",),
    ".ico": ("image/vnd.microsoft.icon",),
    ".ics": ("text/calendar",),
    ".jar": ("application/java-archive",),
    ".jpg": ("image/jpeg",),
    ".jpeg": ("image/jpeg",),
    ".js": ("text/javascript",),
    ".json": ("application/json",),
    ".jsonld": ("application/ld+json",),
    ".mid": ("audio/midi", "audio/x-midi"),
    ".midi": ("audio/midi", "audio/x-midi"),
    ".mjs": ("text/javascript",),
    ".mp3": ("audio/mpeg",),
    ".mpeg": ("video/mpeg",),
    ".mpkg": ("application/vnd.apple.installer+xml",),
    ".odp": ("application/vnd.oasis.opendocument.presentation",),
    ".ods": ("application/vnd.oasis.opendocument.spreadsheet",),
    ".odt": ("application/vnd.oasis.opendocument.text",),
    ".oga": ("audio/ogg",),
    ".ogv": ("video/ogg",),
    ".ogx": ("application/ogg",),
    ".otf": ("font/otf",),
    ".png": ("image/png",),
    ".pdf": ("application/pdf",),
    ".ppt": ("application/vnd.ms-powerpoint",),
    ".pptx": ("application/vnd.openxmlformats-officedocument.presentationml.presentation",),
    ".rar": ("application/x-rar-compressed",),
    ".rtf": ("application/rtf",),
    ".sh": ("application/x-sh",),
    ".svg": ("image/svg+xml",),
    ".swf": ("application/x-shockwave-flash",),
    ".tar": ("application/x-tar",),
    ".tif": ("image/tiff",),
    ".tiff": ("image/tiff",),
    ".ttf": ("font/ttf",),
    ".txt": ("text/plain",),
    ".vsd": ("application/vnd.visio",),
    ".wav": ("audio/wav",),
    ".weba": ("audio/webm",),
    ".webm": ("video/webm",),
    ".webp": ("image/webp",),
    ".woff": ("font/woff",),
    ".woff2": ("font/woff2",),
    ".xhtml": ("application/xhtml+xml",),
    ".xls": ("application/vnd.ms-excel",),
    ".xlsx": ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",),
    ".xml": ("application/xml", "text/xml"),
    ".xul": ("application/vnd.mozilla.xul+xml",),
    ".zip": ("application/zip",),
    ".3gp": ("video/3gpp", "audio/3gpp"),
    ".3g2": ("video/3gpp2", "audio/3gpp2"),
    ".7z": ("application/x-7z-compressed",),
}

_PREFERRED_EXTENSIONS = {
    "text/plain; charset=utf-8": ".txt",
    "image/jpeg": ".jpg",
}


def _bare_type(content_type: str) -> str:
    return content_type.split(";", 1)[0].strip().lower()


def _build_extension_table() -> dict[str, tuple[str, ...]]:
    table: dict[str, set[str]] = {}
    for extension, content_type in _BUILTIN_TYPES.items():
        table.setdefault(_bare_type(content_type), set()).add(extension)
    for extension, content_types in _COMMON_TYPES.items():
        for content_type in content_types:
            table.setdefault(_bare_type(content_type), set()).add(extension)
    return {content_type: tuple(sorted(exts)) for content_type, exts in table.items()}


_EXTENSIONS_BY_TYPE = _build_extension_table()


def _path_ext(path: str) -> str:
    tail = path
    for separator in (os.sep, os.altsep):
        if separator:
            tail = tail.rpartition(separator)[2]
    dot = tail.rfind(".")
    return tail[dot:] if dot >= 0 else ""


def ext(path: str, data: bytes | None = None) -> str:
    """Return the extension of a resource, from its content when it can be read.

    ``data`` is sniffed when given; otherwise the first 512 bytes of the file
    at ``path`` are. When the content gives no extension, the one in
    ``path`` is returned.
    """
    if not path and data is None:
        return ""
    if data is None and exists(path):
        try:
            with open(path, "rb") as handle:
                data = handle.read(_SNIFF_LENGTH)
        except OSError:
            data = None
    result = ""
    if data is not None:
        content_type = _detect_content_type(data)
        extensions = _EXTENSIONS_BY_TYPE.get(_bare_type(content_type), ())
        if len(extensions) == 1:
            result = extensions[0]
        elif extensions:
            result = _PREFERRED_EXTENSIONS.get(content_type, extensions[0])
    return result or _path_ext(path)