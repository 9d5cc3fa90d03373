"""Static extension to MIME type lookup."""

from typing import Optional

from common.constants import SERVABLE_MIME_FAMILIES


MIME_TYPES = {
    # text
    "txt": "text/plain",
    "text": "text/plain",
    "log": "text/plain",
    "conf": "text/plain",
    "ini": "text/plain",
    "md": "text/markdown",
    "markdown": "text/markdown",
    "csv": "text/csv",
    "tsv": "text/tab-separated-values",
    "html": "text/html",
    "htm": "text/html",
    "css": "text/css",
    "js": "text/javascript",
    "mjs": "text/javascript",
    "xml": "text/xml",
    "yaml": "text/yaml",
    "yml": "text/yaml",
    "ics": "text/calendar",
    "vcf": "text/vcard",
    "rtf": "text/rtf",
    # image
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "jpe": "image/jpeg",
    "gif": "image/gif",
    "bmp": "image/bmp",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "svgz": "image/svg+xml",
    "ico": "image/x-icon",
    "tif": "image/tiff",
    "tiff": "image/tiff",
    "avif": "image/avif",
    "heic": "image/heic",
    # audio / video
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "ogg": "audio/ogg",
    "flac": "audio/flac",
    "mp4": "video/mp4",
    "webm": "video/webm",
    "mov": "video/quicktime",
    "avi": "video/x-msvideo",
    "mkv": "video/x-matroska",
    # application
    "json": "application/json",
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "wasm": "application/wasm",
    "bin": "application/octet-stream",
    "exe": "application/x-msdownload",
    "dll": "application/x-msdownload",
    "msi": "application/x-msdownload",
    "sh": "application/x-sh",
    "jar": "application/java-archive",
    # archives
    "zip": "application/zip",
    "gz": "application/gzip",
    "tar": "application/x-tar",
    "bz2": "application/x-bzip2",
    "7z": "application/x-7z-compressed",
    "rar": "application/vnd.rar",
    # fonts
    "woff": "font/woff",
    "woff2": "font/woff2",
    "ttf": "font/ttf",
    "otf": "font/otf",
}


def lookup_mime(file_name: str) -> Optional[str]:
    """
    Resolve the MIME type of a file from its extension.

    Args:
        file_name: File name or path; only the last extension is used

    Returns:
        MIME type string, or None if the extension is unknown
    """
    base_name = file_name.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in base_name:
        return None
    extension = base_name.rsplit(".", 1)[-1].lower()
    return MIME_TYPES.get(extension)


def mime_family(mime: Optional[str]) -> Optional[str]:
    """Return the part of a MIME type before the slash."""
    if not mime or "/" not in mime:
        return None
    return mime.split("/", 1)[0]


def is_servable(mime: Optional[str]) -> bool:
    """Whether files of this MIME type may be fetched through /files."""
    return mime_family(mime) in SERVABLE_MIME_FAMILIES
