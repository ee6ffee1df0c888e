import re
from pathlib import PurePosixPath
from urllib.parse import unquote, urlsplit

DEFAULT_FILE_NAME = "document.pdf"
DEFAULT_TITLE = "Untitled Summary"


def file_name_from_url(url: str) -> str:
    """Last path segment of a storage URL, e.g. https://x/y.pdf -> y.pdf"""
    name = PurePosixPath(unquote(urlsplit(url).path)).name
    return name or DEFAULT_FILE_NAME


def format_file_name_to_title(file_name: str) -> str:
    """Turn a file name into a display title: my-annual_report.pdf -> My Annual Report"""
    stem = PurePosixPath(file_name).stem if "." in file_name else file_name
    words = re.sub(r"[-_]+", " ", stem).split()
    return " ".join(word[:1].upper() + word[1:] for word in words) or DEFAULT_TITLE
