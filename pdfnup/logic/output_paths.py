# PDFNup/pdfnup/logic/output_paths.py
"""Output file naming next to the source PDF, never overwriting."""

import logging
import re
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

DUPLICATED_SUFFIX = "_duplicated"
COMBINED_SUFFIX = "_2up"

_COUNTER_RE = re.compile(r"^(.*?)(\(\d+\))?$")


def output_path_for(source: Union[str, Path], suffix: str) -> Path:
    """<source dir>/<source basename><suffix>.pdf"""
    source = Path(source)
    return source.with_name(f"{source.stem}{suffix}.pdf")


def unique_file_path(path: Union[str, Path]) -> Path:
    """
    Return ``path`` if it is free, otherwise the first free ``name(n).ext``.

    A trailing ``(n)`` already present in the stem is dropped before
    counting, so ``report(1).pdf`` becomes ``report(2).pdf`` rather than
    ``report(1)(1).pdf``.
    """
    path = Path(path)
    if not path.exists():
        return path

    base = _COUNTER_RE.match(path.stem).group(1).strip()
    counter = 1
    candidate = path
    while candidate.exists():
        candidate = path.with_name(f"{base}({counter}){path.suffix}")
        counter += 1

    logger.debug(f"{path.name} exists, using {candidate.name}")
    return candidate
