"""JSDoc extraction for class and property documentation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List

# Body of a /** ... */ block that cannot run past its own terminator.
_DOC_BODY = r"/\*\*((?:(?!\*/).)*?)\*/"

_CLASS_DOC_RE = re.compile(_DOC_BODY + r"\s*export\s+class\b", re.DOTALL)

_PROPERTY_DOC_RE = re.compile(
    _DOC_BODY
    + r"\s*@property\b"
    + r"(?:\s*\((?:[^()]|\([^()]*\))*\))?"
    + r"\s*(?:(?:public|protected|private|declare|override|readonly|accessor|static)\s+)*"
    + r"(\w+)",
    re.DOTALL,
)

_LEADING_STAR_RE = re.compile(r"^\s*\*\s?")


@dataclass
class DocBlock:
    """Class documentation and per-property one-liners pulled from a source file."""

    documentation: str = ""
    property_docs: Dict[str, str] = field(default_factory=dict)


def clean_doc_lines(body: str) -> List[str]:
    """Strip comment markers, drop blank and ``@`` annotation lines."""
    lines = (_LEADING_STAR_RE.sub("", line).strip() for line in body.split("\n"))
    return [line for line in lines if line and not line.startswith("@")]


def extract_class_doc(text: str) -> str:
    match = _CLASS_DOC_RE.search(text)
    if not match:
        return ""
    return "\n".join(clean_doc_lines(match.group(1)))


def extract_property_docs(text: str) -> Dict[str, str]:
    docs: Dict[str, str] = {}
    for match in _PROPERTY_DOC_RE.finditer(text):
        cleaned = " ".join(clean_doc_lines(match.group(1)))
        if cleaned:
            docs[match.group(2)] = cleaned
    return docs


def extract_documentation(text: str) -> DocBlock:
    """Return the class documentation and property docs found in ``text``."""
    return DocBlock(
        documentation=extract_class_doc(text),
        property_docs=extract_property_docs(text),
    )


__all__ = [
    "DocBlock",
    "clean_doc_lines",
    "extract_class_doc",
    "extract_documentation",
    "extract_property_docs",
]
