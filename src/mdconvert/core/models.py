"""Intermediate data models for the convert and record pipeline"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class OutputFormat(str, Enum):
    """What a conversion produces: a bare fragment or a full styled page"""
    html = "html"
    document = "document"


class RenderedDoc(BaseModel):
    """One converted Markdown source, handed from convert to record."""
    source_path: str
    markdown: str
    html: str
    format: OutputFormat = OutputFormat.html
    hash: str                           # sha256 of markdown
    output_path: Optional[str] = None   # set once written to disk
