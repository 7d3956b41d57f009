"""Database table definitions for the conversion history"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, String, Text
from sqlmodel import Field, SQLModel

from mdconvert.core.models import OutputFormat


class Conversion(SQLModel, table=True):
    """A single Markdown to HTML conversion and its rendered output"""
    __tablename__ = "conversions"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    source_path: str = Field(..., sa_column=Column(Text, nullable=False, index=True))
    markdown: str = Field(..., sa_column=Column(Text, nullable=False))
    html: str = Field(..., sa_column=Column(Text, nullable=False))
    hash: str = Field(..., sa_column=Column(String(64), nullable=False))
    format: OutputFormat = Field(default=OutputFormat.html, nullable=False, description="html fragment or full document")
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
