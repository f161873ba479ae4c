"""Pydantic schemas for YAML segmenter configuration."""

import re
from pydantic import BaseModel, Field
from typing import List, Optional

SCRIPT_TAG = re.compile(r"^[A-Z][a-z]{3}$")


class Thresholds(BaseModel):
    """Heuristic thresholds for dictionary segmentation."""
    root_combine: int = Field(default=3, ge=1,
                              description="Will not combine a non-word with a preceding dictionary word this long or longer")
    prefix_combine: int = Field(default=3, ge=1,
                                description="Will not combine a non-word sharing at least this much prefix with a dictionary word")
    min_word: int = Field(default=2, ge=1,
                          description="Ranges shorter than this are left undivided")

    class Config:
        extra = "forbid"


class DictionarySource(BaseModel):
    """Word list backing the dictionary of one script."""
    script: str = Field(description="ISO 15924 script tag, e.g. 'Mymr'")
    path: str = Field(description="Word list file, one word per line (relative to the config file)")
    comment_prefix: str = Field(default="#", min_length=1,
                                description="Lines starting with this prefix are ignored")

    class Config:
        extra = "forbid"


class SegmenterConfig(BaseModel):
    """Complete configuration for dictbreak engines."""
    version: int = Field(default=1, description="Configuration schema version")
    thresholds: Thresholds = Field(default_factory=Thresholds, description="Segmentation thresholds")
    dictionaries: List[DictionarySource] = Field(default_factory=list,
                                                 description="Dictionary word lists by script")

    class Config:
        extra = "forbid"

    def dictionary_for(self, script: str) -> Optional[DictionarySource]:
        """Get the dictionary source configured for a script tag."""
        for source in self.dictionaries:
            if source.script == script:
                return source
        return None

    def validate_dictionaries(self) -> List[str]:
        """Validate dictionary configuration and return any issues."""
        issues = []

        scripts = [d.script for d in self.dictionaries]
        duplicates = set([x for x in scripts if scripts.count(x) > 1])
        if duplicates:
            issues.append(f"Duplicate dictionary scripts: {sorted(duplicates)}")

        bad_tags = [s for s in scripts if not SCRIPT_TAG.match(s)]
        if bad_tags:
            issues.append(f"Invalid script tags (expected e.g. 'Mymr'): {bad_tags}")

        empty_paths = [d.script for d in self.dictionaries if not d.path.strip()]
        if empty_paths:
            issues.append(f"Dictionaries with empty path: {empty_paths}")

        return issues
