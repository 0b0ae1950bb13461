"""
Resource descriptors: immutable values naming what to enumerate.
"""
from enum import Enum
from pathlib import Path
from typing import NamedTuple

class CodeSet(Enum):
	ALPHA2_PART1 = "alpha2"
	PART3 = "part3"

class DirectoryPath(NamedTuple):
	path: Path

class StandardCountryCodeSet(NamedTuple):
	variant: CodeSet
