"""
Acquire, once, the host-side collection behind a resource descriptor
and hand back a cursor over it.

Python iterators cannot say whether more remains without pulling,
so the cursor keeps (at most) one element of look-ahead. That's the
only buffering anywhere in here; the collections themselves are
already fully materialized by the time the cursor sees them.
"""
import os
from pathlib import Path
from typing import Iterable, Iterator
from boozetools.support.foundation import Visitor

from .resource import DirectoryPath, StandardCountryCodeSet
from .errors import IOFailure, ExhaustedIteration
from . import iso

_NOTHING = object()

class Cursor:
	""" Exclusively owned by one adapter. Forward-only; no reset. """
	def __init__(self, items:Iterable):
		self._iter:Iterator = iter(items)
		self._ahead = _NOTHING
	
	def has_next(self) -> bool:
		if self._ahead is _NOTHING:
			self._ahead = next(self._iter, _NOTHING)
		return self._ahead is not _NOTHING
	
	def next(self):
		if not self.has_next():
			raise ExhaustedIteration("No more elements")
		item, self._ahead = self._ahead, _NOTHING
		return item

class Opener(Visitor):
	
	def visit_DirectoryPath(self, descriptor:DirectoryPath) -> Cursor:
		path = Path(descriptor.path)
		# The with-block closes the directory stream whether or not the listing succeeds.
		try:
			with os.scandir(path) as stream:
				entries = [path/entry.name for entry in stream]
		except OSError as ex:
			raise IOFailure(path, ex.strerror or str(ex)) from ex
		return Cursor(entries)
	
	def visit_StandardCountryCodeSet(self, descriptor:StandardCountryCodeSet) -> Cursor:
		return Cursor(iso.country_codes(descriptor.variant))

_opener = Opener()

def open_source(descriptor) -> Cursor:
	return _opener.visit(descriptor)
