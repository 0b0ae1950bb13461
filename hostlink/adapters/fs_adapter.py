"""
Filesystem functions shaped for a foreign caller: one concrete element
type per class, fixed arity per function, and no Python iterator protocol
at the boundary.
"""
import codecs
from pathlib import Path

from ..resource import DirectoryPath
from ..opener import open_source
from ..errors import IOFailure, EncodingFailure

class FilesList:
	""" The immediate entries of one directory, in whatever order the host lists them. """
	def __init__(self, directory):
		self._cursor = open_source(DirectoryPath(Path(directory)))
	
	def has_next(self) -> bool:
		return self._cursor.has_next()
	
	def next(self) -> Path:
		return self._cursor.next()

def write_string(path, encoding:str, content:str) -> None:
	"""
	Create or truncate `path` and write `content` encoded as `encoding`.
	Strict encoding; no newline translation. A failure part-way may leave
	a short file behind, same as the host would.
	"""
	path = Path(path)
	try: codec = codecs.lookup(encoding)
	except LookupError as ex: raise EncodingFailure(path, "unknown encoding %r"%encoding) from ex
	# Same test the text writer applies, but made before the file gets truncated.
	if not getattr(codec, "_is_text_encoding", True):
		raise EncodingFailure(path, "%r is not a text encoding"%encoding)
	try:
		with open(path, "w", encoding=encoding, newline="") as fh:
			fh.write(content)
	except UnicodeEncodeError as ex:
		raise EncodingFailure(path, "cannot encode content as %s: %s"%(encoding, ex.reason)) from ex
	except OSError as ex:
		raise IOFailure(path, ex.strerror or str(ex)) from ex
