"""
The two country-code sets ship with the package as plain word lists,
one file per set. Lines starting with "#" are commentary.
"""
from pathlib import Path
from .resource import CodeSet
from .errors import IOFailure, HostDataError

ISO_FOLDER = Path(__file__).parent/"data"

_FILES = {
	CodeSet.ALPHA2_PART1: ("part1_alpha2.txt", 2),
	CodeSet.PART3: ("part3.txt", 4),
}

def country_codes(variant:CodeSet) -> frozenset[str]:
	filename, width = _FILES[variant]
	path = ISO_FOLDER/filename
	try: text = path.read_text(encoding="ascii")
	except (OSError, UnicodeDecodeError) as ex: raise IOFailure(path, "cannot read bundled country codes") from ex
	codes = []
	for line in text.splitlines():
		if line.startswith("#"): continue
		codes.extend(line.split())
	for code in codes:
		if len(code) != width or not (code.isalpha() and code.isupper()):
			raise HostDataError("%s: %r is not a %d-letter country code"%(path, code, width))
	answer = frozenset(codes)
	if len(answer) != len(codes):
		raise HostDataError("%s: duplicate country codes"%path)
	return answer
