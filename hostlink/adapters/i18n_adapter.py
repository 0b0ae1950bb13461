"""
The two standard country-code sets, one adapter class apiece.
Order of enumeration is unspecified; these come out of sets.
"""
from ..resource import CodeSet, StandardCountryCodeSet
from ..opener import open_source

class Part1Alpha2IsoCountryCodes:
	""" ISO 3166-1 alpha-2, e.g. "FR", "JP". """
	def __init__(self):
		self._cursor = open_source(StandardCountryCodeSet(CodeSet.ALPHA2_PART1))
	
	def has_next(self) -> bool:
		return self._cursor.has_next()
	
	def next(self) -> str:
		return self._cursor.next()

class Part3IsoCountryCodes:
	""" ISO 3166-3 four-letter codes for countries that no longer go by that name, e.g. "SUHH". """
	def __init__(self):
		self._cursor = open_source(StandardCountryCodeSet(CodeSet.PART3))
	
	def has_next(self) -> bool:
		return self._cursor.has_next()
	
	def next(self) -> str:
		return self._cursor.next()
