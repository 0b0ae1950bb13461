import sys
from typing import Any

class Report:
	""" Collects what went wrong so the front end can complain once, at the end. """
	_issues : list[Any]
	
	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self): return list(self._issues)
	
	def issue(self, it:Any):
		self._issues.append(it)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		for i in self._issues:
			print("%s: %s"%(type(i).__name__, i), file=sys.stderr)
