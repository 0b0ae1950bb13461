"""
Everything this layer raises. The foreign caller sees one of these at exactly
the call that went wrong: constructing an adapter, calling `next`, or writing.
"""

class HostLinkError(Exception):
	pass

class IOFailure(HostLinkError, OSError):
	""" The host filesystem said no. The original OSError rides along as __cause__. """
	def __init__(self, path, reason):
		super().__init__(reason)
		self.path = path
	def __str__(self): return "%s: %s"%(self.path, self.args[0])

class EncodingFailure(IOFailure):
	""" Content cannot be expressed in the requested encoding, or the encoding does not exist. """

class ExhaustedIteration(HostLinkError, LookupError):
	""" `next` was called after `has_next` went false. That's on the caller. """

class HostDataError(HostLinkError, ValueError):
	pass
