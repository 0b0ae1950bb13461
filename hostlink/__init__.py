"""
Host-side adapters that let a foreign runtime enumerate directories and
country codes, and write text files, through plain fixed-arity calls.
"""
