"""
Drive the host adapters the way a foreign caller would: poll has_next, pull next.

{0}

For example:

    hostlink ls /tmp

lists the entries of /tmp, one per line, in whatever order the host produces.

    hostlink countries part3

lists the ISO 3166-3 codes for formerly used country names.

    hostlink write out.txt utf-8 "hello"

replaces out.txt with exactly the UTF-8 bytes of "hello".
"""
import sys, argparse

from .diagnostics import Report
from .errors import HostLinkError
from .adapters.fs_adapter import FilesList, write_string
from .adapters.i18n_adapter import Part1Alpha2IsoCountryCodes, Part3IsoCountryCodes

CODE_SETS = {
	"alpha2": Part1Alpha2IsoCountryCodes,
	"part3": Part3IsoCountryCodes,
}

parser = argparse.ArgumentParser(
	prog="hostlink",
	description="Enumerate directories and country codes, or write a text file, through the host adapters.",
)
parser.add_argument('-v', "--verbose", action="count", help="Say how many items came out.")
commands = parser.add_subparsers(dest="command", required=True)

ls = commands.add_parser("ls", help="List the immediate entries of a directory.")
ls.add_argument("directory")

countries = commands.add_parser("countries", help="List a standard set of country codes.")
countries.add_argument("variant", choices=sorted(CODE_SETS))

write = commands.add_parser("write", help="Create or replace a text file.")
write.add_argument("path")
write.add_argument("encoding", help="e.g. utf-8, latin-1, ascii")
write.add_argument("content")

def drain(adapter, report:Report):
	count = 0
	while adapter.has_next():
		print(adapter.next())
		count += 1
	report.info(count, "item(s)")

def run(args):
	report = Report(verbose=args.verbose)
	try:
		if args.command == "ls":
			drain(FilesList(args.directory), report)
		elif args.command == "countries":
			drain(CODE_SETS[args.variant](), report)
		elif args.command == "write":
			write_string(args.path, args.encoding, args.content)
			report.info("Wrote", args.path)
	except HostLinkError as ex:
		report.issue(ex)
	if report.sick():
		report.complain_to_console()
		return 1
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
