"""
This is a type-inference workbench for a tiny expression language.

{0}

For example:

    robinson "(let x = 1 in x)"

will print the type of every variable in that expression, or else try to explain why not.

    robinson

with no expressions starts a read-eval-print loop, one expression per line.

    robinson -h

will explain all the arguments.
"""
import sys, argparse
from typing import TextIO

PROMPT = "robinson> "

parser = argparse.ArgumentParser(
	prog="robinson",
	description="Infer the types of variables in tiny expressions.",
)
parser.add_argument("expression", nargs="*", help='try "(if x then 0 else 1)" for example.')
parser.add_argument('-v', "--verbose", action="count", help="Describe the progress of each pass on stderr.")
parser.add_argument("--order", choices=("name", "seen"), default="name", help="List variables alphabetically (the default) or in order of first appearance.")
parser.add_argument("--usage", action="store_true", help="Explain the program at greater length, then quit.")

def render(types:dict[str, str], order:str) -> list[str]:
	pairs = sorted(types.items()) if order == "name" else types.items()
	return ["%s :: %s" % pair for pair in pairs]

def check_line(text:str, report, order:str="name", out:TextIO=None) -> bool:
	from .checker import Checker, Yuck
	out = out or sys.stdout
	try: checker = Checker(text, report)
	except Yuck:
		assert report.sick()
		report.complain_to_console()
		report.reset()
		return False
	for line in render(checker.types, order):
		print(line, file=out)
	return True

def repl(report, order:str="name", stdin:TextIO=None, out:TextIO=None) -> int:
	""" Failures on one line do not stop the loop. End-of-file does. """
	stdin = stdin or sys.stdin
	out = out or sys.stdout
	interactive = stdin.isatty()
	failures = 0
	while True:
		if interactive:
			print(PROMPT, end="", file=out, flush=True)
		line = stdin.readline()
		if not line:
			break
		text = line.rstrip("\r\n")
		if text.strip() and not check_line(text, report, order, out):
			failures += 1
	if interactive:
		print(file=out)
	return failures

def run(args):
	from .diagnostics import Report
	if args.usage:
		print(__doc__.strip().format(parser.format_usage()))
		return 0
	report = Report(verbose=args.verbose)
	if args.expression:
		results = [check_line(text, report, args.order) for text in args.expression]
		return 0 if all(results) else 1
	repl(report, args.order)
	return 0

def main():
	sys.exit(run(parser.parse_args()))
