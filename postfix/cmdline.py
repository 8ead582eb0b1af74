"""
This is Postfix++, a reverse-Polish calculator that remembers.

{0}

The stack and the variables carry over from one invocation to the next.
For example:

    postfix input 3 4 5 + \\* && postfix print

leaves [ 27 ] on the stack, and then

    postfix input A 3 =
    postfix input A 7 \\*
    postfix variables
    postfix clear

binds A, multiplies it by 7, shows the variables, and starts over.

    postfix -h

will explain all the arguments. Options go before the command:
everything after the command is taken as words of input.
"""
import sys, argparse

from .storage import DEFAULT_SESSION, SessionFile, SessionStorageError

parser = argparse.ArgumentParser(
	prog="postfix",
	description="Reverse-Polish calculator with a persistent stack and variables.",
)
parser.add_argument("command", choices=["input", "print", "variables", "clear"], help="input an expression, print the stack, print the variables, or clear the session.")
parser.add_argument("words", nargs=argparse.REMAINDER, help="for input: integers, variables A-Z, and operators + - * / =")
parser.add_argument('-s', "--session", default=DEFAULT_SESSION, help="where to keep the session (default: %(default)s)")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what is going on.")
parser.add_argument('-q', "--quiet", action="store_true", help="Do not echo the stack after every word of input.")

def _input(session, args, report):
	from .evaluator import EvaluationError
	if args.quiet: on_step = None
	else: on_step = lambda word: print(session.render_stack())
	try: session.evaluate(args.words, on_step)
	except EvaluationError as ex:
		report.evaluation_failed(args.words, ex)

def _print(session, args, report):
	print(session.render_stack())

def _variables(session, args, report):
	print(session.render_symbol_table())

COMMANDS = {"input": _input, "print": _print, "variables": _variables}

def run(args):
	from .diagnostics import Report
	report = Report(verbose=args.verbose)
	session_file = SessionFile(args.session)
	if args.command != "input" and args.words:
		parser.error("%s takes no further words" % args.command)
	try:
		if args.command == "clear":
			session_file.clear()
			report.info("session cleared")
			return 0
		if not session_file.exists():
			report.info("no session, opening a new one")
		session = session_file.load()
		COMMANDS[args.command](session, args, report)
		session_file.save(session)
	except SessionStorageError as ex:
		report.storage_failed(ex)
	if report.sick():
		report.complain_to_console()
		return 1
	return 0

def main(argv=None):
	if argv is None: argv = sys.argv[1:]
	if argv:
		sys.exit(run(parser.parse_args(argv)))
	else:
		print(__doc__.strip().format(parser.format_usage()))
